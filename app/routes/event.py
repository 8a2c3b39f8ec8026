from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.db.crud import event as event_crud
from app.db.crud import shop as shop_crud
from app.db.schemas.event import EventAck, EventCreate
from app.dependencies import get_db

router = APIRouter(tags=["Events"])

@router.post("/event", response_model=EventAck)
def record_event(event: EventCreate, db: Session = Depends(get_db)):
    """Append a storefront event (shop_view, product_view, whatsapp, ar_view, ...)"""
    if not shop_crud.get_shop(db, event.shop_id):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="shop_id unknown")
    event_crud.create_event(db, event)
    return {"ok": True}
