from sqlalchemy import func
from sqlalchemy.orm import Session
from typing import Dict
from datetime import datetime, timedelta
from app.db.models.event import Event
from app.db.schemas.event import EventCreate

def create_event(db: Session, event: EventCreate) -> Event:
    db_event = Event(
        shop_id=event.shop_id,
        product_id=event.product_id or None,
        type=event.type,
    )
    db.add(db_event)
    db.commit()
    db.refresh(db_event)
    return db_event

def count_events_by_type(db: Session, shop_id: str, days: int) -> Dict[str, int]:
    since = datetime.utcnow() - timedelta(days=days)
    rows = db.query(Event.type, func.count(Event.id)).filter(
        Event.shop_id == shop_id,
        Event.created_at >= since
    ).group_by(Event.type).all()
    return {event_type: count for event_type, count in rows}
