from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from app.db.crud import event as event_crud
from app.db.schemas.analytics import AnalyticsSummary
from app.dependencies import get_db
from app.constants.analytics import build_summary, get_all_bucket_configs, resolve_range

router = APIRouter(
    prefix="/analytics",
    tags=["analytics"]
)

@router.get("/buckets", response_model=dict)
def get_analytics_buckets():
    """Get the analytics buckets and the event type each one counts"""
    return get_all_bucket_configs()

@router.get("", response_model=AnalyticsSummary)
def get_analytics(
    shop: str = Query(..., min_length=1),
    range_: Optional[str] = Query(None, alias="range", description="Lookback in days: 7, 15, 30 or 365"),
    db: Session = Depends(get_db)
):
    """Event counts for a shop over the selected lookback window"""
    days = resolve_range(range_)
    counts = event_crud.count_events_by_type(db, shop, days)
    return build_summary(counts)
