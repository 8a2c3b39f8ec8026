import logging
import re
from urllib.parse import quote
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, RedirectResponse
from sqlalchemy.orm import Session
from typing import Optional
from app.config import Settings
from app.db.crud import product as product_crud
from app.db.crud import shop as shop_crud
from app.dependencies import get_db, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Buy"])

WHATSAPP_URL = "https://wa.me/"

def whatsapp_number(phone: str, country_code: str) -> str:
    """Digits-only international number. Numbers starting with '+' already carry their country code."""
    digits = re.sub(r"\D", "", phone or "")
    if (phone or "").strip().startswith("+"):
        return digits
    digits = digits.lstrip("0")
    return f"{country_code}{digits}" if digits else ""

def build_whatsapp_url(number: str, product_name: str, description: str, image_url: Optional[str]) -> str:
    lines = [f"Hi, I'm interested in {product_name}"]
    if description:
        lines.append(description)
    if image_url:
        lines.append(image_url)
    return f"{WHATSAPP_URL}{number}?text={quote(chr(10).join(lines), safe='')}"

@router.get("/buy/{product_id}")
def buy_product(
    product_id: str,
    request: Request,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Redirect a shopper to a prefilled WhatsApp chat with the shop"""
    product = product_crud.get_product(db, product_id)
    if not product or not product.is_active:
        return PlainTextResponse("Product not found", status_code=404)

    shop = shop_crud.get_shop(db, product.shop_id)
    number = whatsapp_number(shop.phone, settings.whatsapp_country_code) if shop else ""
    if not number:
        logger.warning(f"Shop {product.shop_id} has no phone number for WhatsApp")
        return PlainTextResponse("Shop is not reachable on WhatsApp", status_code=404)

    image_url = None
    if product.image_urls:
        image_url = product.image_urls[0]
        if image_url.startswith("/"):
            base_url = settings.public_base_url or str(request.base_url).rstrip("/")
            image_url = base_url + image_url

    return RedirectResponse(
        build_whatsapp_url(number, product.category, product.description, image_url),
        status_code=302
    )
