from io import BytesIO
from functools import lru_cache
import qrcode
from qrcode.constants import ERROR_CORRECT_M
from fastapi import APIRouter, Depends
from fastapi.responses import Response
from app.config import Settings
from app.dependencies import get_settings

router = APIRouter(tags=["QR"])

@lru_cache(maxsize=16)
def qr_png(text: str, box_size: int = 8, border: int = 2) -> bytes:
    """Generate a QR code PNG for the given text"""
    qr = qrcode.QRCode(
        version=None,
        error_correction=ERROR_CORRECT_M,
        box_size=box_size,
        border=border,
    )
    qr.add_data(text)
    qr.make(fit=True)
    img = qr.make_image(fill_color="black", back_color="white")
    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()

@router.get("/qr")
def get_qr(settings: Settings = Depends(get_settings)):
    """QR code pointing at the storefront"""
    return Response(content=qr_png(settings.qr_target_url), media_type="image/png")
