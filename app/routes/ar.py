from html import escape
from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, PlainTextResponse
from sqlalchemy.orm import Session
from app.config import Settings
from app.db.crud import product as product_crud
from app.dependencies import get_db, get_settings

router = APIRouter(tags=["AR"])

# Rendering is done entirely by the <model-viewer> web component
AR_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{title}</title>
  <script type="module" src="{script_url}"></script>
  <style>html, body {{ margin: 0; height: 100%; }} model-viewer {{ width: 100%; height: 100%; }}</style>
</head>
<body>
  <model-viewer src="{model_url}" alt="{title}" ar ar-modes="webxr scene-viewer quick-look" camera-controls auto-rotate></model-viewer>
</body>
</html>
"""

@router.get("/ar/{product_id}", response_class=HTMLResponse)
def ar_viewer(
    product_id: str,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """AR viewer page for a product's 3D model"""
    product = product_crud.get_product(db, product_id)
    if not product or not product.ar_model:
        return PlainTextResponse("AR model not available", status_code=404)
    return HTMLResponse(AR_PAGE.format(
        title=escape(product.category),
        script_url=escape(settings.ar_viewer_script_url),
        model_url=escape(product.ar_model),
    ))
