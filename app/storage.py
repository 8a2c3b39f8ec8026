"""
Local disk storage for product images
"""

import os
import re
import shutil
import time
import logging
from typing import List

from fastapi import UploadFile

logger = logging.getLogger(__name__)

UPLOADS_URL_PREFIX = "/uploads/"
_UNSAFE_CHARS = re.compile(r"[^a-zA-Z0-9.\-_]")


def sanitize_filename(filename: str) -> str:
    """Replace anything outside [a-zA-Z0-9._-] with an underscore"""
    name = _UNSAFE_CHARS.sub("_", os.path.basename(filename or ""))
    return name or "image"


IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp", ".avif", ".bmp"}


def is_image(upload: UploadFile) -> bool:
    """Declared content type and file extension must both be an image's"""
    extension = os.path.splitext(upload.filename or "")[1].lower()
    return (upload.content_type or "").startswith("image/") and extension in IMAGE_EXTENSIONS


def save_uploads(files: List[UploadFile], upload_dir: str) -> List[str]:
    """Write uploads to disk under a timestamped safe name and return their public paths"""
    os.makedirs(upload_dir, exist_ok=True)
    paths = []
    for upload in files:
        stored_name = f"{int(time.time() * 1000)}-{sanitize_filename(upload.filename)}"
        destination = os.path.join(upload_dir, stored_name)
        # same millisecond and same name: keep both
        suffix = 1
        while os.path.exists(destination):
            stored_name = f"{int(time.time() * 1000)}-{suffix}-{sanitize_filename(upload.filename)}"
            destination = os.path.join(upload_dir, stored_name)
            suffix += 1
        with open(destination, "wb") as out:
            shutil.copyfileobj(upload.file, out)
        paths.append(UPLOADS_URL_PREFIX + stored_name)
    logger.info(f"Stored {len(paths)} image(s) in {upload_dir}")
    return paths


def remove_uploads(paths: List[str], upload_dir: str):
    """Delete files previously returned by save_uploads"""
    for path in paths:
        try:
            os.remove(os.path.join(upload_dir, os.path.basename(path)))
        except FileNotFoundError:
            pass
    logger.info(f"Removed {len(paths)} orphaned image(s) from {upload_dir}")
