# ticketlog/core/uploads.py
import os
import shutil
import time

from fastapi import UploadFile

from ticketlog.core.config import get_settings


def ensure_upload_dir() -> str:
    upload_dir = get_settings().UPLOAD_DIR
    os.makedirs(upload_dir, exist_ok=True)
    return upload_dir


def save_upload(upload: UploadFile) -> str:
    """Store an uploaded file and return the public path recorded on the owning row."""
    settings = get_settings()
    upload_dir = ensure_upload_dir()

    original = os.path.basename(upload.filename or "upload").replace(" ", "_")
    filename = f"{int(time.time() * 1000)}-{original}"
    with open(os.path.join(upload_dir, filename), "wb") as out:
        shutil.copyfileobj(upload.file, out)

    return f"{settings.UPLOAD_URL_PREFIX.rstrip('/')}/{filename}"
