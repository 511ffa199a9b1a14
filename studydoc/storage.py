"""Transient on-disk copies of uploaded files, scoped to one request."""
import os
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from flask import current_app

KNOWN_EXTENSIONS = (".pdf", ".txt")
# multipart parts without their own Content-Type are text/plain
DEFAULT_PART_TYPE = "text/plain"


@dataclass
class TransientUpload:
    path: str
    filename: str
    mimetype: str
    size: int = 0

    def read(self) -> bytes:
        with open(self.path, "rb") as f:
            return f.read()


def _ensure_upload_dir(upload_dir: str) -> None:
    os.makedirs(upload_dir, exist_ok=True)


def upload_path(upload_dir: str, filename: str) -> str:
    """Server-assigned path; the client filename only contributes a known extension"""
    ext = os.path.splitext((filename or "").strip())[1].lower()
    if ext not in KNOWN_EXTENSIONS:
        ext = ".bin"
    return os.path.join(upload_dir, f"{uuid.uuid4().hex}{ext}")


def discard(path: str) -> None:
    """Remove a transient file. Failures are logged, never raised."""
    try:
        if os.path.exists(path):
            os.remove(path)
    except OSError as e:
        current_app.logger.warning(f"Could not remove transient upload {path}: {e}")


@contextmanager
def transient_upload(file_storage, upload_dir: str) -> Iterator[TransientUpload]:
    """Write an upload to disk and delete it again on every exit path"""
    _ensure_upload_dir(upload_dir)
    filename = getattr(file_storage, "filename", "") or ""
    path = upload_path(upload_dir, filename)
    try:
        file_storage.save(path)
        upload = TransientUpload(
            path=path,
            filename=filename,
            mimetype=file_storage.mimetype or DEFAULT_PART_TYPE,
            size=os.path.getsize(path),
        )
        yield upload
    finally:
        discard(path)
