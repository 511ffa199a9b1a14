"""
Upload Blueprint - accepts one document and returns its text as JSON.

Flow per request: save the upload to a transient file, classify it, extract
text, delete the transient file, respond. The transient file is removed on
every exit path by ``transient_upload``.
"""
from functools import lru_cache

from flask import Blueprint, current_app, jsonify, request

from studydoc.errors import MissingFile, ProcessingFailed, UploadError
from studydoc.extractors import build_detector, build_registry
from studydoc.storage import transient_upload

uploads_bp = Blueprint("uploads", __name__)

SNIFF_BYTES = 1024


@lru_cache(maxsize=8)
def registry_for(pdf_engine: str):
    return build_registry(pdf_engine)


@lru_cache(maxsize=8)
def detector_for(policy: str):
    return build_detector(policy)


def extract_upload(upload) -> str:
    """Classify a transient upload and return its text.

    Raises UnsupportedFormat for types without an extractor and ProcessingFailed
    when reading or extraction fails.
    """
    cfg = current_app.config
    detector = detector_for(cfg["FORMAT_POLICY"])
    registry = registry_for(cfg["PDF_ENGINE"])

    try:
        data = upload.read()
    except OSError as e:
        raise ProcessingFailed() from e

    mimetype = detector.detect(upload.mimetype, data[:SNIFF_BYTES])
    extractor = registry.for_type(mimetype)

    try:
        return extractor.extract(data)
    except Exception as e:
        raise ProcessingFailed() from e


@uploads_bp.route("/upload", methods=["POST"])
def upload():
    file = request.files.get("file")
    if not file:
        current_app.logger.warning("Upload rejected: no file part")
        raise MissingFile()

    try:
        with transient_upload(file, current_app.config["UPLOAD_FOLDER"]) as stored:
            current_app.logger.info(
                f"Upload received: name={stored.filename!r} type={stored.mimetype!r} size={stored.size}"
            )
            text = extract_upload(stored)
    except UploadError as e:
        if e.status_code >= 500:
            current_app.logger.exception(f"Upload failed: {e.message}")
        else:
            current_app.logger.warning(f"Upload rejected: {e.message} (type={file.mimetype!r})")
        raise
    except Exception as e:
        current_app.logger.exception("Upload failed while storing file")
        raise ProcessingFailed() from e

    return jsonify({"text": text}), 200
