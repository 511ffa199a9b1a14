"""
Upload errors and their JSON rendering.

Every failure on the upload path is raised as an UploadError subclass and turned
into ``{"error": message}`` with the matching status code by the handlers
registered in ``register_error_handlers``.
"""
from flask import current_app, jsonify
from werkzeug.exceptions import MethodNotAllowed, RequestEntityTooLarge


class UploadError(Exception):
    """Base class for client-visible upload failures"""
    status_code = 500
    message = "Failed to process file."

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class MissingFile(UploadError):
    status_code = 400
    message = "No file uploaded"


class UnsupportedFormat(UploadError):
    status_code = 400
    message = "Unsupported file format, upload PDF or TXT."


class ProcessingFailed(UploadError):
    status_code = 500
    message = "Failed to process file."


class FileTooLarge(UploadError):
    status_code = 413
    message = "File too large"


class ExtractionError(Exception):
    """Raised by extractors when a document cannot be turned into text"""


def register_error_handlers(app):
    """Render upload failures as JSON instead of HTML error pages"""

    @app.errorhandler(UploadError)
    def handle_upload_error(err):
        return jsonify({"error": err.message}), err.status_code

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(err):
        current_app.logger.warning(
            "Rejected upload over %s bytes", current_app.config.get("MAX_CONTENT_LENGTH")
        )
        return handle_upload_error(FileTooLarge())

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(err):
        response = jsonify({"error": "Method not allowed"})
        response.status_code = 405
        if err.valid_methods:
            response.headers["Allow"] = ", ".join(err.valid_methods)
        return response
