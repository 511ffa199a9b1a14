"""
StudyDoc Application Factory
"""
import logging
import os
from datetime import datetime, timezone

from flask import Flask, jsonify

from config import get_config
from studydoc.errors import register_error_handlers
from studydoc.extractors import build_detector, build_registry


def create_app(config_name=None):
    config_name = config_name or os.environ.get("FLASK_ENV", "development")
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))

    app.logger.setLevel(getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.INFO))

    # Fail at startup on a misconfigured engine or policy
    build_registry(app.config["PDF_ENGINE"])
    build_detector(app.config["FORMAT_POLICY"])

    # Register blueprints
    from studydoc.pages import pages_bp
    from studydoc.uploads import uploads_bp

    app.register_blueprint(pages_bp)
    app.register_blueprint(uploads_bp)

    register_error_handlers(app)

    # Health check endpoint
    @app.route("/healthz")
    def healthz():
        """Health check for load balancers and monitoring"""
        return jsonify({
            "ok": True,
            "app_version": app.config["APP_VERSION"],
            "time_utc": datetime.now(timezone.utc).isoformat(),
            "pdf_engine": app.config["PDF_ENGINE"],
            "format_policy": app.config["FORMAT_POLICY"],
        })

    # Version endpoint
    @app.route("/version")
    def version():
        """Version and build info"""
        return jsonify({
            "version": app.config["APP_VERSION"],
            "build_time": app.config["BUILD_TIME"],
            "git_commit": app.config["GIT_COMMIT"],
            "supported_types": build_registry(app.config["PDF_ENGINE"]).types,
        })

    app.logger.info(
        f"StudyDoc ready (env={config_name}, uploads={app.config['UPLOAD_FOLDER']}, "
        f"pdf_engine={app.config['PDF_ENGINE']}, format_policy={app.config['FORMAT_POLICY']})"
    )
    return app
