"""Static upload page."""
from flask import Blueprint, current_app, render_template

pages_bp = Blueprint("pages", __name__)


@pages_bp.route("/", methods=["GET"])
def index():
    return render_template("index.html", version=current_app.config.get("APP_VERSION", ""))
