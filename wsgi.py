"""
WSGI entry point.

    flask --app wsgi run
    python wsgi.py
"""
import os

from studydoc import create_app

app = create_app(os.getenv("FLASK_ENV", "production"))

if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config.get("DEBUG", False))
