"""Shared extensions for the habitcal application."""

from flask_sqlalchemy import SQLAlchemy

# Key-value persistence for the tracker state
db = SQLAlchemy(session_options={"expire_on_commit": False})


def init_extensions(app) -> None:
    """Initialize all extensions with the Flask app."""
    db.init_app(app)
