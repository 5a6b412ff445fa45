from datetime import date
from unittest.mock import patch

import pytest

from habitcal import create_app
from habitcal.extensions import db

# Fixed "today" for API tests: Wednesday 2024-03-13.
FROZEN_TODAY = date(2024, 3, 13)


# ==================== Pytest Markers ====================
def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (database, API)")


@pytest.fixture()
def app():
    """Per-test app on a fresh in-memory database."""
    app = create_app("testing")
    ctx = app.app_context()
    ctx.push()
    try:
        yield app
    finally:
        db.session.remove()
        db.drop_all()
        ctx.pop()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def frozen_today():
    """Pin the local clock used by the calendar service."""
    with patch(
        "habitcal.domains.habits.services.calendar_service.local_today",
        return_value=FROZEN_TODAY,
    ):
        yield FROZEN_TODAY
