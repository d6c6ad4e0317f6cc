"""
Shared fixtures: an in-memory SQLite database per test, the FastAPI app
wired to it, and a factory for valid booking payloads.
"""
import pytest
from fastapi.testclient import TestClient

from banquet_booking.core.config import Settings
from banquet_booking.db.repository import SqlBookingStore
from banquet_booking.db.session import Database
from banquet_booking.main import create_app
from banquet_booking.services.booking_service import BookingService


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url="sqlite://",
        redis_url=None,
        log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def database():
    db = Database("sqlite://").connect()
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    s = database.session()
    yield s
    s.close()


@pytest.fixture
def service(session):
    return BookingService(SqlBookingStore(session))


@pytest.fixture
def make_payload():
    """Build a camelCase create-booking body, overriding any field."""

    def _make(**overrides):
        payload = {
            "customerName": "Asha Patil",
            "customerNumber": "9876543210",
            "startDate": "2026-12-10",
            "endDate": "2026-12-11",
            "eventType": "Wedding reception",
            "eventTiming": "Evening",
            "hallCharges": 1000,
            "items": [{"name": "Flower decoration", "price": 50, "quantity": 4}],
            "selectedThali": "Supreme",
            "numberOfPeople": 10,
            "discount": 10,
            "paymentStatus": "Pending",
        }
        payload.update(overrides)
        return payload

    return _make
