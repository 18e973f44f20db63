"""Pytest configuration and fixtures for booking backend tests."""
import pytest
from datetime import date, time

from core.config import Settings
from db.repositories import ReservationRepository, ShiftRepository, UserRepository
from db.session import create_session_factory, create_test_engine, init_db
from domain.enums import UserRole
from services import build_services


@pytest.fixture(scope="function")
def db_engine():
    """Create an in-memory SQLite database engine for testing."""
    engine = create_test_engine()
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory bound to the test engine."""
    return create_session_factory(db_engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    """Create a database session for testing."""
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(scope="function")
def test_settings():
    """Settings with the defaults the tests rely on."""
    return Settings(slot_interval_minutes=30, unspecified_menu_label="unspecified")


@pytest.fixture(scope="function")
def user_repository(db_session):
    return UserRepository(db_session)


@pytest.fixture(scope="function")
def shift_repository(db_session):
    return ShiftRepository(db_session)


@pytest.fixture(scope="function")
def reservation_repository(db_session):
    return ReservationRepository(db_session)


@pytest.fixture(scope="function")
def users(user_repository, db_session):
    """Seed two staff members, two customers and an admin (committed)."""
    seeded = {
        "staff": user_repository.create("Sakura Tanaka", "sakura@example.com", UserRole.STAFF, "x"),
        "other_staff": user_repository.create("Ken Ito", "ken@example.com", UserRole.STAFF, "x"),
        "customer_a": user_repository.create("Alice", "alice@example.com", UserRole.CUSTOMER, "x"),
        "customer_b": user_repository.create("Bob", "bob@example.com", UserRole.CUSTOMER, "x"),
        "admin": user_repository.create("Admin", "admin@example.com", UserRole.ADMIN, "x"),
    }
    db_session.commit()
    return seeded


@pytest.fixture(scope="function")
def services(db_session, test_settings):
    """All services bound to the test session."""
    return build_services(db_session, test_settings)


@pytest.fixture(scope="function")
def booking_service(services):
    return services.booking


@pytest.fixture(scope="function")
def availability_service(services):
    return services.availability


@pytest.fixture(scope="function")
def reporting_service(services):
    return services.reporting


@pytest.fixture(scope="function")
def staff_service(services):
    return services.staff


@pytest.fixture(scope="function")
def base_date():
    """Provide a base date for consistent testing."""
    return date(2024, 1, 10)


@pytest.fixture(scope="function")
def add_shift(staff_service, db_session):
    """Factory fixture to store a committed shift."""
    def _add(staff_id, on_date, start=time(9, 0), end=time(12, 0)):
        shift = staff_service.upsert_shift(staff_id, on_date, start, end)
        db_session.commit()
        return shift
    return _add


@pytest.fixture(scope="function")
def create_reservation(booking_service, db_session, users, base_date):
    """Factory fixture to create a committed reservation."""
    def _create(**kwargs):
        data = {
            "customer_id": users["customer_a"].id,
            "staff_id": users["staff"].id,
            "reservation_date": base_date,
            "time_slot": time(9, 0),
            "menu": "Cut",
        }
        data.update(kwargs)
        reservation = booking_service.create(**data)
        db_session.commit()
        return reservation
    return _create
