"""Tests for the HTTP shell: routing and error translation."""
import pytest
from fastapi.testclient import TestClient

from apps.api.deps import get_db
from apps.api.main import app
from db.session import get_session_context


API = "/api/v1"


@pytest.fixture
def client(session_factory, users):
    """Test client whose requests each run in their own session on the test database."""
    def override_get_db():
        with get_session_context(session_factory) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def staff_with_shift(client, users):
    """Staff member working 09:00-12:00 on 2024-01-10."""
    staff_id = users["staff"].id
    response = client.put(
        f"{API}/staff/{staff_id}/shifts/2024-01-10",
        json={"start_time": "09:00", "end_time": "12:00"},
    )
    assert response.status_code == 200
    return staff_id


def _book(client, customer_id, staff_id, time_slot="09:00", menu="Cut"):
    return client.post(
        f"{API}/reservations",
        json={
            "customer_id": customer_id,
            "staff_id": staff_id,
            "date": "2024-01-10",
            "time_slot": time_slot,
            "menu": menu,
        },
    )


@pytest.mark.integration
class TestReservationEndpoints:
    """Test booking through the API."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_book_and_conflict(self, client, users, staff_with_shift):
        """Test the end-to-end flow with error translation."""
        first = _book(client, users["customer_a"].id, staff_with_shift)
        assert first.status_code == 201
        assert first.json()["status"] == "BOOKED"

        second = _book(client, users["customer_b"].id, staff_with_shift)
        assert second.status_code == 409
        assert second.json()["detail"] == "This time slot is already booked."

        availability = client.get(
            f"{API}/staff/{staff_with_shift}/availability", params={"date": "2024-01-10"}
        )
        assert availability.status_code == 200
        slots = availability.json()["slots"]
        assert "09:00:00" not in slots
        assert slots[0] == "09:30:00"
        assert slots[-1] == "11:30:00"

    def test_outside_shift_is_422(self, client, users, staff_with_shift):
        response = _book(client, users["customer_a"].id, staff_with_shift, time_slot="12:00")

        assert response.status_code == 422
        assert response.json()["detail"] == "Staff is not available at this time."

    def test_offset_aware_time_is_422(self, client, users, staff_with_shift):
        created = _book(client, users["customer_a"].id, staff_with_shift, time_slot="09:00:00Z")
        assert created.status_code == 422

        reservation_id = _book(client, users["customer_a"].id, staff_with_shift).json()["id"]
        moved = client.put(
            f"{API}/reservations/{reservation_id}",
            json={"date": "2024-01-10", "time_slot": "10:00:00+09:00"},
        )
        assert moved.status_code == 422

    def test_unknown_staff_is_404(self, client, users):
        response = _book(client, users["customer_a"].id, 9999)

        assert response.status_code == 404
        assert response.json()["detail"] == "Staff not found"

    def test_update_and_cancel(self, client, users, staff_with_shift):
        reservation_id = _book(client, users["customer_a"].id, staff_with_shift).json()["id"]

        updated = client.put(
            f"{API}/reservations/{reservation_id}",
            json={"date": "2024-01-10", "time_slot": "10:30", "menu": "Color"},
        )
        assert updated.status_code == 200
        assert updated.json()["time_slot"] == "10:30:00"
        assert updated.json()["menu"] == "Color"

        cancelled = client.post(f"{API}/reservations/{reservation_id}/cancel")
        assert cancelled.status_code == 204

        fetched = client.get(f"{API}/reservations/{reservation_id}")
        assert fetched.json()["status"] == "CANCELLED"

    def test_get_missing_reservation(self, client):
        response = client.get(f"{API}/reservations/9999")

        assert response.status_code == 404

    def test_list_requires_both_range_bounds(self, client):
        response = client.get(f"{API}/reservations", params={"start": "2024-01-10"})

        assert response.status_code == 400

    def test_customer_history(self, client, users, staff_with_shift):
        _book(client, users["customer_a"].id, staff_with_shift, time_slot="09:00")
        _book(client, users["customer_a"].id, staff_with_shift, time_slot="11:00")

        response = client.get(f"{API}/customers/{users['customer_a'].id}/reservations")

        assert [r["time_slot"] for r in response.json()] == ["11:00:00", "09:00:00"]


@pytest.mark.integration
class TestStaffAndReportEndpoints:
    """Test staff, shift and report endpoints."""

    def test_list_staff(self, client, users):
        response = client.get(f"{API}/staff")

        assert {u["name"] for u in response.json()} == {"Sakura Tanaka", "Ken Ito"}

    def test_invalid_shift_window(self, client, users):
        response = client.put(
            f"{API}/staff/{users['staff'].id}/shifts/2024-01-10",
            json={"start_time": "12:00", "end_time": "09:00"},
        )

        assert response.status_code == 422

    def test_shift_listing(self, client, users, staff_with_shift):
        by_staff = client.get(f"{API}/staff/{staff_with_shift}/shifts")
        by_range = client.get(f"{API}/shifts", params={"start": "2024-01-01", "end": "2024-01-31"})

        assert len(by_staff.json()) == 1
        assert by_range.json()[0]["staff_id"] == staff_with_shift

    def test_reports(self, client, users, staff_with_shift):
        _book(client, users["customer_a"].id, staff_with_shift, time_slot="09:00", menu="Cut")
        _book(client, users["customer_b"].id, staff_with_shift, time_slot="09:30", menu=None)

        params = {"start": "2024-01-10", "end": "2024-01-10"}
        by_menu = client.get(f"{API}/reports/by-menu", params=params).json()
        by_staff = client.get(f"{API}/reports/by-staff", params=params).json()

        assert by_menu["counts"] == {"Cut": 1, "unspecified": 1}
        assert by_menu["total"] == 2
        assert by_staff["counts"] == {"Sakura Tanaka": 2}
