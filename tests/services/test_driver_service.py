# tests/services/test_driver_service.py
import pytest
from fastapi.testclient import TestClient


PASSENGER = "+27820000001"
BOOKING = ["", "1", "4", "0", "1", "1", "1", "1"]


def book_trip(client: TestClient, session_id: str = "ATUid_1") -> str:
    for text in BOOKING:
        response = client.post("/ussd", data={"sessionId": session_id, "phoneNumber": PASSENGER, "text": text})
    return response.text.split("Trip ID: ")[1].split(".")[0]


def register(client: TestClient, phone: str = "+27830000001", name: str = "Thabo"):
    return client.post("/driver/register", json={"name": name, "idNumber": "8001015009087", "phone": phone})


class TestRegister:

    def test_register(self, client: TestClient):
        response = register(client)

        assert response.status_code == 200
        assert response.json() == {"message": "Driver registered", "driverId": "DR-1"}

    def test_missing_field(self, client: TestClient):
        response = client.post("/driver/register", json={"name": "Thabo", "phone": "+27830000001"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: idNumber"}

    def test_empty_body(self, client: TestClient):
        response = client.post("/driver/register", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields: name, idNumber, phone"}

    def test_duplicate_phone(self, client: TestClient):
        register(client)
        response = register(client, name="Sipho")

        assert response.status_code == 400
        assert "already registered" in response.json()["error"]

    def test_body_not_an_object(self, client: TestClient):
        response = client.post("/driver/register", json=["Thabo"])

        assert response.status_code == 400
        assert "error" in response.json()


class TestLogin:

    def test_login(self, client: TestClient):
        register(client)

        response = client.post("/driver/login", json={"phone": "+27 83 000 0001"})

        assert response.status_code == 200
        assert response.json() == {"message": "Login successful", "driverId": "DR-1", "name": "Thabo"}

    def test_unknown_driver(self, client: TestClient):
        response = client.post("/driver/login", json={"phone": "+27839999999"})

        assert response.status_code == 400
        assert response.json() == {"error": "Driver not found"}


class TestTrips:

    def test_pending_empty(self, client: TestClient):
        response = client.get("/driver/trips/pending")

        assert response.status_code == 200
        assert response.json() == []

    def test_pending_after_booking(self, client: TestClient):
        trip_id = book_trip(client)

        trips = client.get("/driver/trips/pending").json()

        assert len(trips) == 1
        assert trips[0]["id"] == trip_id
        assert trips[0]["pickup"] == "Meadowlands"
        assert trips[0]["dropoffTown"] == "Johannesburg"
        assert trips[0]["fare"] == "R70-R85"
        assert trips[0]["status"] == "pending"
        assert trips[0]["driverId"] is None

    def test_accept(self, client: TestClient):
        trip_id = book_trip(client)

        response = client.post(f"/driver/trips/{trip_id}/accept", json={"driverId": "DR-1"})

        assert response.status_code == 200
        assert response.json()["status"] == "accepted"
        assert response.json()["driverId"] == "DR-1"
        assert client.get("/driver/trips/pending").json() == []

    def test_accept_by_unregistered_driver_id(self, client: TestClient):
        """driverId хранится как есть, без сверки с реестром водителей."""
        trip_id = book_trip(client)

        response = client.post(f"/driver/trips/{trip_id}/accept", json={"driverId": "DR-404"})

        assert response.status_code == 200
        assert response.json()["driverId"] == "DR-404"

    def test_accept_twice(self, client: TestClient):
        trip_id = book_trip(client)
        client.post(f"/driver/trips/{trip_id}/accept", json={"driverId": "DR-1"})

        response = client.post(f"/driver/trips/{trip_id}/accept", json={"driverId": "DR-2"})

        assert response.status_code == 400
        assert response.json() == {"error": f"Trip {trip_id} already accepted by another driver"}

    def test_accept_unknown_trip(self, client: TestClient):
        response = client.post("/driver/trips/TR-99/accept", json={"driverId": "DR-1"})

        assert response.status_code == 404
        assert response.json() == {"error": "Trip TR-99 not found"}

    @pytest.mark.parametrize("body", [None, {}, {"driverId": ""}])
    def test_accept_without_driver(self, client: TestClient, body):
        trip_id = book_trip(client)

        response = client.post(f"/driver/trips/{trip_id}/accept", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "driverId is required"}

    def test_decline(self, client: TestClient):
        trip_id = book_trip(client)

        response = client.post(f"/driver/trips/{trip_id}/decline")

        assert response.status_code == 200
        assert response.json() == {"message": "Trip declined", "tripId": trip_id}
        assert len(client.get("/driver/trips/pending").json()) == 1

    @pytest.mark.parametrize("status", ["pickedup", "completed", "cancelled"])
    def test_update(self, client: TestClient, status: str):
        trip_id = book_trip(client)

        response = client.post(f"/driver/trips/{trip_id}/update", json={"status": status})

        assert response.status_code == 200
        assert response.json()["status"] == status

    @pytest.mark.parametrize("body", [{"status": "flying"}, {"status": "accepted"}, {}])
    def test_update_invalid_status(self, client: TestClient, body):
        trip_id = book_trip(client)

        response = client.post(f"/driver/trips/{trip_id}/update", json=body)

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid status")

    def test_update_unknown_trip(self, client: TestClient):
        response = client.post("/driver/trips/TR-5/update", json={"status": "completed"})

        assert response.status_code == 404
        assert response.json() == {"error": "Trip TR-5 not found"}
