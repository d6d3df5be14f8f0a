"""
Hotels API tests
Cover GET /hotels and GET /hotels/{hotel_id}, including the enrollment/ticket guard chain
"""
import pytest
from fastapi.testclient import TestClient

from app.models.entities import TicketStatus, UserSession
from app.routers.hotels import get_hotels_service
from app.security.auth import create_access_token, get_current_user_id
from tests import factories


HOTEL_KEYS = {"id", "name", "image", "createdAt", "updatedAt"}
ROOM_KEYS = {"id", "name", "capacity", "hotelId", "createdAt", "updatedAt"}


@pytest.fixture(params=["/hotels", "/hotels/1"])
def endpoint(request):
    """Both hotel endpoints share the authentication and guard behaviour"""
    return request.param


class TestAuthentication:

    def test_no_token(self, client: TestClient, endpoint):
        response = client.get(endpoint)

        assert response.status_code == 401

    def test_invalid_token(self, client: TestClient, endpoint):
        response = client.get(endpoint, headers={"Authorization": "Bearer notatoken"})

        assert response.status_code == 401

    def test_token_without_session(self, client: TestClient, db_session, endpoint):
        user_without_session = factories.create_user(db_session)
        token = create_access_token(user_without_session.id)

        response = client.get(endpoint, headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_expired_token(self, client: TestClient, db_session, endpoint):
        user = factories.create_user(db_session)
        token = create_access_token(user.id, expires_minutes=-5)
        db_session.add(UserSession(user_id=user.id, token=token))
        db_session.commit()

        response = client.get(endpoint, headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401


class TestGuardChain:

    def test_no_enrollment(self, client: TestClient, auth_headers, endpoint):
        response = client.get(endpoint, headers=auth_headers)

        assert response.status_code == 401

    def test_no_ticket(self, client: TestClient, auth_headers, enrollment, endpoint):
        response = client.get(endpoint, headers=auth_headers)

        assert response.status_code == 403

    def test_ticket_without_hotel(self, client: TestClient, db_session, auth_headers, enrollment, endpoint):
        ticket_type = factories.create_ticket_type_without_hotel(db_session)
        factories.create_ticket(db_session, enrollment.id, ticket_type.id, TicketStatus.PAID)

        response = client.get(endpoint, headers=auth_headers)

        assert response.status_code == 403

    def test_remote_ticket(self, client: TestClient, db_session, auth_headers, enrollment, endpoint):
        ticket_type = factories.create_ticket_type(db_session, is_remote=True, includes_hotel=True)
        factories.create_ticket(db_session, enrollment.id, ticket_type.id, TicketStatus.PAID)

        response = client.get(endpoint, headers=auth_headers)

        assert response.status_code == 403

    def test_ticket_not_paid(self, client: TestClient, db_session, auth_headers, enrollment, endpoint):
        ticket_type = factories.create_ticket_type_with_hotel(db_session)
        factories.create_ticket(db_session, enrollment.id, ticket_type.id, TicketStatus.RESERVED)

        response = client.get(endpoint, headers=auth_headers)

        assert response.status_code == 402


class TestListHotels:

    def test_empty(self, client: TestClient, auth_headers, paid_hotel_ticket):
        response = client.get("/hotels", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == []

    def test_hotels(self, client: TestClient, db_session, auth_headers, paid_hotel_ticket):
        hotel = factories.create_hotel(db_session)

        response = client.get("/hotels", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert set(data[0].keys()) == HOTEL_KEYS
        assert data[0]["id"] == hotel.id
        assert data[0]["name"] == hotel.name
        assert data[0]["image"] == hotel.image
        assert isinstance(data[0]["createdAt"], str)
        assert isinstance(data[0]["updatedAt"], str)

    def test_repeated_calls_are_identical(self, client: TestClient, db_session, auth_headers, paid_hotel_ticket):
        factories.create_hotel(db_session)
        factories.create_hotel(db_session)

        first = client.get("/hotels", headers=auth_headers)
        second = client.get("/hotels", headers=auth_headers)

        assert first.status_code == second.status_code == 200
        assert first.json() == second.json()


class TestHotelRooms:

    def test_unknown_hotel(self, client: TestClient, db_session, auth_headers, paid_hotel_ticket):
        hotel = factories.create_hotel(db_session)
        factories.create_room(db_session, hotel.id)

        response = client.get("/hotels/0", headers=auth_headers)

        assert response.status_code == 404

    def test_hotel_with_rooms(self, client: TestClient, db_session, auth_headers, paid_hotel_ticket):
        hotel = factories.create_hotel(db_session)
        room = factories.create_room(db_session, hotel.id, capacity=2)
        other_hotel = factories.create_hotel(db_session)
        factories.create_room(db_session, other_hotel.id)

        response = client.get(f"/hotels/{hotel.id}", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert set(data.keys()) == HOTEL_KEYS | {"Rooms"}
        assert data["id"] == hotel.id
        assert len(data["Rooms"]) == 1
        assert set(data["Rooms"][0].keys()) == ROOM_KEYS
        assert data["Rooms"][0]["id"] == room.id
        assert data["Rooms"][0]["capacity"] == 2
        assert data["Rooms"][0]["hotelId"] == hotel.id

    def test_hotel_without_rooms(self, client: TestClient, db_session, auth_headers, paid_hotel_ticket):
        hotel = factories.create_hotel(db_session)

        response = client.get(f"/hotels/{hotel.id}", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == hotel.id
        assert data["Rooms"] == []

    def test_non_numeric_hotel_id(self, client: TestClient, auth_headers, paid_hotel_ticket):
        response = client.get("/hotels/abc", headers=auth_headers)

        assert response.status_code == 404

    def test_non_numeric_hotel_id_still_checks_enrollment(self, client: TestClient, auth_headers):
        response = client.get("/hotels/abc", headers=auth_headers)

        assert response.status_code == 401

    def test_repeated_calls_are_identical(self, client: TestClient, db_session, auth_headers, paid_hotel_ticket):
        hotel = factories.create_hotel(db_session)
        factories.create_room(db_session, hotel.id)
        factories.create_room(db_session, hotel.id)

        first = client.get(f"/hotels/{hotel.id}", headers=auth_headers)
        second = client.get(f"/hotels/{hotel.id}", headers=auth_headers)

        assert first.status_code == second.status_code == 200
        assert len(first.json()["Rooms"]) == 2
        assert first.json() == second.json()


class TestErrorFallback:

    def test_unclassified_error_is_not_found(self, client: TestClient):
        class BrokenService:
            def list_available_hotels(self, user_id):
                raise RuntimeError("database went away")

            def list_hotel_rooms(self, hotel_id, user_id):
                raise RuntimeError("database went away")

        client.app.dependency_overrides[get_current_user_id] = lambda: 1
        client.app.dependency_overrides[get_hotels_service] = lambda: BrokenService()

        assert client.get("/hotels").status_code == 404
        assert client.get("/hotels/1").status_code == 404
