import json
from unittest.mock import MagicMock

from services.booking.applications.get_booking import GetBookingService
from services.booking.applications.list_user_bookings import ListUserBookingsService
from services.booking.applications.occupied_seats import OccupiedSeatsService
from services.booking.handlers import get, list_by_user, occupied_seats
from services.shared.domain.exception import StoreFailureException


class TestGetHandler:
    """予約詳細取得ハンドラーのテスト"""

    def test_get_booking(
        self, monkeypatch, create_booking, in_memory_repository, api_event, lambda_context
    ):
        repository = in_memory_repository(create_booking(booking_id="b1"))
        monkeypatch.setattr(
            get, "get_get_booking_service", lambda: GetBookingService(repository)
        )

        response = get.lambda_handler(
            api_event(path_parameters={"id": "b1"}), lambda_context
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["booking"]["id"] == "b1"

    def test_unknown_booking_returns_404(
        self, monkeypatch, in_memory_repository, api_event, lambda_context
    ):
        monkeypatch.setattr(
            get,
            "get_get_booking_service",
            lambda: GetBookingService(in_memory_repository()),
        )

        response = get.lambda_handler(
            api_event(path_parameters={"id": "missing"}), lambda_context
        )

        assert response["statusCode"] == 404
        assert "error" in json.loads(response["body"])

    def test_missing_id_returns_400(self, api_event, lambda_context):
        response = get.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 400
        assert json.loads(response["body"]) == {"error": "Missing required field: id"}


class TestListByUserHandler:
    """ユーザーの予約一覧ハンドラーのテスト"""

    def test_list_by_path_parameter(
        self, monkeypatch, create_booking, in_memory_repository, api_event, lambda_context
    ):
        repository = in_memory_repository(
            create_booking(booking_id="old", booking_date="2025-01-01T00:00:00Z"),
            create_booking(booking_id="new", booking_date="2025-02-01T00:00:00Z"),
        )
        monkeypatch.setattr(
            list_by_user,
            "get_list_user_bookings_service",
            lambda: ListUserBookingsService(repository),
        )

        response = list_by_user.lambda_handler(
            api_event(path_parameters={"user_id": "u1"}), lambda_context
        )

        payload = json.loads(response["body"])
        assert response["statusCode"] == 200
        assert payload["count"] == 2
        assert [b["id"] for b in payload["bookings"]] == ["new", "old"]

    def test_list_by_query_parameter(
        self, monkeypatch, in_memory_repository, api_event, lambda_context
    ):
        monkeypatch.setattr(
            list_by_user,
            "get_list_user_bookings_service",
            lambda: ListUserBookingsService(in_memory_repository()),
        )

        response = list_by_user.lambda_handler(
            api_event(query_parameters={"user_id": "u1"}), lambda_context
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == {"bookings": [], "count": 0}

    def test_missing_user_id_returns_400(self, api_event, lambda_context):
        response = list_by_user.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 400
        assert "user_id" in json.loads(response["body"])["error"]


class TestOccupiedSeatsHandler:
    """使用済み座席照会ハンドラーのテスト"""

    def test_occupied_seats(
        self, monkeypatch, create_booking, in_memory_repository, api_event, lambda_context
    ):
        repository = in_memory_repository(
            create_booking(booking_id="b1", seat_number="12C"),
            create_booking(
                booking_id="b2",
                flight_id="SW050",
                return_flight_id="SW100",
                return_seat_number="14D",
                return_departure_date="2025-03-14",
            ),
        )
        monkeypatch.setattr(
            occupied_seats,
            "get_occupied_seats_service",
            lambda: OccupiedSeatsService(repository),
        )

        response = occupied_seats.lambda_handler(
            api_event(
                query_parameters={"flight_id": "SW100", "departure_date": "2025-03-14"}
            ),
            lambda_context,
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == {
            "occupied_seats": ["12C", "14D"],
            "count": 2,
        }

    def test_missing_flight_id_returns_400(self, api_event, lambda_context):
        response = occupied_seats.lambda_handler(api_event(), lambda_context)

        assert response["statusCode"] == 400
        assert json.loads(response["body"]) == {
            "error": "Missing required field: flight_id"
        }

    def test_store_failure_returns_500(self, monkeypatch, api_event, lambda_context):
        service = MagicMock()
        service.occupied_seats.side_effect = StoreFailureException("scan failed")
        monkeypatch.setattr(occupied_seats, "get_occupied_seats_service", lambda: service)

        response = occupied_seats.lambda_handler(
            api_event(query_parameters={"flight_id": "SW100"}), lambda_context
        )

        assert response["statusCode"] == 500
        assert json.loads(response["body"]) == {
            "error": "Failed to fetch occupied seats"
        }

    def test_options_returns_preflight(self, monkeypatch, api_event, lambda_context):
        factory = MagicMock()
        monkeypatch.setattr(occupied_seats, "get_occupied_seats_service", factory)

        response = occupied_seats.lambda_handler(
            api_event(method="OPTIONS"), lambda_context
        )

        assert response["statusCode"] == 200
        assert response["headers"]["Access-Control-Allow-Methods"] == "GET,OPTIONS"
        factory.assert_not_called()
