from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from services.booking.domain.value_object import BookingId, Leg, parse_seat_list
from services.booking.infrastructure.dynamodb_seat_claim_repository import (
    DynamoDBSeatClaimRepository,
    claim_key,
)
from services.shared.domain.exception import (
    SeatAlreadyTakenException,
    StoreFailureException,
)


def conditional_check_failed() -> ClientError:
    return ClientError(
        {"Error": {"Code": "ConditionalCheckFailedException", "Message": "taken"}},
        "PutItem",
    )


@pytest.fixture
def leg():
    return Leg(
        flight_id="SW100",
        seats=parse_seat_list("12C,12D"),
        details={"departure_date": "2025-03-14"},
    )


class TestDynamoDBSeatClaimRepository:
    """DynamoDBSeatClaimRepository のテスト"""

    def test_claim_key(self, leg):
        assert claim_key("SW100", "2025-03-14", leg.seats[0]) == "SW100#2025-03-14#12C"
        assert claim_key("SW100", None, leg.seats[0]) == "SW100#ANY#12C"

    def test_claim_puts_each_seat_conditionally(self, leg):
        table = MagicMock()
        repository = DynamoDBSeatClaimRepository(table=table)

        repository.claim(BookingId(value="b1"), leg)

        assert table.put_item.call_count == 2
        first = table.put_item.call_args_list[0].kwargs
        assert first["Item"]["claim_key"] == "SW100#2025-03-14#12C"
        assert first["Item"]["booking_id"] == "b1"
        assert "ConditionExpression" in first

    def test_taken_seat_releases_partial_claims(self, leg):
        """2 席目が確保済みなら、1 席目を解放して SeatAlreadyTakenException"""
        table = MagicMock()
        table.put_item.side_effect = [None, conditional_check_failed()]
        repository = DynamoDBSeatClaimRepository(table=table)

        with pytest.raises(SeatAlreadyTakenException, match="Seat 12D is already taken"):
            repository.claim(BookingId(value="b1"), leg)

        table.delete_item.assert_called_once()
        key = table.delete_item.call_args.kwargs["Key"]
        assert key == {"claim_key": "SW100#2025-03-14#12C"}

    def test_other_errors_raise_store_failure(self, leg):
        table = MagicMock()
        table.put_item.side_effect = ClientError(
            {"Error": {"Code": "InternalServerError", "Message": "boom"}}, "PutItem"
        )
        repository = DynamoDBSeatClaimRepository(table=table)

        with pytest.raises(StoreFailureException):
            repository.claim(BookingId(value="b1"), leg)

    def test_release_ignores_claims_of_other_bookings(self, leg):
        """他の予約のクレームは削除しない（条件不一致は無視する）"""
        table = MagicMock()
        table.delete_item.side_effect = [conditional_check_failed(), None]
        repository = DynamoDBSeatClaimRepository(table=table)

        repository.release(BookingId(value="b1"), leg)

        assert table.delete_item.call_count == 2
