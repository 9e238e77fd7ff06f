from decimal import Decimal

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import (
    BookingId,
    Leg,
    OneWay,
    Passenger,
    parse_seat_list,
)
from services.shared.domain import IsoDateTime
from services.shared.domain.exception import BusinessRuleViolationException


class TestBooking:
    """Booking Entity のテスト"""

    def test_cancel_is_idempotent(self, create_booking):
        """キャンセル済みの予約を再度キャンセルしても状態は変わらない"""
        booking = create_booking()
        booking.cancel()
        booking.cancel()
        assert booking.status == BookingStatus.CANCELLED
        assert not booking.holds_seats

    def test_negative_amount_raises_error(self):
        with pytest.raises(BusinessRuleViolationException):
            Booking(
                id=BookingId(value="booking-123"),
                user_id="u1",
                passenger=Passenger(name="Ana Silva", email="ana@example.com"),
                itinerary=OneWay(
                    outbound=Leg(flight_id="SW100", seats=parse_seat_list("12C"))
                ),
                total_amount=Decimal("-1"),
                booking_date=IsoDateTime.now(),
                created_at=IsoDateTime.now(),
            )

    def test_round_trip_legs(self, create_booking):
        """往復予約は往路・復路の 2 区間を持つ"""
        booking = create_booking(return_flight_id="SW200", return_seat_number="14D")

        assert booking.is_round_trip
        assert booking.outbound.flight_id == "SW100"
        assert booking.inbound is not None
        assert booking.inbound.flight_id == "SW200"
        assert len(booking.itinerary.legs) == 2

    def test_one_way_has_no_inbound(self, create_booking):
        booking = create_booking()
        assert not booking.is_round_trip
        assert booking.inbound is None

    def test_seats_on_matches_flight_and_date(self, create_booking):
        """指定便・出発日で占有している座席を返す"""
        booking = create_booking(
            seat_number="12C,12D",
            return_flight_id="SW200",
            return_seat_number="14D",
        )

        assert [str(s) for s in booking.seats_on("SW100")] == ["12C", "12D"]
        assert [str(s) for s in booking.seats_on("SW200", "2025-03-21")] == ["14D"]
        assert booking.seats_on("SW200", "2025-03-22") == ()
        assert booking.seats_on("SW999") == ()

    def test_cancelled_booking_holds_no_seats(self, create_booking):
        booking = create_booking(status=BookingStatus.CANCELLED)
        assert booking.seats_on("SW100") == ()
