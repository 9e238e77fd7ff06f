from decimal import Decimal

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import (
    BookingId,
    Leg,
    OneWay,
    Passenger,
    RoundTrip,
    parse_seat_list,
)
from services.shared.domain import IsoDateTime


class InMemoryBookingRepository(BookingRepository):
    """テスト用のインメモリ実装（DynamoDB の絞り込みと同じ条件で検索する）"""

    def __init__(self, bookings: list[Booking] | None = None) -> None:
        self.items: dict[str, Booking] = {}
        for booking in bookings or []:
            self.save(booking)

    def save(self, booking: Booking) -> None:
        self.items[str(booking.id)] = booking

    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        return self.items.get(str(booking_id))

    def find_by_user(self, user_id: str) -> list[Booking]:
        bookings = [b for b in self.items.values() if b.user_id == user_id]
        return sorted(bookings, key=lambda b: str(b.booking_date), reverse=True)

    def find_by_flight(
        self, flight_id: str, departure_date: str | None = None
    ) -> list[Booking]:
        return [
            b
            for b in self.items.values()
            if b.outbound.flight_id == flight_id
            and b.outbound.departs_on(departure_date)
        ]

    def find_by_return_flight(
        self, flight_id: str, departure_date: str | None = None
    ) -> list[Booking]:
        return [
            b
            for b in self.items.values()
            if b.inbound is not None
            and b.inbound.flight_id == flight_id
            and b.inbound.departs_on(departure_date)
        ]

    def update_status(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        self.items[str(booking.id)] = booking


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        booking_id: str = "booking-123",
        user_id: str = "u1",
        flight_id: str = "SW100",
        seat_number: str = "12C",
        departure_date: str | None = "2025-03-14",
        return_flight_id: str | None = None,
        return_seat_number: str | None = None,
        return_departure_date: str | None = "2025-03-21",
        total_amount: Decimal = Decimal("450.5"),
        booking_date: str = "2025-03-01T09:30:00.000Z",
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> Booking:
        outbound = Leg(
            flight_id=flight_id,
            seats=parse_seat_list(seat_number),
            details={"departure_date": departure_date} if departure_date else None,
        )
        if return_flight_id:
            inbound = Leg(
                flight_id=return_flight_id,
                seats=parse_seat_list(return_seat_number or "1A"),
                details=(
                    {"departure_date": return_departure_date}
                    if return_departure_date
                    else None
                ),
            )
            itinerary = RoundTrip(outbound=outbound, inbound=inbound)
        else:
            itinerary = OneWay(outbound=outbound)

        return Booking(
            id=BookingId(value=booking_id),
            user_id=user_id,
            passenger=Passenger(name="Ana Silva", email="ana@example.com"),
            itinerary=itinerary,
            total_amount=total_amount,
            booking_date=IsoDateTime.from_string(booking_date),
            created_at=IsoDateTime.from_string(booking_date),
            status=status,
        )

    return _factory


@pytest.fixture
def in_memory_repository():
    """InMemoryBookingRepository を生成する Factory fixture"""

    def _factory(*bookings: Booking) -> InMemoryBookingRepository:
        return InMemoryBookingRepository(list(bookings))

    return _factory
