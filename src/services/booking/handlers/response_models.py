from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel

from services.booking.domain.entity import Booking
from services.booking.domain.value_object import OccupancySet, join_seat_list


class BookingData(BaseModel):
    """予約データのレスポンスモデル（保存形式と同じフラットな形）"""

    id: str
    user_id: str
    flight_id: str
    passenger_name: str
    passenger_email: str
    seat_number: str
    booking_status: str
    total_amount: Decimal
    booking_date: str
    created_at: str
    flight_details: dict[str, Any] | None = None
    return_flight_id: str | None = None
    return_seat_number: str | None = None
    return_flight_details: dict[str, Any] | None = None


class OccupiedSeatsData(BaseModel):
    """使用済み座席のレスポンスモデル"""

    occupied_seats: list[str]
    count: int


def to_booking_dict(booking: Booking) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    outbound = booking.outbound
    inbound = booking.inbound
    data = BookingData(
        id=str(booking.id),
        user_id=booking.user_id,
        flight_id=outbound.flight_id,
        passenger_name=booking.passenger.name,
        passenger_email=booking.passenger.email,
        seat_number=join_seat_list(outbound.seats),
        booking_status=booking.status.value,
        total_amount=booking.total_amount,
        booking_date=str(booking.booking_date),
        created_at=str(booking.created_at),
        flight_details=dict(outbound.details) if outbound.details else None,
        return_flight_id=inbound.flight_id if inbound else None,
        return_seat_number=join_seat_list(inbound.seats) if inbound else None,
        return_flight_details=(
            dict(inbound.details) if inbound and inbound.details else None
        ),
    )
    return data.model_dump(exclude_none=True)


def to_occupied_seats_dict(occupied: OccupancySet) -> dict:
    labels = occupied.labels()
    return OccupiedSeatsData(occupied_seats=labels, count=len(labels)).model_dump()
