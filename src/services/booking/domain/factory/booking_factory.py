from collections.abc import Callable, Mapping
from decimal import Decimal
from typing import Any, TypedDict

from services.booking.domain.entity.booking import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import (
    BookingId,
    Itinerary,
    Leg,
    OneWay,
    Passenger,
    RoundTrip,
    parse_seat_list,
)
from services.shared.domain import IsoDateTime
from services.shared.domain.exception import (
    InvalidFieldException,
    MissingFieldException,
)
from services.shared.utils.validators import is_blank, to_decimal

REQUIRED_FIELDS = (
    "user_id",
    "flight_id",
    "passenger_name",
    "passenger_email",
    "seat_number",
    "total_amount",
)


class BookingDetails(TypedDict, total=False):
    """予約作成の入力データ構造

    必須: user_id, flight_id, passenger_name, passenger_email,
    seat_number, total_amount
    """

    user_id: str
    flight_id: str
    passenger_name: str
    passenger_email: str
    seat_number: str
    total_amount: Decimal | str | int | float
    booking_status: str
    booking_date: str
    flight_details: Mapping[str, Any]
    return_flight_id: str
    return_seat_number: str
    return_flight_details: Mapping[str, Any]


class BookingFactory:
    """予約エンティティのファクトリ

    - 必須項目の検証（欠けていれば保存前に MissingFieldException）
    - プリミティブ型から Value Object への変換
    - 既定値の設定（ステータス・予約日時）と ID・作成日時の採番
    """

    def __init__(self, clock: Callable[[], IsoDateTime] = IsoDateTime.now) -> None:
        self._clock = clock

    def create(self, details: BookingDetails) -> Booking:
        """新規予約エンティティを生成する

        Args:
            details: 予約の入力データ

        Returns:
            Booking: 生成された予約エンティティ（未保存）

        Raises:
            MissingFieldException: 必須項目が未指定・空の場合
            InvalidFieldException: 値の形式が不正な場合
        """
        for field in REQUIRED_FIELDS:
            if is_blank(details.get(field)):
                raise MissingFieldException(field)

        now = self._clock()

        total_amount = to_decimal("total_amount", details["total_amount"])
        if total_amount < 0:
            raise InvalidFieldException("total_amount", "cannot be negative")

        return Booking(
            id=BookingId.generate(),
            user_id=str(details["user_id"]).strip(),
            passenger=self._to_passenger(details),
            itinerary=self._to_itinerary(details),
            total_amount=total_amount,
            booking_date=self._to_booking_date(details.get("booking_date"), now),
            created_at=now,
            status=self._to_status(details.get("booking_status")),
        )

    def _to_passenger(self, details: BookingDetails) -> Passenger:
        try:
            return Passenger(
                name=str(details["passenger_name"]).strip(),
                email=str(details["passenger_email"]).strip(),
            )
        except ValueError as e:
            raise InvalidFieldException("passenger_email", str(e)) from e

    def _to_itinerary(self, details: BookingDetails) -> Itinerary:
        outbound = self._to_leg(
            details["flight_id"],
            details["seat_number"],
            details.get("flight_details"),
            seat_field="seat_number",
        )

        return_flight_id = details.get("return_flight_id")
        return_seat_number = details.get("return_seat_number")
        if is_blank(return_flight_id) and is_blank(return_seat_number):
            return OneWay(outbound=outbound)

        # 往復は復路の便と座席が揃って初めて成立する
        if is_blank(return_flight_id):
            raise MissingFieldException("return_flight_id")
        if is_blank(return_seat_number):
            raise MissingFieldException("return_seat_number")

        inbound = self._to_leg(
            str(return_flight_id),
            str(return_seat_number),
            details.get("return_flight_details"),
            seat_field="return_seat_number",
        )
        return RoundTrip(outbound=outbound, inbound=inbound)

    @staticmethod
    def _to_leg(
        flight_id: str,
        seat_number: str,
        flight_details: Mapping[str, Any] | None,
        seat_field: str,
    ) -> Leg:
        try:
            seats = parse_seat_list(str(seat_number))
        except ValueError as e:
            raise InvalidFieldException(seat_field, str(e)) from e
        if not seats:
            raise MissingFieldException(seat_field)
        return Leg(
            flight_id=str(flight_id).strip(),
            seats=seats,
            details=dict(flight_details) if flight_details else None,
        )

    @staticmethod
    def _to_booking_date(value: str | None, now: IsoDateTime) -> IsoDateTime:
        if is_blank(value):
            return now
        try:
            return IsoDateTime.from_string(str(value))
        except ValueError as e:
            raise InvalidFieldException("booking_date", str(e)) from e

    @staticmethod
    def _to_status(value: str | None) -> BookingStatus:
        if is_blank(value):
            return BookingStatus.CONFIRMED
        try:
            return BookingStatus(str(value).strip().lower())
        except ValueError as e:
            raise InvalidFieldException(
                "booking_status", "must be one of confirmed, pending, cancelled"
            ) from e
