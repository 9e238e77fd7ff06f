from decimal import Decimal

from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import (
    BookingId,
    Itinerary,
    Leg,
    Passenger,
    RoundTrip,
    SeatLabel,
)
from services.shared.domain import AggregateRoot, IsoDateTime
from services.shared.domain.exception import BusinessRuleViolationException


class Booking(AggregateRoot[BookingId]):
    """フライト予約

    片道・往復のどちらも 1 つの集約として扱う。
    座席の割り当ては作成後に変更しない。
    """

    def __init__(
        self,
        id: BookingId,
        user_id: str,
        passenger: Passenger,
        itinerary: Itinerary,
        total_amount: Decimal,
        booking_date: IsoDateTime,
        created_at: IsoDateTime,
        status: BookingStatus = BookingStatus.CONFIRMED,
    ) -> None:
        super().__init__(id)

        self._user_id = user_id
        self._passenger = passenger
        self._itinerary = itinerary
        self._total_amount = total_amount
        self._booking_date = booking_date
        self._created_at = created_at
        self._status = status

        self._validate_amount()

    def _validate_amount(self) -> None:
        """合計金額は 0 以上"""
        if self._total_amount < 0:
            raise BusinessRuleViolationException("Total amount cannot be negative")

    @property
    def user_id(self) -> str:
        return self._user_id

    @property
    def passenger(self) -> Passenger:
        return self._passenger

    @property
    def itinerary(self) -> Itinerary:
        return self._itinerary

    @property
    def outbound(self) -> Leg:
        return self._itinerary.outbound

    @property
    def inbound(self) -> Leg | None:
        if isinstance(self._itinerary, RoundTrip):
            return self._itinerary.inbound
        return None

    @property
    def is_round_trip(self) -> bool:
        return isinstance(self._itinerary, RoundTrip)

    @property
    def total_amount(self) -> Decimal:
        return self._total_amount

    @property
    def booking_date(self) -> IsoDateTime:
        return self._booking_date

    @property
    def created_at(self) -> IsoDateTime:
        return self._created_at

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def holds_seats(self) -> bool:
        """座席を占有しているか（キャンセル済みは座席を解放する）"""
        return self._status != BookingStatus.CANCELLED

    def seats_on(
        self, flight_id: str, departure_date: str | None = None
    ) -> tuple[SeatLabel, ...]:
        """指定便（・出発日）でこの予約が占有している座席"""
        if not self.holds_seats:
            return ()
        seats: list[SeatLabel] = []
        for leg in self._itinerary.legs:
            if leg.flight_id == flight_id and leg.departs_on(departure_date):
                seats.extend(leg.seats)
        return tuple(seats)

    def cancel(self) -> None:
        """予約をキャンセルする"""
        if self._status == BookingStatus.CANCELLED:
            return
        self._status = BookingStatus.CANCELLED
