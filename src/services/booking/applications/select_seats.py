from collections.abc import Callable
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from aws_lambda_powertools import Logger

from services.booking.domain.entity import SeatSelection
from services.booking.domain.value_object import OccupancySet, SeatLabel

logger = Logger(child=True)

OccupancyLookup = Callable[[str, str | None], OccupancySet]


class SeatSelectionStep(str, Enum):
    OUTBOUND = "outbound"
    RETURN = "return"


@dataclass(frozen=True)
class SeatAvailabilityNotice:
    """座席情報を取得できなかったときの利用者向けの通知"""

    flight_id: str
    message: str = "Could not load seat availability"


@dataclass(frozen=True)
class SeatSelectionResult:
    """座席選択の確定結果（次の画面に引き渡す値）"""

    outbound_seats: tuple[SeatLabel, ...]
    outbound_surcharge: Decimal
    return_seats: tuple[SeatLabel, ...] = ()
    return_surcharge: Decimal = Decimal("0")

    @property
    def total_surcharge(self) -> Decimal:
        return self.outbound_surcharge + self.return_surcharge

    def seat_numbers(self) -> str:
        return ",".join(str(seat) for seat in self.outbound_seats)

    def return_seat_numbers(self) -> str:
        return ",".join(str(seat) for seat in self.return_seats)


class SeatSelectionFlow:
    """座席選択の画面遷移（往路 → 復路）

    使用済み座席の取得に失敗しても選択は止めない。
    その場合は空の集合で続行し、通知を返す（確定時の重複は座席クレームで防ぐ）。
    """

    def __init__(
        self,
        lookup: OccupancyLookup,
        outbound_flight_id: str,
        outbound_date: str,
        passengers: int,
        return_flight_id: str | None = None,
        return_date: str = "",
    ) -> None:
        self._lookup = lookup
        self._flights = {
            SeatSelectionStep.OUTBOUND: (outbound_flight_id, outbound_date),
            SeatSelectionStep.RETURN: (return_flight_id or "", return_date),
        }
        self._selections = {
            SeatSelectionStep.OUTBOUND: SeatSelection(passengers),
            SeatSelectionStep.RETURN: SeatSelection(passengers),
        }
        self._step = SeatSelectionStep.OUTBOUND

    @property
    def is_round_trip(self) -> bool:
        return bool(self._flights[SeatSelectionStep.RETURN][0])

    @property
    def step(self) -> SeatSelectionStep:
        return self._step

    @property
    def current(self) -> SeatSelection:
        return self._selections[self._step]

    @property
    def current_flight_id(self) -> str:
        return self._flights[self._step][0]

    def load_availability(self) -> SeatAvailabilityNotice | None:
        """現在の区間の使用済み座席を読み込む"""
        flight_id, departure_date = self._flights[self._step]
        if not flight_id or not departure_date:
            self.current.replace_occupancy(OccupancySet.empty())
            return None

        try:
            occupied = self._lookup(flight_id, departure_date)
        except Exception:
            logger.warning(
                "Failed to load occupied seats",
                extra={"flight_id": flight_id, "departure_date": departure_date},
                exc_info=True,
            )
            self.current.replace_occupancy(OccupancySet.empty())
            return SeatAvailabilityNotice(flight_id=flight_id)

        self.current.replace_occupancy(occupied)
        return None

    def toggle(self, seat: SeatLabel) -> tuple[SeatLabel, ...]:
        return self.current.toggle(seat)

    def advance(self) -> SeatSelectionResult | None:
        """現在の区間を確定する

        往復の往路では復路に切り替えて None を返し、
        最後の区間では選択結果を返す。
        """
        self.current.ensure_complete()

        if self._step == SeatSelectionStep.OUTBOUND and self.is_round_trip:
            self._step = SeatSelectionStep.RETURN
            return None

        outbound = self._selections[SeatSelectionStep.OUTBOUND]
        if not self.is_round_trip:
            return SeatSelectionResult(
                outbound_seats=outbound.selected,
                outbound_surcharge=outbound.surcharge(),
            )

        inbound = self._selections[SeatSelectionStep.RETURN]
        return SeatSelectionResult(
            outbound_seats=outbound.selected,
            outbound_surcharge=outbound.surcharge(),
            return_seats=inbound.selected,
            return_surcharge=inbound.surcharge(),
        )

    def back(self) -> None:
        """復路から往路に戻る（往路の選択はそのまま）"""
        if self._step == SeatSelectionStep.RETURN:
            self._step = SeatSelectionStep.OUTBOUND
