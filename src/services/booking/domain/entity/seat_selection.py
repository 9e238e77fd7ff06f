from decimal import Decimal

from services.booking.domain.service.seat_map import SeatMap
from services.booking.domain.value_object import OccupancySet, SeatLabel
from services.shared.domain.exception import (
    IncompleteSeatSelectionException,
    SeatCapacityExceededException,
)


class SeatSelection:
    """1 区間分の座席選択

    - 選択できるのは搭乗人数分まで
    - 1 名の場合は上限到達後の選択で入れ替え、複数名の場合はエラー
    - 選択済みの座席を再度選ぶと解除（トグル）
    - 使用済み座席の選択は何もしない
    """

    def __init__(
        self,
        max_passengers: int,
        occupied: OccupancySet | None = None,
        seat_map: SeatMap | None = None,
    ) -> None:
        if max_passengers < 1:
            raise ValueError("max_passengers must be at least 1")
        self._max_passengers = max_passengers
        self._occupied = occupied or OccupancySet.empty()
        self._seat_map = seat_map or SeatMap()
        self._selected: list[SeatLabel] = []

    @property
    def max_passengers(self) -> int:
        return self._max_passengers

    @property
    def occupied(self) -> OccupancySet:
        return self._occupied

    @property
    def selected(self) -> tuple[SeatLabel, ...]:
        return tuple(self._selected)

    def replace_occupancy(self, occupied: OccupancySet) -> None:
        """使用済み座席の情報を差し替える（選択中の座席はそのまま）"""
        self._occupied = occupied

    def is_occupied(self, seat: SeatLabel) -> bool:
        return seat in self._occupied

    def is_selected(self, seat: SeatLabel) -> bool:
        return seat in self._selected

    def toggle(self, seat: SeatLabel) -> tuple[SeatLabel, ...]:
        """座席をクリックしたときの選択操作

        Returns:
            操作後の選択座席

        Raises:
            SeatCapacityExceededException: 複数名で上限まで選択済みの場合
        """
        if self.is_occupied(seat):
            return self.selected

        if self.is_selected(seat):
            self._selected.remove(seat)
            return self.selected

        if len(self._selected) >= self._max_passengers:
            if self._max_passengers == 1:
                self._selected = [seat]
                return self.selected
            raise SeatCapacityExceededException(
                f"You can only select {self._max_passengers} seats "
                f"for {self._max_passengers} passengers"
            )

        self._selected.append(seat)
        return self.selected

    def is_complete(self) -> bool:
        return len(self._selected) == self._max_passengers

    def ensure_complete(self) -> None:
        """搭乗人数ちょうどの座席が選ばれていることを確認する"""
        if not self._selected:
            raise IncompleteSeatSelectionException("Please select at least one seat")
        if not self.is_complete():
            plural = "s" if self._max_passengers > 1 else ""
            raise IncompleteSeatSelectionException(
                f"Please select exactly {self._max_passengers} seat{plural} "
                f"for {self._max_passengers} passenger{plural}"
            )

    def surcharge(self) -> Decimal:
        """選択中の座席の追加料金合計"""
        return self._seat_map.total_surcharge(self._selected)
