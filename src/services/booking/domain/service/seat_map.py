from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from services.booking.domain.enum.seat_tier import SeatTier
from services.booking.domain.value_object.seat_label import (
    COLUMNS,
    ROW_COUNT,
    SeatLabel,
)

AISLE_AFTER = 3
PREMIUM_ROWS = 5
EXTRA_LEGROOM_ROWS = 10


@dataclass(frozen=True)
class SeatRow:
    """表示用の 1 行（通路の左右に分割）"""

    row: int
    left: tuple[SeatLabel, ...]
    right: tuple[SeatLabel, ...]
    tier: SeatTier

    @property
    def seats(self) -> tuple[SeatLabel, ...]:
        return self.left + self.right


class SeatMap:
    """客室の座席配置（30 行 × 6 列、C と D の間が通路）

    副作用のない純粋なモデル。通路は表示用で、選択ルールには影響しない。
    """

    rows_count = ROW_COUNT
    seats_per_row = len(COLUMNS)

    def labels(self) -> list[SeatLabel]:
        """全座席を行・列順に返す"""
        return [
            SeatLabel.from_position(row_index, column_index)
            for row_index in range(self.rows_count)
            for column_index in range(self.seats_per_row)
        ]

    def rows(self) -> list[SeatRow]:
        """通路で左右に分けた表示用の行"""
        result: list[SeatRow] = []
        for row_index in range(self.rows_count):
            seats = tuple(
                SeatLabel.from_position(row_index, column_index)
                for column_index in range(self.seats_per_row)
            )
            result.append(
                SeatRow(
                    row=row_index + 1,
                    left=seats[:AISLE_AFTER],
                    right=seats[AISLE_AFTER:],
                    tier=self._tier_for_index(row_index),
                )
            )
        return result

    def tier(self, seat: SeatLabel | int) -> SeatTier:
        """料金帯（行番号は 1 始まり、判定は 0 始まりのインデックスで行う）"""
        row = seat.row if isinstance(seat, SeatLabel) else seat
        if not 1 <= row <= self.rows_count:
            raise ValueError(f"Seat row out of range: {row}")
        return self._tier_for_index(row - 1)

    def price(self, seat: SeatLabel | int) -> Decimal:
        """座席指定の追加料金"""
        return self.tier(seat).surcharge

    def total_surcharge(self, seats: Iterable[SeatLabel]) -> Decimal:
        return sum((self.price(seat) for seat in seats), Decimal("0"))

    @staticmethod
    def _tier_for_index(row_index: int) -> SeatTier:
        if row_index < PREMIUM_ROWS:
            return SeatTier.PREMIUM
        if row_index < EXTRA_LEGROOM_ROWS:
            return SeatTier.EXTRA_LEGROOM
        return SeatTier.STANDARD
