from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

ROW_COUNT = 30
COLUMNS = "ABCDEF"


@dataclass(frozen=True, order=True)
class SeatLabel:
    """座席ラベル

    行番号（1-30）+ 列記号（A-F）の形式。
    例: 1A, 14D, 30F
    """

    row: int
    column: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^(\d{1,2})([A-Z])$")

    def __post_init__(self) -> None:
        if not 1 <= self.row <= ROW_COUNT:
            raise ValueError(f"Seat row out of range: {self.row}")
        if len(self.column) != 1 or self.column not in COLUMNS:
            raise ValueError(f"Seat column out of range: {self.column}")

    @classmethod
    def from_string(cls, s: str) -> SeatLabel:
        """"14D" 形式の文字列から生成"""
        normalized = s.strip().upper()
        match = cls.PATTERN.match(normalized)
        if not match:
            raise ValueError(
                f"Invalid seat label format: {s}. "
                "Expected format: 14D (row 1-30 + column A-F)"
            )
        return cls(row=int(match.group(1)), column=match.group(2))

    @classmethod
    def from_position(cls, row_index: int, column_index: int) -> SeatLabel:
        """0 始まりの行・列インデックスから生成"""
        if not 0 <= column_index < len(COLUMNS):
            raise ValueError(f"Seat column index out of range: {column_index}")
        return cls(row=row_index + 1, column=COLUMNS[column_index])

    @property
    def row_index(self) -> int:
        """0 始まりの行インデックス（料金帯の判定に使う）"""
        return self.row - 1

    @property
    def column_index(self) -> int:
        return COLUMNS.index(self.column)

    def __str__(self) -> str:
        return f"{self.row}{self.column}"


def parse_seat_list(value: str) -> tuple[SeatLabel, ...]:
    """カンマ区切りの座席番号（"12C,14D"）を分解する

    空要素は無視し、同じ座席の重複は最初の出現のみ残す。
    """
    seats: list[SeatLabel] = []
    for part in value.split(","):
        if not part.strip():
            continue
        seat = SeatLabel.from_string(part)
        if seat not in seats:
            seats.append(seat)
    return tuple(seats)


def join_seat_list(seats: Iterable[SeatLabel]) -> str:
    """座席のリストを永続化用のカンマ区切り文字列にする"""
    return ",".join(str(seat) for seat in seats)
