from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .seat_label import SeatLabel


@dataclass(frozen=True)
class OccupancySet:
    """便・出発日ごとの使用済み座席の集合

    往路として予約された座席と、他の予約の復路として予約された座席の和集合。
    """

    seats: frozenset[SeatLabel]

    @classmethod
    def empty(cls) -> OccupancySet:
        return cls(seats=frozenset())

    @classmethod
    def of(cls, seats: Iterable[SeatLabel]) -> OccupancySet:
        return cls(seats=frozenset(seats))

    def union(self, other: OccupancySet) -> OccupancySet:
        return OccupancySet(seats=self.seats | other.seats)

    def __contains__(self, seat: object) -> bool:
        return seat in self.seats

    def __iter__(self) -> Iterator[SeatLabel]:
        return iter(sorted(self.seats))

    def __len__(self) -> int:
        return len(self.seats)

    def labels(self) -> list[str]:
        """行・列順に並べた座席ラベルの一覧"""
        return [str(seat) for seat in sorted(self.seats)]
