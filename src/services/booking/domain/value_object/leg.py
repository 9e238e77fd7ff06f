from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .seat_label import SeatLabel


@dataclass(frozen=True)
class Leg:
    """区間（片道1フライト分の搭乗情報）

    - flight_id: 便の識別子（例: "SW100"）
    - seats: この区間で割り当てられた座席（1席以上）
    - details: 予約時点のフライト情報のスナップショット
      （出発地・到着地・時刻・departure_date・人数・通貨・運賃など）
    """

    flight_id: str
    seats: tuple[SeatLabel, ...]
    details: Mapping[str, Any] | None = field(default=None, hash=False)

    def __post_init__(self) -> None:
        if not self.flight_id or not self.flight_id.strip():
            raise ValueError("Leg flight_id cannot be empty")
        if not self.seats:
            raise ValueError("Leg must have at least one seat")
        if len(set(self.seats)) != len(self.seats):
            raise ValueError("Leg seats must be unique")

    @property
    def departure_date(self) -> str | None:
        """スナップショットに含まれる出発日（YYYY-MM-DD）"""
        if not self.details:
            return None
        value = self.details.get("departure_date")
        return str(value) if value else None

    def departs_on(self, departure_date: str | None) -> bool:
        """出発日が一致するか（日付指定なしなら常に True）"""
        if not departure_date:
            return True
        return self.departure_date == departure_date
