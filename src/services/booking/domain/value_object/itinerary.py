from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from .leg import Leg


@dataclass(frozen=True)
class OneWay:
    """片道の旅程"""

    outbound: Leg

    @property
    def legs(self) -> tuple[Leg, ...]:
        return (self.outbound,)


@dataclass(frozen=True)
class RoundTrip:
    """往復の旅程

    往路・復路を 1 つの予約に保持する（2 レコードに分割しない）。
    """

    outbound: Leg
    inbound: Leg

    @property
    def legs(self) -> tuple[Leg, ...]:
        return (self.outbound, self.inbound)


Itinerary: TypeAlias = OneWay | RoundTrip
