from decimal import Decimal
from enum import Enum


class SeatTier(str, Enum):
    """座席の料金帯"""

    PREMIUM = "premium"
    EXTRA_LEGROOM = "extra_legroom"
    STANDARD = "standard"

    @property
    def surcharge(self) -> Decimal:
        """座席指定の追加料金"""
        return _SURCHARGES[self]


_SURCHARGES: dict[SeatTier, Decimal] = {
    SeatTier.PREMIUM: Decimal("50"),
    SeatTier.EXTRA_LEGROOM: Decimal("30"),
    SeatTier.STANDARD: Decimal("0"),
}
