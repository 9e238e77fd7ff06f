from enum import Enum


class BookingStatus(str, Enum):
    """予約ステータス"""

    CONFIRMED = "confirmed"
    PENDING = "pending"
    CANCELLED = "cancelled"
