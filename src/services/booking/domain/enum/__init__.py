from .booking_status import BookingStatus
from .seat_tier import SeatTier

__all__ = ["BookingStatus", "SeatTier"]
