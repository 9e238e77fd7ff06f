from .booking import Booking
from .seat_selection import SeatSelection

__all__ = ["Booking", "SeatSelection"]
