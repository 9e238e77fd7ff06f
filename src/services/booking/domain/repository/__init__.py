from .booking_repository import BookingRepository
from .seat_claim_repository import SeatClaimRepository

__all__ = ["BookingRepository", "SeatClaimRepository"]
