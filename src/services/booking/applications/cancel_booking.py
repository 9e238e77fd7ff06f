from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository, SeatClaimRepository
from services.booking.domain.value_object import BookingId
from services.shared.domain.exception import ResourceNotFoundException


class CancelBookingService:
    """予約キャンセルのユースケース（冪等）"""

    def __init__(
        self,
        repository: BookingRepository,
        seat_claims: SeatClaimRepository | None = None,
    ) -> None:
        self._repository = repository
        self._seat_claims = seat_claims

    def cancel(self, booking_id: BookingId) -> Booking:
        """予約をキャンセルし、座席を解放する"""
        booking = self._repository.find_by_id(booking_id)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {booking_id}")
        if booking.status != BookingStatus.CANCELLED:
            expected_status = booking.status
            booking.cancel()
            self._repository.update_status(booking, expected_status=expected_status)

        # 前回の解放が途中で失敗していても、再実行で残りのクレームを解放する
        if self._seat_claims is not None:
            for leg in booking.itinerary.legs:
                self._seat_claims.release(booking.id, leg)

        return booking
