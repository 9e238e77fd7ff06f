from services.booking.domain.entity import Booking
from services.booking.domain.factory import BookingDetails, BookingFactory
from services.booking.domain.repository import BookingRepository, SeatClaimRepository
from services.booking.domain.value_object import Leg


class CreateBookingService:
    """予約作成のユースケース

    座席クレームが有効で予約が座席を占有する場合は、保存前に全区間の座席を確保し、
    保存に失敗したら確保済みの座席を解放する（補償処理）。
    """

    def __init__(
        self,
        repository: BookingRepository,
        factory: BookingFactory,
        seat_claims: SeatClaimRepository | None = None,
    ) -> None:
        self._repository = repository
        self._factory = factory
        self._seat_claims = seat_claims

    def create(self, details: BookingDetails) -> Booking:
        """予約を作成する"""
        booking = self._factory.create(details)

        if self._seat_claims is None or not booking.holds_seats:
            self._repository.save(booking)
            return booking

        claimed: list[Leg] = []
        try:
            for leg in booking.itinerary.legs:
                self._seat_claims.claim(booking.id, leg)
                claimed.append(leg)
            self._repository.save(booking)
        except Exception:
            for leg in reversed(claimed):
                self._seat_claims.release(booking.id, leg)
            raise

        return booking
