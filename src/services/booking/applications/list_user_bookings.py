from services.booking.domain.entity import Booking
from services.booking.domain.repository import BookingRepository


class ListUserBookingsService:
    """ユーザーの予約一覧取得のユースケース"""

    def __init__(self, repository: BookingRepository) -> None:
        self._repository = repository

    def list(self, user_id: str) -> list[Booking]:
        """予約日時の新しい順で返す"""
        return self._repository.find_by_user(user_id)
