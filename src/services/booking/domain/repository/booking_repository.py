from abc import ABC, abstractmethod

from services.booking.domain.entity.booking import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingId


class BookingRepository(ABC):
    """予約レポジトリ

    読み取りは結果整合（書き込み直後の読み取り保証は前提にしない）。
    """

    @abstractmethod
    def save(self, booking: Booking) -> None:
        """永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: BookingId) -> Booking | None:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user(self, user_id: str) -> list[Booking]:
        """ユーザーの予約を予約日時の新しい順で返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_flight(
        self, flight_id: str, departure_date: str | None = None
    ) -> list[Booking]:
        """往路の便（・出発日）が一致する予約"""
        raise NotImplementedError

    @abstractmethod
    def find_by_return_flight(
        self, flight_id: str, departure_date: str | None = None
    ) -> list[Booking]:
        """復路の便（・出発日）が一致する予約"""
        raise NotImplementedError

    @abstractmethod
    def update_status(
        self, booking: Booking, expected_status: BookingStatus | None = None
    ) -> None:
        """予約のステータスを更新する"""
        raise NotImplementedError
