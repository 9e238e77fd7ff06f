"""Lambda ハンドラーの依存関係の組み立て

boto3 のリソースはコールドスタート時に 1 度だけ作り、以降の呼び出しで使い回す。
"""

from functools import lru_cache

from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.create_booking import CreateBookingService
from services.booking.applications.get_booking import GetBookingService
from services.booking.applications.list_user_bookings import ListUserBookingsService
from services.booking.applications.occupied_seats import OccupiedSeatsService
from services.booking.domain.factory import BookingFactory
from services.booking.domain.repository import BookingRepository, SeatClaimRepository
from services.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)
from services.booking.infrastructure.dynamodb_seat_claim_repository import (
    DynamoDBSeatClaimRepository,
)
from services.shared.config import Settings


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()


@lru_cache
def get_booking_repository() -> BookingRepository:
    return DynamoDBBookingRepository(table_name=get_settings().bookings_table)


@lru_cache
def get_seat_claim_repository() -> SeatClaimRepository | None:
    settings = get_settings()
    if not settings.seat_claims_enabled:
        return None
    return DynamoDBSeatClaimRepository(table_name=settings.seat_claims_table)


def get_create_booking_service() -> CreateBookingService:
    return CreateBookingService(
        repository=get_booking_repository(),
        factory=BookingFactory(),
        seat_claims=get_seat_claim_repository(),
    )


def get_get_booking_service() -> GetBookingService:
    return GetBookingService(repository=get_booking_repository())


def get_list_user_bookings_service() -> ListUserBookingsService:
    return ListUserBookingsService(repository=get_booking_repository())


def get_occupied_seats_service() -> OccupiedSeatsService:
    return OccupiedSeatsService(repository=get_booking_repository())


def get_cancel_booking_service() -> CancelBookingService:
    return CancelBookingService(
        repository=get_booking_repository(),
        seat_claims=get_seat_claim_repository(),
    )


def get_cors_allow_origin() -> str:
    return get_settings().cors_allow_origin
