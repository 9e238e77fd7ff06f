from unittest.mock import MagicMock

import pytest

from services.booking.domain.value_object import BookingId


@pytest.fixture
def booking_id():
    """全テスト共通の BookingId フィクスチャ"""
    return BookingId(value="booking-123")


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()
