from .booking_factory import REQUIRED_FIELDS, BookingDetails, BookingFactory

__all__ = ["BookingFactory", "BookingDetails", "REQUIRED_FIELDS"]
