from .entity import Booking as Booking
from .entity import SeatSelection as SeatSelection
from .enum import BookingStatus as BookingStatus
from .enum import SeatTier as SeatTier
from .factory import BookingDetails as BookingDetails
from .factory import BookingFactory as BookingFactory
from .repository import BookingRepository as BookingRepository
from .repository import SeatClaimRepository as SeatClaimRepository
from .service import SeatMap as SeatMap
from .value_object import BookingId as BookingId
from .value_object import Itinerary as Itinerary
from .value_object import Leg as Leg
from .value_object import OccupancySet as OccupancySet
from .value_object import OneWay as OneWay
from .value_object import Passenger as Passenger
from .value_object import RoundTrip as RoundTrip
from .value_object import SeatLabel as SeatLabel
