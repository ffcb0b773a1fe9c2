"""Domain Enums"""
from enum import Enum


class ReservationStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CHECKED_IN = "checked-in"
    CHECKED_OUT = "checked-out"
    CANCELLED = "cancelled"
    NO_SHOW = "no-show"


class ReservationSource(str, Enum):
    DIRECT = "direct"
    BOOKING_COM = "booking.com"
    AIRBNB = "airbnb"
    PHONE = "phone"
    WALK_IN = "walk-in"
    OTHER = "other"


class ServiceOrderStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class RoomStatus(str, Enum):
    VACANT = "vacant"
    OCCUPIED = "occupied"
    DIRTY = "dirty"
    MAINTENANCE = "maintenance"
    RESERVED = "reserved"


class Weekday(str, Enum):
    """Weekday names in date.weekday() order"""
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"

    @classmethod
    def of(cls, day) -> "Weekday":
        """Get weekday of a calendar date"""
        return list(cls)[day.weekday()]


# Statuses that hold a room for the night
OCCUPYING_STATUSES = frozenset({
    ReservationStatus.CONFIRMED,
    ReservationStatus.CHECKED_IN,
    ReservationStatus.CHECKED_OUT,
})

UNKNOWN_SOURCE = "unknown"

SOURCE_LABELS = {
    ReservationSource.DIRECT.value: "Direct Booking",
    ReservationSource.BOOKING_COM.value: "Booking.com",
    ReservationSource.AIRBNB.value: "Airbnb",
    ReservationSource.PHONE.value: "Phone",
    ReservationSource.WALK_IN.value: "Walk-in",
    ReservationSource.OTHER.value: "Other",
    UNKNOWN_SOURCE: "Unknown",
}
