"""Domain Entities - read models of the documents the engine consumes"""
from pydantic import Field, validator
from datetime import datetime, date
from typing import Optional, List
from decimal import Decimal

from domain.enums import (
    ReservationStatus, ReservationSource, ServiceOrderStatus, RoomStatus, OCCUPYING_STATUSES
)
from domain.dates import get_zone
from domain.value_objects import DomainModel, SeasonalPrice, WeekdayPricing


class Hotel(DomainModel):
    """Hotel settings used by pricing and reporting"""
    id: str
    name: str = ""
    tax_rate: Optional[Decimal] = Field(default=None, ge=0)
    currency: Optional[str] = None
    timezone: Optional[str] = None

    @validator('timezone')
    def timezone_is_known(cls, v):
        if v:
            get_zone(v)
        return v or None


class RoomType(DomainModel):
    """Room type with its pricing rules"""

    # Identity
    id: str
    hotel_id: Optional[str] = None
    name: str = ""
    capacity: Optional[int] = Field(default=None, ge=1)

    # Pricing rules
    base_price: Decimal = Field(gt=0)
    weekday_pricing: Optional[WeekdayPricing] = None
    seasonal_pricing: List[SeasonalPrice] = []

    # Metadata
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # ==================== QUERY METHODS ====================
    def seasonal_price_for(self, day: date) -> Optional[Decimal]:
        """Price of the first seasonal period covering day"""
        for season in self.seasonal_pricing:
            if season.covers(day):
                return season.price
        return None

    def weekday_price_for(self, day: date) -> Optional[Decimal]:
        """Weekday override for day, if any"""
        if self.weekday_pricing is None:
            return None
        return self.weekday_pricing.price_for(day)


class Room(DomainModel):
    """Physical room; reports only need how many a hotel has"""
    id: str
    hotel_id: str
    room_number: str = ""
    room_type_id: Optional[str] = None
    floor: Optional[int] = None
    status: RoomStatus = RoomStatus.VACANT


class Reservation(DomainModel):
    """Reservation as stored by the booking flow"""

    # Identity
    id: str
    hotel_id: Optional[str] = None

    # References
    room_id: str
    room_type_id: str

    # Stay (check-out date is not a night of the stay)
    check_in_date: date
    check_out_date: date

    status: ReservationStatus = ReservationStatus.PENDING
    source: Optional[ReservationSource] = None
    total_price: Decimal = Decimal("0")

    # Timestamps
    created_at: datetime
    checked_in_at: Optional[datetime] = None
    checked_out_at: Optional[datetime] = None

    @validator('source', pre=True)
    def unrecognized_source_is_unknown(cls, v):
        if v is None or isinstance(v, ReservationSource):
            return v
        try:
            return ReservationSource(v)
        except ValueError:
            return None

    @validator('check_out_date')
    def check_out_after_check_in(cls, v, values):
        if 'check_in_date' in values and v <= values['check_in_date']:
            raise ValueError('Check-out date must be after check-in date')
        return v

    # ==================== QUERY METHODS ====================
    def is_occupying(self) -> bool:
        """Check if reservation holds its room"""
        return self.status in OCCUPYING_STATUSES

    def occupies(self, day: date) -> bool:
        """Check if the room is held on night day (check-out day is free)"""
        return self.is_occupying() and self.check_in_date <= day < self.check_out_date

class Service(DomainModel):
    """Sellable extra service (laundry, spa, ...)"""
    id: str
    hotel_id: Optional[str] = None
    name: str = ""
    price: Decimal = Decimal("0")
    active: bool = True


class ServiceOrder(DomainModel):
    """Order of a service against a reservation"""
    id: str
    hotel_id: Optional[str] = None
    reservation_id: str
    service_id: str
    quantity: int = 1
    total_price: Decimal = Decimal("0")
    status: ServiceOrderStatus = ServiceOrderStatus.PENDING
    ordered_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
