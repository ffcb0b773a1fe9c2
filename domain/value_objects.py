"""Domain Value Objects"""
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import date
from decimal import Decimal
from typing import List, Optional

from domain.enums import Weekday
from domain.exceptions import InvalidRangeError
from domain.dates import DateLike, parse_date, date_range


class DomainModel(BaseModel):
    """Base model accepting both snake_case and the stored camelCase field names"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class SeasonalPrice(DomainModel):
    """Value Object for a seasonal pricing period (both ends inclusive)"""
    start_date: date
    end_date: date
    price: Decimal = Field(gt=0)

    class Config:
        frozen = True

    def covers(self, day: date) -> bool:
        """Check if day falls within the period"""
        return self.start_date <= day <= self.end_date

    def overlaps(self, other: "SeasonalPrice") -> bool:
        """Strict overlap test; periods that only touch do not overlap"""
        return self.start_date < other.end_date and self.end_date > other.start_date


class WeekdayPricing(DomainModel):
    """Value Object for per-weekday price overrides, absent days have no override"""
    monday: Optional[Decimal] = Field(default=None, gt=0)
    tuesday: Optional[Decimal] = Field(default=None, gt=0)
    wednesday: Optional[Decimal] = Field(default=None, gt=0)
    thursday: Optional[Decimal] = Field(default=None, gt=0)
    friday: Optional[Decimal] = Field(default=None, gt=0)
    saturday: Optional[Decimal] = Field(default=None, gt=0)
    sunday: Optional[Decimal] = Field(default=None, gt=0)

    class Config:
        frozen = True

    def price_for(self, day: date) -> Optional[Decimal]:
        """Get override price for day's weekday"""
        return getattr(self, Weekday.of(day).value)


class ReportPeriod(DomainModel):
    """Value Object for a report date range (both ends inclusive)"""
    start_date: date
    end_date: date

    class Config:
        frozen = True

    @staticmethod
    def of(start_date: DateLike, end_date: DateLike) -> "ReportPeriod":
        """Create period, rejecting ranges that do not end after they start"""
        start = parse_date(start_date)
        end = parse_date(end_date)
        if end <= start:
            raise InvalidRangeError(start, end)
        return ReportPeriod(start_date=start, end_date=end)

    def contains(self, day: Optional[date]) -> bool:
        """Check if day falls within the period"""
        return day is not None and self.start_date <= day <= self.end_date

    def days(self) -> List[date]:
        """Every date in the period"""
        return list(date_range(self.start_date, self.end_date))


class NightlyRate(DomainModel):
    """Price of a single night"""
    date: date
    price: Decimal

    class Config:
        frozen = True


class StayQuote(DomainModel):
    """Priced stay with per-night breakdown"""
    nights: int
    breakdown: List[NightlyRate]
    subtotal: Decimal
    tax_rate: Decimal
    tax: Decimal
    total: Decimal
    currency: Optional[str] = None

    class Config:
        frozen = True
