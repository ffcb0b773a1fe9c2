"""API Schemas - Request and Response DTOs"""
from pydantic import Field
from datetime import date
from decimal import Decimal
from typing import List, Optional

from domain.value_objects import DomainModel, NightlyRate, SeasonalPrice, WeekdayPricing


# ============================================================================
# PRICING SCHEMAS
# ============================================================================

class QuoteStayRequest(DomainModel):
    """Stay quote request DTO"""
    room_type_id: str
    check_in_date: date
    check_out_date: date
    tax_rate: Optional[Decimal] = Field(default=None, ge=0)


class StayQuoteResponse(DomainModel):
    """Stay quote response DTO"""
    room_type_id: str
    nights: int
    breakdown: List[NightlyRate]
    subtotal: Decimal
    tax_rate: Decimal
    tax: Decimal
    total: Decimal
    currency: str


class DatePriceResponse(DomainModel):
    """Nightly price response DTO"""
    room_type_id: str
    date: date
    price: Decimal


# ============================================================================
# ROOM TYPE SCHEMAS
# ============================================================================

class CreateRoomTypeRequest(DomainModel):
    """Create room type request DTO"""
    id: str
    hotel_id: str
    name: str
    capacity: Optional[int] = Field(default=None, ge=1)
    base_price: Decimal = Field(gt=0)
    weekday_pricing: Optional[WeekdayPricing] = None
    seasonal_pricing: List[SeasonalPrice] = []


class SeasonalPricingRequest(DomainModel):
    """Seasonal pricing list request DTO"""
    seasonal_pricing: List[SeasonalPrice]


class SeasonalPricingValidationResponse(DomainModel):
    """Seasonal pricing validation result DTO"""
    valid: bool
    message: Optional[str] = None
    conflict: Optional[List[SeasonalPrice]] = None
