"""Application Services - pricing and reporting use cases"""
import asyncio
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional, Sequence, Union

from domain import analytics, pricing
from domain.dates import DateLike
from domain.entities import Hotel, RoomType
from domain.enums import OCCUPYING_STATUSES, ReservationStatus, ServiceOrderStatus
from domain.reports import OccupancyReport, OccupancySummary, RevenueReport, ReservationReport
from domain.repositories import (
    HotelRepository, RoomTypeRepository, RoomRepository,
    ReservationRepository, ServiceRepository, ServiceOrderRepository
)
from domain.value_objects import ReportPeriod, SeasonalPrice, StayQuote
from infrastructure import config

logger = logging.getLogger(__name__)


async def load_hotel_settings(repository: Optional[HotelRepository], hotel_id: Optional[str]) -> Hotel:
    """Hotel record with unset tax rate, currency and timezone taken from config"""
    hotel = None
    if repository is not None and hotel_id:
        hotel = await repository.find_by_id(hotel_id)
    if hotel is None:
        hotel = Hotel(id=hotel_id or "")

    return hotel.model_copy(update={
        "tax_rate": config.DEFAULT_TAX_RATE if hotel.tax_rate is None else hotel.tax_rate,
        "currency": hotel.currency or config.DEFAULT_CURRENCY,
        "timezone": hotel.timezone or config.DEFAULT_TIMEZONE,
    })


class PricingService:
    """Service for stay pricing use cases"""

    def __init__(self,
                 room_type_repo: RoomTypeRepository,
                 hotel_repo: Optional[HotelRepository] = None):
        self.room_type_repo = room_type_repo
        self.hotel_repo = hotel_repo

    async def get_hotel_settings(self, hotel_id: Optional[str]) -> Hotel:
        return await load_hotel_settings(self.hotel_repo, hotel_id)

    async def price_for_date(self, room_type_id: str, day: DateLike) -> Optional[Decimal]:
        """Nightly price of a room type on a date"""
        room_type = await self.room_type_repo.find_by_id(room_type_id)
        if not room_type:
            return None
        return pricing.resolve_price(room_type, day)

    async def quote_stay(
        self,
        room_type_id: str,
        check_in: DateLike,
        check_out: DateLike,
        tax_rate: Optional[Decimal] = None
    ) -> Optional[StayQuote]:
        """Price a stay in the hotel's currency, using the hotel's tax rate unless one is given"""
        room_type = await self.room_type_repo.find_by_id(room_type_id)
        if not room_type:
            return None

        hotel = await self.get_hotel_settings(room_type.hotel_id)
        if tax_rate is None:
            tax_rate = hotel.tax_rate

        quote = pricing.price_for_stay(room_type, check_in, check_out, tax_rate)
        quote = quote.model_copy(update={"currency": hotel.currency})
        logger.debug(
            "Quoted room type %s from %s to %s: %s nights, total %s",
            room_type_id, check_in, check_out, quote.nights, quote.total
        )
        return quote


class RoomTypeService:
    """Service for room type writes that must keep seasonal pricing consistent"""

    def __init__(self, repository: RoomTypeRepository):
        self.repository = repository

    @staticmethod
    def validate_seasonal_pricing(periods: Sequence[SeasonalPrice]) -> None:
        """Raise OverlapError or InvalidRangeError for an invalid season list"""
        pricing.validate_seasonal_pricing(periods)

    async def create_room_type(self, room_type: RoomType) -> RoomType:
        """Create room type after checking its seasonal periods"""
        try:
            self.validate_seasonal_pricing(room_type.seasonal_pricing)
        except ValueError as e:
            logger.warning("Rejected room type %s: %s", room_type.id, e)
            raise

        now = datetime.utcnow()
        room_type = room_type.model_copy(update={"created_at": now, "updated_at": now})
        return await self.repository.save(room_type)

    async def update_seasonal_pricing(
        self,
        room_type_id: str,
        periods: List[SeasonalPrice]
    ) -> Optional[RoomType]:
        """Replace a room type's seasonal periods; the whole list is rejected on any conflict"""
        room_type = await self.repository.find_by_id(room_type_id)
        if not room_type:
            return None

        try:
            self.validate_seasonal_pricing(periods)
        except ValueError as e:
            logger.warning("Rejected seasonal pricing for room type %s: %s", room_type_id, e)
            raise

        updated = room_type.model_copy(update={
            "seasonal_pricing": list(periods),
            "updated_at": datetime.utcnow(),
        })
        return await self.repository.update(updated)


class ReportService:
    """Service loading hotel data and handing it to the report aggregators"""

    def __init__(self,
                 room_repo: RoomRepository,
                 reservation_repo: ReservationRepository,
                 service_order_repo: ServiceOrderRepository,
                 room_type_repo: RoomTypeRepository,
                 service_repo: ServiceRepository,
                 hotel_repo: Optional[HotelRepository] = None):
        self.room_repo = room_repo
        self.reservation_repo = reservation_repo
        self.service_order_repo = service_order_repo
        self.room_type_repo = room_type_repo
        self.service_repo = service_repo
        self.hotel_repo = hotel_repo

    async def generate_occupancy_report(
        self,
        hotel_id: str,
        start_date: Union[date, str],
        end_date: Union[date, str]
    ) -> OccupancyReport:
        """Daily occupancy with summary for a hotel"""
        period = ReportPeriod.of(start_date, end_date)

        total_rooms, reservations = await asyncio.gather(
            self.room_repo.count_by_hotel(hotel_id),
            self.reservation_repo.find_by_hotel(hotel_id, statuses=list(OCCUPYING_STATUSES)),
        )
        logger.debug("Loaded %d rooms and %d reservations for hotel %s",
                     total_rooms, len(reservations), hotel_id)

        report = analytics.occupancy_report(total_rooms, reservations, period)
        logger.info("Generated occupancy report for hotel %s (%s to %s): %d days",
                    hotel_id, period.start_date, period.end_date, report.summary.total_days)
        return report

    async def get_occupancy_summary(
        self,
        hotel_id: str,
        start_date: Union[date, str],
        end_date: Union[date, str]
    ) -> OccupancySummary:
        """Average, max and min occupancy for a hotel"""
        report = await self.generate_occupancy_report(hotel_id, start_date, end_date)
        return report.summary

    async def generate_revenue_report(
        self,
        hotel_id: str,
        start_date: Union[date, str],
        end_date: Union[date, str]
    ) -> RevenueReport:
        """Realized room and service revenue for a hotel"""
        period = ReportPeriod.of(start_date, end_date)

        reservations, service_orders, room_types, services, hotel = await asyncio.gather(
            self.reservation_repo.find_by_hotel(hotel_id, statuses=[ReservationStatus.CHECKED_OUT]),
            self.service_order_repo.find_by_hotel(hotel_id, status=ServiceOrderStatus.COMPLETED),
            self.room_type_repo.find_by_hotel(hotel_id),
            self.service_repo.find_by_hotel(hotel_id),
            load_hotel_settings(self.hotel_repo, hotel_id),
        )
        logger.debug(
            "Loaded %d reservations, %d service orders, %d room types and %d services for hotel %s",
            len(reservations), len(service_orders), len(room_types), len(services), hotel_id
        )

        report = analytics.revenue(
            reservations, service_orders, room_types, services, period, tz=hotel.timezone
        )
        logger.info("Generated revenue report for hotel %s (%s to %s): total %s",
                    hotel_id, period.start_date, period.end_date, report.total_revenue)
        return report

    async def generate_reservation_report(
        self,
        hotel_id: str,
        start_date: Union[date, str],
        end_date: Union[date, str]
    ) -> ReservationReport:
        """Booking sources, cancellations and no-shows for a hotel"""
        period = ReportPeriod.of(start_date, end_date)

        reservations, hotel = await asyncio.gather(
            self.reservation_repo.find_by_hotel(hotel_id),
            load_hotel_settings(self.hotel_repo, hotel_id),
        )
        logger.debug("Loaded %d reservations for hotel %s", len(reservations), hotel_id)

        report = analytics.booking_behavior(reservations, period, tz=hotel.timezone)
        logger.info("Generated reservation report for hotel %s (%s to %s): %d bookings",
                    hotel_id, period.start_date, period.end_date, report.summary.total_bookings)
        return report
