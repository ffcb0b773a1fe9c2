"""Report Models - recomputed on every query, never persisted"""
from datetime import date
from decimal import Decimal
from typing import List

from domain.value_objects import DomainModel


class ReportModel(DomainModel):
    class Config:
        frozen = True


# ==================== OCCUPANCY ====================

class OccupancyReportRow(ReportModel):
    date: date
    total_rooms: int
    occupied_rooms: int
    occupancy_percentage: float


class OccupancySummary(ReportModel):
    average_occupancy: float = 0.0
    max_occupancy: float = 0.0
    min_occupancy: float = 0.0
    total_days: int = 0


class OccupancyReport(ReportModel):
    rows: List[OccupancyReportRow]
    summary: OccupancySummary


# ==================== REVENUE ====================

class RoomTypeRevenue(ReportModel):
    room_type_id: str
    room_type_name: str
    revenue: Decimal
    reservation_count: int


class ServiceRevenue(ReportModel):
    service_id: str
    service_name: str
    revenue: Decimal
    order_count: int


class RevenueReport(ReportModel):
    total_revenue: Decimal
    room_revenue: Decimal
    service_revenue: Decimal
    revenue_by_room_type: List[RoomTypeRevenue]
    revenue_by_service: List[ServiceRevenue]


# ==================== BOOKING BEHAVIOR ====================

class SourceBreakdown(ReportModel):
    source: str
    label: str
    count: int
    percentage: float


class CancellationBucket(ReportModel):
    date: date
    cancelled: int
    no_shows: int
    total: int


class ReservationSummary(ReportModel):
    total_bookings: int = 0
    total_cancellations: int = 0
    total_no_shows: int = 0
    cancellation_rate: float = 0.0
    no_show_rate: float = 0.0


class ReservationReport(ReportModel):
    bookings_by_source: List[SourceBreakdown]
    cancellations_and_no_shows: List[CancellationBucket]
    summary: ReservationSummary
