"""Occupancy, revenue and booking-behavior aggregation.

The aggregators take fully loaded collections and return report models. They
never mutate their arguments and keep no state between calls.

Timestamps (``created_at``, ``checked_out_at``, ``completed_at``) are turned
into the hotel's local calendar date before being compared with a period;
``tz`` is an IANA zone name and defaults to UTC.
"""
from collections import OrderedDict
from decimal import Decimal
from typing import Iterable, List, Optional, Sequence

from domain.dates import percentage, round_money, round_percentage, to_local_date
from domain.entities import Reservation, RoomType, Service, ServiceOrder
from domain.enums import (
    ReservationStatus, ServiceOrderStatus, SOURCE_LABELS, UNKNOWN_SOURCE
)
from domain.reports import (
    CancellationBucket, OccupancyReport, OccupancyReportRow, OccupancySummary,
    ReservationReport, ReservationSummary, RevenueReport, RoomTypeRevenue,
    ServiceRevenue, SourceBreakdown
)
from domain.value_objects import ReportPeriod

UNKNOWN_ROOM_TYPE = "Unknown Room Type"
UNKNOWN_SERVICE = "Unknown Service"


# ==================== OCCUPANCY ====================

def occupancy(
    total_rooms: int,
    reservations: Iterable[Reservation],
    period: ReportPeriod
) -> List[OccupancyReportRow]:
    """One row per day of the period with the share of rooms held that night"""
    if total_rooms <= 0:
        return []

    occupying = [r for r in reservations if r.is_occupying()]

    rows = []
    for day in period.days():
        rooms = {r.room_id for r in occupying if r.occupies(day)}
        rows.append(OccupancyReportRow(
            date=day,
            total_rooms=total_rooms,
            occupied_rooms=len(rooms),
            occupancy_percentage=percentage(len(rooms), total_rooms)
        ))
    return rows


def occupancy_summary(rows: Sequence[OccupancyReportRow]) -> OccupancySummary:
    """Average, max and min occupancy over report rows"""
    if not rows:
        return OccupancySummary()

    values = [Decimal(str(row.occupancy_percentage)) for row in rows]
    return OccupancySummary(
        average_occupancy=round_percentage(sum(values) / len(values)),
        max_occupancy=round_percentage(max(values)),
        min_occupancy=round_percentage(min(values)),
        total_days=len(rows)
    )


def occupancy_report(
    total_rooms: int,
    reservations: Iterable[Reservation],
    period: ReportPeriod
) -> OccupancyReport:
    rows = occupancy(total_rooms, reservations, period)
    return OccupancyReport(rows=rows, summary=occupancy_summary(rows))


# ==================== REVENUE ====================

def _realized_reservations(reservations, period, tz):
    for reservation in reservations:
        if reservation.status != ReservationStatus.CHECKED_OUT or reservation.checked_out_at is None:
            continue
        if period.contains(to_local_date(reservation.checked_out_at, tz)):
            yield reservation


def _completed_orders(service_orders, period, tz):
    for order in service_orders:
        if order.status != ServiceOrderStatus.COMPLETED or order.completed_at is None:
            continue
        if period.contains(to_local_date(order.completed_at, tz)):
            yield order


def _bucket(items, key, amount):
    # key -> [sum, count], insertion ordered so equal sums keep encounter order
    buckets = OrderedDict()
    for item in items:
        bucket = buckets.setdefault(key(item), [Decimal("0"), 0])
        bucket[0] += amount(item)
        bucket[1] += 1
    return buckets


def revenue(
    reservations: Iterable[Reservation],
    service_orders: Iterable[ServiceOrder],
    room_types: Iterable[RoomType],
    services: Iterable[Service],
    period: ReportPeriod,
    tz: Optional[str] = None
) -> RevenueReport:
    """Realized room and service revenue in the period.

    Room revenue counts checked-out reservations by check-out timestamp and
    service revenue counts completed orders by completion timestamp. Sums are
    rounded, individual amounts are not.
    """
    room_type_names = {rt.id: rt.name for rt in room_types}
    service_names = {s.id: s.name for s in services}

    by_room_type = _bucket(
        _realized_reservations(reservations, period, tz),
        key=lambda r: r.room_type_id,
        amount=lambda r: r.total_price
    )
    by_service = _bucket(
        _completed_orders(service_orders, period, tz),
        key=lambda o: o.service_id,
        amount=lambda o: o.total_price
    )

    room_total = sum((b[0] for b in by_room_type.values()), Decimal("0"))
    service_total = sum((b[0] for b in by_service.values()), Decimal("0"))

    revenue_by_room_type = sorted(
        (
            RoomTypeRevenue(
                room_type_id=room_type_id,
                room_type_name=room_type_names.get(room_type_id) or UNKNOWN_ROOM_TYPE,
                revenue=round_money(total),
                reservation_count=count
            )
            for room_type_id, (total, count) in by_room_type.items()
        ),
        key=lambda row: row.revenue,
        reverse=True
    )
    revenue_by_service = sorted(
        (
            ServiceRevenue(
                service_id=service_id,
                service_name=service_names.get(service_id) or UNKNOWN_SERVICE,
                revenue=round_money(total),
                order_count=count
            )
            for service_id, (total, count) in by_service.items()
        ),
        key=lambda row: row.revenue,
        reverse=True
    )

    return RevenueReport(
        total_revenue=round_money(room_total + service_total),
        room_revenue=round_money(room_total),
        service_revenue=round_money(service_total),
        revenue_by_room_type=revenue_by_room_type,
        revenue_by_service=revenue_by_service
    )


# ==================== BOOKING BEHAVIOR ====================

def booking_behavior(
    reservations: Iterable[Reservation],
    period: ReportPeriod,
    tz: Optional[str] = None
) -> ReservationReport:
    """Booking channels, cancellations and no-shows of reservations created in the period"""
    created = []
    for reservation in reservations:
        created_on = to_local_date(reservation.created_at, tz)
        if period.contains(created_on):
            created.append((created_on, reservation))

    total_bookings = len(created)

    source_counts = OrderedDict()
    for _, reservation in created:
        source = reservation.source.value if reservation.source else UNKNOWN_SOURCE
        source_counts[source] = source_counts.get(source, 0) + 1

    bookings_by_source = sorted(
        (
            SourceBreakdown(
                source=source,
                label=SOURCE_LABELS.get(source, source),
                count=count,
                percentage=percentage(count, total_bookings)
            )
            for source, count in source_counts.items()
        ),
        key=lambda row: row.count,
        reverse=True
    )

    by_date = {}
    total_cancellations = 0
    total_no_shows = 0
    for created_on, reservation in created:
        if reservation.status == ReservationStatus.CANCELLED:
            total_cancellations += 1
            by_date.setdefault(created_on, [0, 0])[0] += 1
        elif reservation.status == ReservationStatus.NO_SHOW:
            total_no_shows += 1
            by_date.setdefault(created_on, [0, 0])[1] += 1

    cancellations_and_no_shows = [
        CancellationBucket(
            date=day,
            cancelled=cancelled,
            no_shows=no_shows,
            total=cancelled + no_shows
        )
        for day, (cancelled, no_shows) in sorted(by_date.items())
    ]

    return ReservationReport(
        bookings_by_source=bookings_by_source,
        cancellations_and_no_shows=cancellations_and_no_shows,
        summary=ReservationSummary(
            total_bookings=total_bookings,
            total_cancellations=total_cancellations,
            total_no_shows=total_no_shows,
            cancellation_rate=percentage(total_cancellations, total_bookings),
            no_show_rate=percentage(total_no_shows, total_bookings)
        )
    )
