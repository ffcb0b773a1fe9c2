"""Rate resolution, seasonal period validation and stay pricing.

Everything here is a pure function of its arguments. Prices are resolved per
night with this priority:

1. a seasonal period covering the night (both period ends inclusive)
2. the room type's override for the night's weekday
3. the room type's base price

Weekdays come from the date value itself, so a ``YYYY-MM-DD`` always lands on
the same weekday whatever the server's timezone is.
"""
from datetime import timedelta
from decimal import Decimal
from typing import Sequence, Union

from domain.dates import DateLike, parse_date
from domain.entities import RoomType
from domain.exceptions import InvalidRangeError, OverlapError
from domain.value_objects import NightlyRate, SeasonalPrice, StayQuote


def resolve_price(room_type: RoomType, day: DateLike) -> Decimal:
    """Nightly price of room_type on day"""
    day = parse_date(day)

    seasonal = room_type.seasonal_price_for(day)
    if seasonal is not None:
        return seasonal

    weekday = room_type.weekday_price_for(day)
    if weekday is not None:
        return weekday

    return room_type.base_price


def validate_seasonal_pricing(periods: Sequence[SeasonalPrice]) -> None:
    """Reject seasonal periods that are inverted or overlap each other.

    Raises:
        InvalidRangeError: a period ends before it starts.
        OverlapError: the first pair (in list order) that overlaps.

    Periods that share a boundary date do not count as overlapping.
    """
    for period in periods:
        if period.end_date < period.start_date:
            raise InvalidRangeError(
                period.start_date, period.end_date,
                f"Seasonal pricing period ends ({period.end_date}) before it starts ({period.start_date})"
            )

    for i, first in enumerate(periods):
        for second in periods[i + 1:]:
            if first.overlaps(second):
                raise OverlapError(first, second)


def price_for_stay(
    room_type: RoomType,
    check_in_date: DateLike,
    check_out_date: DateLike,
    tax_rate: Union[Decimal, int, str] = 0
) -> StayQuote:
    """Price every night from check-in up to (not including) check-out"""
    check_in = parse_date(check_in_date)
    check_out = parse_date(check_out_date)

    nights = (check_out - check_in).days
    if nights <= 0:
        raise InvalidRangeError(check_in, check_out, "Check-out date must be after check-in date")

    breakdown = []
    for i in range(nights):
        night = check_in + timedelta(days=i)
        breakdown.append(NightlyRate(date=night, price=resolve_price(room_type, night)))

    subtotal = sum((rate.price for rate in breakdown), Decimal("0"))
    percent = Decimal(str(tax_rate))
    tax = subtotal * percent / Decimal("100")
    total = subtotal + tax

    return StayQuote(
        nights=nights,
        breakdown=breakdown,
        subtotal=subtotal,
        tax_rate=percent,
        tax=tax,
        total=total
    )
