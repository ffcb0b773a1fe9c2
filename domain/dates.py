"""Calendar and rounding helpers shared by pricing and analytics"""
from datetime import date, datetime, timedelta, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterator, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

TWO_PLACES = Decimal("0.01")

DateLike = Union[date, str]


def parse_date(value: DateLike) -> date:
    """Parse a YYYY-MM-DD string, passing dates through"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


def date_range(start: date, end: date) -> Iterator[date]:
    """Yield every calendar date from start to end, both inclusive"""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def get_zone(name: str) -> ZoneInfo:
    """IANA zone by name, ValueError when the name is not a known zone"""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Unknown timezone: {name}")


def to_local_date(timestamp: datetime, tz: Union[str, ZoneInfo, None] = None) -> date:
    """Calendar date of a timestamp in the hotel's timezone.

    Naive timestamps are read as UTC, matching how they are stored.
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    if tz is None:
        zone = timezone.utc
    elif isinstance(tz, str):
        zone = get_zone(tz)
    else:
        zone = tz
    return timestamp.astimezone(zone).date()


def round_money(amount) -> Decimal:
    """Round a money amount half-up to 2 decimal places"""
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def round_percentage(value) -> float:
    """Round a percentage half-up to 2 decimal places"""
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return float(value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def percentage(part: int, whole: int) -> float:
    """part / whole * 100, rounded; 0 when whole is 0"""
    if whole <= 0:
        return 0.0
    return round_percentage(Decimal(part) * 100 / Decimal(whole))
