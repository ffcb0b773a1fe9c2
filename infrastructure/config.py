"""Application configuration read from the environment"""
import os
from decimal import Decimal, InvalidOperation
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def _env_decimal(name: str, default: str) -> Decimal:
    """Read a decimal setting, falling back to default when unset or malformed"""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return Decimal(default)
    try:
        return Decimal(raw.strip())
    except InvalidOperation:
        return Decimal(default)


def _env_timezone(name: str, default: str) -> str:
    """Read an IANA zone name, falling back to default when unset or unknown"""
    raw = (os.environ.get(name) or "").strip()
    if not raw:
        return default
    try:
        ZoneInfo(raw)
    except (ZoneInfoNotFoundError, ValueError):
        return default
    return raw


APP_NAME = os.environ.get("APP_NAME", "Hotel Rate & Analytics API")
APP_VERSION = os.environ.get("APP_VERSION", "1.0.0")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Used when a hotel record does not set its own values
DEFAULT_TAX_RATE = _env_decimal("DEFAULT_TAX_RATE", "10")
DEFAULT_TIMEZONE = _env_timezone("DEFAULT_TIMEZONE", "UTC")
DEFAULT_CURRENCY = os.environ.get("DEFAULT_CURRENCY", "VND")
