"""
"Date Found" resolution in the audit timezone.
"""

import logging
from datetime import date, datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "Africa/Cairo"
DATE_FORMAT = "%d-%m-%Y"
FALLBACK_DATE_FOUND = "01-01-1970"


def today_in_timezone(tz_name: str = DEFAULT_TIMEZONE, now: Optional[datetime] = None) -> Optional[date]:
    """
    Текущая дата в заданной таймзоне.

    Args:
        tz_name: IANA имя таймзоны
        now: Момент времени (по умолчанию сейчас, UTC). Naive datetime считается UTC.

    Returns:
        date или None, если база таймзон недоступна
    """
    try:
        tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning(f"⚠️  Timezone {tz_name!r} unavailable: {e}")
        return None

    moment = now or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(tz).date()


def format_date_found(d: Optional[date]) -> str:
    if d is None:
        return FALLBACK_DATE_FOUND
    return d.strftime(DATE_FORMAT)


def resolve_date_found(tz_name: str = DEFAULT_TIMEZONE, now: Optional[datetime] = None) -> str:
    """Дата в формате DD-MM-YYYY; при недоступной таймзоне 01-01-1970."""
    return format_date_found(today_in_timezone(tz_name, now))
