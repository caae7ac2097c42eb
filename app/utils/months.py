from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

MONTH_KEY_PATTERN = r"^\d{4}-(0[1-9]|1[0-2])$"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    # SQLite devuelve fechas sin zona; se asumen guardadas en UTC
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


def month_key(moment: datetime) -> str:
    return f"{moment.year}-{moment.month:02d}"


def current_month_key(tz: Optional[str] = None) -> str:
    """Mes actual "YYYY-MM" en la zona IANA `tz` (hora local del servidor si es None)."""
    now = datetime.now(ZoneInfo(tz)) if tz else datetime.now()
    return month_key(now)
