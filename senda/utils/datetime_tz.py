from __future__ import annotations

from datetime import date, datetime, timezone

from zoneinfo import ZoneInfo

from senda.application.errors import ValidationError

# Default application timezone aligned with the dashboard's users
DEFAULT_TIMEZONE_NAME = "America/Argentina/Buenos_Aires"
DEFAULT_TZ = ZoneInfo(DEFAULT_TIMEZONE_NAME)

_MON_ES = [
    "enero",
    "febrero",
    "marzo",
    "abril",
    "mayo",
    "junio",
    "julio",
    "agosto",
    "septiembre",
    "octubre",
    "noviembre",
    "diciembre",
]


def ensure_utc(dt: datetime) -> datetime:
    """Treat naive values (SQLite drops tzinfo) as UTC; convert aware ones to UTC."""
    if dt.tzinfo is None or dt.tzinfo.utcoffset(dt) is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def local_now(tz_name: str | None = None) -> datetime:
    return datetime.now(ZoneInfo(tz_name) if tz_name else DEFAULT_TZ)


def local_today(tz_name: str | None = None) -> date:
    tz = ZoneInfo(tz_name) if tz_name else DEFAULT_TZ
    return datetime.now(tz).date()


def parse_iso_date(value: str) -> date:
    """Parse 'YYYY-MM-DD' (or a full ISO timestamp) and fail fast on anything else."""
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as exc:
        raise ValidationError(f"Invalid date: {value!r}") from exc


def format_long_date(d: date | datetime | None, *, include_time: bool = False) -> str:
    """Return '05 de octubre de 2024' (optionally ', 14:30'), es-ES style."""
    if d is None:
        return ""
    if isinstance(d, datetime):
        d = ensure_utc(d).astimezone(DEFAULT_TZ)
    text = f"{d.day:02d} de {_MON_ES[d.month - 1]} de {d.year}"
    if include_time and isinstance(d, datetime):
        text += f", {d.strftime('%H:%M')}"
    return text


def format_time_ago(moment: datetime, now: datetime | None = None) -> str:
    """Relative Spanish wording used by the activity sidebar ("hace 5 minutos")."""
    now = ensure_utc(now or utcnow())
    seconds = int((now - ensure_utc(moment)).total_seconds())
    if seconds < 60:
        return "hace menos de un minuto"
    minutes = seconds // 60
    if minutes < 60:
        return "hace 1 minuto" if minutes == 1 else f"hace {minutes} minutos"
    hours = minutes // 60
    if hours < 24:
        return "hace 1 hora" if hours == 1 else f"hace {hours} horas"
    days = hours // 24
    if days < 30:
        return "hace 1 día" if days == 1 else f"hace {days} días"
    months = days // 30
    if months < 12:
        return "hace 1 mes" if months == 1 else f"hace {months} meses"
    years = days // 365
    return "hace 1 año" if years <= 1 else f"hace {years} años"
