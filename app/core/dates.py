from datetime import date, datetime, time, timedelta, timezone
from zoneinfo import ZoneInfo


def to_utc_naive(dt: datetime) -> datetime:
    """
    La DB guarda DateTime naive, en UTC.
    - Si dt es naive: asumimos que YA está en UTC.
    - Si dt tiene tz: convertimos a UTC y quitamos tzinfo.
    """
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).replace(tzinfo=None)


def utc_now_naive() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


def iso_z_from_utc_naive(dt: datetime | None) -> str | None:
    if dt is None:
        return None
    return dt.replace(tzinfo=timezone.utc).isoformat().replace("+00:00", "Z")


def day_window(day: date, tz_name: str = "UTC") -> tuple[datetime, datetime]:
    """[inicio, fin] del día ``day`` en ``tz_name`` (inclusivo), en UTC naive."""
    tz = ZoneInfo(tz_name)
    start = datetime.combine(day, time.min, tzinfo=tz)
    end = datetime.combine(day, time.max, tzinfo=tz)
    return to_utc_naive(start), to_utc_naive(end)


def cancellation_cutoff(starts_at: datetime, notice: timedelta) -> datetime:
    return starts_at - notice
