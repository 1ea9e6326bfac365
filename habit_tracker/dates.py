from datetime import datetime


def to_local(value: datetime) -> datetime:
    """Return ``value`` as a naive datetime in server local time."""
    if value.tzinfo is not None:
        value = value.astimezone().replace(tzinfo=None)
    return value


def start_of_day(value: datetime) -> datetime:
    return to_local(value).replace(hour=0, minute=0, second=0, microsecond=0)


def week_day(value: datetime) -> int:
    """Day-of-week index, 0=Sunday .. 6=Saturday."""
    return value.isoweekday() % 7


def today() -> datetime:
    return start_of_day(datetime.now())


def get_today() -> datetime:
    # FastAPI dependency; tests replace it through app.dependency_overrides
    return today()
