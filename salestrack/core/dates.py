from datetime import date, datetime, timezone


def to_utc(value: datetime) -> datetime:
    """Tag naive timestamps as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_timestamp(text: str) -> datetime:
    text = text.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return to_utc(datetime.fromisoformat(text))


def sale_timestamp(value) -> datetime:
    """Normalise a sale date to an aware UTC datetime.

    Accepts datetimes, plain dates (midnight UTC) and ISO-8601 strings;
    anything else raises ``ValueError``.
    """
    if isinstance(value, datetime):
        return to_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    message = "date must be a date, datetime or ISO-8601 string, got {!r}".format(value)
    if isinstance(value, str) and value.strip():
        try:
            return parse_timestamp(value)
        except ValueError as exc:
            raise ValueError(message) from exc
    raise ValueError(message)


def utc_day(value) -> date:
    """Calendar day of a sale date, bucketed in UTC."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    return sale_timestamp(value).date()
