from datetime import date, datetime
from utils.constants import DATE_FORMAT, MONTH_FORMAT

_STRFTIME_MAP = {
    "DD/MM/YYYY": "%d/%m/%Y",
    "MM/DD/YYYY": "%m/%d/%Y",
    "YYYY-MM-DD": "%Y-%m-%d",
    "DD.MM.YYYY": "%d.%m.%Y",
}


def today() -> date:
    return date.today()


def today_str() -> str:
    return date.today().strftime(DATE_FORMAT)


def current_month_str() -> str:
    return date.today().strftime(MONTH_FORMAT)


def parse_date(date_str: str | None) -> date | None:
    """Parse a YYYY-MM-DD string, returning None on failure."""
    if not date_str or not isinstance(date_str, str):
        return None
    try:
        return datetime.strptime(date_str.strip(), DATE_FORMAT).date()
    except ValueError:
        return None


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def format_month(d: date) -> str:
    return d.strftime(MONTH_FORMAT)


def parse_month(month_str: str | None) -> date | None:
    """Return the first day of the given YYYY-MM month string."""
    if not month_str or not isinstance(month_str, str) or len(month_str) != 7:
        return None
    try:
        return datetime.strptime(month_str, MONTH_FORMAT).date()
    except ValueError:
        return None


def month_of(date_str: str | None) -> str | None:
    """'2024-03-05' -> '2024-03'; None when the date is missing or malformed."""
    d = parse_date(date_str)
    return format_month(d) if d else None


def normalize_date(value) -> str:
    """Coerce a date as sent by the API into a YYYY-MM-DD string.

    The server serializes DATE columns either as plain dates or as midnight
    timestamps ('2024-03-04T18:30:00.000Z'); timestamps are converted to the
    local calendar date. Unparseable values are returned unchanged so that
    period filtering drops them.
    """
    if value is None:
        return ""
    text = str(value).strip()
    d = parse_date(text)
    if d:
        return format_date(d)
    try:
        ts = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return text
    if ts.tzinfo is not None:
        ts = ts.astimezone()
    return format_date(ts.date())


def prev_month(month_str: str) -> str:
    d = parse_month(month_str)
    if d is None:
        raise ValueError(f"Invalid month: {month_str}")
    if d.month == 1:
        return format_month(d.replace(year=d.year - 1, month=12))
    return format_month(d.replace(month=d.month - 1))


def next_month(month_str: str) -> str:
    d = parse_month(month_str)
    if d is None:
        raise ValueError(f"Invalid month: {month_str}")
    if d.month == 12:
        return format_month(d.replace(year=d.year + 1, month=1))
    return format_month(d.replace(month=d.month + 1))


def friendly_month(month_str: str) -> str:
    """Convert YYYY-MM to e.g. 'March 2024'."""
    d = parse_month(month_str)
    if d is None:
        return month_str
    return d.strftime("%B %Y")


def format_display_date(date_str: str, fmt_key: str = "DD/MM/YYYY") -> str:
    """Convert a YYYY-MM-DD storage string to the user-facing display format."""
    if not date_str:
        return date_str
    d = parse_date(date_str)
    if d is None:
        return date_str
    return d.strftime(_STRFTIME_MAP.get(fmt_key, "%d/%m/%Y"))
