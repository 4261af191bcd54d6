"""
Query parameter parsing shared by the dashboard routes.

Dates are parsed permissively: anything unparsable is ignored rather than
rejected, and a range is only built when both bounds survive.
"""
from datetime import datetime, time, timezone
from typing import Optional

from loguru import logger

from processor.ranking import DateRange

END_OF_DAY = time(23, 59, 59, 999000)


def parse_date_param(value: Optional[str], end_of_day: bool = False) -> Optional[datetime]:
    """
    Parse an ISO-8601 date or datetime query value.

    Args:
        value: Raw query string value
        end_of_day: Extend a date-only value to 23:59:59.999

    Returns:
        Naive UTC datetime, or None when missing or malformed
    """
    if not value:
        return None

    text = value.strip()
    try:
        parsed = datetime.fromisoformat(text.replace('Z', '+00:00'))
    except ValueError:
        logger.debug(f"Ignoring malformed date parameter: {value!r}")
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)

    if end_of_day and 'T' not in text and ' ' not in text:
        parsed = datetime.combine(parsed.date(), END_OF_DAY)

    return parsed


def parse_date_range(
    from_param: Optional[str] = None,
    to_param: Optional[str] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None
) -> Optional[DateRange]:
    """
    Build the request's date range.

    `from`/`to` win over the legacy `startDate`/`endDate` names; the legacy
    value is used when the new one is missing or malformed.
    """
    start = parse_date_param(from_param) or parse_date_param(start_date)
    end = (
        parse_date_param(to_param, end_of_day=True)
        or parse_date_param(end_date, end_of_day=True)
    )
    date_range = DateRange.from_bounds(start, end)

    if date_range is not None:
        logger.info(f"Date filter: {date_range.start.isoformat()} ~ {date_range.end.isoformat()}")
    elif start or end:
        logger.debug("Only one date bound given, date filter skipped")
    return date_range
