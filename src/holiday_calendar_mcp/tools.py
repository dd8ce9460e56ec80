"""
MCP tool implementations for the holiday calendar.
This module contains the business logic for all MCP tools.
"""

import logging
from datetime import date
from typing import Annotated, Dict, List

from pydantic import Field

from .holidays import HolidayCalendar, HolidayCalendarProtocol

logger = logging.getLogger(__name__)

# Initialize Holiday Calendar
holiday_calendar = HolidayCalendar()


def _parse_date(value: str, field: str) -> date:
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise ValueError(f"Invalid {field} '{value}': expected YYYY-MM-DD") from e


def _is_holiday_internal(
    date_str: str = "",
    calendar: HolidayCalendarProtocol | None = None,
) -> Dict[str, str | bool]:
    """Internal function for testing with dependency injection support.

    Args:
        date_str: ISO 8601 date, empty for today
        calendar: Optional holiday calendar for testing (internal use only)

    Returns:
        Dict with the checked date and its holiday flag
    """
    calendar = calendar or holiday_calendar
    try:
        d = _parse_date(date_str, "date") if date_str.strip() else date.today()
    except ValueError as e:
        logger.error("Failed to check holiday: %s", e)
        return {"error": str(e)}

    return {"date": d.isoformat(), "is_holiday": calendar.is_holiday(d)}


def _get_holidays_internal(
    start_date: str,
    end_date: str,
    calendar: HolidayCalendarProtocol | None = None,
) -> List[str] | Dict[str, str]:
    """Internal function for testing with dependency injection support.

    Args:
        start_date: First day of the range, ISO 8601
        end_date: Last day of the range, ISO 8601
        calendar: Optional holiday calendar for testing (internal use only)

    Returns:
        List of ISO dates that are holidays
    """
    calendar = calendar or holiday_calendar
    try:
        start = _parse_date(start_date, "start_date")
        end = _parse_date(end_date, "end_date")
    except ValueError as e:
        logger.error("Failed to get holidays: %s", e)
        return {"error": str(e)}

    return [d.isoformat() for d in calendar.get_holidays(start, end)]


def is_holiday(
    date: Annotated[
        str,
        Field(
            description="Date to check in ISO 8601 format YYYY-MM-DD (e.g., 2025-12-25). Leave empty to check today.",
            default="",
        ),
    ] = "",
) -> Dict[str, str | bool]:
    """Check whether a date is a public holiday according to the Kalendarium holiday service. Returns the date and an is_holiday flag. If the holiday service cannot be reached or answers with an error, the date is reported as not a holiday."""
    return _is_holiday_internal(date)


def get_holidays(
    start_date: Annotated[
        str,
        Field(
            description="First day of the range in ISO 8601 format YYYY-MM-DD (e.g., 2025-12-01). Included in the result."
        ),
    ],
    end_date: Annotated[
        str,
        Field(
            description="Last day of the range in ISO 8601 format YYYY-MM-DD (e.g., 2025-12-31). Included in the result. A range whose end is before its start is empty."
        ),
    ],
) -> List[str] | Dict[str, str]:
    """List all public holidays between two dates, both inclusive, in ascending order. Every day in the range is looked up separately, so long ranges take proportionally longer. If any lookup fails, the whole range is reported as having no holidays."""
    return _get_holidays_internal(start_date, end_date)


__all__ = [
    "is_holiday",
    "get_holidays",
    "_is_holiday_internal",
    "_get_holidays_internal",
]
