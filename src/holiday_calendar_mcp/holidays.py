"""
Holiday lookups against the remote holiday service.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Optional, Protocol

from .client import (
    HolidayClientProtocol,
    HolidayLookupError,
    KalendariumClient,
    LookupFailure,
)

logger = logging.getLogger(__name__)

ClientFactory = Callable[[], HolidayClientProtocol]


@dataclass(slots=True)
class DayLookup:
    """Outcome of a single-date lookup."""

    day: date
    holiday: Optional[bool] = None
    failure: Optional[LookupFailure] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        """True if the service answered."""
        return self.failure is None


class HolidayCalendarProtocol(Protocol):
    """Public holiday operations offered to hosting code."""

    def is_holiday(self, d: date) -> bool: ...

    def get_holidays(self, start: date, end: date) -> list[date]: ...


class HolidayResolver:
    """Resolves one date to a holiday flag with one remote round trip."""

    def __init__(self, client_factory: Optional[ClientFactory] = None):
        self._client_factory: ClientFactory = client_factory or KalendariumClient

    def resolve(self, d: date) -> DayLookup:
        """Query the service for a date.

        Every call opens and closes its own client, so no session is shared
        between days. Failures are returned, not raised.
        """
        try:
            with self._client_factory() as client:
                day_info = client.fetch_day_info(d)
        except HolidayLookupError as e:
            return DayLookup(day=d, failure=e.kind, detail=e.detail)

        holiday = day_info.has_holiday()
        logger.debug("Lookup for %s: holiday=%s", d.isoformat(), holiday)
        return DayLookup(day=d, holiday=holiday)


class HolidayCalendar:
    """Checks dates against the remote holiday service."""

    def __init__(
        self,
        resolver: Optional[HolidayResolver] = None,
        client_factory: Optional[ClientFactory] = None,
    ):
        self.resolver = resolver or HolidayResolver(client_factory)

    def is_holiday(self, d: date) -> bool:
        """Checks if date is a holiday. An unknown answer counts as no holiday."""
        try:
            lookup = self.resolver.resolve(d)
        except Exception as e:
            logger.error("Unexpected error checking %s: %s", d.isoformat(), e)
            return False

        if not lookup.ok:
            logger.warning(
                "Holiday lookup failed for %s (%s): %s",
                d.isoformat(),
                lookup.failure.value,
                lookup.detail,
            )
            return False
        return bool(lookup.holiday)

    def get_holidays(self, start: date, end: date) -> list[date]:
        """Returns the holidays between start and end, both inclusive.

        Days are resolved one at a time in ascending order. The first failed
        lookup aborts the range and an empty list is returned, even if
        holidays were already found.
        """
        try:
            return self._collect_holidays(start, end)
        except Exception as e:
            logger.error(
                "Unexpected error collecting holidays %s..%s: %s",
                start.isoformat(),
                end.isoformat(),
                e,
            )
            return []

    def _collect_holidays(self, start: date, end: date) -> list[date]:
        holidays: list[date] = []
        current = start

        while current <= end:
            lookup = self.resolver.resolve(current)
            if not lookup.ok:
                logger.warning(
                    "Holiday range %s..%s aborted at %s (%s): %s",
                    start.isoformat(),
                    end.isoformat(),
                    current.isoformat(),
                    lookup.failure.value,
                    lookup.detail,
                )
                return []
            if lookup.holiday:
                holidays.append(current)

            # date.max has no successor
            if current == end:
                break
            current += timedelta(days=1)

        return holidays
