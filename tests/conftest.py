"""
Pytest fixtures for holiday lookup tests.
"""

from datetime import date
from typing import Dict, List

import pytest

from holiday_calendar_mcp.client import (
    DayInfo,
    EventInfo,
    HolidayLookupError,
    LookupFailure,
)
from holiday_calendar_mcp.holidays import HolidayCalendar


class FakeHolidayService:
    """Scripted stand-in for the remote holiday service.

    Days default to "no events". Holidays and failures are set per date.
    """

    def __init__(self):
        self._days: Dict[date, DayInfo] = {}
        self._failures: Dict[date, LookupFailure] = {}
        self.requested: List[date] = []
        self.opened = 0
        self.closed = 0

    def add_holiday(self, d: date) -> None:
        """Mark a date as a holiday (one ordinary event, one holiday event)."""
        self._days[d] = DayInfo(
            events=[EventInfo(holliday=False), EventInfo(holliday=True)]
        )

    def set_day(self, d: date, day_info: DayInfo) -> None:
        self._days[d] = day_info

    def fail_on(self, d: date, kind: LookupFailure = LookupFailure.STATUS) -> None:
        self._failures[d] = kind

    def answer(self, d: date) -> DayInfo:
        self.requested.append(d)
        if d in self._failures:
            raise HolidayLookupError(self._failures[d], d, "scripted failure")
        return self._days.get(d, DayInfo(events=[]))

    def client_factory(self) -> "MockHolidayClient":
        return MockHolidayClient(self)


class MockHolidayClient:
    """Mock implementation of HolidayClientProtocol for testing."""

    def __init__(self, service: FakeHolidayService):
        self._service = service
        self._connected = False

    def __enter__(self) -> "MockHolidayClient":
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def connect(self) -> None:
        self._connected = True
        self._service.opened += 1

    def fetch_day_info(self, day: date) -> DayInfo:
        if not self._connected:
            raise HolidayLookupError(LookupFailure.TRANSPORT, day, "Not connected")
        return self._service.answer(day)

    def close(self) -> None:
        if self._connected:
            self._connected = False
            self._service.closed += 1


@pytest.fixture
def holiday_service() -> FakeHolidayService:
    """Fixture providing a fresh scripted holiday service."""
    return FakeHolidayService()


@pytest.fixture
def holiday_calendar(holiday_service: FakeHolidayService) -> HolidayCalendar:
    """Fixture providing a HolidayCalendar wired to the scripted service."""
    return HolidayCalendar(client_factory=holiday_service.client_factory)
