"""
HTTP client for the Kalendarium day-info API.
Uses .env for configuration and fetches the event list of a single day.
"""

import logging
import os
from datetime import date
from enum import Enum
from typing import Optional, Protocol

import requests
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

# Load .env file (only relevant in production)
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.kalendarium.dk"
DEFAULT_TIMEOUT = 30.0


class LookupFailure(str, Enum):
    """Why a remote lookup failed."""

    TRANSPORT = "transport"
    STATUS = "status"
    DECODE = "decode"


class HolidayLookupError(Exception):
    """Raised when the holiday service could not answer for a date."""

    def __init__(self, kind: LookupFailure, day: date, detail: str = ""):
        self.kind = kind
        self.day = day
        self.detail = detail
        super().__init__(f"{kind.value} failure for {day.isoformat()}: {detail}")


class EventInfo(BaseModel):
    """One event of a day. `holliday` is spelled the way the service spells it."""

    model_config = ConfigDict(strict=True)

    holliday: bool = False


class DayInfo(BaseModel):
    """Day info response; only the event list matters."""

    events: Optional[list[EventInfo]] = None

    def has_holiday(self) -> bool:
        """True if any event is flagged as a holiday."""
        return any(event.holliday for event in self.events or [])


_DAY_INFO_BODY = TypeAdapter(Optional[DayInfo])


class HolidayClientProtocol(Protocol):
    """Protocol defining the interface for holiday service clients."""

    def __enter__(self) -> "HolidayClientProtocol": ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None: ...

    def connect(self) -> None: ...

    def fetch_day_info(self, day: date) -> DayInfo: ...

    def close(self) -> None: ...


class KalendariumClient:
    """Production implementation of HolidayClientProtocol using requests."""

    def __init__(
        self, base_url: Optional[str] = None, timeout: Optional[float] = None
    ):
        base_url = base_url or os.getenv("KALENDARIUM_BASE_URL") or DEFAULT_BASE_URL
        self.base_url = base_url.rstrip("/")

        if timeout is None:
            raw_timeout = os.getenv("KALENDARIUM_TIMEOUT")
            try:
                timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
            except ValueError as e:
                raise ValueError(f"Invalid KALENDARIUM_TIMEOUT: {e}") from e
        if timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {timeout}")
        self.timeout = timeout

        self._session: Optional[requests.Session] = None

    def __enter__(self) -> "KalendariumClient":
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        self.close()

    def connect(self) -> None:
        """Open an HTTP session."""
        self._session = requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    def url_for(self, day: date) -> str:
        """Day-info URL for a date."""
        return f"{self.base_url}/Dayinfo/{day.isoformat()}"

    def fetch_day_info(self, day: date) -> DayInfo:
        """Fetch and decode the event list for one day.

        Raises:
            HolidayLookupError: on transport errors, non-2xx responses and
                bodies that do not decode into DayInfo.
        """
        if self._session is None:
            raise HolidayLookupError(
                LookupFailure.TRANSPORT, day, "Not connected to holiday service"
            )

        url = self.url_for(day)
        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise HolidayLookupError(LookupFailure.TRANSPORT, day, str(e)) from e

        if not 200 <= response.status_code < 300:
            raise HolidayLookupError(
                LookupFailure.STATUS, day, f"HTTP {response.status_code} from {url}"
            )

        try:
            day_info = _DAY_INFO_BODY.validate_json(response.content)
        except ValidationError as e:
            raise HolidayLookupError(
                LookupFailure.DECODE, day, f"{e.error_count()} validation error(s)"
            ) from e

        # A null body carries no events
        if day_info is None:
            return DayInfo()
        return day_info

    def close(self) -> None:
        """Close the HTTP session."""
        if self._session is not None:
            self._session.close()
            self._session = None
