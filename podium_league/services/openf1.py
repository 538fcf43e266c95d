"""
OpenF1 schedule source.

Fetches the raw meetings / sessions / drivers collections for one season.
Only HTTP 429 is retried (exponential backoff); every other failure aborts.
"""
from __future__ import annotations

import logging
import re
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import urlencode, urlsplit

import requests

from podium_league.core.config import settings
from podium_league.services.errors import OpenF1Error, ScheduleLoadError

logger = logging.getLogger(__name__)

_VERSION_PREFIX = re.compile(r"/v\d+/")


def endpoint_name(url: str) -> str:
    """Path after the API version prefix, without the query string ("sessions")."""
    path = urlsplit(url).path
    parts = _VERSION_PREFIX.split(path, maxsplit=1)
    return parts[1] if len(parts) == 2 else path.strip("/")


class OpenF1Client:
    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        max_retries: Optional[int] = None,
        backoff_ms: Optional[int] = None,
        timeout: Optional[float] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.base_url = (base_url or settings.openf1_url).rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.max_retries = settings.max_retries if max_retries is None else max_retries
        self.backoff_ms = settings.retry_backoff_ms if backoff_ms is None else backoff_ms
        self.timeout = settings.http_timeout if timeout is None else timeout
        self._sleep = sleep

    def url_for(self, collection: str, **params: Any) -> str:
        query = urlencode(params)
        return f"{self.base_url}/{collection}" + (f"?{query}" if query else "")

    def get(self, collection: str, **params: Any) -> Any:
        return self.fetch(self.url_for(collection, **params))

    def fetch(self, url: str) -> Any:
        endpoint = endpoint_name(url)
        for attempt in range(self.max_retries + 1):
            try:
                resp = self.session.get(url, timeout=self.timeout)
            except requests.RequestException as e:
                raise OpenF1Error(endpoint, detail=str(e)) from e
            if resp.ok:
                try:
                    return resp.json()
                except ValueError as e:
                    raise OpenF1Error(endpoint, detail=f"invalid JSON body ({e})") from e
            if resp.status_code == 429 and attempt < self.max_retries:
                wait = self.backoff_ms * (2 ** attempt) / 1000.0
                logger.warning("Rate limited on %s, retry %d/%d in %.1fs",
                               endpoint, attempt + 1, self.max_retries, wait)
                self._sleep(wait)
                continue
            raise OpenF1Error(endpoint, resp.status_code)


class DriverRosterStrategy:
    """Two-step driver lookup: first race session of the season, else the latest session."""

    FALLBACK_SESSION = "latest"

    def __init__(self, client: OpenF1Client):
        self.client = client

    def primary(self, race_sessions: List[Dict]) -> Any:
        first = race_sessions[0] if isinstance(race_sessions, list) and race_sessions else None
        session_key = first.get("session_key") if isinstance(first, dict) else None
        if session_key is None:
            return None
        return self.client.get("drivers", session_key=session_key)

    def fallback(self) -> Any:
        return self.client.get("drivers", session_key=self.FALLBACK_SESSION)

    def fetch(self, race_sessions: List[Dict]) -> List[Dict]:
        drivers = self.primary(race_sessions)
        if isinstance(drivers, list) and drivers:
            return drivers
        logger.info("No drivers for the first race session, falling back to session_key=%s",
                    self.FALLBACK_SESSION)
        drivers = self.fallback()
        return drivers if isinstance(drivers, list) else []


@dataclass
class ScheduleData:
    meetings: List[Dict] = field(default_factory=list)
    race_sessions: List[Dict] = field(default_factory=list)
    qualifying_sessions: List[Dict] = field(default_factory=list)
    drivers: List[Dict] = field(default_factory=list)


class ScheduleLoader:
    def __init__(self, client: Optional[OpenF1Client] = None, season: Optional[int] = None):
        self.client = client or OpenF1Client()
        self.season = season or settings.season
        self.roster = DriverRosterStrategy(self.client)

    def load(self) -> ScheduleData:
        """Fetch everything for the season; any failure aborts the whole load."""
        try:
            with ThreadPoolExecutor(max_workers=3, thread_name_prefix="openf1") as executor:
                meetings = executor.submit(self.client.get, "meetings", year=self.season)
                races = executor.submit(self.client.get, "sessions",
                                        year=self.season, session_name="Race")
                qualis = executor.submit(self.client.get, "sessions",
                                         year=self.season, session_name="Qualifying")
                data = ScheduleData(
                    meetings=meetings.result(),
                    race_sessions=races.result(),
                    qualifying_sessions=qualis.result(),
                )
            for name in ("meetings", "race_sessions", "qualifying_sessions"):
                if not isinstance(getattr(data, name), list):
                    raise ScheduleLoadError(f"{name} API: expected a list")
            data.drivers = self.roster.fetch(data.race_sessions)
        except OpenF1Error as e:
            logger.error("Schedule load for %s failed: %s", self.season, e)
            raise ScheduleLoadError(str(e)) from e

        logger.info("Loaded %d meetings, %d races, %d qualifying sessions, %d drivers",
                    len(data.meetings), len(data.race_sessions),
                    len(data.qualifying_sessions), len(data.drivers))
        return data
