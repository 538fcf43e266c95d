import os

# Keep the app's module-level engine off the filesystem
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from podium_league.db.base import Base
import podium_league.models.league  # ensure models are registered
from podium_league.services.documents import DocumentRepository
from podium_league.services.league import League
from podium_league.services.openf1 import OpenF1Client, ScheduleLoader

BASE = "https://api.openf1.org/v1"
SEASON = 2026

MEETINGS = [
    {"meeting_key": 1001, "meeting_name": "Australian Grand Prix",
     "circuit_short_name": "Melbourne", "location": "Melbourne", "country_name": "Australia"},
    {"meeting_key": 1002, "meeting_name": "Chinese Grand Prix",
     "circuit_short_name": None, "location": "Shanghai", "country_name": "China"},
    {"meeting_key": 1003, "meeting_name": "Japanese Grand Prix",
     "circuit_short_name": "Suzuka", "location": "Suzuka", "country_name": "Japan"},
    {"meeting_key": 1099, "meeting_name": "Pre-Season Testing",
     "circuit_short_name": "Sakhir", "location": "Sakhir", "country_name": "Bahrain"},
]

# Deliberately not in date order; 1050 has no meeting record
RACE_SESSIONS = [
    {"session_key": 9003, "meeting_key": 1003, "session_name": "Race",
     "date_start": "2099-04-05T05:00:00+00:00"},
    {"session_key": 9001, "meeting_key": 1001, "session_name": "Race",
     "date_start": "2020-03-08T04:00:00+00:00"},
    {"session_key": 9002, "meeting_key": 1002, "session_name": "Race",
     "date_start": "2099-03-15T07:00:00+00:00"},
    {"session_key": 9050, "meeting_key": 1050, "session_name": "Race",
     "date_start": "2099-05-01T12:00:00+00:00"},
]

QUALIFYING_SESSIONS = [
    {"session_key": 8001, "meeting_key": 1001, "session_name": "Qualifying",
     "date_start": "2020-03-07T05:00:00+00:00"},
    {"session_key": 8002, "meeting_key": 1002, "session_name": "Qualifying",
     "date_start": "2099-03-14T07:00:00+00:00"},
]

DRIVERS = [
    {"first_name": "Max", "last_name": "Verstappen", "name_acronym": "VER",
     "driver_number": 1, "team_name": "Red Bull Racing"},
    {"first_name": "Lando", "last_name": "Norris", "name_acronym": "NOR",
     "driver_number": 4, "team_name": "McLaren"},
    {"first_name": "Charles", "last_name": "Leclerc", "name_acronym": "LEC",
     "driver_number": 16, "team_name": "Ferrari"},
    {"first_name": "Lewis", "last_name": "Hamilton", "name_acronym": "HAM",
     "driver_number": 44, "team_name": "Ferrari"},
]


def openf1_url(path):
    return f"{BASE}/{path}"


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        return self._body


class FakeSession:
    """Stands in for requests.Session; answers by exact URL.

    A route may be a single response or a list consumed in order (the last
    one repeats).
    """

    def __init__(self, routes):
        self.routes = dict(routes)
        self.headers = {}
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append(url)
        if url not in self.routes:
            return FakeResponse(404, {"detail": "Not Found"})
        route = self.routes[url]
        if isinstance(route, list):
            return route.pop(0) if len(route) > 1 else route[0]
        return route


def season_routes(drivers=DRIVERS):
    return {
        openf1_url(f"meetings?year={SEASON}"): FakeResponse(body=MEETINGS),
        openf1_url(f"sessions?year={SEASON}&session_name=Race"): FakeResponse(body=RACE_SESSIONS),
        openf1_url(f"sessions?year={SEASON}&session_name=Qualifying"):
            FakeResponse(body=QUALIFYING_SESSIONS),
        openf1_url("drivers?session_key=9003"): FakeResponse(body=drivers),
    }


@pytest.fixture()
def sleeps():
    return []


@pytest.fixture()
def make_client(sleeps):
    def _make(routes):
        return OpenF1Client(base_url=BASE, session=FakeSession(routes),
                            max_retries=4, backoff_ms=1000, sleep=sleeps.append)
    return _make


@pytest.fixture()
def session_factory():
    engine = create_engine("sqlite://", connect_args={"check_same_thread": False},
                           poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture()
def repository(session_factory):
    return DocumentRepository(session_factory)


@pytest.fixture()
def league(repository, make_client):
    loader = ScheduleLoader(make_client(season_routes()), season=SEASON)
    lg = League(repository, loader=loader, users=["Robert", "Johan", "Fredrik", "Klas"])
    lg.load()
    return lg
