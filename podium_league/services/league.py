"""
The prediction league: schedule load, record store wiring, submissions.
"""
import copy
import logging
import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from podium_league.core.config import settings
from podium_league.schemas.predictions import PodiumPick
from podium_league.schemas.races import CalendarEntry, Driver, SeasonProgress
from podium_league.schemas.stats import RoundBest
from podium_league.services import aggregation
from podium_league.services.calendar import build_race_calendar
from podium_league.services.documents import PREDICTIONS, RESULTS, DocumentRepository
from podium_league.services.errors import (
    PredictionLockedError,
    PredictionValidationError,
    UnknownRoundError,
    UnknownUserError,
)
from podium_league.services.openf1 import ScheduleLoader
from podium_league.services.roster import build_driver_roster
from podium_league.services.store import LeagueSnapshot, LeagueStore

logger = logging.getLogger(__name__)

LOCKED_MESSAGE = "Voting is closed! Qualifying has already started."
INCOMPLETE_MESSAGE = "Please select all three podium positions"
DUPLICATE_MESSAGE = "Please select three different drivers"


def validate_podium(picks: Sequence[Optional[str]]) -> List[str]:
    if len(picks) != 3 or not all(picks):
        raise PredictionValidationError(INCOMPLETE_MESSAGE)
    if len(set(picks)) != 3:
        raise PredictionValidationError(DUPLICATE_MESSAGE)
    return list(picks)


class League:
    def __init__(
        self,
        repository: DocumentRepository,
        loader: Optional[ScheduleLoader] = None,
        users: Optional[Sequence[str]] = None,
    ):
        self.repository = repository
        self.loader = loader or ScheduleLoader()
        self.users = list(users if users is not None else settings.users)
        self.store = LeagueStore()
        self.drivers: List[Driver] = []
        self.loaded = False
        self._load_lock = threading.Lock()
        self._subscribed = False

    # ---- load -------------------------------------------------------------

    def load(self) -> None:
        """Full load: schedule, calendar, roster, then the record subscriptions.

        A failure leaves the previous calendar and roster untouched.
        """
        with self._load_lock:
            data = self.loader.load()
            calendar = build_race_calendar(data.meetings, data.race_sessions,
                                           data.qualifying_sessions)
            drivers = build_driver_roster(data.drivers)
            if drivers:
                self.drivers = drivers
            self.store.set_calendar(calendar)
            if not self._subscribed:
                self.repository.subscribe(PREDICTIONS, lambda doc: self.store.replace(PREDICTIONS, doc))
                self.repository.subscribe(RESULTS, lambda doc: self.store.replace(RESULTS, doc))
                self._subscribed = True
            self.loaded = True
        logger.info("League ready: %d races, %d drivers", len(calendar), len(self.drivers))

    # ---- reads ------------------------------------------------------------

    @property
    def snapshot(self) -> LeagueSnapshot:
        return self.store.snapshot

    @property
    def calendar(self) -> List[CalendarEntry]:
        return self.store.calendar

    def race(self, round_label: str) -> CalendarEntry:
        for race in self.calendar:
            if race.round == round_label:
                return race
        raise UnknownRoundError(f"Round {round_label} is not on the calendar")

    def next_race(self) -> Optional[CalendarEntry]:
        return self.snapshot.next_race

    def is_locked(self, now: Optional[datetime] = None) -> bool:
        return self.snapshot.locked(now)

    def round_predictions(self, round_label: str) -> Dict[str, dict]:
        return copy.deepcopy(dict(self.snapshot.predictions.get(round_label) or {}))

    def user_prediction(self, round_label: str, user: str) -> Optional[dict]:
        return self.round_predictions(round_label).get(user)

    def round_best(self, round_label: str) -> Optional[RoundBest]:
        snap = self.snapshot
        return aggregation.round_best(round_label, snap.predictions, snap.results)

    def season_progress(self) -> SeasonProgress:
        results = self.snapshot.results
        calendar = self.calendar
        completed = sum(1 for race in calendar
                        if aggregation.result_podium(results, race.round) is not None)
        return SeasonProgress(completed=completed, total=len(calendar))

    # ---- writes -----------------------------------------------------------

    def submit_prediction(self, user: str, pick: PodiumPick, now: Optional[datetime] = None) -> str:
        """Validate and store ``user``'s pick for the next race; returns the round."""
        if user not in self.users:
            raise UnknownUserError(f"Unknown user {user!r}")
        race = self.next_race()
        if race is None:
            raise PredictionValidationError("There is no race open for voting")
        if aggregation.is_prediction_locked(race, now):
            raise PredictionLockedError(LOCKED_MESSAGE)
        picks = validate_podium(pick.slots())
        self._check_drivers(picks)

        now = now or datetime.now(timezone.utc)
        predictions = self.repository.get(PREDICTIONS)
        predictions.setdefault(race.round, {})[user] = {
            "first": picks[0],
            "second": picks[1],
            "third": picks[2],
            "timestamp": now.isoformat(),
        }
        self.repository.set(PREDICTIONS, predictions)
        logger.info("%s voted for round %s", user, race.round)
        return race.round

    def record_result(self, round_label: str, podium: Sequence[str]) -> None:
        self.race(round_label)
        podium = validate_podium(list(podium))
        self._check_drivers(podium)
        results = self.repository.get(RESULTS)
        results[round_label] = {"podium": podium}
        self.repository.set(RESULTS, results)
        logger.info("Result recorded for round %s: %s", round_label, ", ".join(podium))

    def _check_drivers(self, picks: Sequence[str]) -> None:
        if not self.drivers:
            return
        known = {d.id for d in self.drivers}
        unknown = [p for p in picks if p not in known]
        if unknown:
            raise PredictionValidationError(f"Unknown driver: {', '.join(unknown)}")
