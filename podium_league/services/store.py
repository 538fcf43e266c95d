import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Callable, Dict, List, Mapping, Optional

from podium_league.schemas.races import CalendarEntry
from podium_league.schemas.stats import ChartPoint, LeaderboardEntry
from podium_league.services import aggregation
from podium_league.services.documents import PREDICTIONS, RESULTS

logger = logging.getLogger(__name__)

SLOTS = (PREDICTIONS, RESULTS)


@dataclass(frozen=True)
class LeagueSnapshot:
    """Everything derived from one consistent (calendar, predictions, results) triple."""
    predictions: Mapping[str, Mapping] = field(default_factory=dict)
    results: Mapping[str, Mapping] = field(default_factory=dict)
    leaderboard: List[LeaderboardEntry] = field(default_factory=list)
    series: List[ChartPoint] = field(default_factory=list)
    next_race: Optional[CalendarEntry] = None

    def locked(self, now: Optional[datetime] = None) -> bool:
        return aggregation.is_prediction_locked(self.next_race, now)


class LeagueStore:
    """
    Owns the two record slots and the calendar they are scored against.

    ``replace`` swaps a slot wholesale and rebuilds the snapshot from scratch;
    nothing is ever patched incrementally.
    """

    def __init__(self, calendar: Optional[List[CalendarEntry]] = None):
        self._lock = threading.Lock()
        self._slots: Dict[str, Mapping] = {PREDICTIONS: {}, RESULTS: {}}
        self._calendar: List[CalendarEntry] = list(calendar or [])
        self._listeners: List[Callable[[LeagueSnapshot], None]] = []
        self._snapshot = self._recompute()

    @property
    def snapshot(self) -> LeagueSnapshot:
        return self._snapshot

    @property
    def calendar(self) -> List[CalendarEntry]:
        return list(self._calendar)

    def replace(self, slot: str, document: Optional[Mapping]) -> LeagueSnapshot:
        if slot not in SLOTS:
            raise KeyError(f"Unknown slot {slot!r}")
        with self._lock:
            self._slots[slot] = MappingProxyType(dict(document or {}))
            self._snapshot = self._recompute()
            snapshot = self._snapshot
        logger.debug("Slot %s replaced (%d rounds)", slot, len(document or {}))
        self._notify(snapshot)
        return snapshot

    def set_calendar(self, calendar: List[CalendarEntry]) -> LeagueSnapshot:
        with self._lock:
            self._calendar = list(calendar)
            self._snapshot = self._recompute()
            snapshot = self._snapshot
        self._notify(snapshot)
        return snapshot

    def subscribe(self, listener: Callable[[LeagueSnapshot], None]) -> None:
        self._listeners.append(listener)

    def _recompute(self) -> LeagueSnapshot:
        predictions = self._slots[PREDICTIONS]
        results = self._slots[RESULTS]
        return LeagueSnapshot(
            predictions=predictions,
            results=results,
            leaderboard=aggregation.build_leaderboard(predictions, results),
            series=aggregation.build_score_series(predictions, results),
            next_race=aggregation.resolve_next_race(self._calendar, results),
        )

    def _notify(self, snapshot: LeagueSnapshot) -> None:
        for listener in list(self._listeners):
            listener(snapshot)
