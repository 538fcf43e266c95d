"""
Leaderboard, per-round best, cumulative score series, next race and lock state.

Everything here is a pure function of the calendar and the two documents
(predictions, results). Callers recompute from scratch on every change.
"""
import logging
from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional, Sequence

from podium_league.schemas.races import CalendarEntry
from podium_league.schemas.stats import ChartPoint, LeaderboardEntry, RoundBest
from podium_league.services.scoring import score_prediction

logger = logging.getLogger(__name__)

Document = Mapping[str, Mapping]


def result_podium(results: Document, round_label: str) -> Optional[List[str]]:
    """Official podium for a round, or None while the round is pending."""
    result = results.get(round_label)
    if not result or not result.get("podium"):
        return None
    return list(result["podium"])


def round_scores(round_label: str, predictions: Document, results: Document) -> Dict[str, int]:
    podium = result_podium(results, round_label)
    if podium is None:
        return {}
    return {
        user: score_prediction(pick, podium)
        for user, pick in (predictions.get(round_label) or {}).items()
    }


def build_leaderboard(predictions: Document, results: Document) -> List[LeaderboardEntry]:
    totals: Dict[str, int] = {}
    for round_label in predictions:
        for user, score in round_scores(round_label, predictions, results).items():
            totals[user] = totals.get(user, 0) + score
    ordered = sorted(totals.items(), key=lambda kv: (-kv[1], kv[0]))
    return [LeaderboardEntry(user=user, score=score) for user, score in ordered]


def round_best(round_label: str, predictions: Document, results: Document) -> Optional[RoundBest]:
    """Top score of a completed round and every user who reached it."""
    scores = round_scores(round_label, predictions, results)
    if not scores:
        return None
    best = max(scores.values())
    users = sorted(u for u, s in scores.items() if s == best)
    return RoundBest(round=round_label, users=users, score=best)


def round_sort_key(round_label: str) -> Optional[int]:
    try:
        return int(round_label)
    except (TypeError, ValueError):
        return None


def build_score_series(predictions: Document, results: Document) -> List[ChartPoint]:
    """
    Cumulative score per user after each completed round, in numeric round order.

    A user who did not predict a round is absent from that round's point; the
    previous cumulative value still stands.
    """
    completed = []
    for round_label in results:
        number = round_sort_key(round_label)
        if number is None:
            logger.warning("Ignoring result with non-numeric round %r", round_label)
            continue
        completed.append((number, round_label))
    completed.sort()

    cumulative: Dict[str, int] = {}
    series: List[ChartPoint] = []
    for number, round_label in completed:
        if not predictions.get(round_label):
            continue
        scores = round_scores(round_label, predictions, results)
        if not scores:
            continue
        point: Dict[str, int] = {}
        for user, score in scores.items():
            cumulative[user] = cumulative.get(user, 0) + score
            point[user] = cumulative[user]
        series.append(ChartPoint(round=f"R{round_label}", round_number=number, scores=point))
    return series


def resolve_next_race(calendar: Sequence[CalendarEntry], results: Document) -> Optional[CalendarEntry]:
    """First race without a result; the final race once the season is complete."""
    if not calendar:
        return None
    ordered = sorted(calendar, key=lambda r: r.round_number)
    for race in ordered:
        if result_podium(results, race.round) is None:
            return race
    return ordered[-1]


def is_prediction_locked(race: Optional[CalendarEntry], now: Optional[datetime] = None) -> bool:
    if race is None or race.qualifying_start is None:
        return False
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now >= race.qualifying_start
