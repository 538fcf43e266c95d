"""Podium prediction scoring."""
from typing import Mapping, Sequence, Union

from podium_league.schemas.predictions import PodiumPick

SLOTS = ("first", "second", "third")

EXACT_POINTS = 10
# Points by distance between predicted slot and actual finishing slot
NEAR_POINTS = {1: 5, 2: 2}


def score_prediction(prediction: Union[Mapping, PodiumPick], actual_podium: Sequence[str]) -> int:
    """Score a podium pick against the official top three (0..30)."""
    if isinstance(prediction, PodiumPick):
        picks = prediction.slots()
    else:
        picks = [prediction.get(slot) for slot in SLOTS]
    actual = list(actual_podium[:3])

    score = 0
    for idx, driver in enumerate(picks):
        if driver is None or driver not in actual:
            continue
        found = actual.index(driver)
        if found == idx:
            score += EXACT_POINTS
        else:
            score += NEAR_POINTS.get(abs(found - idx), 0)
    return score
