from itertools import permutations

from podium_league.schemas.predictions import PodiumPick
from podium_league.services.scoring import score_prediction

PODIUM = ["verstappen", "norris", "leclerc"]


def pick(first, second, third):
    return {"first": first, "second": second, "third": third}


def test_exact_podium_scores_30():
    assert score_prediction(pick(*PODIUM), PODIUM) == 30


def test_only_exact_order_scores_30():
    for order in permutations(PODIUM):
        expected = 30 if list(order) == PODIUM else None
        score = score_prediction(pick(*order), PODIUM)
        assert 0 <= score <= 30
        if expected is None:
            assert score < 30


def test_partial_credit():
    # winner picked third (diff 2), second exact, third picked first (diff 2)
    assert score_prediction(pick("leclerc", "norris", "verstappen"), PODIUM) == 2 + 10 + 2
    # everyone off by one where possible
    assert score_prediction(pick("norris", "verstappen", "leclerc"), PODIUM) == 5 + 5 + 10
    assert score_prediction(pick("norris", "leclerc", "verstappen"), PODIUM) == 5 + 5 + 2


def test_drivers_off_the_podium_score_nothing():
    assert score_prediction(pick("hamilton", "piastri", "russell"), PODIUM) == 0
    assert score_prediction(pick("verstappen", "hamilton", "russell"), PODIUM) == 10


def test_only_top_three_of_actual_count():
    longer = PODIUM + ["hamilton", "russell"]
    swapped = PODIUM + ["russell", "hamilton"]
    p = pick("verstappen", "hamilton", "leclerc")
    assert score_prediction(p, longer) == score_prediction(p, swapped) == 20


def test_accepts_podium_pick_model():
    assert score_prediction(PodiumPick(first="norris", second="verstappen", third="leclerc"), PODIUM) == 20


def test_missing_slot_scores_zero_for_that_slot():
    assert score_prediction({"first": "verstappen"}, PODIUM) == 10
