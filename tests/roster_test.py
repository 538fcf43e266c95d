from conftest import DRIVERS
from podium_league.services.roster import build_driver_roster


def driver(first, last, number, team="Team"):
    return {"first_name": first, "last_name": last, "name_acronym": last[:3].upper(),
            "driver_number": number, "team_name": team}


def test_ids_are_lowercased_surnames():
    roster = build_driver_roster(DRIVERS)
    assert {d.id for d in roster} == {"verstappen", "norris", "leclerc", "hamilton"}


def test_sorted_by_full_name():
    roster = build_driver_roster(DRIVERS)
    assert [d.full_name for d in roster] == [
        "Charles Leclerc", "Lando Norris", "Lewis Hamilton", "Max Verstappen",
    ]
    ver = roster[-1]
    assert (ver.code, ver.number, ver.team) == ("VER", 1, "Red Bull Racing")


def test_surname_collision_suffixes_later_driver():
    roster = build_driver_roster([driver("Zed", "Smith", 1), driver("Adam", "Smith", 44)])
    ids = {d.full_name: d.id for d in roster}
    assert ids == {"Zed Smith": "smith", "Adam Smith": "smith-44"}


def test_collision_is_case_insensitive_and_order_dependent():
    roster = build_driver_roster([driver("A", "SMITH", 7), driver("B", "Smith", 3)])
    ids = {d.full_name: d.id for d in roster}
    assert ids == {"A SMITH": "smith", "B Smith": "smith-3"}


def test_every_later_occurrence_is_suffixed():
    roster = build_driver_roster([
        driver("A", "Smith", 1), driver("B", "Smith", 2), driver("C", "Smith", 3),
    ])
    assert sorted(d.id for d in roster) == ["smith", "smith-2", "smith-3"]


def test_case_sensitive_name_order():
    roster = build_driver_roster([driver("bob", "Adams", 2), driver("Bob", "Adams", 3)])
    assert [d.full_name for d in roster] == ["Bob Adams", "bob Adams"]


def test_empty_roster():
    assert build_driver_roster([]) == []
