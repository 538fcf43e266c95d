from typing import Iterable, List, Set

from podium_league.schemas.openf1 import DriverRecord
from podium_league.schemas.races import Driver
from podium_league.services.records import parse_records


def build_driver_roster(records: Iterable) -> List[Driver]:
    """
    Normalize raw driver rows into stable ids.

    The id is the lowercased surname. Every later driver sharing a surname
    gets "-<number>" appended, so fetch order decides who keeps the bare id.
    """
    seen: Set[str] = set()
    drivers: List[Driver] = []
    for d in parse_records(DriverRecord, records):
        surname = d.last_name.lower()
        driver_id = f"{surname}-{d.driver_number}" if surname in seen else surname
        seen.add(surname)
        drivers.append(Driver(
            id=driver_id,
            full_name=f"{d.first_name} {d.last_name}",
            code=d.name_acronym,
            number=d.driver_number,
            team=d.team_name,
        ))
    drivers.sort(key=lambda d: d.full_name)
    return drivers
