import logging
import sys

from podium_league.core.config import settings
from podium_league.services.calendar import build_race_calendar
from podium_league.services.errors import ScheduleLoadError
from podium_league.services.openf1 import ScheduleLoader
from podium_league.services.roster import build_driver_roster

logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


def show_calendar(season: int) -> int:
    try:
        data = ScheduleLoader(season=season).load()
    except ScheduleLoadError as e:
        print(f"❗ Could not load the {season} schedule: {e}")
        return 1

    calendar = build_race_calendar(data.meetings, data.race_sessions, data.qualifying_sessions)
    print(f"{season} calendar ({len(calendar)} races)")
    for race in calendar:
        quali = race.qualifying_start.isoformat() if race.qualifying_start else "-"
        print(f"  R{race.round:>2}  {race.race_start:%Y-%m-%d %H:%M}  {race.name} "
              f"({race.circuit}, {race.country})  quali: {quali}")

    drivers = build_driver_roster(data.drivers)
    print(f"\nDrivers ({len(drivers)})")
    for d in drivers:
        print(f"  {d.id:<16} {d.code or '':<4} #{d.number:<3} {d.full_name} ({d.team})")
    return 0


if __name__ == "__main__":
    season = int(sys.argv[1]) if len(sys.argv) > 1 else settings.season
    sys.exit(show_calendar(season))
