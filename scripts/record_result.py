"""
Record the official podium for a round.

    python scripts/record_result.py 3 verstappen norris leclerc
"""
import logging
import sys

from podium_league.core.config import settings
from podium_league.db.session import SessionLocal
from podium_league.services.documents import DocumentRepository
from podium_league.services.errors import LeagueError
from podium_league.services.league import League

logging.basicConfig(level=settings.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")


def main(argv) -> int:
    if len(argv) != 4:
        print("usage: record_result.py ROUND FIRST SECOND THIRD")
        return 2
    round_label, podium = argv[0], argv[1:]

    league = League(DocumentRepository(SessionLocal))
    try:
        league.load()
        league.record_result(round_label, podium)
    except LeagueError as e:
        print(f"❗ Round {round_label}: {e}")
        return 1

    print(f"✅ Round {round_label}: {', '.join(podium)}")
    for i, entry in enumerate(league.snapshot.leaderboard, start=1):
        print(f"   {i}. {entry.user:<10} {entry.score} pts")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
