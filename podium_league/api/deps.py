from functools import lru_cache

from fastapi import Depends, HTTPException

from podium_league.db.session import SessionLocal
from podium_league.services.documents import DocumentRepository
from podium_league.services.errors import ScheduleLoadError
from podium_league.services.league import League


@lru_cache(maxsize=1)
def get_league() -> League:
    return League(DocumentRepository(SessionLocal))


def get_loaded_league(league: League = Depends(get_league)) -> League:
    """The league, loading the schedule on first use. Load errors surface as 503."""
    if not league.loaded:
        try:
            league.load()
        except ScheduleLoadError as e:
            raise HTTPException(503, detail=f"Failed to load F1 data: {e}")
    return league
