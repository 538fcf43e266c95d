from fastapi import APIRouter, Depends
from typing import List
from podium_league.api.deps import get_loaded_league
from podium_league.core.config import settings
from podium_league.schemas.stats import ChartPoint, LeaderboardResponse
from podium_league.services.league import League

router = APIRouter()

@router.get("/leaderboard", response_model=LeaderboardResponse)
def leaderboard(league: League = Depends(get_loaded_league)):
    """
    League standings, ordered by total score (then username).
    """
    entries = league.snapshot.leaderboard
    return {"season": settings.season, "count": len(entries), "entries": entries}

@router.get("/series", response_model=List[ChartPoint])
def series(league: League = Depends(get_loaded_league)):
    return league.snapshot.series
