from fastapi import APIRouter, Depends, HTTPException
from podium_league.api.deps import get_league
from podium_league.schemas.races import SeasonProgress
from podium_league.services.errors import ScheduleLoadError
from podium_league.services.league import League

router = APIRouter()

@router.post("/schedule/reload", response_model=SeasonProgress)
def reload_schedule(league: League = Depends(get_league)):
    try:
        league.load()
    except ScheduleLoadError as e:
        raise HTTPException(503, detail=f"Failed to load F1 data: {e}")
    return league.season_progress()
