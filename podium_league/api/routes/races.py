from fastapi import APIRouter, Depends, HTTPException
from typing import List
from podium_league.api.deps import get_loaded_league
from podium_league.schemas.races import CalendarEntry, Driver, NextRace, SeasonProgress
from podium_league.schemas.stats import RoundBest
from podium_league.services.errors import UnknownRoundError
from podium_league.services.league import League

router = APIRouter()

@router.get("/races", response_model=List[CalendarEntry])
def calendar(league: League = Depends(get_loaded_league)):
    return league.calendar

@router.get("/races/next", response_model=NextRace)
def next_race(league: League = Depends(get_loaded_league)):
    race = league.next_race()
    if race is None:
        raise HTTPException(404, "No races on the calendar")
    return {"race": race, "locked": league.is_locked()}

@router.get("/races/progress", response_model=SeasonProgress)
def progress(league: League = Depends(get_loaded_league)):
    return league.season_progress()

@router.get("/races/{round}/best", response_model=RoundBest)
def round_best(round: str, league: League = Depends(get_loaded_league)):
    try:
        league.race(round)
    except UnknownRoundError as e:
        raise HTTPException(404, detail=str(e))
    best = league.round_best(round)
    if best is None:
        raise HTTPException(404, detail=f"Round {round} has no scored predictions yet")
    return best

@router.get("/drivers", response_model=List[Driver])
def drivers(league: League = Depends(get_loaded_league)):
    return league.drivers
