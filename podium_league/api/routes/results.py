from fastapi import APIRouter, Depends, HTTPException
from podium_league.api.deps import get_loaded_league
from podium_league.schemas.predictions import ResultIn, SubmitResponse
from podium_league.services.errors import (
    PredictionValidationError, PredictionWriteError, UnknownRoundError,
)
from podium_league.services.league import League

router = APIRouter()

@router.put("/results/{round}", response_model=SubmitResponse)
def record_result(round: str, body: ResultIn, league: League = Depends(get_loaded_league)):
    try:
        league.record_result(round, body.podium)
    except UnknownRoundError as e:
        raise HTTPException(404, detail=str(e))
    except PredictionValidationError as e:
        raise HTTPException(400, detail=str(e))
    except PredictionWriteError as e:
        raise HTTPException(502, detail=str(e))
    return {"ok": True, "message": f"Result recorded for round {round}"}
