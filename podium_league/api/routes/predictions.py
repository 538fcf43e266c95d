from fastapi import APIRouter, Depends, HTTPException
from podium_league.api.deps import get_loaded_league
from podium_league.schemas.predictions import (
    PredictionIn, RoundPredictions, StoredPrediction, SubmitResponse,
)
from podium_league.services.errors import (
    PredictionLockedError, PredictionValidationError, PredictionWriteError, UnknownUserError,
)
from podium_league.services.league import League

router = APIRouter()

@router.get("/predictions/{round}", response_model=RoundPredictions)
def round_predictions(round: str, league: League = Depends(get_loaded_league)):
    return {"round": round, "predictions": league.round_predictions(round)}

@router.get("/predictions/{round}/{user}", response_model=StoredPrediction)
def user_prediction(round: str, user: str, league: League = Depends(get_loaded_league)):
    pick = league.user_prediction(round, user)
    if pick is None:
        raise HTTPException(404, detail=f"{user} has not voted for round {round}")
    return pick

@router.post("/predictions", response_model=SubmitResponse)
def submit(body: PredictionIn, league: League = Depends(get_loaded_league)):
    try:
        round_label = league.submit_prediction(body.user, body)
    except UnknownUserError as e:
        raise HTTPException(404, detail=str(e))
    except PredictionLockedError as e:
        raise HTTPException(409, detail=str(e))
    except PredictionValidationError as e:
        raise HTTPException(400, detail=str(e))
    except PredictionWriteError as e:
        raise HTTPException(502, detail=f"Error submitting vote: {e}")
    return {"ok": True, "message": f"Vote submitted successfully for round {round_label}!"}
