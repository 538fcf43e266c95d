from typing import Dict, List, Optional
from pydantic import BaseModel, Field


class PodiumPick(BaseModel):
    first: Optional[str] = None
    second: Optional[str] = None
    third: Optional[str] = None

    def slots(self) -> List[Optional[str]]:
        return [self.first, self.second, self.third]


class PredictionIn(PodiumPick):
    user: str


class StoredPrediction(BaseModel):
    first: str
    second: str
    third: str
    timestamp: Optional[str] = None


class RoundPredictions(BaseModel):
    round: str
    predictions: Dict[str, StoredPrediction]


class SubmitResponse(BaseModel):
    ok: bool
    message: str


class ResultIn(BaseModel):
    podium: List[str] = Field(..., min_length=3, max_length=3)
