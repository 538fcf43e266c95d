from typing import Dict, List
from pydantic import BaseModel


class LeaderboardEntry(BaseModel):
    user: str
    score: int


class RoundBest(BaseModel):
    round: str
    users: List[str]
    score: int


class ChartPoint(BaseModel):
    round: str                # "R<n>"
    round_number: int
    scores: Dict[str, int]    # cumulative, only users who predicted this round


class LeaderboardResponse(BaseModel):
    season: int
    count: int
    entries: List[LeaderboardEntry]
