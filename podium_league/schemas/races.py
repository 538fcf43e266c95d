from datetime import datetime
from pydantic import BaseModel
from typing import Optional


class CalendarEntry(BaseModel):
    round: str                # display label, "1".."N"
    round_number: int         # numeric sort key for the same round
    name: str
    circuit: Optional[str] = None
    country: Optional[str] = None
    race_start: datetime
    qualifying_start: Optional[datetime] = None
    meeting_key: int


class Driver(BaseModel):
    id: str
    full_name: str
    code: Optional[str] = None
    number: int
    team: Optional[str] = None


class NextRace(BaseModel):
    race: CalendarEntry
    locked: bool


class SeasonProgress(BaseModel):
    completed: int
    total: int
