"""Raw OpenF1 records, as returned by the meetings / sessions / drivers endpoints."""
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


class MeetingRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    meeting_key: int
    meeting_name: str
    circuit_short_name: Optional[str] = None
    location: Optional[str] = None
    country_name: Optional[str] = None

    @property
    def circuit(self) -> Optional[str]:
        return self.circuit_short_name or self.location


class SessionRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    session_key: int
    meeting_key: int
    session_name: Optional[str] = None
    date_start: datetime

    @field_validator("date_start")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        # OpenF1 sends offsets; anything naive is UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class DriverRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    first_name: str
    last_name: str
    name_acronym: Optional[str] = None
    driver_number: int
    team_name: Optional[str] = None
