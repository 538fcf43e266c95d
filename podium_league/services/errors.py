"""Exception types raised by the league services."""
from typing import Optional


class LeagueError(Exception):
    """Base class for every error the league services raise."""


class OpenF1Error(LeagueError):
    """An OpenF1 request failed (non-2xx status, exhausted retries or transport error)."""

    def __init__(self, endpoint: str, status: Optional[int] = None, detail: Optional[str] = None):
        self.endpoint = endpoint
        self.status = status
        if status is not None:
            message = f"{endpoint} API: {status}"
        else:
            message = f"{endpoint} API: {detail or 'request failed'}"
        super().__init__(message)


class ScheduleLoadError(LeagueError):
    """The schedule load sequence failed; nothing from it was kept."""


class UnknownRoundError(LeagueError):
    pass


class PredictionRejected(LeagueError):
    """A submission was refused before anything was written."""


class PredictionValidationError(PredictionRejected):
    pass


class PredictionLockedError(PredictionRejected):
    pass


class UnknownUserError(PredictionRejected):
    pass


class PredictionWriteError(LeagueError):
    """The record store refused or failed the write."""
