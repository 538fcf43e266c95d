from typing import List

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    env: str = "dev"
    database_url: str = "sqlite:///./podium_league.db"
    openf1_url: str = "https://api.openf1.org/v1"
    season: int = 2026
    http_timeout: float = 20.0
    max_retries: int = 4
    retry_backoff_ms: int = 1000
    league_users: str = "Robert,Johan,Fredrik,Klas"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = ""
        case_sensitive = False

    @property
    def users(self) -> List[str]:
        return [u.strip() for u in self.league_users.split(",") if u.strip()]

settings = Settings()
