import logging

from fastapi import FastAPI
from podium_league.api.routes import health, races, predictions, results, stats, schedule
from podium_league.core.config import settings
from podium_league.db.base import Base
from podium_league.db.session import engine
import podium_league.models.league  # ensure models are registered

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Local SQLite databases are created in place; Postgres goes through alembic
if settings.database_url.startswith("sqlite"):
    Base.metadata.create_all(bind=engine)

app = FastAPI(title="F1 Podium League API", version="0.1.0")

# Routers
app.include_router(health.router, tags=["system"])
app.include_router(schedule.router, tags=["system"])
app.include_router(races.router, tags=["races"])
app.include_router(predictions.router, tags=["predictions"])
app.include_router(results.router, tags=["results"])
app.include_router(stats.router, prefix="/stats", tags=["stats"])

@app.get("/", include_in_schema=False)
def root():
    return {"message": "F1 Podium League API - see /docs"}
