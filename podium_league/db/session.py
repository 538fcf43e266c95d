# podium_league/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from podium_league.core.config import settings


def make_engine(url: str):
    # SQLite connections are shared across the request thread pool
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, future=True, echo=False, connect_args=connect_args)


engine = make_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Dependency for FastAPI
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
