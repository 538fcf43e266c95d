from sqlalchemy import Column, String, DateTime, JSON, func
from podium_league.db.base import Base


class LeagueDocument(Base):
    """One whole JSON document per name ("predictions", "results")."""
    __tablename__ = "league_documents"
    name = Column(String, primary_key=True)
    payload = Column(JSON, nullable=False, default=dict)
    updated_at = Column(DateTime(timezone=True), nullable=False,
                        server_default=func.now(), onupdate=func.now())
