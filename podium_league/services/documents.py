"""
Whole-document record store on top of SQLAlchemy.

Two documents live here: "predictions" and "results". Writes replace the
entire document (last write wins) and are pushed to subscribers once the
transaction has committed.
"""
import copy
import logging
import threading
from collections import defaultdict
from typing import Callable, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from podium_league.models.league import LeagueDocument
from podium_league.services.errors import PredictionWriteError

logger = logging.getLogger(__name__)

PREDICTIONS = "predictions"
RESULTS = "results"

Listener = Callable[[dict], None]


class DocumentRepository:
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
        self._listeners: Dict[str, List[Listener]] = defaultdict(list)
        self._lock = threading.Lock()
        self._write_locks: Dict[str, threading.Lock] = {}

    def get(self, name: str) -> dict:
        """Point lookup; a missing document reads as empty."""
        with self.session_factory() as db:
            doc = db.get(LeagueDocument, name)
            return copy.deepcopy(doc.payload) if doc and doc.payload else {}

    def set(self, name: str, payload: dict) -> None:
        """Replace the whole document, then notify subscribers.

        Commit and push happen under one per-document lock, so subscribers
        always end up holding the last committed value.
        """
        with self._write_lock(name):
            try:
                with self.session_factory() as db:
                    doc = db.get(LeagueDocument, name)
                    if doc is None:
                        db.add(LeagueDocument(name=name, payload=payload))
                    else:
                        doc.payload = payload
                    db.commit()
            except SQLAlchemyError as e:
                logger.error("Writing document %s failed: %s", name, e)
                raise PredictionWriteError(str(e)) from e

            for listener in self._subscribers(name):
                try:
                    listener(copy.deepcopy(payload))
                except Exception:
                    # the write is committed; a failing subscriber does not undo it
                    logger.exception("Subscriber of document %s failed", name)

    def subscribe(self, name: str, listener: Listener) -> Callable[[], None]:
        """Register a push listener; it receives the current value immediately."""
        with self._write_lock(name):
            with self._lock:
                self._listeners[name].append(listener)
            listener(self.get(name))

        def unsubscribe():
            with self._lock:
                if listener in self._listeners[name]:
                    self._listeners[name].remove(listener)
        return unsubscribe

    def _write_lock(self, name: str) -> threading.Lock:
        with self._lock:
            return self._write_locks.setdefault(name, threading.Lock())

    def _subscribers(self, name: str) -> List[Listener]:
        with self._lock:
            return list(self._listeners[name])
