"""
Receipt stores: identifier → points, insert-once.

``MemoryReceiptStore`` lives for the process lifetime; ``SqlReceiptStore``
keeps the same contract on top of a SQLAlchemy table.
"""
from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod

from sqlalchemy.exc import IntegrityError

from app.config import Settings
from app.database import Base, make_engine, make_session_factory
from app.models import ScoredReceiptModel
from app.pipeline.errors import ReceiptNotFound

logger = logging.getLogger(__name__)


class ReceiptStore(ABC):
    """Mapping from receipt id to points. Entries are never updated or deleted."""

    @abstractmethod
    def put_if_absent(self, receipt_id: str, points: int) -> bool:
        """Store ``points`` unless ``receipt_id`` exists; return whether it was inserted."""

    @abstractmethod
    def get(self, receipt_id: str) -> int:
        """Return the stored points or raise ``ReceiptNotFound``."""

    def __contains__(self, receipt_id: str) -> bool:
        try:
            self.get(receipt_id)
        except ReceiptNotFound:
            return False
        return True


class MemoryReceiptStore(ReceiptStore):
    def __init__(self):
        self._points: dict[str, int] = {}
        self._lock = threading.Lock()

    def put_if_absent(self, receipt_id: str, points: int) -> bool:
        with self._lock:
            if receipt_id in self._points:
                return False
            self._points[receipt_id] = points
            return True

    def get(self, receipt_id: str) -> int:
        with self._lock:
            try:
                return self._points[receipt_id]
            except KeyError:
                raise ReceiptNotFound(receipt_id) from None

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)


class SqlReceiptStore(ReceiptStore):
    """Store backed by the ``scored_receipts`` table.

    The primary key on ``id`` makes concurrent inserts of the same receipt
    resolve to a single winner.
    """

    def __init__(self, session_factory):
        self._session_factory = session_factory

    def put_if_absent(self, receipt_id: str, points: int) -> bool:
        db = self._session_factory()
        try:
            if db.get(ScoredReceiptModel, receipt_id) is not None:
                return False
            db.add(ScoredReceiptModel(id=receipt_id, points=points))
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                logger.info("Receipt %s was stored concurrently", receipt_id)
                return False
            return True
        finally:
            db.close()

    def get(self, receipt_id: str) -> int:
        db = self._session_factory()
        try:
            row = db.get(ScoredReceiptModel, receipt_id)
            if row is None:
                raise ReceiptNotFound(receipt_id)
            return row.points
        finally:
            db.close()


def build_store(config: Settings) -> ReceiptStore:
    """Create the store selected by ``RECEIPT_STORE``."""
    backend = config.RECEIPT_STORE.lower()
    if backend == "memory":
        return MemoryReceiptStore()
    if backend == "sql":
        engine = make_engine(config.DATABASE_URL, echo=config.DEBUG)
        Base.metadata.create_all(bind=engine)
        logger.info("SQL receipt store ready: %s", config.DATABASE_URL)
        return SqlReceiptStore(make_session_factory(engine))
    raise ValueError(f"Unknown RECEIPT_STORE: {config.RECEIPT_STORE!r}")
