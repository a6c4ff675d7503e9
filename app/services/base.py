import logging
from contextlib import contextmanager

from sqlalchemy.orm import Session

from app.database import db_lock


class BaseService:
    """
    Common plumbing for services: the owned session, a per-class logger,
    and the serialized write transaction.
    """

    def __init__(self, db: Session):
        self.db = db
        self._logger = logging.getLogger(self.__class__.__module__)

    def log_info(self, message: str, **extra):
        self._logger.info(message, extra=extra or None)

    def log_warning(self, message: str, **extra):
        self._logger.warning(message, extra=extra or None)

    @contextmanager
    def write_transaction(self):
        """
        Run a mutation under the process-wide write lock.
        Commits on success; any exception rolls back so no partial write survives.
        """
        with db_lock:
            try:
                yield self.db
                self.db.commit()
            except Exception:
                self.db.rollback()
                raise
