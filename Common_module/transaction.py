import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from .errors import ConflictError, StorageFault

logger = logging.getLogger(__name__)


@contextmanager
def atomic(db: Session, operation: str, conflict_message: Optional[str] = None) -> Iterator[Session]:
    """
    Run a block as one all-or-nothing unit of work.

    Commits when the block finishes. Any exception rolls back every staged
    change; database errors are logged here and re-raised as StorageFault
    (or ConflictError for integrity violations when ``conflict_message`` is
    given) so driver details never reach the client.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if conflict_message:
            logger.warning(f"Integrity conflict during {operation}: {e.orig}")
            raise ConflictError(conflict_message) from e
        logger.error(f"Integrity error during {operation}: {e}", exc_info=True)
        raise StorageFault() from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database error during {operation}: {e}", exc_info=True)
        raise StorageFault() from e
    except Exception:
        db.rollback()
        raise
