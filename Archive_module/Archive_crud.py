"""
Archive store: insert, look up, search and delete archived records.
"""
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from sqlalchemy import String, cast, func, or_
from sqlalchemy.orm import Session

from Common_module.Sequence_counter_model import ARCHIVE_SEQUENCE, lock_counter
from Common_module.datetime_utils import to_local_isoformat
from .Archive_model import Archive, MEMBER
from .Archive_schema import archived_record_adapter

logger = logging.getLogger(__name__)


def next_archive_palo(db: Session) -> int:
    """
    Next archive register number.
    Locks the archive counter for the rest of the transaction. The counter
    keeps its high-water mark, so numbers freed by a restore are not reused.
    """
    counter = lock_counter(db, ARCHIVE_SEQUENCE)
    current_max = (
        db.query(func.max(Archive.palo))
        .filter(Archive.record_type == MEMBER)
        .scalar()
    )
    next_palo = max(counter.last_value or 0, current_max or 0) + 1
    counter.last_value = next_palo
    return next_palo


def insert_archive(
    db: Session,
    record_type: str,
    details: Dict[str, Any],
    palo: Optional[int] = None
) -> Archive:
    archive = Archive(record_type=record_type, details=details, palo=palo)
    db.add(archive)
    db.flush()
    return archive


def get_archive(db: Session, archive_id: int, for_update: bool = False) -> Optional[Archive]:
    query = db.query(Archive).filter(Archive.id == archive_id)
    if for_update:
        query = query.with_for_update()
    return query.first()


def get_archive_of_kind(db: Session, archive_id: int, record_type: str) -> Optional[Archive]:
    return db.query(Archive).filter(
        Archive.id == archive_id,
        Archive.record_type == record_type
    ).first()


def get_member_archive_by_palo(db: Session, palo: int) -> Optional[Archive]:
    return db.query(Archive).filter(
        Archive.palo == palo,
        Archive.record_type == MEMBER
    ).first()


def list_archives(db: Session, search: Optional[str] = None) -> List[Archive]:
    """
    Archived records, newest first.
    ``search`` is a case-insensitive substring match on the record type,
    the serialized snapshot and the archive palo.
    """
    query = db.query(Archive)
    if search and search.strip():
        pattern = f"%{search.strip()}%"
        query = query.filter(or_(
            Archive.record_type.ilike(pattern),
            cast(Archive.details, String).ilike(pattern),
            cast(Archive.palo, String).ilike(pattern),
        ))
    return query.order_by(Archive.archived_date.desc(), Archive.id.desc()).all()


def delete_archive(db: Session, archive: Archive) -> None:
    db.delete(archive)
    db.flush()


def serialize_archive(archive: Archive) -> Dict[str, Any]:
    """Decode a row into its record-type variant for API responses."""
    raw = {
        "id": archive.id,
        "record_type": archive.record_type,
        "palo": archive.palo,
        "archived_date": archive.archived_date,
        "details": archive.details or {},
    }
    try:
        record = archived_record_adapter.validate_python(raw)
    except ValidationError as e:
        # Unknown kind or malformed snapshot: show it as stored
        logger.warning(f"Archive {archive.id} could not be decoded as '{archive.record_type}': {e}")
        raw["archived_date"] = to_local_isoformat(archive.archived_date)
        return raw

    data = record.model_dump()
    data["archived_date"] = to_local_isoformat(record.archived_date)
    return data
