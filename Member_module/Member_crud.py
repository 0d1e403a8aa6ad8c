import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import String, cast, or_
from sqlalchemy.orm import Session

from config import settings
from Audit_module.Action_log_crud import record_action
from Common_module.datetime_utils import to_local_isoformat
from Common_module.errors import RecordNotFoundError, RecordValidationError
from Common_module.transaction import atomic
from Archive_module.Archive_crud import get_member_archive_by_palo, serialize_archive
from .Member_model import Member
from .Member_sequence import lock_member_sequence, allocate_next

logger = logging.getLogger(__name__)


def serialize_member(member: Member) -> Dict[str, Any]:
    return {
        "id": member.id,
        "palo": member.palo,
        "first_name": member.first_name,
        "surname": member.surname,
        "receipts": dict(member.receipts or {}),
        "created_at": to_local_isoformat(member.created_at),
    }


def get_member_by_palo(db: Session, palo: int) -> Optional[Member]:
    return db.query(Member).filter(Member.palo == palo).first()


def list_members(db: Session, search: Optional[str] = None) -> List[Member]:
    """Active members in register order, optionally filtered by name or palo."""
    query = db.query(Member)
    if search and search.strip():
        pattern = f"%{search.strip()}%"
        query = query.filter(or_(
            Member.first_name.ilike(pattern),
            Member.surname.ilike(pattern),
            cast(Member.palo, String).ilike(pattern),
        ))
    return query.order_by(Member.palo.asc()).all()


def find_member_record(db: Session, palo: int) -> Dict[str, Any]:
    """
    Live member with this palo, otherwise the archived member holding that
    archive palo (flagged ``archived``).
    """
    member = get_member_by_palo(db, palo)
    if member:
        data = serialize_member(member)
        data["archived"] = False
        return data

    archive = get_member_archive_by_palo(db, palo)
    if archive:
        record = serialize_archive(archive)
        data = dict(record["details"])
        data.update({
            "id": record["id"],
            "palo": record["palo"],
            "archived": True,
            "archived_date": record["archived_date"],
        })
        return data

    raise RecordNotFoundError("Member not found")


def create_member(db: Session, first_name: str, surname: str, actor_id: int) -> Member:
    """Register a member under the next free palo."""
    with atomic(db, "add_member", conflict_message="Member already exists with this palo"):
        lock_member_sequence(db)
        member = Member(palo=allocate_next(db), first_name=first_name, surname=surname, receipts={})
        db.add(member)
        db.flush()

        record_action(db, actor_id, "add_member", {
            "id": member.id,
            "palo": member.palo,
            "first_name": member.first_name,
            "surname": member.surname,
        })

    db.refresh(member)
    logger.info(f"Member added: palo={member.palo} id={member.id}")
    return member


def update_member(db: Session, palo: int, first_name: str, surname: str, actor_id: int) -> Member:
    with atomic(db, "update_member"):
        member = get_member_by_palo(db, palo)
        if not member:
            raise RecordNotFoundError("Member not found")

        member.first_name = first_name
        member.surname = surname
        db.flush()

        record_action(db, actor_id, "update_member", {
            "palo": palo,
            "first_name": first_name,
            "surname": surname,
        })

    db.refresh(member)
    return member


def update_receipt(db: Session, palo: int, year: str, receipt: Optional[str], actor_id: int) -> Member:
    """Set or clear (``receipt`` empty) the receipt number for one year."""
    valid_years = settings.receipt_years
    if year not in valid_years:
        raise RecordValidationError(
            f"Valid year ({valid_years[0]}-{valid_years[-1]}) is required",
            extra={"valid_years": valid_years}
        )
    if receipt and len(receipt) > settings.RECEIPT_MAX_LENGTH:
        raise RecordValidationError(
            f"Receipt number too long (max {settings.RECEIPT_MAX_LENGTH} characters)"
        )

    with atomic(db, "update_receipt"):
        member = get_member_by_palo(db, palo)
        if not member:
            raise RecordNotFoundError("Member not found")

        # Reassign so the JSON column is flagged dirty
        receipts = dict(member.receipts or {})
        receipts[year] = receipt
        member.receipts = receipts
        db.flush()

        record_action(db, actor_id, "update_receipt", {
            "palo": palo,
            "year": year,
            "receipt": receipt,
            "member_id": member.id,
        })

    db.refresh(member)
    return member
