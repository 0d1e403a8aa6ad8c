"""
Moving members between the live register and the archive.

archive_member:  validate status -> lock register -> snapshot member into the
                 archive -> delete member -> close the palo gap -> log
restore_record:  load archive row -> member kind only -> validate snapshot ->
                 lock register -> insert member under the next palo ->
                 delete archive row -> log

Each runs as one transaction; nothing is kept if any step fails. The action
log entry is written last and its failure never undoes the move.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict

from pydantic import ValidationError
from sqlalchemy.orm import Session

from Audit_module.Action_log_crud import record_action
from Common_module.errors import (
    InvalidSnapshotError,
    InvalidStatusError,
    RecordNotFoundError,
    UnsupportedKindError,
)
from Common_module.transaction import atomic
from Member_module.Member_crud import get_member_by_palo
from Member_module.Member_model import Member
from Member_module.Member_sequence import allocate_next, compact_after_removal, lock_member_sequence
from .Archive_crud import delete_archive, get_archive, insert_archive, next_archive_palo
from .Archive_model import MEMBER
from .Archive_schema import MemberArchiveDetails

logger = logging.getLogger(__name__)

ARCHIVE_STATUSES = ("Moved", "Deceased")


@dataclass(frozen=True)
class ArchiveResult:
    archive_palo: int
    status: str


@dataclass(frozen=True)
class RestoreResult:
    member_id: int
    palo: int
    first_name: str
    surname: str


def _member_snapshot(member: Member, status: str) -> Dict[str, Any]:
    return {
        "first_name": member.first_name,
        "surname": member.surname,
        "status": status,
        "former_palo": member.palo,
        "receipts": dict(member.receipts or {}),
    }


def archive_member(db: Session, palo: int, status: str, actor_id: int) -> ArchiveResult:
    """Retire the member holding ``palo`` and renumber the rest of the register."""
    if status not in ARCHIVE_STATUSES:
        raise InvalidStatusError(
            f"Valid status ({' or '.join(ARCHIVE_STATUSES)}) is required",
            extra={"allowed_statuses": list(ARCHIVE_STATUSES)}
        )

    with atomic(db, "archive_member"):
        lock_member_sequence(db)

        member = get_member_by_palo(db, palo)
        if not member:
            raise RecordNotFoundError("Member not found")

        member_id = member.id
        removed_palo = member.palo
        archive_palo = next_archive_palo(db)
        insert_archive(db, MEMBER, _member_snapshot(member, status), palo=archive_palo)

        db.delete(member)
        db.flush()

        compact_after_removal(db, removed_palo)
        db.flush()

        record_action(db, actor_id, "archive_member", {
            "palo": removed_palo,
            "member_id": member_id,
            "status": status,
            "archive_palo": archive_palo,
        })

    logger.info(f"Member palo={removed_palo} archived as {status} (archive palo {archive_palo})")
    return ArchiveResult(archive_palo=archive_palo, status=status)


def restore_record(db: Session, archive_id: int, actor_id: int) -> RestoreResult:
    """
    Bring an archived member back onto the register.
    The member gets the next free palo, not the one it held before.
    """
    with atomic(db, "restore_member"):
        archive = get_archive(db, archive_id, for_update=True)
        if not archive:
            raise RecordNotFoundError("Archive record not found")

        if archive.record_type != MEMBER:
            raise UnsupportedKindError(
                "Only member records can be restored",
                extra={"record_type": archive.record_type}
            )

        try:
            details = MemberArchiveDetails.model_validate(archive.details or {})
        except ValidationError:
            raise InvalidSnapshotError("Invalid archive data: unreadable member snapshot")
        if not details.first_name or not details.surname:
            raise InvalidSnapshotError("Invalid archive data: missing first name or surname")

        lock_member_sequence(db)
        member = Member(
            palo=allocate_next(db),
            first_name=details.first_name,
            surname=details.surname,
            receipts=dict(details.receipts),
        )
        db.add(member)
        db.flush()

        delete_archive(db, archive)

        record_action(db, actor_id, "restore_member", {
            "archive_id": archive_id,
            "palo": member.palo,
            "first_name": member.first_name,
            "surname": member.surname,
        })

        result = RestoreResult(
            member_id=member.id,
            palo=member.palo,
            first_name=member.first_name,
            surname=member.surname,
        )

    logger.info(f"Archive {archive_id} restored as member palo={result.palo}")
    return result
