from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from deps import get_db
from Auth_module.auth_user import Actor
from Auth_module.permissions import VIEW, ADD, UPDATE, ARCHIVE, require_permission
from Archive_module.Archive_schema import ArchiveMemberRequest
from Archive_module.Archive_service import archive_member
from .Member_schema import MemberRequest, ReceiptRequest
from .Member_crud import (
    list_members, find_member_record, create_member, update_member, update_receipt, serialize_member
)

router = APIRouter(prefix="/api/members", tags=["Member"])


@router.get("")
def list_members_api(
    search: Optional[str] = Query(None, description="Match on name or palo"),
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(VIEW))
):
    members = list_members(db, search)
    return {
        "status": "success",
        "count": len(members),
        "data": [serialize_member(member) for member in members]
    }


@router.post("", status_code=status.HTTP_201_CREATED)
def create_member_api(
    req: MemberRequest,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(ADD))
):
    member = create_member(db, req.first_name, req.surname, actor.user_id)
    return {
        "status": "success",
        "message": "Member registered successfully",
        "data": serialize_member(member)
    }


@router.get("/{palo}")
def get_member_api(
    palo: int,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(VIEW))
):
    """Live member by palo; falls back to the archived member with that archive palo."""
    return {
        "status": "success",
        "data": find_member_record(db, palo)
    }


@router.put("/{palo}")
def update_member_api(
    palo: int,
    req: MemberRequest,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(UPDATE))
):
    member = update_member(db, palo, req.first_name, req.surname, actor.user_id)
    return {
        "status": "success",
        "message": "Member updated successfully",
        "data": serialize_member(member)
    }


@router.put("/{palo}/receipt")
def update_receipt_api(
    palo: int,
    req: ReceiptRequest,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(UPDATE))
):
    member = update_receipt(db, palo, req.year, req.receipt, actor.user_id)
    return {
        "status": "success",
        "message": "Receipt updated successfully",
        "data": serialize_member(member)
    }


@router.put("/{palo}/archive")
def archive_member_api(
    palo: int,
    req: ArchiveMemberRequest,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(ARCHIVE))
):
    """Move a member to the archive as Moved or Deceased; the register closes the gap."""
    result = archive_member(db, palo, req.status, actor.user_id)
    return {
        "status": "success",
        "message": f"Member archived as {result.status}",
        "data": {
            "archive_palo": result.archive_palo,
            "status": result.status
        }
    }
