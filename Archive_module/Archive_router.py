from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from deps import get_db
from Auth_module.auth_user import Actor
from Auth_module.permissions import VIEW, ARCHIVE, require_permission
from Common_module.errors import RecordNotFoundError
from .Archive_crud import list_archives, get_archive, serialize_archive
from .Archive_service import restore_record

router = APIRouter(prefix="/api/archives", tags=["Archive"])


@router.get("")
def list_archives_api(
    search: Optional[str] = Query(None, description="Match on record type, snapshot contents or archive palo"),
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(VIEW))
):
    archives = list_archives(db, search)
    return {
        "status": "success",
        "count": len(archives),
        "data": [serialize_archive(archive) for archive in archives]
    }


@router.get("/{archive_id}")
def get_archive_api(
    archive_id: int,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(VIEW))
):
    archive = get_archive(db, archive_id)
    if not archive:
        raise RecordNotFoundError("Archive record not found")
    return {
        "status": "success",
        "data": serialize_archive(archive)
    }


@router.put("/{archive_id}/restore")
def restore_archive_api(
    archive_id: int,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(ARCHIVE))
):
    result = restore_record(db, archive_id, actor.user_id)
    return {
        "status": "success",
        "message": "Record restored successfully",
        "data": {
            "id": result.member_id,
            "palo": result.palo,
            "first_name": result.first_name,
            "surname": result.surname
        }
    }
