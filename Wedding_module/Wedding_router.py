from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from deps import get_db
from Auth_module.auth_user import Actor
from Auth_module.permissions import VIEW, ADD, UPDATE, require_permission
from .Wedding_schema import WeddingRequest
from .Wedding_crud import (
    list_weddings, find_wedding_record, create_wedding, update_wedding, serialize_wedding
)

router = APIRouter(prefix="/api/weddings", tags=["Wedding"])


@router.get("")
def list_weddings_api(
    search: Optional[str] = Query(None, description="Match on couple, pastor or location"),
    show_archived: bool = Query(False, description="Include archived weddings"),
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(VIEW))
):
    weddings = list_weddings(db, search, show_archived)
    return {
        "status": "success",
        "count": len(weddings),
        "data": [serialize_wedding(wedding) for wedding in weddings]
    }


@router.post("", status_code=status.HTTP_201_CREATED)
def create_wedding_api(
    req: WeddingRequest,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(ADD))
):
    wedding = create_wedding(db, req, actor.user_id)
    return {
        "status": "success",
        "message": "Wedding recorded successfully",
        "data": serialize_wedding(wedding)
    }


@router.get("/{wedding_id}")
def get_wedding_api(
    wedding_id: int,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(VIEW))
):
    return {
        "status": "success",
        "data": find_wedding_record(db, wedding_id)
    }


@router.put("/{wedding_id}")
def update_wedding_api(
    wedding_id: int,
    req: WeddingRequest,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(UPDATE))
):
    wedding = update_wedding(db, wedding_id, req, actor.user_id)
    return {
        "status": "success",
        "message": "Wedding record updated successfully",
        "data": serialize_wedding(wedding)
    }
