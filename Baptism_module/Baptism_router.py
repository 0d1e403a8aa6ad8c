from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from deps import get_db
from Auth_module.auth_user import Actor
from Auth_module.permissions import VIEW, ADD, UPDATE, require_permission
from .Baptism_schema import BaptismRequest
from .Baptism_crud import (
    list_baptisms, find_baptism_record, create_baptism, update_baptism, serialize_baptism
)

router = APIRouter(prefix="/api/baptisms", tags=["Baptism"])


@router.get("")
def list_baptisms_api(
    search: Optional[str] = Query(None, description="Match on child's name or pastor"),
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(VIEW))
):
    baptisms = list_baptisms(db, search)
    return {
        "status": "success",
        "count": len(baptisms),
        "data": [serialize_baptism(baptism) for baptism in baptisms]
    }


@router.post("", status_code=status.HTTP_201_CREATED)
def create_baptism_api(
    req: BaptismRequest,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(ADD))
):
    baptism = create_baptism(db, req, actor.user_id)
    return {
        "status": "success",
        "message": "Baptism recorded successfully",
        "data": serialize_baptism(baptism)
    }


@router.get("/{baptism_id}")
def get_baptism_api(
    baptism_id: int,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(VIEW))
):
    return {
        "status": "success",
        "data": find_baptism_record(db, baptism_id)
    }


@router.put("/{baptism_id}")
def update_baptism_api(
    baptism_id: int,
    req: BaptismRequest,
    db: Session = Depends(get_db),
    actor: Actor = Depends(require_permission(UPDATE))
):
    baptism = update_baptism(db, baptism_id, req, actor.user_id)
    return {
        "status": "success",
        "message": "Baptism record updated successfully",
        "data": serialize_baptism(baptism)
    }
