import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from Audit_module.Action_log_crud import record_action
from Archive_module.Archive_crud import get_archive_of_kind, serialize_archive
from Archive_module.Archive_model import BAPTISM
from Common_module.datetime_utils import to_local_isoformat
from Common_module.errors import RecordNotFoundError, RecordValidationError
from Common_module.transaction import atomic
from .Baptism_model import Baptism
from .Baptism_schema import BaptismRequest, REQUIRED_FIELDS

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = tuple(BaptismRequest.model_fields)


def _check_required(req: BaptismRequest) -> None:
    missing = [field for field in REQUIRED_FIELDS if getattr(req, field) is None]
    if missing:
        raise RecordValidationError("Missing required fields", extra={"fields": missing})


def serialize_baptism(baptism: Baptism) -> Dict[str, Any]:
    data = {field: getattr(baptism, field) for field in _EDITABLE_FIELDS}
    data["date_of_birth"] = baptism.date_of_birth.isoformat() if baptism.date_of_birth else None
    data["baptism_date"] = baptism.baptism_date.isoformat() if baptism.baptism_date else None
    data.update({
        "id": baptism.id,
        "archived": baptism.archived,
        "created_at": to_local_isoformat(baptism.created_at),
        "updated_at": to_local_isoformat(baptism.updated_at),
    })
    return data


def list_baptisms(db: Session, search: Optional[str] = None) -> List[Baptism]:
    query = db.query(Baptism).filter(Baptism.archived == False)
    if search and search.strip():
        pattern = f"%{search.strip()}%"
        query = query.filter(or_(
            Baptism.first_name.ilike(pattern),
            Baptism.surname.ilike(pattern),
            Baptism.pastor.ilike(pattern),
        ))
    return query.order_by(Baptism.baptism_date.desc(), Baptism.id.desc()).all()


def find_baptism_record(db: Session, baptism_id: int) -> Dict[str, Any]:
    """Live baptism by id, otherwise an archived baptism with the same id."""
    baptism = db.query(Baptism).filter(Baptism.id == baptism_id).first()
    if baptism:
        return serialize_baptism(baptism)

    archive = get_archive_of_kind(db, baptism_id, BAPTISM)
    if archive:
        record = serialize_archive(archive)
        data = dict(record["details"])
        data.update({"id": record["id"], "archived": True, "archived_date": record["archived_date"]})
        return data

    raise RecordNotFoundError("Baptism not found")


def create_baptism(db: Session, req: BaptismRequest, actor_id: int) -> Baptism:
    _check_required(req)

    with atomic(db, "add_baptism", conflict_message="Baptism already exists"):
        baptism = Baptism(**req.model_dump(), archived=False)
        db.add(baptism)
        db.flush()

        record_action(db, actor_id, "add_baptism", {
            "id": baptism.id,
            "name": f"{baptism.first_name} {baptism.surname}",
            "baptism_date": baptism.baptism_date.isoformat(),
        })

    db.refresh(baptism)
    logger.info(f"Baptism recorded: id={baptism.id}")
    return baptism


def update_baptism(db: Session, baptism_id: int, req: BaptismRequest, actor_id: int) -> Baptism:
    _check_required(req)

    with atomic(db, "update_baptism"):
        baptism = db.query(Baptism).filter(Baptism.id == baptism_id).first()
        if not baptism:
            raise RecordNotFoundError("Baptism record not found")

        changed = []
        for field, value in req.model_dump().items():
            if getattr(baptism, field) != value:
                setattr(baptism, field, value)
                changed.append(field)
        db.flush()

        record_action(db, actor_id, "update_baptism", {
            "baptism_id": baptism_id,
            "changed_fields": changed,
        })

    db.refresh(baptism)
    return baptism
