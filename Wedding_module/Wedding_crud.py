import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from Audit_module.Action_log_crud import record_action
from Archive_module.Archive_crud import get_archive_of_kind, serialize_archive
from Archive_module.Archive_model import WEDDING
from Common_module.datetime_utils import to_local_isoformat
from Common_module.errors import RecordNotFoundError, RecordValidationError
from Common_module.transaction import atomic
from .Wedding_model import Wedding
from .Wedding_schema import WeddingRequest, REQUIRED_FIELDS

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = tuple(WeddingRequest.model_fields)


def _check_required(req: WeddingRequest) -> None:
    missing = [field for field in REQUIRED_FIELDS if getattr(req, field) is None]
    if missing:
        raise RecordValidationError("Missing required fields", extra={"fields": missing})


def serialize_wedding(wedding: Wedding) -> Dict[str, Any]:
    data = {field: getattr(wedding, field) for field in _EDITABLE_FIELDS}
    data["wedding_date"] = wedding.wedding_date.isoformat() if wedding.wedding_date else None
    data.update({
        "id": wedding.id,
        "archived": wedding.archived,
        "created_at": to_local_isoformat(wedding.created_at),
        "updated_at": to_local_isoformat(wedding.updated_at),
    })
    return data


def list_weddings(db: Session, search: Optional[str] = None, show_archived: bool = False) -> List[Wedding]:
    query = db.query(Wedding)
    if not show_archived:
        query = query.filter(Wedding.archived == False)
    if search and search.strip():
        pattern = f"%{search.strip()}%"
        query = query.filter(or_(
            Wedding.groom_first_name.ilike(pattern),
            Wedding.groom_surname.ilike(pattern),
            Wedding.bride_first_name.ilike(pattern),
            Wedding.bride_surname.ilike(pattern),
            Wedding.pastor.ilike(pattern),
            Wedding.location.ilike(pattern),
        ))
    return query.order_by(Wedding.wedding_date.desc(), Wedding.id.desc()).all()


def find_wedding_record(db: Session, wedding_id: int) -> Dict[str, Any]:
    """Live wedding by id, otherwise an archived wedding with the same id."""
    wedding = db.query(Wedding).filter(Wedding.id == wedding_id).first()
    if wedding:
        return serialize_wedding(wedding)

    archive = get_archive_of_kind(db, wedding_id, WEDDING)
    if archive:
        record = serialize_archive(archive)
        data = dict(record["details"])
        data.update({"id": record["id"], "archived": True, "archived_date": record["archived_date"]})
        return data

    raise RecordNotFoundError("Wedding not found")


def create_wedding(db: Session, req: WeddingRequest, actor_id: int) -> Wedding:
    _check_required(req)

    with atomic(db, "add_wedding"):
        wedding = Wedding(**req.model_dump(), archived=False)
        db.add(wedding)
        db.flush()

        record_action(db, actor_id, "add_wedding", {
            "id": wedding.id,
            "groom": f"{wedding.groom_first_name} {wedding.groom_surname}",
            "bride": f"{wedding.bride_first_name} {wedding.bride_surname}",
            "wedding_date": wedding.wedding_date.isoformat(),
        })

    db.refresh(wedding)
    logger.info(f"Wedding recorded: id={wedding.id}")
    return wedding


def update_wedding(db: Session, wedding_id: int, req: WeddingRequest, actor_id: int) -> Wedding:
    _check_required(req)

    with atomic(db, "update_wedding"):
        wedding = db.query(Wedding).filter(Wedding.id == wedding_id).first()
        if not wedding:
            raise RecordNotFoundError("Wedding record not found")

        changed = []
        for field, value in req.model_dump().items():
            if getattr(wedding, field) != value:
                setattr(wedding, field, value)
                changed.append(field)
        db.flush()

        record_action(db, actor_id, "update_wedding", {
            "wedding_id": wedding_id,
            "changed_fields": changed,
        })

    db.refresh(wedding)
    return wedding
