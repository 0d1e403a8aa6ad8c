"""
Archived records at the API boundary.

The archive table is polymorphic; a row is decoded into the variant named by
its ``record_type`` when it is read, never when it is written.
"""
import re
from datetime import datetime
from typing import Annotated, Any, Dict, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator

_LEGACY_RECEIPT_KEY = re.compile(r"^receipt_(\d{4})$")


class MemberArchiveDetails(BaseModel):
    """Member snapshot. Also reads snapshots written with the old register keys."""
    model_config = ConfigDict(extra="allow")

    first_name: Optional[str] = None
    surname: Optional[str] = None
    status: Optional[str] = None
    former_palo: Optional[int] = None
    receipts: Dict[str, Optional[str]] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def map_legacy_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        if "first_name" not in data and "lebitso" in data:
            data["first_name"] = data.pop("lebitso")
        if "surname" not in data and "fane" in data:
            data["surname"] = data.pop("fane")
        receipts = dict(data.get("receipts") or {})
        for key in list(data):
            match = _LEGACY_RECEIPT_KEY.match(key)
            if match:
                value = data.pop(key)
                if value:
                    receipts.setdefault(match.group(1), value)
        data["receipts"] = receipts
        return data

    @field_validator("first_name", "surname")
    @classmethod
    def strip_names(cls, v):
        return v.strip() if isinstance(v, str) else v


class BaptismArchiveDetails(BaseModel):
    model_config = ConfigDict(extra="allow")

    first_name: Optional[str] = None
    surname: Optional[str] = None
    baptism_date: Optional[str] = None
    pastor: Optional[str] = None


class WeddingArchiveDetails(BaseModel):
    model_config = ConfigDict(extra="allow")

    groom_first_name: Optional[str] = None
    groom_surname: Optional[str] = None
    bride_first_name: Optional[str] = None
    bride_surname: Optional[str] = None
    wedding_date: Optional[str] = None


class _ArchivedRecordBase(BaseModel):
    id: int
    palo: Optional[int] = None
    archived_date: Optional[datetime] = None


class MemberArchive(_ArchivedRecordBase):
    record_type: Literal["member"]
    details: MemberArchiveDetails


class BaptismArchive(_ArchivedRecordBase):
    record_type: Literal["baptism"]
    details: BaptismArchiveDetails


class WeddingArchive(_ArchivedRecordBase):
    record_type: Literal["wedding"]
    details: WeddingArchiveDetails


ArchivedRecord = Annotated[
    Union[MemberArchive, BaptismArchive, WeddingArchive],
    Field(discriminator="record_type"),
]

archived_record_adapter = TypeAdapter(ArchivedRecord)


class ArchiveMemberRequest(BaseModel):
    status: str = Field(..., description="Reason the member left the register: Moved or Deceased")
