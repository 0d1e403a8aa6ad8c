from datetime import date
from typing import Optional

from pydantic import BaseModel, field_validator

REQUIRED_FIELDS = (
    "groom_first_name", "groom_surname",
    "bride_first_name", "bride_surname",
    "wedding_date", "pastor", "location",
)


class WeddingRequest(BaseModel):
    groom_first_name: Optional[str] = None
    groom_middle_name: Optional[str] = None
    groom_surname: Optional[str] = None
    groom_id_number: Optional[str] = None

    bride_first_name: Optional[str] = None
    bride_middle_name: Optional[str] = None
    bride_surname: Optional[str] = None
    bride_id_number: Optional[str] = None

    wedding_date: Optional[date] = None
    pastor: Optional[str] = None
    location: Optional[str] = None

    @field_validator(
        'groom_first_name', 'groom_middle_name', 'groom_surname', 'groom_id_number',
        'bride_first_name', 'bride_middle_name', 'bride_surname', 'bride_id_number',
        'pastor', 'location'
    )
    @classmethod
    def strip_text(cls, v):
        if v is None:
            return None
        v = v.strip()
        return v or None
