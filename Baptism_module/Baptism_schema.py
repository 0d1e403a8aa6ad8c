from datetime import date
from typing import Optional

from pydantic import BaseModel, field_validator

# Fields the register cannot be kept without; checked by the CRUD layer so
# the response can list every missing one at once.
REQUIRED_FIELDS = (
    "first_name", "surname", "date_of_birth", "baptism_date", "pastor",
    "father_first_name", "father_surname", "mother_first_name", "mother_surname",
)


class BaptismRequest(BaseModel):
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    surname: Optional[str] = None
    date_of_birth: Optional[date] = None

    father_first_name: Optional[str] = None
    father_middle_name: Optional[str] = None
    father_surname: Optional[str] = None
    mother_first_name: Optional[str] = None
    mother_middle_name: Optional[str] = None
    mother_surname: Optional[str] = None

    baptism_date: Optional[date] = None
    pastor: Optional[str] = None

    @field_validator(
        'first_name', 'middle_name', 'surname',
        'father_first_name', 'father_middle_name', 'father_surname',
        'mother_first_name', 'mother_middle_name', 'mother_surname',
        'pastor'
    )
    @classmethod
    def strip_text(cls, v):
        if v is None:
            return None
        v = v.strip()
        return v or None
