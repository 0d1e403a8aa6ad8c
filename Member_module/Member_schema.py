from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator


class MemberRequest(BaseModel):
    first_name: str = Field(..., description="Given name (lebitso)", max_length=100)
    surname: str = Field(..., description="Family name (fane)", max_length=100)

    @field_validator('first_name', 'surname')
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Name cannot be empty or whitespace only')
        return v


class ReceiptRequest(BaseModel):
    year: Union[int, str] = Field(..., description="Calendar year of the contribution")
    receipt: Optional[str] = Field(None, description="Receipt number; empty clears the year")

    @field_validator('year')
    @classmethod
    def normalize_year(cls, v):
        return str(v).strip()

    @field_validator('receipt')
    @classmethod
    def normalize_receipt(cls, v):
        if v is None:
            return None
        v = v.strip()
        return v or None
