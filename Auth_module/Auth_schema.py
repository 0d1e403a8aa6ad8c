from typing import Optional

from pydantic import BaseModel, Field, field_validator


class RegisterRequest(BaseModel):
    username: str = Field(..., description="Login name", min_length=1, max_length=100)
    password: str = Field(..., description="Password (at least 6 characters)")

    @field_validator('username')
    @classmethod
    def validate_username(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('Username is required')
        return v


class LoginRequest(BaseModel):
    username: str
    password: str


class UserData(BaseModel):
    id: int
    username: str
    role: Optional[str] = None


class LoginResponse(BaseModel):
    status: str = "success"
    message: str
    token: str
    user: UserData
