import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from deps import get_db
from .Auth_schema import RegisterRequest, LoginRequest, LoginResponse, UserData
from .Auth_crud import register_user, authenticate_user, issue_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(req: RegisterRequest, db: Session = Depends(get_db)):
    """Self-service registration. New accounts only get view access."""
    user = register_user(db, req.username, req.password)
    return {
        "status": "success",
        "message": "Registration successful",
        "data": UserData(id=user.id, username=user.username, role=user.role).model_dump()
    }


@router.post("/login", response_model=LoginResponse)
def login(req: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate_user(db, req.username, req.password)
    logger.info(f"User logged in: {user.username}")
    return LoginResponse(
        message="Login successful",
        token=issue_token(user),
        user=UserData(id=user.id, username=user.username, role=user.role)
    )
