from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from salestrack.config import get_settings
from salestrack.dependencies import get_db, require_user
from salestrack.schemas.account import LoginRequest, MessageResponse, RegisterRequest, TokenResponse
from salestrack.services.account_service import authenticate_user, register_user

router = APIRouter(prefix="/account", tags=["Account"])


@router.post("/register", response_model=MessageResponse)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    register_user(db, payload.username, payload.email, payload.password)
    return MessageResponse(result="User created successfully")


@router.post("/login", response_model=TokenResponse)
def login(payload: LoginRequest, response: Response, db: Session = Depends(get_db)):
    settings = get_settings()
    token = authenticate_user(db, payload.username, payload.password)
    response.set_cookie(
        key=settings.JWT_COOKIE_NAME,
        value=token,
        max_age=settings.JWT_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.ENVIRONMENT.lower() != "local",
        samesite="lax",
    )
    return TokenResponse(result="User logged in successfully", access_token=token)


@router.post("/logout", response_model=MessageResponse, status_code=status.HTTP_200_OK)
def logout(response: Response, _user: str = Depends(require_user)):
    response.delete_cookie(get_settings().JWT_COOKIE_NAME)
    return MessageResponse(result="User logged out successfully")


__all__ = ["router"]
