from fastapi import APIRouter, Depends, HTTPException, status, Response
from sqlalchemy.orm import Session
from database.models.auth_models import User
from api.dependencies.auth import (
    get_db,
    get_current_user,
    create_access_token,
    ACCESS_TOKEN_EXPIRE_MINUTES,
    AUTH_COOKIE_NAME,
)
from api.models.user_models import RegisterRequest, LoginRequest, Token, UserRead
from services.user_service import register_user, authenticate_user
import logging
import os

IS_PRODUCTION = os.getenv("APP_ENV", "local") != "local"

logger = logging.getLogger(__name__)

router = APIRouter()


def _set_auth_cookie(response: Response, access_token: str):
    response.set_cookie(
        key=AUTH_COOKIE_NAME,
        value=access_token,
        httponly=True,
        secure=IS_PRODUCTION,
        samesite="lax",
        max_age=ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        path="/"
    )


@router.post("/auth/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register(request: RegisterRequest, db: Session = Depends(get_db)):
    return register_user(db, request.name, request.email, request.password)


@router.post("/auth/login", response_model=Token)
def login(response: Response, request: LoginRequest, db: Session = Depends(get_db)):
    """
    Issues an access token, returned in the body for Bearer clients and
    set as an httponly cookie for the browser.
    """
    user = authenticate_user(db, request.email, request.password)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Wrong email or password")

    access_token = create_access_token(user)
    _set_auth_cookie(response, access_token)

    logger.info(f"USER_LOGIN user_id={user.id}")
    return Token(access_token=access_token, user=UserRead.model_validate(user))


@router.post("/auth/logout")
def logout(response: Response):
    response.delete_cookie(AUTH_COOKIE_NAME, path="/", httponly=True, secure=IS_PRODUCTION)
    return {"message": "Logged out successfully"}


@router.get("/auth/me", response_model=UserRead)
def read_users_me(current_user: User = Depends(get_current_user)):
    return current_user
