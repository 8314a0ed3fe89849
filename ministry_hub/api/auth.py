"""Cookie session login, logout and current-user lookup."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy import func

from ministry_hub.api.deps import DbSession, get_current_user
from ministry_hub.core.config import get_settings
from ministry_hub.core.security import Role, issue_token, verify_password
from ministry_hub.models.user import User
from ministry_hub.schemas.auth import LoginRequest, LoginResponse, MeResponse, UserRead
from ministry_hub.schemas.common import MessageResponse
from ministry_hub.services.identity import Identity

logger = logging.getLogger(__name__)

router = APIRouter()


def _set_session_cookie(response: Response, token: str) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value=token,
        max_age=settings.JWT_EXPIRE_MINUTES * 60,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
    )


@router.post("/login", response_model=LoginResponse)
def login(body: LoginRequest, response: Response, db: DbSession) -> LoginResponse:
    """
    Authenticate with email and password; sets the httpOnly session cookie.
    Unknown email and wrong password get the same 401 and no cookie.
    """
    email = body.email.strip()
    if not email or not body.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email and password are required",
        )
    user = db.query(User).filter(func.lower(User.email) == email.lower()).first()
    if user is None or not verify_password(body.password, user.password_hash):
        logger.info("Login failed", extra={"email": email})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    role = Role.parse(user.role)
    if role is None:
        logger.warning("Login refused: stored role is not recognised", extra={"user_id": user.id})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
        )
    token = issue_token(user.id, user.email, role)
    _set_session_cookie(response, token)
    logger.info("Login succeeded", extra={"user_id": user.id})
    return LoginResponse(user=UserRead(id=user.id, email=user.email, role=role.value))


@router.post("/logout", response_model=MessageResponse)
def logout(response: Response) -> MessageResponse:
    settings = get_settings()
    response.set_cookie(
        key=settings.AUTH_COOKIE_NAME,
        value="",
        max_age=0,
        path="/",
        httponly=True,
        samesite="lax",
        secure=settings.cookie_secure,
    )
    return MessageResponse(message="Logout successful")


@router.get("/me", response_model=MeResponse)
def me(identity: Annotated[Identity, Depends(get_current_user)]) -> MeResponse:
    return MeResponse(user=UserRead(id=identity.id, email=identity.email, role=identity.role.value))
