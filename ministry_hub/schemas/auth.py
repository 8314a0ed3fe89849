"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field

from ministry_hub.schemas.common import CamelModel


class LoginRequest(BaseModel):
    """Credentials for login. Emptiness is checked by the handler to return a single message."""

    email: str = Field(default="", max_length=255, description="Account email")
    password: str = Field(default="", max_length=128, description="Password")


class UserRead(CamelModel):
    """Authenticated user (id, email, role); never includes the password hash."""

    id: int
    email: str
    role: str


class LoginResponse(BaseModel):
    message: str = "Login successful"
    user: UserRead


class MeResponse(BaseModel):
    user: UserRead


class UsersListResponse(BaseModel):
    """Response for GET /admin/users."""

    users: list[UserRead]
