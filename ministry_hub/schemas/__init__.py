"""Pydantic request/response schemas."""

from ministry_hub.schemas.auth import LoginRequest, LoginResponse, MeResponse, UserRead
from ministry_hub.schemas.church import ChurchCreate, ChurchRead, ChurchStats, ChurchUpdate
from ministry_hub.schemas.common import CamelModel, ErrorResponse, FieldError, MessageResponse
from ministry_hub.schemas.content import (
    ChurchCoverCreate,
    ChurchCoverRead,
    ChurchCoverUpdate,
    ChurchEventCreate,
    ChurchEventRead,
    ChurchEventUpdate,
    ContactSubmissionCreate,
    ContactSubmissionRead,
    ContactSubmissionUpdate,
)
from ministry_hub.schemas.health import HealthResponse
from ministry_hub.schemas.ministry import (
    MinistryRankCreate,
    MinistryRankRead,
    MinistryRankUpdate,
    MinistrySkillCreate,
    MinistrySkillRead,
    MinistrySkillUpdate,
)
from ministry_hub.schemas.people import (
    MemberCreate,
    MemberRead,
    MemberUpdate,
    MinisterCreate,
    MinisterDetail,
    MinisterRead,
    MinisterUpdate,
)

__all__ = [
    "CamelModel",
    "ChurchCoverCreate",
    "ChurchCoverRead",
    "ChurchCoverUpdate",
    "ChurchCreate",
    "ChurchEventCreate",
    "ChurchEventRead",
    "ChurchEventUpdate",
    "ChurchRead",
    "ChurchStats",
    "ChurchUpdate",
    "ContactSubmissionCreate",
    "ContactSubmissionRead",
    "ContactSubmissionUpdate",
    "ErrorResponse",
    "FieldError",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MeResponse",
    "MemberCreate",
    "MemberRead",
    "MemberUpdate",
    "MessageResponse",
    "MinisterCreate",
    "MinisterDetail",
    "MinisterRead",
    "MinisterUpdate",
    "MinistryRankCreate",
    "MinistryRankRead",
    "MinistryRankUpdate",
    "MinistrySkillCreate",
    "MinistrySkillRead",
    "MinistrySkillUpdate",
    "UserRead",
]
