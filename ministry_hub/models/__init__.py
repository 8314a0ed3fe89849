"""SQLAlchemy ORM models."""

from ministry_hub.models.base import Base
from ministry_hub.models.church import Church, Member, Minister
from ministry_hub.models.content import ChurchCoverPhoto, ChurchEvent, ContactSubmission
from ministry_hub.models.minister_profile import (
    MinisterAward,
    MinisterCaseReport,
    MinisterChild,
    MinisterEducationBackground,
    MinisterEmergencyContact,
    MinisterEmploymentRecord,
    MinisterMinistryExperience,
    MinisterMinistryRecord,
    MinisterMinistrySkill,
    MinisterSeminar,
)
from ministry_hub.models.ministry import MinistryRank, MinistrySkill
from ministry_hub.models.user import User

__all__ = [
    "Base",
    "Church",
    "ChurchCoverPhoto",
    "ChurchEvent",
    "ContactSubmission",
    "Member",
    "Minister",
    "MinisterAward",
    "MinisterCaseReport",
    "MinisterChild",
    "MinisterEducationBackground",
    "MinisterEmergencyContact",
    "MinisterEmploymentRecord",
    "MinisterMinistryExperience",
    "MinisterMinistryRecord",
    "MinisterMinistrySkill",
    "MinisterSeminar",
    "MinistryRank",
    "MinistrySkill",
    "User",
]
