"""ORM model for dashboard users (auth and RBAC)."""

from sqlalchemy import CheckConstraint, Column, String

from ministry_hub.core.security import Role
from ministry_hub.models.base import Base, TimestampedMixin

ROLE_CHECK_SQL = "role IN ({})".format(", ".join(f"'{role.value}'" for role in Role))


class User(TimestampedMixin, Base):
    """
    Dashboard account for cookie session authentication.

    role: one of Role ('admin' or 'user'), enforced by a check constraint.
    Users are created by scripts, never via the public API.
    """

    __tablename__ = "users"
    __table_args__ = (CheckConstraint(ROLE_CHECK_SQL, name="ck_users_role"),)

    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(32), nullable=False, default=Role.USER.value)
