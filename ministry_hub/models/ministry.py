"""ORM models for the ministry rank and skill catalogues."""

from sqlalchemy import Column, String, Text

from ministry_hub.models.base import Base, TimestampedMixin


class MinistryRank(TimestampedMixin, Base):
    __tablename__ = "ministry_ranks"

    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=True)


class MinistrySkill(TimestampedMixin, Base):
    __tablename__ = "ministry_skills"

    name = Column(String(100), nullable=False, unique=True)
    description = Column(Text, nullable=False)
