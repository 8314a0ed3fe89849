"""ORM models for the sections of a minister profile (one row per list entry)."""

from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text

from ministry_hub.models.base import Base, TimestampedMixin

YEAR_LEN = 16


def _minister_fk(table: str) -> Column:
    # Rows belong to one minister and go with it.
    return Column(
        Integer,
        ForeignKey("ministers.id", name=f"{table}_minister_id_ministers_id_fk", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


class MinisterChild(TimestampedMixin, Base):
    __tablename__ = "minister_children"

    minister_id = _minister_fk(__tablename__)
    name = Column(Text, nullable=False)
    place_of_birth = Column(Text, nullable=False)
    date_of_birth = Column(Date, nullable=False)
    gender = Column(String(16), nullable=False)


class MinisterEmergencyContact(TimestampedMixin, Base):
    __tablename__ = "minister_emergency_contacts"

    minister_id = _minister_fk(__tablename__)
    name = Column(Text, nullable=False)
    relationship = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    contact_number = Column(String(64), nullable=False)


class MinisterEducationBackground(TimestampedMixin, Base):
    __tablename__ = "minister_education_backgrounds"

    minister_id = _minister_fk(__tablename__)
    school_name = Column(Text, nullable=False)
    educational_attainment = Column(Text, nullable=False)
    date_graduated = Column(Date, nullable=True)
    description = Column(Text, nullable=True)
    course = Column(Text, nullable=True)


class MinisterMinistryExperience(TimestampedMixin, Base):
    """A rank held by the minister over a span of years."""

    __tablename__ = "minister_ministry_experiences"

    minister_id = _minister_fk(__tablename__)
    ministry_rank_id = Column(
        Integer,
        ForeignKey("ministry_ranks.id", name="minister_experiences_rank_id_fk"),
        nullable=False,
    )
    description = Column(Text, nullable=True)
    from_year = Column(String(YEAR_LEN), nullable=False)
    to_year = Column(String(YEAR_LEN), nullable=True)


class MinisterMinistrySkill(TimestampedMixin, Base):
    """Link between a minister and an entry of the ministry skill catalogue."""

    __tablename__ = "minister_ministry_skills"

    minister_id = _minister_fk(__tablename__)
    ministry_skill_id = Column(
        Integer,
        ForeignKey("ministry_skills.id", name="minister_skills_skill_id_fk"),
        nullable=False,
    )


class MinisterMinistryRecord(TimestampedMixin, Base):
    """Service at one church location."""

    __tablename__ = "minister_ministry_records"

    minister_id = _minister_fk(__tablename__)
    church_location_id = Column(
        Integer,
        ForeignKey("churches.id", name="minister_records_church_id_fk"),
        nullable=False,
    )
    from_year = Column(String(YEAR_LEN), nullable=False)
    to_year = Column(String(YEAR_LEN), nullable=True)
    contribution = Column(Text, nullable=True)


class MinisterAward(TimestampedMixin, Base):
    __tablename__ = "minister_awards_recognitions"

    minister_id = _minister_fk(__tablename__)
    year = Column(String(YEAR_LEN), nullable=False)
    description = Column(Text, nullable=False)


class MinisterEmploymentRecord(TimestampedMixin, Base):
    __tablename__ = "minister_employment_records"

    minister_id = _minister_fk(__tablename__)
    company_name = Column(Text, nullable=False)
    from_year = Column(String(YEAR_LEN), nullable=False)
    to_year = Column(String(YEAR_LEN), nullable=True)
    position = Column(Text, nullable=False)


class MinisterSeminar(TimestampedMixin, Base):
    __tablename__ = "minister_seminars_conferences"

    minister_id = _minister_fk(__tablename__)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    place = Column(Text, nullable=True)
    year = Column(String(YEAR_LEN), nullable=False)
    number_of_hours = Column(Integer, nullable=False)


class MinisterCaseReport(TimestampedMixin, Base):
    __tablename__ = "minister_case_reports"

    minister_id = _minister_fk(__tablename__)
    description = Column(Text, nullable=False)
    year = Column(String(YEAR_LEN), nullable=False)
