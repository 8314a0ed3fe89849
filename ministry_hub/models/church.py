"""ORM models for churches and the people attached to them."""

from sqlalchemy import Boolean, Column, Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from ministry_hub.models.base import Base, TimestampedMixin


class Church(TimestampedMixin, Base):
    """A church location shown on the public map and used to group members/ministers."""

    __tablename__ = "churches"

    name = Column(String(255), nullable=False, unique=True)
    image_url = Column(Text, nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    address = Column(Text, nullable=True)
    email = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    link = Column(String(255), nullable=True)

    # No cascade: a church with members or ministers cannot be deleted.
    members = relationship("Member", back_populates="church", passive_deletes="all")
    ministers = relationship("Minister", back_populates="church", passive_deletes="all")


class Member(TimestampedMixin, Base):
    """A registered church member."""

    __tablename__ = "members"

    church_id = Column(
        Integer,
        ForeignKey("churches.id", name="members_church_id_churches_id_fk"),
        nullable=False,
        index=True,
    )
    profile_picture = Column(Text, nullable=True)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    middle_name = Column(String(255), nullable=True)
    gender = Column(String(16), nullable=False)
    birthdate = Column(Date, nullable=False)
    year_joined = Column(Integer, nullable=False)
    ministry_involvement = Column(Text, nullable=True)
    occupation = Column(Text, nullable=True)
    educational_attainment = Column(Text, nullable=True)
    school = Column(Text, nullable=True)
    degree = Column(Text, nullable=True)
    mobile_number = Column(String(64), nullable=True)
    email = Column(String(255), nullable=True)
    home_address = Column(Text, nullable=True)
    facebook_link = Column(Text, nullable=True)
    x_link = Column(Text, nullable=True)
    instagram_link = Column(Text, nullable=True)
    tiktok_link = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

    church = relationship("Church", back_populates="members")


class Minister(TimestampedMixin, Base):
    """A minister (church worker) profile."""

    __tablename__ = "ministers"

    church_id = Column(
        Integer,
        ForeignKey("churches.id", name="ministers_church_id_churches_id_fk"),
        nullable=False,
        index=True,
    )
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    middle_name = Column(String(255), nullable=True)
    suffix = Column(String(32), nullable=True)
    nickname = Column(String(255), nullable=True)
    date_of_birth = Column(Date, nullable=False)
    place_of_birth = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    gender = Column(String(16), nullable=False)
    civil_status = Column(String(32), nullable=False)
    email = Column(String(255), nullable=True)
    telephone = Column(String(64), nullable=True)
    biography = Column(Text, nullable=True)
    present_address = Column(Text, nullable=True)
    permanent_address = Column(Text, nullable=True)
    skills = Column(Text, nullable=True)
    hobbies = Column(Text, nullable=True)
    certified_by = Column(Text, nullable=True)
    image_url = Column(Text, nullable=True)
    signature_image_url = Column(Text, nullable=True)

    church = relationship("Church", back_populates="ministers")

    # Profile sections are written as whole lists and deleted with the minister.
    children = relationship("MinisterChild", cascade="all, delete-orphan", order_by="MinisterChild.id")
    emergency_contacts = relationship(
        "MinisterEmergencyContact", cascade="all, delete-orphan", order_by="MinisterEmergencyContact.id"
    )
    education_backgrounds = relationship(
        "MinisterEducationBackground", cascade="all, delete-orphan", order_by="MinisterEducationBackground.id"
    )
    ministry_experiences = relationship(
        "MinisterMinistryExperience", cascade="all, delete-orphan", order_by="MinisterMinistryExperience.id"
    )
    ministry_skills = relationship(
        "MinisterMinistrySkill", cascade="all, delete-orphan", order_by="MinisterMinistrySkill.id"
    )
    ministry_records = relationship(
        "MinisterMinistryRecord", cascade="all, delete-orphan", order_by="MinisterMinistryRecord.id"
    )
    awards_recognitions = relationship("MinisterAward", cascade="all, delete-orphan", order_by="MinisterAward.id")
    employment_records = relationship(
        "MinisterEmploymentRecord", cascade="all, delete-orphan", order_by="MinisterEmploymentRecord.id"
    )
    seminars_conferences = relationship("MinisterSeminar", cascade="all, delete-orphan", order_by="MinisterSeminar.id")
    case_reports = relationship("MinisterCaseReport", cascade="all, delete-orphan", order_by="MinisterCaseReport.id")
