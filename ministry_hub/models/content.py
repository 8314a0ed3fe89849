"""ORM models for public-site content: events, cover photos, contact submissions."""

from sqlalchemy import Column, DateTime, String, Text

from ministry_hub.models.base import Base, TimestampedMixin


class ChurchEvent(TimestampedMixin, Base):
    """Upcoming event listed on the home page, ordered by its datetime."""

    __tablename__ = "church_events"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    place = Column(Text, nullable=False)
    datetime = Column(DateTime(timezone=True), nullable=False, index=True)
    image_url = Column(Text, nullable=True)


class ChurchCoverPhoto(TimestampedMixin, Base):
    """Hero/cover image; cover_image holds a storage key or URL, never the bytes."""

    __tablename__ = "church_cover_photos"

    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    cover_image = Column(Text, nullable=False)


class ContactSubmission(TimestampedMixin, Base):
    """Message left through the public contact form."""

    __tablename__ = "contact_us"

    name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False)
    contact_number = Column(String(64), nullable=False)
    description = Column(Text, nullable=False)
