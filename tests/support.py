"""Shared helpers for database-backed tests."""

from datetime import date

from ministry_hub.core.database import SessionLocal, engine
from ministry_hub.core.security import hash_password
from ministry_hub.models import Base, Church, Member, Minister, User


def reset_database() -> None:
    """Create all tables (once) and empty them."""
    Base.metadata.create_all(engine)
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


def add_user(email: str, password: str, role: str = "admin") -> User:
    db = SessionLocal()
    try:
        user = User(email=email, password_hash=hash_password(password), role=role)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    finally:
        db.close()


def add_church(db, name: str = "IRM Main Church - Manila", **kwargs) -> Church:
    church = Church(name=name, **kwargs)
    db.add(church)
    db.commit()
    db.refresh(church)
    return church


def add_member(db, church_id: int, first_name: str = "Ana", last_name: str = "Cruz", **kwargs) -> Member:
    fields = {"gender": "female", "birthdate": date(1990, 5, 1), "year_joined": 2015}
    fields.update(kwargs)
    member = Member(church_id=church_id, first_name=first_name, last_name=last_name, **fields)
    db.add(member)
    db.commit()
    db.refresh(member)
    return member


def add_minister(db, church_id: int, first_name: str = "Jose", last_name: str = "Reyes", **kwargs) -> Minister:
    fields = {
        "gender": "male",
        "date_of_birth": date(1975, 2, 14),
        "place_of_birth": "Cebu City",
        "address": "789 Colon Street, Cebu City",
        "civil_status": "married",
    }
    fields.update(kwargs)
    minister = Minister(church_id=church_id, first_name=first_name, last_name=last_name, **fields)
    db.add(minister)
    db.commit()
    db.refresh(minister)
    return minister
