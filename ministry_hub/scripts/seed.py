"""
Bootstrap the first admin and default catalogue rows. Safe to re-run. Run from project root:

  python -m ministry_hub.scripts.seed

Requires ADMIN_EMAIL and ADMIN_PASSWORD in the environment (or .env).
"""

import logging
import sys

from sqlalchemy import func
from sqlalchemy.orm import Session

from ministry_hub.core.config import Settings, get_settings
from ministry_hub.core.database import SessionLocal
from ministry_hub.core.security import Role, hash_password
from ministry_hub.models import Church, MinistryRank, MinistrySkill, User

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)

MINISTRY_RANKS = [
    (
        "Volunteer Worker / M.T./ GNMB",
        "Volunteer Worker, M.T. (Missionary Trainee), or GNMB (General National Missionary Board) "
        "rank in ministry experience.",
    ),
    ("Missionary", "Missionary rank in ministry experience."),
    ("Pastor / Deaconess (Probationary)", "Probationary Pastor or Deaconess rank in ministry experience."),
    ("Ordained Pastor / Ordained Deaconess", "Ordained Pastor or Ordained Deaconess rank in ministry experience."),
]

MINISTRY_SKILLS = [
    ("Preaching", "Delivering sermons and messages to inspire and teach."),
    ("Teaching", "Educating others in biblical truths and Christian living."),
    ("Planning", "Organizing ministry events and activities."),
    ("Administration", "Managing church operations and resources."),
    ("Value Formation", "Instilling Christian values and character."),
    ("Advocacy", "Promoting social justice and community welfare."),
    ("Counseling", "Providing spiritual and personal guidance."),
    ("Music Ministry", "Leading worship through music and song."),
    ("Youth Ministry", "Mentoring and guiding young people."),
    ("Children's Ministry", "Teaching and caring for children in the church."),
    ("Evangelism", "Sharing the gospel and reaching out to the lost."),
    ("Discipleship", "Helping others grow in their faith."),
    ("Hospitality", "Welcoming and serving guests and members."),
    ("Prayer Ministry", "Leading and organizing prayer efforts."),
    ("Missions", "Serving in local and global mission fields."),
    ("Community Service", "Engaging in outreach and service projects."),
    ("Event Coordination", "Planning and executing church events."),
    ("Small Group Leadership", "Facilitating small group studies and fellowship."),
    ("Ushering", "Assisting with church services and logistics."),
    ("Finance", "Managing church finances and budgeting."),
    ("Pastoral Care", "Providing care and support to members."),
    ("Technical Support", "Supporting audio, video, and IT needs."),
    ("Church Planting", "Establishing new churches and ministries."),
    ("Public Speaking", "Communicating effectively to groups."),
]

CHURCHES = [
    {
        "name": "IRM Main Church - Manila",
        "address": "123 Main Street, Manila, Philippines",
        "email": "manila@irm.ph",
        "description": "Main headquarters of IRM Ministries",
    },
    {
        "name": "IRM Branch - Quezon City",
        "address": "456 Commonwealth Avenue, Quezon City, Philippines",
        "email": "qc@irm.ph",
        "description": "Quezon City branch church",
    },
    {
        "name": "IRM Branch - Cebu",
        "address": "789 Colon Street, Cebu City, Philippines",
        "email": "cebu@irm.ph",
        "description": "Cebu branch church",
    },
    {
        "name": "IRM Branch - Davao",
        "address": "321 Roxas Avenue, Davao City, Philippines",
        "email": "davao@irm.ph",
        "description": "Davao branch church",
    },
]


def ensure_admin(db: Session, settings: Settings) -> bool:
    """Create the bootstrap admin if missing. Returns True when a user was created."""
    if not settings.ADMIN_EMAIL or settings.ADMIN_PASSWORD is None:
        raise RuntimeError("ADMIN_EMAIL and ADMIN_PASSWORD must be set to seed the admin user")
    password = settings.ADMIN_PASSWORD.get_secret_value()
    if not password:
        raise RuntimeError("ADMIN_PASSWORD must not be empty")
    email = settings.ADMIN_EMAIL.strip()
    if db.query(User).filter(func.lower(User.email) == email.lower()).first():
        return False
    db.add(User(email=email, password_hash=hash_password(password), role=Role.ADMIN.value))
    db.commit()
    return True


def _insert_missing(db: Session, model, rows: list[dict]) -> int:
    existing = {name for (name,) in db.query(model.name).all()}
    new_rows = [model(**row) for row in rows if row["name"] not in existing]
    db.add_all(new_rows)
    db.commit()
    return len(new_rows)


def seed_defaults(db: Session) -> dict[str, int]:
    """Insert default ranks, skills and churches that are not there yet; returns inserted counts."""
    return {
        "ministry_ranks": _insert_missing(
            db, MinistryRank, [{"name": n, "description": d} for n, d in MINISTRY_RANKS]
        ),
        "ministry_skills": _insert_missing(
            db, MinistrySkill, [{"name": n, "description": d} for n, d in MINISTRY_SKILLS]
        ),
        "churches": _insert_missing(db, Church, CHURCHES),
    }


def main() -> int:
    settings = get_settings()
    db = SessionLocal()
    try:
        try:
            created = ensure_admin(db, settings)
        except RuntimeError as e:
            logger.error("Seed aborted: %s", e)
            return 1
        if created:
            logger.info("Admin user created", extra={"email": settings.ADMIN_EMAIL})
        else:
            logger.info("Admin user already exists", extra={"email": settings.ADMIN_EMAIL})
        inserted = seed_defaults(db)
        logger.info("Seed completed: %s", inserted)
        return 0
    except Exception as e:
        db.rollback()
        logger.exception("Seed failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
