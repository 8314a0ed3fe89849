"""
Create a dashboard user (e.g. an extra admin). Run from project root:
  python -m ministry_hub.scripts.create_user EMAIL PASSWORD [role]
Example:
  python -m ministry_hub.scripts.create_user pastor@example.org your-secure-password admin
"""
import argparse
import sys

from sqlalchemy import func

from ministry_hub.core.database import SessionLocal
from ministry_hub.core.security import EMAIL_MAX_LEN, PASSWORD_MAX_LEN, Role, hash_password
from ministry_hub.models.user import User

# Accounts made by hand get a stricter floor than the login form enforces.
SCRIPT_PASSWORD_MIN_LEN = 8


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a Ministry Hub user (no registration UI).")
    parser.add_argument("email", help=f"Email (1-{EMAIL_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password ({SCRIPT_PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default=Role.USER.value, choices=[r.value for r in Role])
    args = parser.parse_args()

    email = args.email.strip()
    if not email or len(email) > EMAIL_MAX_LEN or "@" not in email:
        print("Invalid email.", file=sys.stderr)
        return 1
    if not SCRIPT_PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN:
        print(f"Password must be {SCRIPT_PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        existing = db.query(User).filter(func.lower(User.email) == email.lower()).first()
        if existing:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        db.add(User(email=email, password_hash=hash_password(args.password), role=args.role))
        db.commit()
        print(f"Created user '{email}' with role '{args.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
