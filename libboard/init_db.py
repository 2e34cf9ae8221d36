"""Create the board tables, optionally registering members for local use.

Usage:
    python -m libboard.init_db [email:name ...]
"""

import logging
import sys

from libboard.database import Base, SessionLocal, engine, unit_of_work
import libboard.models  # registers every model on Base.metadata
from libboard.crud import crud_member

logger = logging.getLogger(__name__)


def create_tables() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Tables created")


def seed_members(pairs) -> int:
    """Register ``email:name`` members that do not exist yet. Returns how many were added."""
    added = 0
    db = SessionLocal()
    try:
        with unit_of_work(db):
            for pair in pairs:
                email, _, name = pair.partition(":")
                if crud_member.get_by_email(db, email) is None:
                    crud_member.create_member(db, email=email, name=name or email)
                    added += 1
    finally:
        db.close()
    return added


def main(argv=None):
    logging.basicConfig(level=logging.INFO)
    args = sys.argv[1:] if argv is None else argv
    create_tables()
    print("✅ Tables created successfully")
    if args:
        print(f"✅ {seed_members(args)} member(s) added")

if __name__ == "__main__":
    main()
