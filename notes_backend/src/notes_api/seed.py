"""Demo data for local development: one user and a handful of notes."""
import logging
from datetime import timedelta

from sqlalchemy.orm import Session

from notes_api.auth import get_password_hash
from notes_api.config import Settings
from notes_api.models import Note, User, utcnow

logger = logging.getLogger(__name__)

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "password123"

SAMPLE_NOTES = [
    ("Meeting notes", "Discussed new features for Q1. Prioritize authentication and API improvements.", "Work"),
    ("Shopping list", "Milk, eggs, bread, coffee, fruit, vegetables, chicken", "Personal"),
    ("App idea: task manager", "A simple task manager with drag-and-drop boards.", "Ideas"),
    ("Learn SQL indexing", "Read up on composite indexes and query plans.", "Tasks"),
    ("Vacation planning", "Look into destinations for the summer. Consider Italy or Greece.", "Personal"),
    ("Code review feedback", "Remember to check error handling and add unit tests for new features.", "Work"),
    ("Book recommendations", "Clean Code by Robert Martin, Design Patterns by the Gang of Four", "Personal"),
    ("Feature: dark theme", "Add a dark theme toggle and remember the choice.", "Ideas"),
    ("Fix login bug", "Users report timeouts on sign in. Check the token settings.", "Tasks"),
    ("Database tuning", "Add indexes to frequently queried columns. Consider query caching.", "Work"),
]


# PUBLIC_INTERFACE
def seed_demo_data(db: Session, settings: Settings) -> bool:
    """
    Create the demo user and sample notes unless the demo user already exists.

    Returns:
        True if data was created.
    """
    if db.query(User).filter(User.email == DEMO_EMAIL).first():
        return False
    user = User(email=DEMO_EMAIL, password_hash=get_password_hash(DEMO_PASSWORD, settings))
    db.add(user)
    db.flush()

    now = utcnow()
    for offset, (title, content, category) in enumerate(SAMPLE_NOTES):
        created = now - timedelta(hours=offset)
        db.add(Note(
            title=title,
            content=content,
            category=category,
            user_id=user.id,
            created_at=created,
            updated_at=created,
        ))
    db.commit()
    logger.info("Seeded demo user %s with %d notes", DEMO_EMAIL, len(SAMPLE_NOTES))
    return True


def main() -> None:
    from notes_api.database import build_engine, build_session_factory
    from notes_api.logging_config import setup_logging
    from notes_api.models import Base

    settings = Settings.from_env()
    setup_logging(settings.log_level)
    engine = build_engine(settings.database_url)
    try:
        Base.metadata.create_all(bind=engine)
        with build_session_factory(engine)() as db:
            if not seed_demo_data(db, settings):
                logger.info("Demo user already exists, nothing to do")
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
