import os

import structlog
from sqlalchemy.orm import Session

from backend.app.core.security import get_password_hash
from backend.app.models.user import User

logger = structlog.get_logger(__name__)

DEFAULT_DEV_PASSWORD = "Secret123!"
DEFAULT_DEV_ADMIN = "admin@example.com"


def ensure_default_dev_admin(db: Session) -> None:
    """
    Create an admin account for local development so organization
    applications can be reviewed without touching the database by hand.
    Skipped under pytest and outside the development environment.
    """
    if os.getenv("PYTEST_CURRENT_TEST"):
        return
    if os.getenv("BERRY_ENV", "development") != "development":
        return

    if db.query(User).filter(User.email == DEFAULT_DEV_ADMIN).first():
        return

    db.add(
        User(
            email=DEFAULT_DEV_ADMIN,
            hashed_password=get_password_hash(DEFAULT_DEV_PASSWORD),
            role="admin",
            is_active=True,
        )
    )
    db.commit()
    logger.info("dev_admin_created", email=DEFAULT_DEV_ADMIN)
