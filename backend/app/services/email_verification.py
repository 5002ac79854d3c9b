"""Six-digit email verification codes stored with an expiry.

Codes live in the database so every API process sees the same state.
Delivery is handed to ``deliver_code``; the transport itself is not part of
this service.
"""

import secrets
from datetime import UTC, datetime, timedelta

import structlog
from sqlalchemy.orm import Session

from backend.app.core.errors import NotFound, PermissionDenied, ValidationFailed
from backend.app.core.settings import get_settings
from backend.app.core.time import utc_now
from backend.app.models.email_verification import EmailVerificationCode

logger = structlog.get_logger(__name__)


def _aware(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def ensure_domain_allowed(email: str) -> None:
    allowed = get_settings().allowed_email_domains
    if not allowed:
        return
    domain = _normalize_email(email).rsplit("@", 1)[-1]
    if domain not in allowed:
        choices = ", ".join(f"@{d}" for d in allowed)
        raise PermissionDenied(f"Email domain @{domain} is not authorized. Please use an email from: {choices}")


def generate_code() -> str:
    return f"{secrets.randbelow(900000) + 100000}"


def deliver_code(email: str, code: str, expires_at: datetime) -> None:
    settings = get_settings()
    extra = {"code": code} if settings.environment == "development" else {}
    logger.info("verification_code_issued", email=email, expires_at=expires_at.isoformat(), **extra)


def issue_code(db: Session, email: str, now: datetime | None = None) -> EmailVerificationCode:
    ensure_domain_allowed(email)
    email = _normalize_email(email)
    now = now or utc_now()
    expires_at = now + timedelta(minutes=get_settings().verification_code_ttl_minutes)

    record = db.query(EmailVerificationCode).filter(EmailVerificationCode.email == email).first()
    if record is None:
        record = EmailVerificationCode(email=email)
        db.add(record)
    record.code = generate_code()
    record.expires_at = expires_at
    record.verified = False
    record.created_at = now
    db.commit()
    db.refresh(record)
    deliver_code(email, record.code, expires_at)
    return record


def verify_code(db: Session, email: str, code: str, now: datetime | None = None) -> EmailVerificationCode:
    email = _normalize_email(email)
    now = now or utc_now()
    record = db.query(EmailVerificationCode).filter(EmailVerificationCode.email == email).first()
    if record is None:
        raise NotFound("No verification code found. Please request a new code.")
    if now > _aware(record.expires_at):
        db.delete(record)
        db.commit()
        raise ValidationFailed("Verification code has expired. Please request a new code.", ["code"])
    if not secrets.compare_digest(record.code.encode(), code.strip().encode()):
        raise ValidationFailed("Invalid verification code. Please check and try again.", ["code"])

    record.verified = True
    db.commit()
    db.refresh(record)
    logger.info("email_verified", email=email)
    return record


def code_status(db: Session, email: str, now: datetime | None = None) -> dict:
    now = now or utc_now()
    record = db.query(EmailVerificationCode).filter(EmailVerificationCode.email == _normalize_email(email)).first()
    if record is None:
        return {"has_code": False, "verified": False, "expired": False}
    return {
        "has_code": True,
        "verified": bool(record.verified),
        "expired": now > _aware(record.expires_at),
    }
