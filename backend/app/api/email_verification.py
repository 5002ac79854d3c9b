"""Email verification code endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.models.user import User
from backend.app.schemas.email_verification import (
    VerificationCodeRequest,
    VerificationCodeSent,
    VerificationCodeSubmit,
    VerificationResult,
    VerificationStatus,
)
from backend.app.services.email_verification import code_status, issue_code, verify_code
from backend.app.services.organization_service import mark_email_verified

router = APIRouter(prefix="/auth/verify-email", tags=["auth"])


@router.post("/send", response_model=VerificationCodeSent)
def send_verification_code(
    request: VerificationCodeRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    record = issue_code(db, request.email)
    return VerificationCodeSent(message="Verification code sent successfully", expires_at=record.expires_at)


@router.post("/verify", response_model=VerificationResult)
def submit_verification_code(
    submission: VerificationCodeSubmit,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    verify_code(db, submission.email, submission.code)
    if current_user.role == "org":
        mark_email_verified(db, current_user, submission.email)
    return VerificationResult(message="Email verified successfully", verified=True)


@router.get("/status", response_model=VerificationStatus)
def verification_status(
    email: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return code_status(db, email)
