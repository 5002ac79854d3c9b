from datetime import datetime

from pydantic import BaseModel, EmailStr


class VerificationCodeRequest(BaseModel):
    email: EmailStr


class VerificationCodeSubmit(BaseModel):
    email: EmailStr
    code: str


class VerificationCodeSent(BaseModel):
    message: str
    expires_at: datetime


class VerificationResult(BaseModel):
    message: str
    verified: bool


class VerificationStatus(BaseModel):
    has_code: bool
    verified: bool
    expired: bool
