"""Input validation for the login and signup forms."""
from __future__ import annotations

from dataclasses import dataclass

from app.settings import settings

MISMATCH_MESSAGE = "Passwords do not match."


@dataclass
class ValidationIssue:
    field: str
    message: str


def password_mismatch(password: str, confirm: str) -> str:
    """Return the live hint under the confirmation field, or ``""``."""

    if not confirm:
        return ""
    return MISMATCH_MESSAGE if password != confirm else ""


def validate_signup(
    email: str,
    password: str,
    confirm: str,
    nickname: str,
    *,
    min_length: int | None = None,
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if not (email.strip() and password and confirm and nickname.strip()):
        issues.append(ValidationIssue("form", "Please fill in all fields."))
        return issues
    if password != confirm:
        issues.append(ValidationIssue("password_confirm", MISMATCH_MESSAGE))
        return issues
    limit = min_length if min_length is not None else settings.min_password_length
    if len(password) < limit:
        issues.append(
            ValidationIssue("password", f"Password must be at least {limit} characters.")
        )
    return issues


def validate_login(email: str, password: str) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    if not email.strip():
        issues.append(ValidationIssue("email", "Enter your email."))
    if not password:
        issues.append(ValidationIssue("password", "Enter your password."))
    return issues



__all__ = [
    "MISMATCH_MESSAGE",
    "ValidationIssue",
    "password_mismatch",
    "validate_login",
    "validate_signup",
]
