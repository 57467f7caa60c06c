from __future__ import annotations

from dataclasses import dataclass

from sqlmodel import Session

from profile_hub.models.user import User
from profile_hub.schemas.auth import RegisterRequest
from profile_hub.services.auth_service import create_user, get_user_by_email

TEST_USER_EMAIL = 'test@example.com'
TEST_USER_PASSWORD = 'password123'


@dataclass(frozen=True)
class SeedResult:
    user: User
    created: bool


def ensure_test_user(
    session: Session,
    email: str = TEST_USER_EMAIL,
    password: str = TEST_USER_PASSWORD,
) -> SeedResult:
    existing = get_user_by_email(session, email)
    if existing:
        return SeedResult(user=existing, created=False)
    payload = RegisterRequest(
        first_name='Test',
        last_name='User',
        email=email,
        password=password,
        course='Computer Science',
        graduation_year=2024,
    )
    return SeedResult(user=create_user(session, payload, is_verified=True), created=True)
