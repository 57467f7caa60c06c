from uuid import uuid4

from sqlmodel import Session

from profile_hub.db.session import engine
from profile_hub.services.auth_service import verify_password
from profile_hub.services.seed import ensure_test_user


def test_ensure_test_user_is_idempotent():
    email = f"seed-{uuid4().hex[:8]}@example.com"
    with Session(engine) as session:
        first = ensure_test_user(session, email=email, password='password123')
        assert first.created is True
        assert first.user.first_name == 'Test'
        assert first.user.course == 'Computer Science'
        assert first.user.graduation_year == 2024
        assert first.user.is_verified is True
        assert verify_password('password123', first.user.hashed_password)

        second = ensure_test_user(session, email=email, password='other')
        assert second.created is False
        assert second.user.id == first.user.id
