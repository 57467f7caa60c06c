from sqlmodel import Session

from profile_hub.models.user import User
from profile_hub.schemas.user import (
    Availability,
    AvailabilityUpdate,
    Preferences,
    PreferencesUpdate,
    UserOut,
    UserUpdate,
)


def to_user_out(user: User, show_email: bool = True) -> UserOut:
    return UserOut(
        id=user.id,
        created_at=user.created_at,
        updated_at=user.updated_at,
        email=user.email if show_email else None,
        first_name=user.first_name,
        last_name=user.last_name,
        full_name=f"{user.first_name} {user.last_name}",
        is_active=user.is_active,
        is_verified=user.is_verified,
        course=user.course,
        graduation_year=user.graduation_year,
        bio=user.bio,
        location=user.location,
        current_position=user.current_position,
        company=user.company,
        work_status=user.work_status,
        linked_in=user.linked_in,
        github=user.github,
        website=user.website,
        profile_picture=user.profile_picture,
        cover_picture=user.cover_picture,
    )


def availability_of(user: User) -> Availability:
    return Availability(
        for_mentoring=user.for_mentoring,
        for_job_opportunities=user.for_job_opportunities,
        for_networking=user.for_networking,
    )


def preferences_of(user: User) -> Preferences:
    return Preferences(
        email_notifications=user.email_notifications,
        profile_visibility=user.profile_visibility,
        show_email=user.show_email,
        show_phone=user.show_phone,
    )


def _apply(session: Session, user: User, data: dict) -> User:
    for key, value in data.items():
        setattr(user, key, value)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def update_user(session: Session, user: User, payload: UserUpdate) -> User:
    return _apply(session, user, payload.model_dump(exclude_unset=True, exclude_none=True))


def update_availability(session: Session, user: User, payload: AvailabilityUpdate) -> User:
    # absent and null flags keep their stored value
    data = payload.model_dump(exclude_unset=True, exclude_none=True)
    return _apply(session, user, data)


def update_preferences(session: Session, user: User, payload: PreferencesUpdate) -> User:
    data = payload.model_dump(exclude_unset=True, exclude_none=True)
    return _apply(session, user, data)


def set_picture(session: Session, user: User, field: str, url: str) -> User:
    return _apply(session, user, {field: url})
