from typing import Optional
import sqlalchemy as sa
from sqlmodel import Field, SQLModel
from profile_hub.models.base import IDModel, TimestampModel
from profile_hub.models.enums import ProfileVisibility, enum_column


class User(IDModel, TimestampModel, SQLModel, table=True):
    __tablename__ = 'users'

    email: str = Field(index=True, unique=True)
    hashed_password: str
    first_name: str
    last_name: str
    is_active: bool = True
    is_verified: bool = False

    course: str = ''
    graduation_year: Optional[int] = None
    bio: str = Field(default='', sa_column=sa.Column(sa.Text(), nullable=False, default=''))
    location: str = ''
    current_position: Optional[str] = None
    company: Optional[str] = None
    work_status: str = ''
    linked_in: str = ''
    github: str = ''
    website: str = ''
    profile_picture: str = ''
    cover_picture: str = ''

    for_mentoring: bool = False
    for_job_opportunities: bool = True
    for_networking: bool = True

    email_notifications: bool = True
    profile_visibility: ProfileVisibility = Field(
        default=ProfileVisibility.PUBLIC,
        sa_column=enum_column(ProfileVisibility, 'profile_visibility'),
    )
    show_email: bool = False
    show_phone: bool = False
