from typing import Optional
from datetime import date
import sqlalchemy as sa
from sqlmodel import Field, SQLModel
from profile_hub.models.base import ProfileRecordModel
from profile_hub.models.enums import ExperienceType, enum_column


class Experience(ProfileRecordModel, SQLModel, table=True):
    __tablename__ = 'experiences'

    title: str
    company: str
    location: Optional[str] = None
    description: Optional[str] = Field(default=None, sa_column=sa.Column(sa.Text()))
    start_date: date
    end_date: Optional[date] = None
    is_current_position: bool = False
    type: ExperienceType = Field(
        default=ExperienceType.FULL_TIME,
        sa_column=enum_column(ExperienceType, 'experience_type'),
    )
