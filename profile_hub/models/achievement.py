import datetime
from typing import Optional
import sqlalchemy as sa
from sqlmodel import Field, SQLModel
from profile_hub.models.base import ProfileRecordModel
from profile_hub.models.enums import AchievementType, enum_column


class Achievement(ProfileRecordModel, SQLModel, table=True):
    __tablename__ = 'achievements'

    title: str
    description: Optional[str] = Field(default=None, sa_column=sa.Column(sa.Text()))
    date: Optional[datetime.date] = None
    type: AchievementType = Field(
        default=AchievementType.OTHER,
        sa_column=enum_column(AchievementType, 'achievement_type'),
    )
    url: Optional[str] = None
