from typing import Optional
import sqlalchemy as sa
from sqlmodel import Field, SQLModel
from profile_hub.models.base import IDModel, TimestampModel


class SkillEndorsement(IDModel, TimestampModel, SQLModel, table=True):
    __tablename__ = 'skill_endorsements'
    __table_args__ = (sa.UniqueConstraint('skill_id', 'endorser_id'),)

    skill_id: str = Field(index=True)
    endorser_id: str = Field(index=True)
    note: Optional[str] = None
