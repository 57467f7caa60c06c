from typing import Optional
from sqlmodel import SQLModel
from profile_hub.models.base import ProfileRecordModel


class Education(ProfileRecordModel, SQLModel, table=True):
    __tablename__ = 'educations'

    institution: str
    degree: str
    field: str
    start_year: int
    end_year: Optional[int] = None
    is_currently_studying: bool = False
    # JSON-encoded list of strings
    achievements: Optional[str] = None
