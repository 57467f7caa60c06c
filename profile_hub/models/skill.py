from sqlmodel import Field, SQLModel
from profile_hub.models.base import ProfileRecordModel
from profile_hub.models.enums import SkillCategory, SkillLevel, enum_column


class Skill(ProfileRecordModel, SQLModel, table=True):
    __tablename__ = 'skills'

    name: str
    level: SkillLevel = Field(
        default=SkillLevel.INTERMEDIATE,
        sa_column=enum_column(SkillLevel, 'skill_level'),
    )
    category: SkillCategory = Field(
        default=SkillCategory.TECHNICAL,
        sa_column=enum_column(SkillCategory, 'skill_category'),
    )
