import datetime
from typing import Optional
from pydantic import Field, field_validator
from profile_hub.core.config import settings
from profile_hub.models.enums import (
    AchievementType,
    ExperienceType,
    PortfolioType,
    SkillCategory,
    SkillLevel,
)
from profile_hub.schemas.base import CamelModel, RecordOut
from profile_hub.schemas.user import Availability, Preferences, UserOut


class SkillCreate(CamelModel):
    name: str
    level: SkillLevel = SkillLevel.INTERMEDIATE
    category: SkillCategory = SkillCategory.TECHNICAL


class EndorseRequest(CamelModel):
    note: Optional[str] = Field(default=None, max_length=settings.ENDORSEMENT_NOTE_MAX_LEN)

    @field_validator('note', mode='before')
    @classmethod
    def strip_note(cls, value):
        # length is checked on the trimmed note
        if isinstance(value, str):
            return value.strip()
        return value


class EndorsementOut(RecordOut):
    endorser: str
    note: Optional[str] = None


class SkillOut(RecordOut):
    name: str
    level: SkillLevel
    category: SkillCategory
    endorsements: list[EndorsementOut] = Field(default_factory=list)
    endorsement_count: int = 0


class AchievementCreate(CamelModel):
    title: str
    description: Optional[str] = None
    date: Optional[datetime.date] = None
    type: AchievementType = AchievementType.OTHER
    url: Optional[str] = None


class AchievementOut(RecordOut):
    title: str
    description: Optional[str] = None
    date: Optional[datetime.date] = None
    type: AchievementType
    url: Optional[str] = None


class ExperienceCreate(CamelModel):
    title: str
    company: str
    location: Optional[str] = None
    description: Optional[str] = None
    start_date: datetime.date
    end_date: Optional[datetime.date] = None
    is_current_position: bool = False
    type: ExperienceType = ExperienceType.FULL_TIME


class ExperienceOut(RecordOut):
    title: str
    company: str
    location: Optional[str] = None
    description: Optional[str] = None
    start_date: datetime.date
    end_date: Optional[datetime.date] = None
    is_current_position: bool
    type: ExperienceType


class EducationCreate(CamelModel):
    institution: str
    degree: str
    field: str
    start_year: int
    end_year: Optional[int] = None
    is_currently_studying: bool = False
    achievements: list[str] = Field(default_factory=list)


class EducationOut(RecordOut):
    institution: str
    degree: str
    field: str
    start_year: int
    end_year: Optional[int] = None
    is_currently_studying: bool
    achievements: list[str] = Field(default_factory=list)


class PortfolioCreate(CamelModel):
    title: str
    description: str
    type: PortfolioType = PortfolioType.PROJECT
    technologies: list[str] = Field(default_factory=list)
    url: Optional[str] = None
    github_url: Optional[str] = None
    images: list[str] = Field(default_factory=list)
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    is_ongoing: bool = False


class PortfolioOut(RecordOut):
    title: str
    description: str
    type: PortfolioType
    technologies: list[str] = Field(default_factory=list)
    url: Optional[str] = None
    github_url: Optional[str] = None
    images: list[str] = Field(default_factory=list)
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    is_ongoing: bool


class SkillList(CamelModel):
    skills: list[SkillOut]


class AchievementList(CamelModel):
    achievements: list[AchievementOut]


class ExperienceList(CamelModel):
    experience: list[ExperienceOut]


class EducationList(CamelModel):
    education: list[EducationOut]


class PortfolioList(CamelModel):
    portfolio: list[PortfolioOut]


class AvailabilityOut(CamelModel):
    availability: Availability


class PreferencesOut(CamelModel):
    preferences: Preferences


class ProfileOut(UserOut):
    availability: Availability
    preferences: Preferences
    skills: list[SkillOut] = Field(default_factory=list)
    achievements: list[AchievementOut] = Field(default_factory=list)
    experience: list[ExperienceOut] = Field(default_factory=list)
    education: list[EducationOut] = Field(default_factory=list)
    portfolio: list[PortfolioOut] = Field(default_factory=list)


class ProfileResponse(CamelModel):
    success: bool = True
    user: ProfileOut


class UserResponse(CamelModel):
    success: bool = True
    user: UserOut
