from enum import Enum
import sqlalchemy as sa
from sqlalchemy import Column


class SkillLevel(str, Enum):
    BEGINNER = 'beginner'
    INTERMEDIATE = 'intermediate'
    ADVANCED = 'advanced'
    EXPERT = 'expert'


class SkillCategory(str, Enum):
    TECHNICAL = 'technical'
    SOFT = 'soft'
    LANGUAGE = 'language'
    OTHER = 'other'


class AchievementType(str, Enum):
    AWARD = 'award'
    CERTIFICATION = 'certification'
    PUBLICATION = 'publication'
    PROJECT = 'project'
    OTHER = 'other'


class ExperienceType(str, Enum):
    FULL_TIME = 'full-time'
    PART_TIME = 'part-time'
    INTERNSHIP = 'internship'
    FREELANCE = 'freelance'
    CONTRACT = 'contract'


class PortfolioType(str, Enum):
    PROJECT = 'project'
    RESEARCH = 'research'
    PUBLICATION = 'publication'
    PRESENTATION = 'presentation'
    OTHER = 'other'


class ProfileVisibility(str, Enum):
    PUBLIC = 'public'
    ALUMNI_ONLY = 'alumni-only'
    CONNECTIONS_ONLY = 'connections-only'


def enum_column(enum_cls: type[Enum], name: str) -> Column:
    return Column(
        sa.Enum(
            enum_cls,
            values_callable=lambda enum: [item.value for item in enum],
            name=name,
        ),
        nullable=False,
    )
