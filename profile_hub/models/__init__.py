from profile_hub.models.base import IDModel, ProfileRecordModel, TimestampModel
from profile_hub.models.user import User
from profile_hub.models.refresh_token import RefreshToken
from profile_hub.models.skill import Skill
from profile_hub.models.endorsement import SkillEndorsement
from profile_hub.models.achievement import Achievement
from profile_hub.models.experience import Experience
from profile_hub.models.education import Education
from profile_hub.models.portfolio import PortfolioItem

__all__ = [
    'IDModel',
    'TimestampModel',
    'ProfileRecordModel',
    'User',
    'RefreshToken',
    'Skill',
    'SkillEndorsement',
    'Achievement',
    'Experience',
    'Education',
    'PortfolioItem',
]
