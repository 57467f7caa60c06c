"""Owner of the authoritative profile lists.

Sections receive lists from here and report user actions back through the
callbacks below. Each callback issues one API call and, once it succeeds,
swaps in the list the server returned and pushes it to every section built
from this container. A failed call raises :class:`ApiError` and leaves the
lists as they were.
"""
from typing import Any, Optional

from profile_hub.client.api_client import ProfileApiClient
from profile_hub.sections.accomplishments import AccomplishmentsSection
from profile_hub.sections.base import Section, record_id
from profile_hub.sections.experience import ExperienceSection
from profile_hub.sections.portfolio import PortfolioSection
from profile_hub.sections.skills import SkillsSection
from profile_hub.services.permissions import ProfileViewer, viewer_for

LIST_KEYS = ('skills', 'achievements', 'experience', 'education', 'portfolio')


class ProfileContainer:
    def __init__(self, client: ProfileApiClient, user_id: Optional[str] = None) -> None:
        self.client = client
        self.user_id = user_id or client.user_id
        self.skills: list = []
        self.achievements: list = []
        self.experience: list = []
        self.education: list = []
        self.portfolio: list = []
        self.availability: dict = {}
        self.preferences: dict = {}
        self._bound: list[tuple[str, Section]] = []

    @property
    def current_user_id(self) -> Optional[str]:
        return self.client.user_id

    @property
    def viewer(self) -> ProfileViewer:
        return viewer_for(self.current_user_id, self.user_id)

    def _replace(self, key: str, records: Optional[list]) -> list:
        fresh = list(records or [])
        setattr(self, key, fresh)
        for bound_key, section in self._bound:
            if bound_key == key:
                section.update(fresh)
        return fresh

    def load(self) -> dict:
        if self.viewer.is_owner or self.user_id is None:
            data = self.client.get_profile()
        else:
            data = self.client.get_profile(self.user_id)
        user = data.get('user') or {}
        self.user_id = user.get('_id', self.user_id)
        for key in LIST_KEYS:
            self._replace(key, user.get(key))
        self.availability = dict(user.get('availability') or {})
        self.preferences = dict(user.get('preferences') or {})
        return user

    # skills

    def add_skill(self, draft: Any) -> list:
        data = self.client.add_skill(draft)
        return self._replace('skills', data.get('skills'))

    def endorse_skill(self, skill: Any, note: Optional[str] = None) -> list:
        data = self.client.endorse_skill(self.user_id, record_id(skill), note=note)
        return self._replace('skills', data.get('skills'))

    def remove_endorsement(self, skill: Any) -> list:
        data = self.client.remove_endorsement(self.user_id, record_id(skill))
        return self._replace('skills', data.get('skills'))

    def delete_skill(self, skill_id: str) -> list:
        data = self.client.delete_skill(skill_id)
        return self._replace('skills', data.get('skills'))

    # achievements

    def add_achievement(self, draft: Any) -> list:
        data = self.client.add_achievement(draft)
        return self._replace('achievements', data.get('achievements'))

    def delete_achievement(self, achievement_id: str) -> list:
        data = self.client.delete_achievement(achievement_id)
        return self._replace('achievements', data.get('achievements'))

    # experience

    def add_experience(self, draft: Any) -> list:
        data = self.client.add_experience(draft)
        return self._replace('experience', data.get('experience'))

    def delete_experience(self, experience_id: str) -> list:
        data = self.client.delete_experience(experience_id)
        return self._replace('experience', data.get('experience'))

    # education

    def add_education(self, draft: Any) -> list:
        data = self.client.add_education(draft)
        return self._replace('education', data.get('education'))

    def delete_education(self, education_id: str) -> list:
        data = self.client.delete_education(education_id)
        return self._replace('education', data.get('education'))

    # portfolio

    def add_portfolio(self, draft: Any) -> list:
        data = self.client.add_portfolio_item(draft)
        return self._replace('portfolio', data.get('portfolio'))

    def edit_portfolio(self, item_id: str, draft: Any) -> list:
        data = self.client.update_portfolio_item(item_id, draft)
        return self._replace('portfolio', data.get('portfolio'))

    def delete_portfolio(self, item_id: str) -> list:
        data = self.client.delete_portfolio_item(item_id)
        return self._replace('portfolio', data.get('portfolio'))

    # settings

    def update_availability(self, **flags: Optional[bool]) -> dict:
        data = self.client.update_availability(**flags)
        self.availability = dict(data.get('availability') or {})
        return self.availability

    # sections

    def _bind(self, key: str, section: Section) -> Section:
        self._bound.append((key, section))
        return section

    def skills_section(self) -> SkillsSection:
        return self._bind('skills', SkillsSection(
            self.skills,
            on_add_skill=self.add_skill,
            on_endorse_skill=self.endorse_skill,
            current_user_id=self.current_user_id,
            user_id=self.user_id,
        ))

    def accomplishments_section(self) -> AccomplishmentsSection:
        return self._bind('achievements', AccomplishmentsSection(
            self.achievements,
            on_add_achievement=self.add_achievement,
            on_delete_achievement=self.delete_achievement,
            current_user_id=self.current_user_id,
            user_id=self.user_id,
        ))

    def experience_section(self) -> ExperienceSection:
        return self._bind('experience', ExperienceSection(
            self.experience,
            on_add_experience=self.add_experience,
            on_delete_experience=self.delete_experience,
            current_user_id=self.current_user_id,
            user_id=self.user_id,
        ))

    def portfolio_section(self) -> PortfolioSection:
        return self._bind('portfolio', PortfolioSection(
            self.portfolio,
            on_add_portfolio=self.add_portfolio,
            on_edit_portfolio=self.edit_portfolio,
            on_delete_portfolio=self.delete_portfolio,
            current_user_id=self.current_user_id,
            user_id=self.user_id,
        ))
