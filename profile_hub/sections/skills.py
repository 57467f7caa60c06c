from dataclasses import dataclass
from typing import Any, Callable, Optional

from profile_hub.models.enums import SkillCategory, SkillLevel
from profile_hub.schemas.base import CamelModel
from profile_hub.sections.base import Section, field_of, record_id

LEVEL_COLORS = {
    SkillLevel.BEGINNER.value: 'default',
    SkillLevel.INTERMEDIATE.value: 'info',
    SkillLevel.ADVANCED.value: 'warning',
    SkillLevel.EXPERT.value: 'error',
}


def level_color(level: Any) -> str:
    if isinstance(level, SkillLevel):
        level = level.value
    return LEVEL_COLORS.get(level, 'default')


def endorsement_count(skill: Any) -> int:
    return len(field_of(skill, 'endorsements') or [])


class SkillDraft(CamelModel):
    name: str = ''
    level: SkillLevel = SkillLevel.INTERMEDIATE
    category: SkillCategory = SkillCategory.TECHNICAL


@dataclass(frozen=True)
class SkillChip:
    id: Optional[str]
    label: str
    color: str
    endorsement_count: int
    clickable: bool


class SkillsSection(Section):
    def __init__(
        self,
        skills: Optional[list] = None,
        on_add_skill: Optional[Callable[[SkillDraft], Any]] = None,
        on_endorse_skill: Optional[Callable[[Any], Any]] = None,
        current_user_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> None:
        super().__init__(skills, current_user_id=current_user_id, user_id=user_id)
        self.on_add_skill = on_add_skill
        self.on_endorse_skill = on_endorse_skill

    def new_draft(self) -> SkillDraft:
        return SkillDraft()

    @property
    def skills(self) -> list:
        return self.records

    @property
    def can_submit(self) -> bool:
        return bool(self.draft.name)

    def add_skill(self) -> Any:
        """Hand the draft to the owner, then reset the form and close the dialog.

        An empty name is not rejected here; ``can_submit`` is what keeps the
        button disabled.
        """
        result = self.on_add_skill(self.draft)
        self.reset_draft()
        self.close_dialog()
        return result

    submit = add_skill

    def endorse_skill(self, skill: Any) -> Any:
        if not self.viewer.can_endorse:
            return None
        return self.on_endorse_skill(skill)

    click_skill = endorse_skill

    def render(self) -> list[SkillChip]:
        clickable = self.viewer.can_endorse
        return [
            SkillChip(
                id=record_id(skill),
                label=field_of(skill, 'name', ''),
                color=level_color(field_of(skill, 'level')),
                endorsement_count=endorsement_count(skill),
                clickable=clickable,
            )
            for skill in self.records
        ]
