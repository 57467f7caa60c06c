import datetime
from dataclasses import dataclass
from typing import Any, Callable, Optional

from profile_hub.models.enums import AchievementType
from profile_hub.schemas.base import CamelModel
from profile_hub.sections.base import Section, field_of, month_year, record_id

ACHIEVEMENT_TYPE_LABELS = {
    AchievementType.AWARD.value: 'Award',
    AchievementType.CERTIFICATION.value: 'Certification',
    AchievementType.PUBLICATION.value: 'Publication',
    AchievementType.PROJECT.value: 'Project',
    AchievementType.OTHER.value: 'Other',
}


class AchievementDraft(CamelModel):
    title: str = ''
    description: str = ''
    date: Optional[datetime.date] = None
    type: AchievementType = AchievementType.AWARD
    url: str = ''


@dataclass(frozen=True)
class AchievementCard:
    id: Optional[str]
    title: str
    type_label: str
    description: str
    date_label: Optional[str]
    link_url: Optional[str]
    link_label: Optional[str]
    deletable: bool


class AccomplishmentsSection(Section):
    def __init__(
        self,
        achievements: Optional[list] = None,
        on_add_achievement: Optional[Callable[[AchievementDraft], Any]] = None,
        on_delete_achievement: Optional[Callable[[str], Any]] = None,
        current_user_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> None:
        super().__init__(achievements, current_user_id=current_user_id, user_id=user_id)
        self.on_add_achievement = on_add_achievement
        self.on_delete_achievement = on_delete_achievement

    def new_draft(self) -> AchievementDraft:
        return AchievementDraft()

    @property
    def achievements(self) -> list:
        return self.records

    @property
    def type_options(self) -> list[tuple[str, str]]:
        return list(ACHIEVEMENT_TYPE_LABELS.items())

    def close_dialog(self) -> None:
        super().close_dialog()
        self.reset_draft()

    def add_achievement(self) -> Any:
        # forwarded as typed, blank title included
        result = self.on_add_achievement(self.draft)
        self.close_dialog()
        return result

    submit = add_achievement

    def delete_achievement(self, index: int) -> Any:
        if not self.viewer.can_edit:
            return None
        return self.on_delete_achievement(self._id_at(index))

    def render(self) -> list[AchievementCard]:
        cards = []
        for achievement in self.records:
            url = field_of(achievement, 'url') or None
            cards.append(
                AchievementCard(
                    id=record_id(achievement),
                    title=field_of(achievement, 'title', ''),
                    type_label=str(field_of(achievement, 'type') or '').upper(),
                    description=field_of(achievement, 'description') or '',
                    date_label=month_year(field_of(achievement, 'date')),
                    link_url=url,
                    link_label='View Details' if url else None,
                    deletable=self.viewer.can_edit,
                )
            )
        return cards
