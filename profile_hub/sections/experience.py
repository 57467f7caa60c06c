import datetime
from dataclasses import dataclass
from typing import Any, Callable, Optional

from profile_hub.models.enums import ExperienceType
from profile_hub.schemas.base import CamelModel
from profile_hub.sections.base import Section, field_of, month_year, record_id


class ExperienceDraft(CamelModel):
    title: str = ''
    company: str = ''
    location: str = ''
    description: str = ''
    type: ExperienceType = ExperienceType.FULL_TIME
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    is_current_position: bool = False


@dataclass(frozen=True)
class ExperienceCard:
    id: Optional[str]
    title: str
    company: str
    location: str
    type_label: str
    period_label: str
    description: str
    deletable: bool


def period_label(experience: Any) -> str:
    start = month_year(field_of(experience, 'startDate'), short=True) or ''
    if field_of(experience, 'isCurrentPosition'):
        end = 'Present'
    else:
        end = month_year(field_of(experience, 'endDate'), short=True) or ''
    if not end:
        return start
    return f"{start} - {end}"


class ExperienceSection(Section):
    def __init__(
        self,
        experience: Optional[list] = None,
        on_add_experience: Optional[Callable[[ExperienceDraft], Any]] = None,
        on_delete_experience: Optional[Callable[[str], Any]] = None,
        current_user_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> None:
        super().__init__(experience, current_user_id=current_user_id, user_id=user_id)
        self.on_add_experience = on_add_experience
        self.on_delete_experience = on_delete_experience

    def new_draft(self) -> ExperienceDraft:
        return ExperienceDraft()

    @property
    def experience(self) -> list:
        return self.records

    def add_experience(self) -> Any:
        result = self.on_add_experience(self.draft)
        self.reset_draft()
        self.close_dialog()
        return result

    submit = add_experience

    def delete_experience(self, experience_id: str) -> Any:
        if not self.viewer.can_edit:
            return None
        return self.on_delete_experience(experience_id)

    def render(self) -> list[ExperienceCard]:
        return [
            ExperienceCard(
                id=record_id(item),
                title=field_of(item, 'title', ''),
                company=field_of(item, 'company', ''),
                location=field_of(item, 'location') or '',
                type_label=str(field_of(item, 'type') or '').replace('-', ' ').title(),
                period_label=period_label(item),
                description=field_of(item, 'description') or '',
                deletable=self.viewer.can_edit,
            )
            for item in self.records
        ]
