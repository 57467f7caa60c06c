import datetime
from dataclasses import dataclass
from typing import Any, Callable, Optional

from pydantic import Field

from profile_hub.models.enums import PortfolioType
from profile_hub.schemas.base import CamelModel
from profile_hub.sections.base import Section, field_of, record_id


class PortfolioDraft(CamelModel):
    title: str = ''
    description: str = ''
    type: PortfolioType = PortfolioType.PROJECT
    technologies: list[str] = Field(default_factory=list)
    url: str = ''
    github_url: str = ''
    images: list[str] = Field(default_factory=list)
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    is_ongoing: bool = False


@dataclass(frozen=True)
class PortfolioCard:
    id: Optional[str]
    title: str
    type_label: str
    description: str
    technologies: tuple[str, ...]
    url: Optional[str]
    github_url: Optional[str]
    deletable: bool


class PortfolioSection(Section):
    def __init__(
        self,
        portfolio: Optional[list] = None,
        on_add_portfolio: Optional[Callable[[PortfolioDraft], Any]] = None,
        on_edit_portfolio: Optional[Callable[[str, PortfolioDraft], Any]] = None,
        on_delete_portfolio: Optional[Callable[[str], Any]] = None,
        current_user_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> None:
        super().__init__(portfolio, current_user_id=current_user_id, user_id=user_id)
        self.on_add_portfolio = on_add_portfolio
        self.on_edit_portfolio = on_edit_portfolio
        self.on_delete_portfolio = on_delete_portfolio
        self.mode = 'add'
        self.selected_id: Optional[str] = None

    def new_draft(self) -> PortfolioDraft:
        return PortfolioDraft()

    @property
    def portfolio(self) -> list:
        return self.records

    def close_dialog(self) -> None:
        super().close_dialog()
        self.reset_draft()
        self.mode = 'add'
        self.selected_id = None

    def start_edit(self, item: Any) -> None:
        if not self.viewer.can_edit:
            return
        data = item if isinstance(item, dict) else item.model_dump(by_alias=True)
        self.draft = PortfolioDraft.model_validate(
            {key: value for key, value in data.items() if value is not None}
        )
        self.mode = 'edit'
        self.selected_id = record_id(item)
        self.open_dialog()

    def add_technology(self, name: str) -> None:
        name = name.strip()
        if not name or name in self.draft.technologies:
            return
        self.draft = self.draft.model_copy(update={'technologies': [*self.draft.technologies, name]})

    def remove_technology(self, name: str) -> None:
        remaining = [tech for tech in self.draft.technologies if tech != name]
        self.draft = self.draft.model_copy(update={'technologies': remaining})

    def submit(self) -> Any:
        if self.mode == 'edit':
            result = self.on_edit_portfolio(self.selected_id, self.draft)
        else:
            result = self.on_add_portfolio(self.draft)
        self.close_dialog()
        return result

    def delete_portfolio(self, index: int) -> Any:
        if not self.viewer.can_edit:
            return None
        return self.on_delete_portfolio(self._id_at(index))

    def render(self) -> list[PortfolioCard]:
        return [
            PortfolioCard(
                id=record_id(item),
                title=field_of(item, 'title', ''),
                type_label=str(field_of(item, 'type') or '').upper(),
                description=field_of(item, 'description') or '',
                technologies=tuple(field_of(item, 'technologies') or ()),
                url=field_of(item, 'url') or None,
                github_url=field_of(item, 'githubUrl') or None,
                deletable=self.viewer.can_edit,
            )
            for item in self.records
        ]
