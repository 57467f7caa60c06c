import datetime
from typing import Any, Optional

from profile_hub.services.permissions import ProfileViewer, viewer_for


def record_id(record: Any) -> Optional[str]:
    if isinstance(record, dict):
        return record.get('_id') or record.get('id')
    return getattr(record, 'id', None)


def field_of(record: Any, name: str, default: Any = None) -> Any:
    if isinstance(record, dict):
        return record.get(name, default)
    return getattr(record, name, default)


def parse_date(value: Any) -> Optional[datetime.date]:
    if value in (None, ''):
        return None
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    return datetime.date.fromisoformat(str(value)[:10])


def month_year(value: Any, short: bool = False) -> Optional[str]:
    parsed = parse_date(value)
    if parsed is None:
        return None
    return parsed.strftime('%b %Y' if short else '%B %Y')


class Section:
    """Holds one profile list handed down by its owner plus the compose dialog.

    The list is replaced wholesale through :meth:`update`; the section never
    edits it locally.
    """

    def __init__(
        self,
        records: Optional[list] = None,
        current_user_id: Optional[str] = None,
        user_id: Optional[str] = None,
    ) -> None:
        self.records: list = list(records or [])
        self.viewer: ProfileViewer = viewer_for(current_user_id, user_id)
        self.dialog_open = False
        self.draft = self.new_draft()

    def new_draft(self):
        raise NotImplementedError

    @property
    def show_add_control(self) -> bool:
        return self.viewer.can_edit

    def update(self, records: Optional[list]) -> None:
        self.records = list(records or [])

    def open_dialog(self) -> None:
        self.dialog_open = True

    def close_dialog(self) -> None:
        self.dialog_open = False

    def reset_draft(self) -> None:
        self.draft = self.new_draft()

    def edit_draft(self, **changes: Any) -> None:
        data = self.draft.model_dump()
        data.update(changes)
        self.draft = type(self.draft).model_validate(data)

    def _id_at(self, index: int) -> Optional[str]:
        # positions are resolved against the list as rendered right now
        if index < 0 or index >= len(self.records):
            raise IndexError(f"no record at position {index}")
        return record_id(self.records[index])
