"""Who may do what on a profile page.

Owners add and delete their own records; everyone else may only endorse.
An anonymous viewer never owns a profile, and a viewer whose id matches the
profile (even when both are unknown) never endorses it.
Every section and route asks a :class:`ProfileViewer` instead of comparing
user ids inline.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ProfileViewer:
    current_user_id: Optional[str]
    profile_user_id: Optional[str]

    @property
    def is_owner(self) -> bool:
        return self.current_user_id is not None and self.current_user_id == self.profile_user_id

    @property
    def can_edit(self) -> bool:
        return self.is_owner

    @property
    def can_endorse(self) -> bool:
        return self.current_user_id != self.profile_user_id


def viewer_for(current_user_id: Optional[str], profile_user_id: Optional[str]) -> ProfileViewer:
    return ProfileViewer(current_user_id=current_user_id, profile_user_id=profile_user_id)
