from typing import Optional
from profile_hub.models.enums import ProfileVisibility
from profile_hub.schemas.base import CamelModel, RecordOut


class Availability(CamelModel):
    for_mentoring: bool
    for_job_opportunities: bool
    for_networking: bool


class AvailabilityUpdate(CamelModel):
    for_mentoring: Optional[bool] = None
    for_job_opportunities: Optional[bool] = None
    for_networking: Optional[bool] = None


class Preferences(CamelModel):
    email_notifications: bool
    profile_visibility: ProfileVisibility
    show_email: bool
    show_phone: bool


class PreferencesUpdate(CamelModel):
    email_notifications: Optional[bool] = None
    profile_visibility: Optional[ProfileVisibility] = None
    show_email: Optional[bool] = None
    show_phone: Optional[bool] = None


class UserOut(RecordOut):
    # None when the viewer may not see it
    email: Optional[str] = None
    first_name: str
    last_name: str
    full_name: str
    is_active: bool
    is_verified: bool
    course: str = ''
    graduation_year: Optional[int] = None
    bio: str = ''
    location: str = ''
    current_position: Optional[str] = None
    company: Optional[str] = None
    work_status: str = ''
    linked_in: str = ''
    github: str = ''
    website: str = ''
    profile_picture: str = ''
    cover_picture: str = ''


class UserUpdate(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    course: Optional[str] = None
    graduation_year: Optional[int] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    current_position: Optional[str] = None
    company: Optional[str] = None
    work_status: Optional[str] = None
    linked_in: Optional[str] = None
    github: Optional[str] = None
    website: Optional[str] = None


class ProfilePictureOut(CamelModel):
    profile_picture: str


class CoverPictureOut(CamelModel):
    cover_picture: str
