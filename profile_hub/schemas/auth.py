from typing import Optional
from pydantic import EmailStr
from profile_hub.schemas.base import CamelModel
from profile_hub.schemas.user import UserOut


class RegisterRequest(CamelModel):
    first_name: str
    last_name: str
    email: EmailStr
    password: str
    graduation_year: Optional[int] = None
    course: Optional[str] = None


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class RefreshRequest(CamelModel):
    refresh_token: str


class LogoutRequest(CamelModel):
    refresh_token: str


class TokenResponse(CamelModel):
    message: str
    token: str
    refresh_token: str


class AuthResponse(TokenResponse):
    user: UserOut


class MeResponse(CamelModel):
    user: UserOut
