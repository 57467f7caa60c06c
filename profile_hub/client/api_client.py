"""HTTP client for the profile API.

Every call after :meth:`ProfileApiClient.login` carries the bearer token the
server handed out. Non-2xx answers and transport failures surface as
:class:`ApiError`; nothing is retried.
"""
import mimetypes
from typing import Any, Optional

import requests
from loguru import logger
from pydantic_core import to_jsonable_python

DEFAULT_BASE_URL = 'http://localhost:8000/api'


class ApiError(Exception):
    def __init__(
        self,
        message: str,
        status_code: int = 0,
        reason: Optional[str] = None,
        method: Optional[str] = None,
        url: Optional[str] = None,
        request_body: Any = None,
        response_body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.reason = reason
        self.method = method
        self.url = url
        self.request_body = request_body
        self.response_body = response_body

    @property
    def detail(self) -> Any:
        if self.response_body is not None:
            return self.response_body
        return self.message

    def to_dict(self) -> dict:
        return {
            'message': self.message,
            'detail': self.detail,
            'status': self.status_code,
            'statusText': self.reason,
            'data': self.response_body,
            'config': {
                'url': self.url,
                'method': self.method,
                'data': self.request_body,
            },
        }


def _safe_json(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def _encode(payload: Any) -> Any:
    if payload is None:
        return None
    return to_jsonable_python(payload, by_alias=True)


def _image_part(filename: str, content: Any, content_type: Optional[str]) -> dict:
    content_type = content_type or mimetypes.guess_type(filename)[0] or 'application/octet-stream'
    return {'image': (filename, content, content_type)}


class ProfileApiClient:
    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ) -> None:
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout
        self.token: Optional[str] = None
        self.refresh_token: Optional[str] = None
        self.user_id: Optional[str] = None

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _set_token(self, token: Optional[str]) -> None:
        self.token = token
        if token:
            self.session.headers['Authorization'] = f"Bearer {token}"
        else:
            self.session.headers.pop('Authorization', None)

    def request(self, method: str, path: str, payload: Any = None, files: Optional[dict] = None) -> dict:
        method = method.upper()
        url = self._url(path)
        body = _encode(payload)
        try:
            if files:
                response = self.session.request(method, url, files=files, timeout=self.timeout)
            else:
                response = self.session.request(method, url, json=body, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning('client.request.failed', method=method, url=url, error=str(exc))
            raise ApiError(str(exc), method=method, url=url, request_body=body) from exc

        if response.status_code >= 400:
            data = _safe_json(response)
            if data is None:
                data = response.text or None
            logger.warning('client.request.rejected', method=method, url=url, status=response.status_code)
            raise ApiError(
                f"{method} {url} failed with status {response.status_code}",
                status_code=response.status_code,
                reason=response.reason,
                method=method,
                url=url,
                request_body=body,
                response_body=data,
            )
        if not response.content:
            return {}
        data = _safe_json(response)
        if not isinstance(data, dict):
            logger.warning('client.response.malformed', method=method, url=url, status=response.status_code)
            raise ApiError(
                f"{method} {url} returned a body that is not a JSON object",
                status_code=response.status_code,
                reason=response.reason,
                method=method,
                url=url,
                request_body=body,
                response_body=data if data is not None else response.text,
            )
        return data

    # auth

    def register(self, first_name: str, last_name: str, email: str, password: str, **extra: Any) -> dict:
        payload = {'firstName': first_name, 'lastName': last_name, 'email': email, 'password': password}
        payload.update(extra)
        data = self.request('POST', '/auth/register', payload)
        self._remember_login(data)
        return data

    def login(self, email: str, password: str) -> dict:
        data = self.request('POST', '/auth/login', {'email': email, 'password': password})
        self._remember_login(data)
        return data

    def _remember_login(self, data: dict) -> None:
        self.refresh_token = data.get('refreshToken')
        self.user_id = (data.get('user') or {}).get('_id')
        self._set_token(data.get('token'))

    def me(self) -> dict:
        return self.request('GET', '/auth/me')

    def refresh(self) -> dict:
        data = self.request('POST', '/auth/refresh', {'refreshToken': self.refresh_token})
        self.refresh_token = data.get('refreshToken')
        self._set_token(data.get('token'))
        return data

    def logout(self) -> dict:
        data = self.request('POST', '/auth/logout', {'refreshToken': self.refresh_token})
        self.refresh_token = None
        self.user_id = None
        self._set_token(None)
        return data

    # profile

    def get_profile(self, user_id: Optional[str] = None) -> dict:
        if user_id is None:
            return self.request('GET', '/user/profile')
        return self.request('GET', f"/user/{user_id}/profile")

    def update_profile(self, changes: Any) -> dict:
        return self.request('PUT', '/user/profile', changes)

    def add_skill(self, skill: Any) -> dict:
        return self.request('POST', '/user/skills', skill)

    def delete_skill(self, skill_id: str) -> dict:
        return self.request('DELETE', f"/user/skills/{skill_id}")

    def endorse_skill(self, user_id: str, skill_id: str, note: Optional[str] = None) -> dict:
        return self.request('POST', f"/user/{user_id}/skills/{skill_id}/endorse", {'note': note})

    def remove_endorsement(self, user_id: str, skill_id: str) -> dict:
        return self.request('DELETE', f"/user/{user_id}/skills/{skill_id}/endorse")

    def add_achievement(self, achievement: Any) -> dict:
        return self.request('POST', '/user/achievements', achievement)

    def delete_achievement(self, achievement_id: str) -> dict:
        return self.request('DELETE', f"/user/achievements/{achievement_id}")

    def add_experience(self, experience: Any) -> dict:
        return self.request('POST', '/user/experience', experience)

    def update_experience(self, experience_id: str, experience: Any) -> dict:
        return self.request('PUT', f"/user/experience/{experience_id}", experience)

    def delete_experience(self, experience_id: str) -> dict:
        return self.request('DELETE', f"/user/experience/{experience_id}")

    def add_education(self, education: Any) -> dict:
        return self.request('POST', '/user/education', education)

    def update_education(self, education_id: str, education: Any) -> dict:
        return self.request('PUT', f"/user/education/{education_id}", education)

    def delete_education(self, education_id: str) -> dict:
        return self.request('DELETE', f"/user/education/{education_id}")

    def add_portfolio_item(self, item: Any) -> dict:
        return self.request('POST', '/user/portfolio', item)

    def update_portfolio_item(self, item_id: str, item: Any) -> dict:
        return self.request('PUT', f"/user/portfolio/{item_id}", item)

    def delete_portfolio_item(self, item_id: str) -> dict:
        return self.request('DELETE', f"/user/portfolio/{item_id}")

    def upload_portfolio_image(self, item_id: str, filename: str, content: Any, content_type: Optional[str] = None) -> dict:
        return self.request('POST', f"/user/portfolio/{item_id}/images", files=_image_part(filename, content, content_type))

    def update_availability(
        self,
        for_mentoring: Optional[bool] = None,
        for_job_opportunities: Optional[bool] = None,
        for_networking: Optional[bool] = None,
    ) -> dict:
        flags = {
            'forMentoring': for_mentoring,
            'forJobOpportunities': for_job_opportunities,
            'forNetworking': for_networking,
        }
        return self.request('PATCH', '/user/availability', {k: v for k, v in flags.items() if v is not None})

    def update_privacy(self, changes: Any) -> dict:
        return self.request('PATCH', '/user/privacy', changes)

    def upload_profile_picture(self, filename: str, content: Any, content_type: Optional[str] = None) -> dict:
        return self.request('POST', '/user/profile-picture', files=_image_part(filename, content, content_type))

    def upload_cover_picture(self, filename: str, content: Any, content_type: Optional[str] = None) -> dict:
        return self.request('POST', '/user/cover-picture', files=_image_part(filename, content, content_type))
