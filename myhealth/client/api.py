"""Thin HTTP client for the backend's /api routes."""

import logging
from typing import Any, Dict, List, Optional
import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx response from the backend."""

    def __init__(self, status_code: int, detail: Any):
        super().__init__(f"HTTP {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail

    @property
    def is_transient(self) -> bool:
        """Server-side failure that may succeed on a later attempt."""
        return self.status_code >= 500

    @property
    def is_auth_error(self) -> bool:
        return self.status_code in (401, 403)


class HealthChatAPI:
    """
    Wraps an ``httpx.Client`` (or FastAPI's ``TestClient``).

    Transport failures surface as ``httpx.TransportError``; HTTP error
    statuses as ``ApiError``.
    """

    def __init__(self, http: httpx.Client, token: Optional[str] = None):
        self.http = http
        self.token = token

    def _headers(self) -> Dict[str, str]:
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}

    def _request(self, method: str, path: str, **kwargs) -> Any:
        response = self.http.request(method, path, headers=self._headers(), **kwargs)
        if response.status_code >= 400:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            raise ApiError(response.status_code, detail)
        return response.json()

    # Auth
    def register(
        self,
        email: str,
        password: str,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> int:
        data = self._request(
            "POST",
            "/api/auth/register",
            json={
                "email": email,
                "password": password,
                "firstName": first_name,
                "lastName": last_name,
            },
        )
        return data["id"]

    def login(self, email: str, password: str) -> Dict[str, Any]:
        return self._request(
            "POST", "/api/auth/login", json={"email": email, "password": password}
        )

    # Profile
    def get_profile(self) -> Dict[str, Any]:
        return self._request("GET", "/api/user/profile")

    def update_profile(self, fields: Dict[str, Any]) -> None:
        self._request("PUT", "/api/user/profile", json=fields)

    # Chat
    def list_sessions(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/chat/sessions")

    def create_session(self, title: str) -> int:
        return self._request("POST", "/api/chat/sessions", json={"title": title})["id"]

    def list_history(self, session_id: Optional[int] = None) -> List[Dict[str, Any]]:
        params = {"sessionId": session_id} if session_id is not None else None
        return self._request("GET", "/api/chat/history", params=params)

    def append_history(self, role: str, content: str, session_id: Optional[int]) -> None:
        self._request(
            "POST",
            "/api/chat/history",
            json={"role": role, "content": content, "sessionId": session_id},
        )

    # Reports
    def upload_report(
        self, filename: str, data: bytes, mime_type: str, analysis: str
    ) -> None:
        self._request(
            "POST",
            "/api/reports/upload",
            files={"report": (filename, data, mime_type)},
            data={"analysis": analysis},
        )

    def list_reports(self) -> List[Dict[str, Any]]:
        return self._request("GET", "/api/reports")
