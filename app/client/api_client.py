"""
Career Tracker API Client

Thin httpx wrapper issuing the same calls as the web front end.
Holds the bearer token after login/register and sends it on every request.

No retries and no timeouts beyond httpx defaults: a failed call raises
ApiError once and the caller decides what to do with it.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

RESOURCE_NAMES = ("internships", "skills", "certifications")


class ApiError(Exception):
    """Non-2xx response. `message` is the server's {message} when present."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class CareerTrackerClient:
    """
    Usage:
        client = CareerTrackerClient("http://localhost:8000")
        client.login("ada@example.com", "secret1")
        client.create("skills", {"name": "Python", "proficiency": 4})
        client.list("skills")

    Any httpx.Client (including FastAPI's TestClient) can be passed as
    `session`; paths are then resolved against that session's base_url.
    """

    def __init__(self, base_url: str = "", session: Optional[httpx.Client] = None,
                 token: Optional[str] = None, api_prefix: str = "/api"):
        self.session = session or httpx.Client(base_url=base_url)
        self.api_prefix = api_prefix
        self.token = token
        self.user: Optional[dict] = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def _headers(self) -> Dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def _request(self, method: str, path: str, **kwargs) -> Any:
        response = self.session.request(
            method, f"{self.api_prefix}{path}", headers=self._headers(), **kwargs
        )
        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = response.reason_phrase
            if isinstance(body, dict) and body.get("message"):
                message = body["message"]
            logger.error("%s %s failed: %s %s", method, path, response.status_code, message)
            raise ApiError(response.status_code, message)
        return response.json()

    @staticmethod
    def _check_resource(resource: str) -> None:
        if resource not in RESOURCE_NAMES:
            raise ValueError(f"Unknown resource '{resource}'")

    # ---------------- auth ----------------

    def register(self, name: str, email: str, password: str) -> dict:
        data = self._request("POST", "/auth/register",
                             json={"name": name, "email": email, "password": password})
        self.token, self.user = data["access_token"], data["user"]
        return self.user

    def login(self, email: str, password: str) -> dict:
        data = self._request("POST", "/auth/login", json={"email": email, "password": password})
        self.token, self.user = data["access_token"], data["user"]
        return self.user

    def logout(self) -> None:
        self.token = None
        self.user = None

    def me(self) -> dict:
        return self._request("GET", "/auth/me")

    def health(self) -> dict:
        return self._request("GET", "/health")

    # ---------------- records ----------------

    def list(self, resource: str) -> List[dict]:
        self._check_resource(resource)
        return self._request("GET", f"/{resource}")

    def get(self, resource: str, record_id: str) -> dict:
        self._check_resource(resource)
        return self._request("GET", f"/{resource}/{record_id}")

    def create(self, resource: str, payload: dict) -> dict:
        self._check_resource(resource)
        return self._request("POST", f"/{resource}", json=payload)

    def update(self, resource: str, record_id: str, payload: dict) -> dict:
        self._check_resource(resource)
        return self._request("PUT", f"/{resource}/{record_id}", json=payload)

    def delete(self, resource: str, record_id: str) -> dict:
        self._check_resource(resource)
        return self._request("DELETE", f"/{resource}/{record_id}")
