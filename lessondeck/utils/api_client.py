"""
Minimal JSON client for the course API.

Wraps urllib with the API base URL, JSON encoding and an optional bearer
token. No retries: callers decide what a failure means.
"""

import json
import logging
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen


logger = logging.getLogger(__name__)

USER_AGENT = "LessonDeck/0.1"
DEFAULT_TIMEOUT = 30  # seconds


class ApiError(Exception):
    """Request failed at the transport level or with an HTTP error status."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class ApiClient:
    def __init__(self, base_url: str, token: Optional[str] = None, timeout: float = DEFAULT_TIMEOUT):
        """
        Args:
            base_url: API root, e.g. http://localhost:5000/api
            token: Bearer token sent as Authorization header when set
            timeout: Socket timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def request(self, method: str, path: str, body: Optional[dict] = None) -> Any:
        """
        Send a request and decode the JSON response.

        Args:
            method: HTTP method
            path: Path below base_url, starting with "/"
            body: JSON-serializable request body

        Returns:
            Decoded JSON, or None for an empty response body

        Raises:
            ApiError: On network failure, HTTP error status or invalid JSON
        """
        url = f"{self.base_url}{path}"
        data = json.dumps(body).encode("utf-8") if body is not None else None
        req = Request(url, data=data, headers=self._headers(), method=method)

        try:
            with urlopen(req, timeout=self.timeout) as response:
                raw = response.read().decode("utf-8")
        except HTTPError as e:
            logger.warning(f"{method} {url} failed with HTTP {e.code}")
            raise ApiError(f"{method} {path} returned HTTP {e.code}", status=e.code) from e
        except (URLError, TimeoutError) as e:
            reason = getattr(e, "reason", e)
            logger.warning(f"{method} {url} failed: {reason}")
            raise ApiError(f"{method} {path} failed: {reason}") from e

        if not raw.strip():
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ApiError(f"{method} {path} returned invalid JSON: {e}") from e

    def get_json(self, path: str) -> Any:
        return self.request("GET", path)

    def post_json(self, path: str, body: dict) -> Any:
        return self.request("POST", path, body)
