import logging

import requests

from utils.constants import REQUEST_TIMEOUT, SESSION_COOKIE_NAME
from utils.errors import NotAuthenticated, NotFoundOrUnauthorized, TransportError

logger = logging.getLogger(__name__)


class ApiClient:
    """Thin wrapper over a requests.Session bound to the tracker server.

    Every call returns the decoded JSON body or raises a TransportError
    subclass; callers never see requests exceptions or raw responses.
    """

    def __init__(
        self,
        base_url: str,
        session_cookie: str | None = None,
        timeout: float = REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"Accept": "application/json"})
        if session_cookie:
            self.set_session_cookie(session_cookie)

    def set_session_cookie(self, value: str | None):
        self._session.cookies.pop(SESSION_COOKIE_NAME, None)
        if value:
            self._session.cookies.set(SESSION_COOKIE_NAME, value)

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def get(self, path: str):
        return self.request("GET", path)

    def post(self, path: str, payload: dict):
        return self.request("POST", path, payload)

    def put(self, path: str, payload: dict):
        return self.request("PUT", path, payload)

    def delete(self, path: str):
        return self.request("DELETE", path)

    def request(
        self, method: str, path: str, payload: dict | None = None, expect_json: bool = True
    ):
        try:
            resp = self._session.request(
                method, self.url(path), json=payload, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise TransportError(f"Could not reach the server: {e}") from e

        logger.debug("%s %s -> %s", method, path, resp.status_code)

        if resp.status_code == 401:
            raise NotAuthenticated("Not signed in.", status=401)
        if resp.status_code in (403, 404):
            raise NotFoundOrUnauthorized(
                self._error_message(resp) or "Not found or not authorized.",
                status=resp.status_code,
            )
        if not resp.ok:
            logger.warning("%s %s returned %s", method, path, resp.status_code)
            raise TransportError(
                self._error_message(resp) or f"Server error ({resp.status_code}).",
                status=resp.status_code,
            )

        if not expect_json or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise TransportError(
                "Server sent an unreadable response.", status=resp.status_code
            ) from e

    def close(self):
        self._session.close()

    @staticmethod
    def _error_message(resp: requests.Response) -> str:
        """The server answers errors with a JSON string, {'msg': ...} or plain text."""
        try:
            body = resp.json()
        except ValueError:
            return (resp.text or "").strip()[:200]
        if isinstance(body, str):
            return body
        if isinstance(body, dict):
            return str(body.get("msg") or body.get("error") or "")
        return ""
