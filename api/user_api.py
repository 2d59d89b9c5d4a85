from api.api_client import ApiClient
from models.user import User
from utils.errors import NotAuthenticated, TransportError


class UserAPI:
    def __init__(self, client: ApiClient):
        self._client = client

    def get_current(self) -> User | None:
        """The signed-in user, or None when the session is missing/expired."""
        try:
            row = self._client.get("/api/user")
        except NotAuthenticated:
            return None
        if not isinstance(row, dict) or "id" not in row:
            raise TransportError("Unexpected user profile from server.")
        return User(
            id=row["id"],
            email=row.get("email") or "",
            display_name=row.get("display_name") or "",
            avatar=row.get("avatar"),
        )

    def logout(self):
        """Ends the server session. The server answers with a redirect."""
        self._client.request("GET", "/auth/logout", expect_json=False)

    def login_url(self) -> str:
        return self._client.url("/auth/google")
