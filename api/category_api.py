from api.api_client import ApiClient
from models.category import Category
from utils.constants import FALLBACK_CATEGORY_COLOR
from utils.errors import TransportError


class CategoryAPI:
    def __init__(self, client: ApiClient):
        self._client = client

    def _row_to_model(self, row: dict) -> Category:
        if not isinstance(row, dict) or not row.get("name"):
            raise TransportError("Unexpected category from server.")
        return Category(
            id=row.get("id"),
            name=row["name"],
            type=row.get("type") or "expense",
            color_hex=row.get("color") or FALLBACK_CATEGORY_COLOR,
            user_id=row.get("user_id"),
        )

    def get_all(self) -> list[Category]:
        """Global defaults plus the caller's own categories."""
        rows = self._client.get("/api/categories")
        if not isinstance(rows, list):
            raise TransportError("Unexpected category list from server.")
        return [self._row_to_model(r) for r in rows]

    def create(self, name: str, type_: str) -> Category:
        row = self._client.post("/api/categories", {"name": name, "type": type_})
        return self._row_to_model(row)

    def delete(self, category_id: int):
        self._client.delete(f"/api/categories/{category_id}")
