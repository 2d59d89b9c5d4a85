from decimal import Decimal

from api.api_client import ApiClient
from models.transaction import Transaction
from utils.currency import to_decimal
from utils.date_helpers import normalize_date
from utils.errors import TransportError


class TransactionAPI:
    def __init__(self, client: ApiClient):
        self._client = client

    def _row_to_model(self, row: dict) -> Transaction:
        if not isinstance(row, dict) or "id" not in row:
            raise TransportError("Unexpected transaction from server.")
        try:
            amount = to_decimal(row.get("amount"))
        except ValueError as e:
            raise TransportError(f"Bad amount in transaction {row['id']}.") from e
        return Transaction(
            id=row["id"],
            text=row.get("text") or "",
            amount=amount,
            category=row.get("category") or "",
            date=normalize_date(row.get("date")),
            user_id=row.get("user_id"),
        )

    @staticmethod
    def _payload(text: str, amount: Decimal, category: str, date: str) -> dict:
        # JSON has no decimal type; two-place values survive float repr exactly
        return {"text": text, "amount": float(amount), "category": category, "date": date}

    def get_all(self) -> list[Transaction]:
        """Ordered by date descending, then id descending (server order)."""
        rows = self._client.get("/api/transactions")
        if not isinstance(rows, list):
            raise TransportError("Unexpected transaction list from server.")
        return [self._row_to_model(r) for r in rows]

    def create(self, text: str, amount: Decimal, category: str, date: str) -> Transaction:
        row = self._client.post(
            "/api/transactions", self._payload(text, amount, category, date)
        )
        return self._row_to_model(row)

    def update(
        self, tx_id: int, text: str, amount: Decimal, category: str, date: str
    ) -> Transaction:
        row = self._client.put(
            f"/api/transactions/{tx_id}", self._payload(text, amount, category, date)
        )
        return self._row_to_model(row)

    def delete(self, tx_id: int):
        self._client.delete(f"/api/transactions/{tx_id}")

    def delete_all(self):
        self._client.delete("/api/transactions")
