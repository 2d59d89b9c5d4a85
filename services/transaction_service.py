import logging

from api.transaction_api import TransactionAPI
from models.transaction import Transaction
from services.category_service import CategoryRegistry
from utils.currency import parse_magnitude, signed_amount
from utils.date_helpers import format_date, parse_date, today
from utils.errors import ValidationError

logger = logging.getLogger(__name__)


class TransactionStore:
    """In-memory copy of the user's transactions, kept in server order.

    Mutations are applied only after the server confirms them: a raised
    error always leaves the collection exactly as it was.
    """

    def __init__(self, tx_api: TransactionAPI, category_registry: CategoryRegistry):
        self._api = tx_api
        self._registry = category_registry
        self._transactions: list[Transaction] = []

    @property
    def transactions(self) -> list[Transaction]:
        return list(self._transactions)

    def __len__(self) -> int:
        return len(self._transactions)

    def get(self, tx_id: int) -> Transaction | None:
        return next((t for t in self._transactions if t.id == tx_id), None)

    def load_all(self) -> list[Transaction]:
        self._transactions = list(self._api.get_all())
        logger.info("Loaded %d transactions", len(self._transactions))
        return self.transactions

    def create(self, text: str, magnitude, category_name: str, date: str) -> Transaction:
        text, amount, date = self._prepare(text, magnitude, category_name, date)
        tx = self._api.create(text, amount, category_name, date)
        self._transactions.append(tx)
        logger.info("Created transaction %s (%s %s)", tx.id, tx.category, tx.amount)
        return tx

    def update(
        self, tx_id: int, text: str, magnitude, category_name: str, date: str
    ) -> Transaction:
        text, amount, date = self._prepare(text, magnitude, category_name, date)
        tx = self._api.update(tx_id, text, amount, category_name, date)
        self._transactions = [tx if t.id == tx_id else t for t in self._transactions]
        logger.info("Updated transaction %s (%s %s)", tx_id, tx.category, tx.amount)
        return tx

    def delete(self, tx_id: int):
        self._api.delete(tx_id)
        self._transactions = [t for t in self._transactions if t.id != tx_id]
        logger.info("Deleted transaction %s", tx_id)

    def clear_all(self):
        self._api.delete_all()
        self._transactions = []
        logger.info("Cleared all transactions")

    def _prepare(self, text, magnitude, category_name, date):
        """Validate form input and apply the sign policy for the category."""
        text = (text or "").strip()
        date = (date or "").strip()
        if not text or magnitude is None or str(magnitude).strip() == "" or not date:
            raise ValidationError("Please add a text, amount, and date")
        value = parse_magnitude(magnitude)
        d = parse_date(date)
        if d is None:
            raise ValidationError("Invalid date format. Use YYYY-MM-DD.")
        if d > today():
            raise ValidationError("Date cannot be in the future.")
        category = self._registry.resolve(category_name)
        return text, signed_amount(value, category.type), format_date(d)
