"""Period filtering and the derived numbers shown above the list and in the chart.

All sums are accumulated as Decimal so that many small amounts add up
exactly (19 x 0.01 == 0.19).
"""
from collections.abc import Iterable
from decimal import Decimal

from models.transaction import Transaction
from services.category_service import CategoryRegistry
from utils.constants import OTHER_CATEGORY
from utils.currency import round_money, to_decimal
from utils.date_helpers import month_of, parse_month
from utils.errors import ValidationError


def select_period(transactions: Iterable[Transaction], period: str) -> list[Transaction]:
    """Transactions dated within the YYYY-MM period, in their original order."""
    if parse_month(period) is None:
        raise ValidationError(f"Invalid month: {period}")
    return [t for t in transactions if month_of(t.date) == period]


def totals(transactions: Iterable[Transaction]) -> dict:
    """Return {balance, income, expense}; expense is reported as a positive number."""
    income = Decimal("0")
    spent = Decimal("0")
    for t in transactions:
        amount = to_decimal(t.amount)
        if amount > 0:
            income += amount
        elif amount < 0:
            spent += amount
    return {
        "balance": round_money(income + spent),
        "income": round_money(income),
        "expense": round_money(-spent),
    }


def by_category(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Sum of magnitudes per stored category label, in order of first appearance."""
    result: dict[str, Decimal] = {}
    for t in transactions:
        label = t.category or OTHER_CATEGORY
        result[label] = result.get(label, Decimal("0")) + abs(to_decimal(t.amount))
    return result


class ReportService:
    def __init__(self, category_registry: CategoryRegistry):
        self._registry = category_registry

    def get_summary(self, transactions: Iterable[Transaction]) -> dict:
        return totals(transactions)

    def get_category_breakdown(self, transactions: Iterable[Transaction]) -> list[dict]:
        """Return [{category, color_hex, total}, ...] for the doughnut chart.

        Colors come from the live registry; labels of deleted categories get
        the neutral fallback color.
        """
        return [
            {
                "category": label,
                "color_hex": self._registry.resolve(label).color_hex,
                "total": round_money(total),
            }
            for label, total in by_category(transactions).items()
        ]
