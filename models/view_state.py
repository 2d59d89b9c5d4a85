from dataclasses import dataclass, field
from decimal import Decimal

from models.transaction import Transaction


@dataclass
class ViewState:
    """Everything the window renders for one selected period. Derived, never stored."""
    period: str                         # 'YYYY-MM'
    transactions: list[Transaction]     # visible subsequence, server order
    balance: Decimal = Decimal("0.00")
    income: Decimal = Decimal("0.00")
    expense: Decimal = Decimal("0.00")
    breakdown: list[dict] = field(default_factory=list)   # [{category, color_hex, total}]

    @property
    def is_empty(self) -> bool:
        return not self.transactions
