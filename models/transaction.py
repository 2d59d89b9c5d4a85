from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Transaction:
    id: int
    text: str
    amount: Decimal         # negative = expense, positive = income
    category: str           # category name; may outlive the category itself
    date: str               # 'YYYY-MM-DD'
    user_id: Optional[int] = None

    @property
    def is_expense(self) -> bool:
        return self.amount < 0

    @property
    def magnitude(self) -> Decimal:
        return abs(self.amount)
