from dataclasses import dataclass
from typing import Optional


@dataclass
class Category:
    id: Optional[int]           # None for built-in defaults
    name: str
    type: str                   # 'income' | 'expense'
    color_hex: str = "#95a5a6"
    user_id: Optional[int] = None   # None = system category

    @property
    def is_system(self) -> bool:
        return self.user_id is None

    @property
    def is_expense(self) -> bool:
        return self.type == "expense"
