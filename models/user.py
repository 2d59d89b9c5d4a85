from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    id: int
    email: str
    display_name: str = ""
    avatar: Optional[str] = None

    @property
    def label(self) -> str:
        return self.display_name or self.email
