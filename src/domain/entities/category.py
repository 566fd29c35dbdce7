"""
Domain Entity: Category
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Category:
    """Transaction category, either owned by a user or a system default"""

    id: int
    name: str
    user_id: Optional[str] = None
    is_default: bool = False
    description: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None

    def matches(self, name: str) -> bool:
        """Case-insensitive name comparison"""
        return self.name.strip().lower() == name.strip().lower()
