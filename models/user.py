"""
models/user.py
--------------
Domain model for LightBnB accounts (guests and owners alike).
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class User:
    """
    A registered user.

    Attributes:
        name: Display name.
        email: Login email; lookups treat it case-insensitively.
        password: Stored password hash.
        id: Database primary key (None for new records).
    """
    name: str
    email: str
    password: str
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
