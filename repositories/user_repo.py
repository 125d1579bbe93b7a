"""
repositories/user_repo.py
--------------------------
Data access layer for user records.
"""

from typing import Optional

from db.connection import DataStore
from models.user import User
from utils.logger import get_logger

logger = get_logger(__name__)


class UserRepository:
    """Lookups and inserts on the users table."""

    def __init__(self, store: Optional[DataStore] = None):
        self.store = store if store is not None else DataStore()

    def get_user_with_email(self, email: str) -> Optional[User]:
        """
        Fetch a user by email, ignoring case.

        Returns:
            The User, or None if no account uses that email.
        """
        sql = "SELECT * FROM users WHERE lower(email) = %s;"
        rows = self.store.execute(sql, (email.lower(),))
        return self._row_to_user(rows[0]) if rows else None

    def get_user_with_id(self, user_id: int) -> Optional[User]:
        """Fetch a user by primary key, or None."""
        sql = "SELECT * FROM users WHERE id = %s;"
        rows = self.store.execute(sql, (user_id,))
        return self._row_to_user(rows[0]) if rows else None

    def add_user(self, user: User) -> User:
        """
        Insert a new user.

        Returns:
            The stored User with its `id` populated.
        """
        sql = """
            INSERT INTO users (name, email, password)
            VALUES (%s, %s, %s)
            RETURNING *;
        """
        rows = self.store.execute(sql, (user.name, user.email, user.password), commit=True)
        stored = self._row_to_user(rows[0])
        logger.info(f"Added user #{stored.id}")
        return stored

    @staticmethod
    def _row_to_user(row: dict) -> User:
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password=row["password"],
        )
