"""User repository over the users record store."""

from typing import Optional

from ..storage import Record, RecordStore


class UserRepository:
    """Repository for user records."""

    def __init__(self, store: RecordStore):
        self.store = store

    async def list_users(self) -> list[Record]:
        """All user records, passwords included."""
        return await self.store.load()

    async def get_by_username(self, username: str) -> Optional[Record]:
        """Get user by username."""
        users = await self.store.load()
        return next((u for u in users if u.get("username") == username), None)

    async def is_username_taken(self, username: str) -> bool:
        """Check if username exists."""
        return await self.get_by_username(username) is not None

    async def create_user(self, user_data: dict) -> Optional[Record]:
        """Append a user; ``None`` when the username is already taken."""
        async with self.store.transaction() as users:
            if any(u.get("username") == user_data["username"] for u in users):
                return None
            users.append(user_data)
        return user_data

    async def update_user(self, username: str, update_data: dict) -> Optional[Record]:
        """Update the given fields of a user."""
        async with self.store.transaction() as users:
            for user in users:
                if user.get("username") == username:
                    user.update(update_data)
                    return user
        return None

    async def delete_user(self, username: str) -> bool:
        """Delete user."""
        async with self.store.transaction() as users:
            remaining = [u for u in users if u.get("username") != username]
            if len(remaining) == len(users):
                return False
            users[:] = remaining
        return True
