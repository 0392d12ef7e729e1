"""
Adapter: User repository.

Implements UserRepository port on the users table.
A unique violation on insert is reported as UsernameAlreadyExistsError.
"""

from typing import Optional

from sqlalchemy import insert, select

from app.domain.news.entities import User
from app.domain.news.ports import UserRepository
from app.infrastructure.news.sql_repository import SqlRepository
from app.infrastructure.news.tables import users


def _to_user(row) -> User:
    return User(username=row["username"], name=row["name"], avatar_url=row["avatar_url"])


class UserRepositoryAdapter(SqlRepository, UserRepository):
    """Reads and writes users through an AsyncSession."""

    resource = "user"

    async def list_all(self) -> list[User]:
        result = await self._read(select(users).order_by(users.c.username))
        return [_to_user(row) for row in result.mappings()]

    async def get_by_username(self, username: str) -> Optional[User]:
        result = await self._read(
            select(users).where(users.c.username == username), identifier=username
        )
        row = result.mappings().first()
        return _to_user(row) if row is not None else None

    async def create(self, user: User) -> User:
        statement = (
            insert(users)
            .values(username=user.username, name=user.name, avatar_url=user.avatar_url)
            .returning(users)
        )
        async with self._transaction(identifier=user.username) as session:
            row = (await session.execute(statement)).mappings().one()
        return _to_user(row)
