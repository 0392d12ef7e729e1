"""
Use cases: List, fetch and register users.

Input: none / GetUserQuery (username) / CreateUserCommand
Output: list[User] / User
Side effects: CreateUserUseCase inserts one row.
Failure cases: ResourceNotFoundError, MissingInfoError, UsernameAlreadyExistsError.
"""

import logging

from app.application.news.dtos import CreateUserCommand, GetUserQuery
from app.domain.news.entities import User
from app.domain.news.errors import ResourceNotFoundError, UsernameAlreadyExistsError
from app.domain.news.ports import UserRepository
from app.domain.news.validation import require_fields

logger = logging.getLogger(__name__)


class ListUsersUseCase:
    """Returns every registered user."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def execute(self) -> list[User]:
        users = await self._user_repo.list_all()
        logger.info("Listed %d users.", len(users))
        return users


class GetUserUseCase:
    """Looks up one user by username."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def execute(self, query: GetUserQuery) -> User:
        """Return the matching user.

        Raises:
            ResourceNotFoundError: If no user has this username.
        """
        user = await self._user_repo.get_by_username(query.username)
        if user is None:
            raise ResourceNotFoundError("user", query.username)
        return user


class CreateUserUseCase:
    """Registers a user after checking the username is free.

    The explicit lookup turns the common duplicate case into a
    UsernameAlreadyExistsError before any insert is attempted; a
    concurrent insert that slips past it is still reported the same way
    by the repository's storage error translation.
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def execute(self, command: CreateUserCommand) -> User:
        """Run the create user use case.

        Args:
            command: Username, display name and avatar URL.

        Returns:
            The stored user.

        Raises:
            MissingInfoError: If any field is absent or blank.
            UsernameAlreadyExistsError: If the username is taken.
        """
        require_fields(
            "user",
            username=command.username,
            name=command.name,
            avatar_url=command.avatar_url,
        )

        if await self._user_repo.get_by_username(command.username) is not None:
            raise UsernameAlreadyExistsError(command.username)

        logger.info("Creating user username=%s", command.username)
        return await self._user_repo.create(
            User(
                username=command.username,
                name=command.name,
                avatar_url=command.avatar_url,
            )
        )
