"""User repository port."""

from typing import Protocol
from uuid import UUID

from resmgmt.domain.entities import User


class UserRepository(Protocol):
    """Port for user persistence."""

    async def get_by_id(self, user_id: UUID, organization_id: UUID) -> User | None: ...

    async def get_by_email(self, email: str) -> User | None: ...

    async def create(self, user: User) -> User: ...

    async def update(self, user: User) -> None: ...

    async def count_admins(self, organization_id: UUID) -> int: ...
