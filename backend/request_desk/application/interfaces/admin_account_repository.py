"""Abstract repository interface (port) for the admin account."""

from abc import ABC, abstractmethod

from request_desk.domain.entities import AdminAccount


class AdminAccountRepository(ABC):
    """Port for admin account persistence."""

    @abstractmethod
    async def get_by_username(self, username: str) -> AdminAccount | None:
        """Exact, case-sensitive lookup."""
        ...

    @abstractmethod
    async def create(self, account: AdminAccount) -> AdminAccount:
        ...
