"""Abstract repository interface (port) for RequestRecord persistence."""

from abc import ABC, abstractmethod

from request_desk.domain.entities import RequestRecord


class RequestRecordRepository(ABC):
    """Port for request record persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, record_id: str) -> RequestRecord | None:
        """Retrieve a single record by its UUID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[RequestRecord]:
        """Retrieve every record, oldest first."""
        ...

    @abstractmethod
    async def create(self, record: RequestRecord) -> RequestRecord:
        """Persist a new record and return it."""
        ...

    @abstractmethod
    async def update(self, record: RequestRecord) -> RequestRecord:
        """Replace the stored fields of an existing record.

        Raises EntityNotFoundError if the record no longer exists.
        """
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...
