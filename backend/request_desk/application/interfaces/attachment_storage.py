"""Abstract interface for attachment file storage."""

from abc import ABC, abstractmethod


class AttachmentStorage(ABC):
    """Port for writing uploaded attachments to durable storage."""

    @abstractmethod
    async def store_attachment(self, content: bytes, filename: str) -> str:
        """Persist the bytes and return the stored file name.

        Raises StorageWriteError when the write fails.
        """
        ...
