"""Abstract interface for password hashing and verification."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Turns plain passwords into salted hashes and verifies them."""

    @abstractmethod
    def hash(self, password: str) -> str:
        ...

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Constant-time check of a password against a stored hash."""
        ...
