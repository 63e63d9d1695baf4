"""bcrypt-backed implementation of the PasswordHasher port."""

import logging

import bcrypt

from request_desk.application.interfaces import PasswordHasher

logger = logging.getLogger(__name__)


class BcryptPasswordHasher(PasswordHasher):
    """Salted bcrypt hashes; ``bcrypt.checkpw`` does the constant-time comparison."""

    def __init__(self, rounds: int = 12):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        if not password or not password_hash:
            return False
        try:
            return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
        except ValueError as exc:
            logger.error("Password verification failed: %s", exc)
            return False
