"""Admin login/logout and the access check for admin-only operations."""

import logging

from request_desk.application.interfaces import AdminAccountRepository, PasswordHasher
from request_desk.domain.entities import AdminAccount, AdminSession
from request_desk.domain.exceptions import AuthorizationError, InvalidCredentialsError

logger = logging.getLogger(__name__)


class SessionGate:
    """Tracks whether a client session belongs to the admin. Depends on ports (DI)."""

    def __init__(self, admin_repository: AdminAccountRepository, password_hasher: PasswordHasher):
        self._admins = admin_repository
        self._hasher = password_hasher

    async def seed_admin(self, username: str, password: str) -> AdminAccount:
        """Create the admin account once; later calls return the existing one."""
        existing = await self._admins.get_by_username(username)
        if existing is not None:
            logger.debug("Admin account '%s' already exists", username)
            return existing

        account = AdminAccount(username=username, password_hash=self._hasher.hash(password))
        created = await self._admins.create(account)
        logger.info("Seeded admin account '%s'", username)
        return created

    async def login(self, username: str, password: str) -> AdminSession:
        account = await self._admins.get_by_username(username)
        if account is None or not self._hasher.verify(password, account.password_hash):
            logger.info("Rejected admin login for '%s'", username)
            raise InvalidCredentialsError()

        logger.info("Admin '%s' logged in", account.username)
        return AdminSession(logged_in=True, username=account.username)

    def logout(self, session: AdminSession) -> AdminSession:
        if session.logged_in:
            logger.info("Admin '%s' logged out", session.username)
        return AdminSession.anonymous()

    def require_admin(self, session: AdminSession, operation: str = "admin") -> None:
        if not session.logged_in:
            raise AuthorizationError(operation)
