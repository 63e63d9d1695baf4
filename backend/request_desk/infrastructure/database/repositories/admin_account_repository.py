"""SQLAlchemy repository for the admin account."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from request_desk.application.interfaces import AdminAccountRepository
from request_desk.domain.entities import AdminAccount
from request_desk.infrastructure.database.models import AdminAccountModel

logger = logging.getLogger(__name__)


class SQLAlchemyAdminAccountRepository(AdminAccountRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_username(self, username: str) -> AdminAccount | None:
        stmt = select(AdminAccountModel).where(AdminAccountModel.username == username)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            return None
        return AdminAccount(
            id=model.id,
            username=model.username,
            password_hash=model.password_hash,
            created_at=model.created_at,
        )

    async def create(self, account: AdminAccount) -> AdminAccount:
        """Insert the account, or return the stored one if the username was taken meanwhile."""
        self._session.add(
            AdminAccountModel(
                id=account.id,
                username=account.username,
                password_hash=account.password_hash,
                created_at=account.created_at,
            )
        )
        try:
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            existing = await self.get_by_username(account.username)
            if existing is None:
                raise
            logger.info("Admin account '%s' was created concurrently", account.username)
            return existing
        return account
