"""Concrete repository implementation for RequestRecord backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from request_desk.application.interfaces import RequestRecordRepository
from request_desk.domain.entities import RequestRecord
from request_desk.domain.exceptions import EntityNotFoundError
from request_desk.infrastructure.database.models import RequestRecordModel


class SQLAlchemyRequestRecordRepository(RequestRecordRepository):
    """Implements the RequestRecordRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: RequestRecordModel) -> RequestRecord:
        """Map ORM model → domain entity."""
        return RequestRecord(
            id=model.id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            department=model.department,
            issue_date=model.issue_date,
            query=model.query,
            sms=model.sms,
            attachment=model.attachment,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: RequestRecord) -> RequestRecordModel:
        """Map domain entity → ORM model (for creation)."""
        return RequestRecordModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            phone=entity.phone,
            department=entity.department,
            issue_date=entity.issue_date,
            query=entity.query,
            sms=entity.sms,
            attachment=entity.attachment,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def get_by_id(self, record_id: str) -> RequestRecord | None:
        result = await self._session.get(RequestRecordModel, record_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[RequestRecord]:
        stmt = select(RequestRecordModel).order_by(RequestRecordModel.created_at.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, record: RequestRecord) -> RequestRecord:
        model = self._to_model(record)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, record: RequestRecord) -> RequestRecord:
        model = await self._session.get(RequestRecordModel, record.id)
        if model is None:
            raise EntityNotFoundError("RequestRecord", record.id)
        model.name = record.name
        model.email = record.email
        model.phone = record.phone
        model.department = record.department
        model.issue_date = record.issue_date
        model.query = record.query
        model.sms = record.sms
        model.attachment = record.attachment
        model.updated_at = record.updated_at
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, record_id: str) -> bool:
        model = await self._session.get(RequestRecordModel, record_id)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
