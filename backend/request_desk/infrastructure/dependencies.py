"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from request_desk.config import get_settings
from request_desk.application.services import (
    AttachmentService,
    RequestWorkflowService,
    SessionGate,
)
from request_desk.domain.entities import AdminSession
from request_desk.infrastructure.database.session import get_db_session
from request_desk.infrastructure.database.repositories import (
    SQLAlchemyAdminAccountRepository,
    SQLAlchemyRequestRecordRepository,
)
from request_desk.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from request_desk.infrastructure.storage.local_file_storage import LocalFileStorage


async def get_session_gate(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[SessionGate, None]:
    """Provides a SessionGate with the admin repository and bcrypt hasher wired up."""
    yield SessionGate(
        admin_repository=SQLAlchemyAdminAccountRepository(session),
        password_hasher=BcryptPasswordHasher(),
    )


async def get_request_workflow_service(
    session: AsyncSession = Depends(get_db_session),
    gate: SessionGate = Depends(get_session_gate),
) -> AsyncGenerator[RequestWorkflowService, None]:
    """Provides the record workflow with repository, attachment storage and gate."""
    settings = get_settings()
    storage = LocalFileStorage(
        upload_dir=settings.upload_dir,
        unique_names=settings.unique_attachment_names,
    )
    yield RequestWorkflowService(
        repository=SQLAlchemyRequestRecordRepository(session),
        attachments=AttachmentService(storage, failure_policy=settings.attachment_failure_policy),
        gate=gate,
    )


def get_admin_session(request: Request) -> AdminSession:
    """Reads the admin login state from the signed cookie session."""
    return AdminSession.from_mapping(request.session)
