"""Shared fakes and fixtures for unit and HTTP-level tests."""

from dataclasses import replace

import pytest

from request_desk.application.interfaces import (
    AdminAccountRepository,
    AttachmentStorage,
    RequestRecordRepository,
)
from request_desk.application.services import (
    AttachmentService,
    RequestWorkflowService,
    SessionGate,
)
from request_desk.domain.entities import AdminAccount, AdminSession, RequestRecord
from request_desk.domain.exceptions import EntityNotFoundError, StorageWriteError
from request_desk.infrastructure.security.bcrypt_password_hasher import BcryptPasswordHasher
from request_desk.infrastructure.storage.local_file_storage import LocalFileStorage


# ── Fake Repositories ────────────────────────────────────────────────

class FakeRequestRecordRepository(RequestRecordRepository):
    """In-memory record store. Hands out copies, like a real database would."""

    def __init__(self):
        self._records: dict[str, RequestRecord] = {}

    async def get_by_id(self, record_id: str) -> RequestRecord | None:
        record = self._records.get(record_id)
        return replace(record) if record else None

    async def get_all(self) -> list[RequestRecord]:
        return [replace(r) for r in self._records.values()]

    async def create(self, record: RequestRecord) -> RequestRecord:
        self._records[record.id] = replace(record)
        return replace(record)

    async def update(self, record: RequestRecord) -> RequestRecord:
        if record.id not in self._records:
            raise EntityNotFoundError("RequestRecord", record.id)
        self._records[record.id] = replace(record)
        return replace(record)

    async def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None

    def count(self) -> int:
        return len(self._records)


class FakeAdminAccountRepository(AdminAccountRepository):
    def __init__(self):
        self._accounts: dict[str, AdminAccount] = {}

    async def get_by_username(self, username: str) -> AdminAccount | None:
        return self._accounts.get(username)

    async def create(self, account: AdminAccount) -> AdminAccount:
        self._accounts[account.username] = account
        return account

    def count(self) -> int:
        return len(self._accounts)


class FailingAttachmentStorage(AttachmentStorage):
    """Storage whose every write fails."""

    def __init__(self):
        self.attempts: list[str] = []

    async def store_attachment(self, content: bytes, filename: str) -> str:
        self.attempts.append(filename)
        raise StorageWriteError(filename, "disk full")


# ── Fixtures ─────────────────────────────────────────────────────────

@pytest.fixture
def record_repository() -> FakeRequestRecordRepository:
    return FakeRequestRecordRepository()


@pytest.fixture
def admin_repository() -> FakeAdminAccountRepository:
    return FakeAdminAccountRepository()


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    # Lowest cost bcrypt allows; keeps the suite fast
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def gate(admin_repository, password_hasher) -> SessionGate:
    return SessionGate(admin_repository, password_hasher)


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def storage(upload_dir) -> LocalFileStorage:
    return LocalFileStorage(upload_dir=str(upload_dir))


@pytest.fixture
def workflow(record_repository, storage, gate) -> RequestWorkflowService:
    return RequestWorkflowService(
        repository=record_repository,
        attachments=AttachmentService(storage),
        gate=gate,
    )


@pytest.fixture
def admin_session() -> AdminSession:
    return AdminSession(logged_in=True, username="admin")


@pytest.fixture
def anonymous_session() -> AdminSession:
    return AdminSession.anonymous()


@pytest.fixture
def valid_fields() -> dict[str, str]:
    return {
        "name": "Jane Doe",
        "email": "jane@library.org",
        "phone": "555-123-4567",
        "dept": "Fiction",
        "date": "2024-03-01",
        "query": "Looking for the second volume",
        "sms": "yes",
    }


@pytest.fixture
def failing_storage() -> FailingAttachmentStorage:
    return FailingAttachmentStorage()
