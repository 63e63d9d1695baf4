from .request_record_repository import RequestRecordRepository
from .admin_account_repository import AdminAccountRepository
from .attachment_storage import AttachmentStorage
from .password_hasher import PasswordHasher

__all__ = [
    "RequestRecordRepository",
    "AdminAccountRepository",
    "AttachmentStorage",
    "PasswordHasher",
]
