from .request_record_repository import SQLAlchemyRequestRecordRepository
from .admin_account_repository import SQLAlchemyAdminAccountRepository

__all__ = [
    "SQLAlchemyRequestRecordRepository",
    "SQLAlchemyAdminAccountRepository",
]
