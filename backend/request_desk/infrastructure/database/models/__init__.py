from .request_record import RequestRecordModel
from .admin_account import AdminAccountModel

__all__ = [
    "RequestRecordModel",
    "AdminAccountModel",
]
