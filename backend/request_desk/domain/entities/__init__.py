from .request_record import NO_ATTACHMENT, RecordDraft, RequestRecord
from .admin_account import AdminAccount, AdminSession
from .uploaded_file import UploadedFile
from .validation import (
    Accepted,
    FieldError,
    FieldErrorKind,
    Rejected,
    ValidationOutcome,
)

__all__ = [
    "NO_ATTACHMENT",
    "RecordDraft",
    "RequestRecord",
    "AdminAccount",
    "AdminSession",
    "UploadedFile",
    "Accepted",
    "FieldError",
    "FieldErrorKind",
    "Rejected",
    "ValidationOutcome",
]
