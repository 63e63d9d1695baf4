from .request_record import (
    DeleteConfirmationResponse,
    FieldErrorSchema,
    FormDescriptorResponse,
    FormErrorsResponse,
    FormThanksResponse,
    LoginErrorResponse,
    RecordListResponse,
    RecordViewResponse,
    RequestRecordResponse,
)

__all__ = [
    "DeleteConfirmationResponse",
    "FieldErrorSchema",
    "FormDescriptorResponse",
    "FormErrorsResponse",
    "FormThanksResponse",
    "LoginErrorResponse",
    "RecordListResponse",
    "RecordViewResponse",
    "RequestRecordResponse",
]
