"""Pydantic DTOs (Data Transfer Objects) for request records and form results."""

from datetime import datetime

from pydantic import BaseModel, Field


class RequestRecordResponse(BaseModel):
    """A stored record as returned to the admin views."""

    id: str
    name: str
    email: str
    phone: str
    department: str
    issue_date: str
    query: str
    sms: str
    attachment: str = Field(..., examples=["Empty", "receipt.png"])
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class FieldErrorSchema(BaseModel):
    """One field that failed validation."""

    field: str = Field(..., examples=["phone"])
    kind: str = Field(..., examples=["invalid_format"])
    message: str = Field(..., examples=["Phone should be in format xxx-xxx-xxxx"])


class FormErrorsResponse(BaseModel):
    """Returned with 422 when a submission or edit is rejected."""

    view: str
    errors: list[FieldErrorSchema]


class FormThanksResponse(BaseModel):
    """Confirmation after a successful submission or edit."""

    view: str
    id: str
    name: str
    email: str


class FormDescriptorResponse(BaseModel):
    """Describes a form for the renderer: which view and which fields."""

    view: str
    action: str
    fields: list[str]
    file_field: str | None = None


class RecordListResponse(BaseModel):
    view: str = "admin-home"
    data: list[RequestRecordResponse]


class RecordViewResponse(BaseModel):
    view: str
    customer: RequestRecordResponse


class DeleteConfirmationResponse(BaseModel):
    view: str = "deleteThanks"
    id: str


class LoginErrorResponse(BaseModel):
    view: str = "login"
    error: str
