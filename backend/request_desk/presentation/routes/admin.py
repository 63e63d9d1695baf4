"""Admin routes — listing, viewing, editing and deleting records.

Every route here requires the admin session; anonymous callers are
redirected to the login form and nothing is changed.
"""

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status

from request_desk.application.schemas import (
    DeleteConfirmationResponse,
    FormThanksResponse,
    RecordListResponse,
    RecordViewResponse,
    RequestRecordResponse,
)
from request_desk.application.services import RequestWorkflowService
from request_desk.domain.entities import AdminSession, Rejected
from request_desk.domain.exceptions import (
    AuthorizationError,
    EntityNotFoundError,
    StorageWriteError,
)
from request_desk.infrastructure.dependencies import (
    get_admin_session,
    get_request_workflow_service,
)
from request_desk.presentation.routes._forms import (
    form_errors,
    form_fields,
    login_redirect,
    read_upload,
)

router = APIRouter(tags=["Admin"])


@router.get("/admin-home", response_model=RecordListResponse)
async def admin_home(
    admin_session: AdminSession = Depends(get_admin_session),
    service: RequestWorkflowService = Depends(get_request_workflow_service),
):
    """List every stored record."""
    try:
        records = await service.list_records(admin_session)
    except AuthorizationError:
        return login_redirect()
    return RecordListResponse(
        data=[RequestRecordResponse.model_validate(r, from_attributes=True) for r in records]
    )


@router.get("/details/{record_id}", response_model=RecordViewResponse)
async def record_details(
    record_id: str,
    admin_session: AdminSession = Depends(get_admin_session),
    service: RequestWorkflowService = Depends(get_request_workflow_service),
):
    try:
        record = await service.get_record(admin_session, record_id)
    except AuthorizationError:
        return login_redirect()
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return RecordViewResponse(
        view="customerView",
        customer=RequestRecordResponse.model_validate(record, from_attributes=True),
    )


@router.get("/delete/{record_id}", response_model=DeleteConfirmationResponse)
async def delete_record(
    record_id: str,
    admin_session: AdminSession = Depends(get_admin_session),
    service: RequestWorkflowService = Depends(get_request_workflow_service),
):
    try:
        await service.delete_record(admin_session, record_id)
    except AuthorizationError:
        return login_redirect()
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return DeleteConfirmationResponse(id=record_id)


@router.get("/edit/{record_id}", response_model=RecordViewResponse)
async def edit_form(
    record_id: str,
    admin_session: AdminSession = Depends(get_admin_session),
    service: RequestWorkflowService = Depends(get_request_workflow_service),
):
    """Return the record so the edit form can be pre-filled."""
    try:
        record = await service.get_record(admin_session, record_id)
    except AuthorizationError:
        return login_redirect()
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return RecordViewResponse(
        view="edit",
        customer=RequestRecordResponse.model_validate(record, from_attributes=True),
    )


@router.post("/edit/{record_id}", response_model=FormThanksResponse)
async def apply_edit(
    record_id: str,
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    dept: str = Form(""),
    date: str = Form(""),
    query: str = Form(""),
    sms: str = Form(""),
    photo: UploadFile | None = File(None),
    admin_session: AdminSession = Depends(get_admin_session),
    service: RequestWorkflowService = Depends(get_request_workflow_service),
):
    """Replace every field of a record; the attachment is kept unless a new file is sent."""
    # The gate runs before the upload is read or size-checked
    if not admin_session.logged_in:
        return login_redirect()
    upload = await read_upload(photo)
    fields = form_fields(name, email, phone, dept, date, query, sms)
    try:
        result = await service.update_record(admin_session, record_id, fields, upload)
    except AuthorizationError:
        return login_redirect()
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StorageWriteError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))

    if isinstance(result, Rejected):
        return form_errors("edit", result)
    return FormThanksResponse(view="editThanks", id=result.id, name=result.name, email=result.email)
