"""Public routes — the request form, admin setup and login/logout."""

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile, status
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse

from request_desk.application.schemas import (
    FormDescriptorResponse,
    FormThanksResponse,
    LoginErrorResponse,
)
from request_desk.application.services import RequestWorkflowService, SessionGate
from request_desk.application.services.record_validator import FORM_FIELDS
from request_desk.config import get_settings
from request_desk.domain.entities import AdminSession, Rejected
from request_desk.domain.exceptions import InvalidCredentialsError, StorageWriteError
from request_desk.infrastructure.dependencies import (
    get_admin_session,
    get_request_workflow_service,
    get_session_gate,
)
from request_desk.presentation.routes._forms import (
    form_errors,
    form_fields,
    login_redirect,
    read_upload,
)

router = APIRouter(tags=["Public"])


@router.get("/setup", response_class=PlainTextResponse)
async def setup_admin(gate: SessionGate = Depends(get_session_gate)) -> str:
    """Seed the single admin account (idempotent)."""
    settings = get_settings()
    await gate.seed_admin(settings.admin_username, settings.admin_password)
    return "Done"


@router.get("/", response_model=FormDescriptorResponse)
async def show_request_form() -> FormDescriptorResponse:
    return FormDescriptorResponse(
        view="home",
        action="/book-form",
        fields=list(FORM_FIELDS),
        file_field="photo",
    )


@router.post("/book-form", response_model=FormThanksResponse)
async def submit_request_form(
    name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    dept: str = Form(""),
    date: str = Form(""),
    query: str = Form(""),
    sms: str = Form(""),
    photo: UploadFile | None = File(None),
    service: RequestWorkflowService = Depends(get_request_workflow_service),
):
    """Validate and store a new request; field errors come back with 422."""
    upload = await read_upload(photo)
    fields = form_fields(name, email, phone, dept, date, query, sms)
    try:
        result = await service.submit(fields, upload)
    except StorageWriteError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e))

    if isinstance(result, Rejected):
        return form_errors("home", result)
    return FormThanksResponse(view="formthanks", id=result.id, name=result.name, email=result.email)


@router.get("/login", response_model=FormDescriptorResponse)
async def show_login_form() -> FormDescriptorResponse:
    return FormDescriptorResponse(
        view="login",
        action="/login-process",
        fields=["username", "password"],
    )


@router.post("/login-process")
async def process_login(
    request: Request,
    username: str = Form(""),
    password: str = Form(""),
    gate: SessionGate = Depends(get_session_gate),
):
    """Log the admin in and redirect to the listing, or re-show the login form."""
    try:
        admin_session = await gate.login(username, password)
    except InvalidCredentialsError as e:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=LoginErrorResponse(error=e.message).model_dump(),
        )

    admin_session.write_to(request.session)
    return RedirectResponse(url="/admin-home", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/logout")
async def logout(
    request: Request,
    admin_session: AdminSession = Depends(get_admin_session),
    gate: SessionGate = Depends(get_session_gate),
) -> RedirectResponse:
    gate.logout(admin_session).write_to(request.session)
    return login_redirect()
