"""Helpers shared by the form-handling routes."""

from fastapi import HTTPException, UploadFile, status
from fastapi.responses import JSONResponse, RedirectResponse

from request_desk.application.schemas import FieldErrorSchema, FormErrorsResponse
from request_desk.config import get_settings
from request_desk.domain.entities import Rejected, UploadedFile

LOGIN_PATH = "/login"


def login_redirect() -> RedirectResponse:
    return RedirectResponse(url=LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)


def form_errors(view: str, rejected: Rejected) -> JSONResponse:
    body = FormErrorsResponse(
        view=view,
        errors=[
            FieldErrorSchema(field=e.field, kind=e.kind.value, message=e.message)
            for e in rejected.errors
        ],
    )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_CONTENT,
        content=body.model_dump(),
    )


async def read_upload(photo: UploadFile | None) -> UploadedFile | None:
    """Turn the optional ``photo`` part into an UploadedFile.

    Browsers send an empty part when no file was chosen; that counts as no upload.
    """
    if photo is None or not photo.filename:
        return None

    content = await photo.read()
    max_bytes = get_settings().max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"Attachment exceeds {get_settings().max_upload_size_mb} MB",
        )
    return UploadedFile(filename=photo.filename, content=content)


def form_fields(
    name: str,
    email: str,
    phone: str,
    dept: str,
    date: str,
    query: str,
    sms: str,
) -> dict[str, str]:
    return {
        "name": name,
        "email": email,
        "phone": phone,
        "dept": dept,
        "date": date,
        "query": query,
        "sms": sms,
    }
