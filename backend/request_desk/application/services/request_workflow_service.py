"""Application service (use case) for the request record lifecycle.

submit → stored → (view | update)* → delete. Public callers may only submit;
every other operation goes through the SessionGate first. Validation and
attachment resolution always finish before the repository is touched.
"""

from collections.abc import Mapping

from request_desk.application.interfaces import RequestRecordRepository
from request_desk.application.services.attachment_service import AttachmentService
from request_desk.application.services.record_validator import validate_record_fields
from request_desk.application.services.session_gate import SessionGate
from request_desk.domain.entities import (
    AdminSession,
    Rejected,
    RequestRecord,
    UploadedFile,
)
from request_desk.domain.exceptions import AuthorizationError, EntityNotFoundError
from request_desk.infrastructure.logging.colored_logger import WorkflowLogger, WorkflowStage

wlog = WorkflowLogger("RequestWorkflowService")


class RequestWorkflowService:
    """Orchestrates submit/list/view/edit/delete. Collaborators are injected (DI)."""

    def __init__(
        self,
        repository: RequestRecordRepository,
        attachments: AttachmentService,
        gate: SessionGate,
    ):
        self._repository = repository
        self._attachments = attachments
        self._gate = gate

    # ── Public ──────────────────────────────────────────────────────

    async def submit(
        self,
        raw_fields: Mapping[str, str | None],
        upload: UploadedFile | None = None,
    ) -> RequestRecord | Rejected:
        """Validate a public form submission and store it."""
        outcome = validate_record_fields(raw_fields)
        if isinstance(outcome, Rejected):
            wlog.step(WorkflowStage.VALIDATE, "Submission rejected", fields=",".join(outcome.fields()))
            return outcome

        attachment = await self._resolve_attachment(None, upload)
        record = outcome.draft.to_record(attachment=attachment)
        with wlog.timed_step(WorkflowStage.SUBMIT, "Stored new record", id=record.id):
            return await self._repository.create(record)

    # ── Admin ───────────────────────────────────────────────────────

    async def list_records(self, session: AdminSession) -> list[RequestRecord]:
        self._authorize(session, "list_records")
        return await self._repository.get_all()

    async def get_record(self, session: AdminSession, record_id: str) -> RequestRecord:
        self._authorize(session, "get_record")
        return await self._find(record_id)

    async def update_record(
        self,
        session: AdminSession,
        record_id: str,
        raw_fields: Mapping[str, str | None],
        upload: UploadedFile | None = None,
    ) -> RequestRecord | Rejected:
        """Full replace of a record's fields; the attachment is kept unless a new file arrives."""
        self._authorize(session, "update_record")
        record = await self._find(record_id)

        outcome = validate_record_fields(raw_fields)
        if isinstance(outcome, Rejected):
            wlog.step(
                WorkflowStage.VALIDATE,
                "Edit rejected",
                id=record_id,
                fields=",".join(outcome.fields()),
            )
            return outcome

        attachment = await self._resolve_attachment(record.attachment, upload)
        record.replace_fields(outcome.draft, attachment)
        with wlog.timed_step(WorkflowStage.STORE, "Updated record", id=record_id):
            return await self._repository.update(record)

    async def delete_record(self, session: AdminSession, record_id: str) -> None:
        self._authorize(session, "delete_record")
        deleted = await self._repository.delete(record_id)
        if not deleted:
            wlog.step(WorkflowStage.DELETE, "Nothing to delete", id=record_id)
            raise EntityNotFoundError("RequestRecord", record_id)
        wlog.step(WorkflowStage.DELETE, "Deleted record", id=record_id)

    # ── Helpers ─────────────────────────────────────────────────────

    def _authorize(self, session: AdminSession, operation: str) -> None:
        try:
            self._gate.require_admin(session, operation)
        except AuthorizationError as exc:
            wlog.step_error(WorkflowStage.AUTH, f"Refused '{operation}'", error=exc)
            raise

    async def _resolve_attachment(
        self,
        existing_reference: str | None,
        upload: UploadedFile | None,
    ) -> str:
        attachment = await self._attachments.resolve(existing_reference, upload)
        if upload is not None and upload.filename:
            wlog.step(WorkflowStage.ATTACH, "Attachment resolved", attachment=attachment)
        return attachment

    async def _find(self, record_id: str) -> RequestRecord:
        record = await self._repository.get_by_id(record_id)
        if record is None:
            raise EntityNotFoundError("RequestRecord", record_id)
        return record
