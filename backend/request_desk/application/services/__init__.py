from .attachment_service import AttachmentService
from .record_validator import validate_record_fields
from .request_workflow_service import RequestWorkflowService
from .session_gate import SessionGate

__all__ = [
    "AttachmentService",
    "RequestWorkflowService",
    "SessionGate",
    "validate_record_fields",
]
