"""Domain entity — one submitted request and its attachment reference."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

# Stored in place of a file name when a record has no attachment.
NO_ATTACHMENT = "Empty"


@dataclass
class RequestRecord:
    """Core domain entity for a submitted request form.

    Every required field has already passed validation by the time a
    RequestRecord is built; the repository never sees raw form input.
    """

    name: str
    email: str
    phone: str
    department: str
    issue_date: str
    sms: str
    query: str = ""
    attachment: str = NO_ATTACHMENT
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def replace_fields(self, draft: "RecordDraft", attachment: str) -> None:
        """Full replace of every user-editable field and refresh updated_at."""
        self.name = draft.name
        self.email = draft.email
        self.phone = draft.phone
        self.department = draft.department
        self.issue_date = draft.issue_date
        self.query = draft.query
        self.sms = draft.sms
        self.attachment = attachment
        self.updated_at = datetime.now(timezone.utc)


@dataclass(frozen=True)
class RecordDraft:
    """Validated field values, ready to be written to a RequestRecord."""

    name: str
    email: str
    phone: str
    department: str
    issue_date: str
    sms: str
    query: str = ""

    def to_record(self, attachment: str = NO_ATTACHMENT) -> RequestRecord:
        return RequestRecord(
            name=self.name,
            email=self.email,
            phone=self.phone,
            department=self.department,
            issue_date=self.issue_date,
            query=self.query,
            sms=self.sms,
            attachment=attachment,
        )
