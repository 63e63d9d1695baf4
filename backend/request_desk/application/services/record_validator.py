"""Field rules for request form submissions.

Every rule is checked independently; failures accumulate in the order the
fields are declared in ``FIELD_RULES`` so the form can show them top-down.
Nothing here raises — the caller always gets an ``Accepted`` or ``Rejected``.
"""

import re
from collections.abc import Callable, Mapping

from email_validator import EmailNotValidError, validate_email

from request_desk.domain.entities import (
    Accepted,
    FieldError,
    FieldErrorKind,
    RecordDraft,
    Rejected,
    ValidationOutcome,
)

PHONE_PATTERN = re.compile(r"^[0-9]{3}-[0-9]{3}-[0-9]{4}$")

# Form field name → RecordDraft attribute
FORM_FIELDS: dict[str, str] = {
    "name": "name",
    "email": "email",
    "phone": "phone",
    "dept": "department",
    "date": "issue_date",
    "query": "query",
    "sms": "sms",
}


def _is_blank(value: str) -> bool:
    return not value.strip()


def _is_email(value: str) -> bool:
    try:
        validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _is_phone(value: str) -> bool:
    return PHONE_PATTERN.fullmatch(value.strip()) is not None


_Rule = tuple[str, Callable[[str], bool], FieldErrorKind, str]

FIELD_RULES: list[_Rule] = [
    ("name", lambda v: not _is_blank(v), FieldErrorKind.EMPTY_FIELD, "Must have a name"),
    ("email", _is_email, FieldErrorKind.INVALID_FORMAT, "Must have an email"),
    ("phone", _is_phone, FieldErrorKind.INVALID_FORMAT, "Phone should be in format xxx-xxx-xxxx"),
    ("dept", lambda v: not _is_blank(v), FieldErrorKind.EMPTY_FIELD, "Please select department"),
    ("date", lambda v: not _is_blank(v), FieldErrorKind.EMPTY_FIELD, "please select date of issuing"),
    ("sms", lambda v: not _is_blank(v), FieldErrorKind.EMPTY_FIELD, "Do you prefer SMS notifications?"),
]


def check_field(field: str, value: str | None) -> FieldError | None:
    """Run the rule for a single form field. Fields without a rule always pass."""
    for name, passes, kind, message in FIELD_RULES:
        if name == field:
            return None if passes(value or "") else FieldError(field, kind, message)
    return None


def validate_record_fields(raw: Mapping[str, str | None]) -> ValidationOutcome:
    """Check a raw form map and produce a draft or the list of field errors."""
    errors = [
        error
        for field, *_ in FIELD_RULES
        if (error := check_field(field, raw.get(field))) is not None
    ]
    if errors:
        return Rejected(errors=tuple(errors))

    values = {
        attr: (raw.get(form_name) or "") if form_name == "query" else (raw.get(form_name) or "").strip()
        for form_name, attr in FORM_FIELDS.items()
    }
    return Accepted(draft=RecordDraft(**values))
