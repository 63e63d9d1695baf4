"""Unit tests for the request form field rules."""

import pytest

from request_desk.application.services.record_validator import check_field, validate_record_fields
from request_desk.domain.entities import Accepted, FieldErrorKind, RecordDraft, Rejected


def test_valid_fields_are_accepted(valid_fields):
    outcome = validate_record_fields(valid_fields)

    assert isinstance(outcome, Accepted)
    assert outcome.draft == RecordDraft(
        name="Jane Doe",
        email="jane@library.org",
        phone="555-123-4567",
        department="Fiction",
        issue_date="2024-03-01",
        query="Looking for the second volume",
        sms="yes",
    )


@pytest.mark.parametrize("phone", ["555-123-4567", "000-000-0000"])
def test_phone_in_expected_format_passes(phone):
    assert check_field("phone", phone) is None


@pytest.mark.parametrize(
    "phone",
    ["5551234567", "555-1234-567", "555-123-456", "abc-def-ghij", "555 123 4567", "(555)123-4567", ""],
)
def test_phone_in_other_formats_is_rejected(valid_fields, phone):
    outcome = validate_record_fields({**valid_fields, "phone": phone})

    assert isinstance(outcome, Rejected)
    assert len(outcome.errors) == 1
    error = outcome.errors[0]
    assert error.field == "phone"
    assert error.kind is FieldErrorKind.INVALID_FORMAT
    assert error.message == "Phone should be in format xxx-xxx-xxxx"


@pytest.mark.parametrize(
    "field, message",
    [
        ("name", "Must have a name"),
        ("dept", "Please select department"),
        ("date", "please select date of issuing"),
        ("sms", "Do you prefer SMS notifications?"),
    ],
)
@pytest.mark.parametrize("blank", ["", "   ", None])
def test_blank_required_field_reports_empty_field(valid_fields, field, message, blank):
    outcome = validate_record_fields({**valid_fields, field: blank})

    assert isinstance(outcome, Rejected)
    assert [(e.field, e.kind, e.message) for e in outcome.errors] == [
        (field, FieldErrorKind.EMPTY_FIELD, message)
    ]


def test_missing_key_counts_as_blank(valid_fields):
    del valid_fields["sms"]
    outcome = validate_record_fields(valid_fields)

    assert isinstance(outcome, Rejected)
    assert outcome.fields() == ["sms"]


@pytest.mark.parametrize("email", ["", "jane", "jane@", "@library.org", "jane doe@library.org"])
def test_invalid_email_is_rejected(valid_fields, email):
    outcome = validate_record_fields({**valid_fields, "email": email})

    assert isinstance(outcome, Rejected)
    assert outcome.errors[0].field == "email"
    assert outcome.errors[0].kind is FieldErrorKind.INVALID_FORMAT


def test_errors_accumulate_in_field_order():
    outcome = validate_record_fields({})

    assert isinstance(outcome, Rejected)
    assert outcome.fields() == ["name", "email", "phone", "dept", "date", "sms"]


def test_query_is_optional(valid_fields):
    valid_fields.pop("query")
    outcome = validate_record_fields(valid_fields)

    assert isinstance(outcome, Accepted)
    assert outcome.draft.query == ""


def test_accepted_values_are_trimmed(valid_fields):
    outcome = validate_record_fields({**valid_fields, "name": "  Jane Doe ", "phone": " 555-123-4567"})

    assert isinstance(outcome, Accepted)
    assert outcome.draft.name == "Jane Doe"
    assert outcome.draft.phone == "555-123-4567"


def test_unknown_field_has_no_rule():
    assert check_field("query", "") is None
