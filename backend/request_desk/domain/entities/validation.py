"""Validation outcome types for request form submissions."""

from dataclasses import dataclass
from enum import Enum

from .request_record import RecordDraft


class FieldErrorKind(str, Enum):
    """Why a single form field was rejected."""

    EMPTY_FIELD = "empty_field"
    INVALID_FORMAT = "invalid_format"


@dataclass(frozen=True)
class FieldError:
    """One rejected field, keyed by its form name."""

    field: str
    kind: FieldErrorKind
    message: str


@dataclass(frozen=True)
class Accepted:
    """Every rule passed; the draft can be written."""

    draft: RecordDraft


@dataclass(frozen=True)
class Rejected:
    """At least one rule failed; errors are in field-declaration order."""

    errors: tuple[FieldError, ...]

    def fields(self) -> list[str]:
        return [error.field for error in self.errors]


ValidationOutcome = Accepted | Rejected
