from dataclasses import dataclass


@dataclass(frozen=True)
class UploadedFile:
    """An attachment received with a form, already read into memory."""

    filename: str
    content: bytes
