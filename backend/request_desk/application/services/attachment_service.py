"""Resolves the attachment reference a record should carry."""

import logging
from typing import Literal

from request_desk.application.interfaces import AttachmentStorage
from request_desk.domain.entities import NO_ATTACHMENT, UploadedFile
from request_desk.domain.exceptions import StorageWriteError

logger = logging.getLogger(__name__)

FailurePolicy = Literal["tolerate", "propagate"]


class AttachmentService:
    """Decides between keeping, replacing or omitting a record's attachment.

    ``failure_policy`` controls what a failed write means:
    ``"tolerate"`` logs it and still returns the reference,
    ``"propagate"`` re-raises the StorageWriteError so nothing is written.
    """

    def __init__(
        self,
        storage: AttachmentStorage,
        failure_policy: FailurePolicy = "tolerate",
    ):
        self._storage = storage
        self._failure_policy = failure_policy

    async def resolve(
        self,
        existing_reference: str | None,
        upload: UploadedFile | None,
    ) -> str:
        if upload is None or not upload.filename:
            return existing_reference if existing_reference else NO_ATTACHMENT

        try:
            return await self._storage.store_attachment(upload.content, upload.filename)
        except StorageWriteError as exc:
            if self._failure_policy == "propagate":
                logger.error("Attachment write failed, aborting: %s", exc)
                raise
            logger.warning(
                "Attachment write failed, keeping reference '%s' anyway: %s",
                upload.filename,
                exc.reason,
            )
            return exc.filename
