"""Local filesystem storage for request attachments.

Storage layout:
    <upload_dir>/<original_name>            — default, same name overwrites
    <upload_dir>/<uuid hex>_<original_name> — with unique_names=True
"""

import asyncio
import logging
import re
from pathlib import Path, PureWindowsPath
from uuid import uuid4

from request_desk.application.interfaces import AttachmentStorage
from request_desk.domain.exceptions import StorageWriteError

logger = logging.getLogger(__name__)


def _base_name(filename: str, max_len: int = 200) -> str:
    """Strip any directory part (POSIX or Windows) so writes stay in the upload dir."""
    name = PureWindowsPath(filename).name
    name = Path(name).name
    name = re.sub(r"[\x00-\x1f]", "", name).strip()
    if name in {"", ".", ".."}:
        return "unnamed"
    return name[-max_len:]


class LocalFileStorage(AttachmentStorage):
    """Infrastructure adapter for local attachment storage."""

    def __init__(self, upload_dir: str, unique_names: bool = False):
        self._upload_dir = Path(upload_dir)
        self._unique_names = unique_names
        self._upload_dir.mkdir(parents=True, exist_ok=True)

    async def store_attachment(self, content: bytes, filename: str) -> str:
        """Write an uploaded file into ``<upload_dir>/`` and return its stored name."""
        stored_name = _base_name(filename)
        if self._unique_names:
            stored_name = f"{uuid4().hex}_{stored_name}"

        dest_path = self._upload_dir / stored_name
        try:
            self._upload_dir.mkdir(parents=True, exist_ok=True)
            await asyncio.to_thread(dest_path.write_bytes, content)
        except OSError as exc:
            raise StorageWriteError(stored_name, str(exc)) from exc

        logger.info("Stored attachment: %s (%d bytes)", dest_path, len(content))
        return stored_name
