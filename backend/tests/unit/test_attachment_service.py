"""Unit tests for attachment resolution and local attachment storage."""

import pytest

from request_desk.application.services import AttachmentService
from request_desk.domain.entities import NO_ATTACHMENT, UploadedFile
from request_desk.domain.exceptions import StorageWriteError
from request_desk.infrastructure.storage.local_file_storage import LocalFileStorage


@pytest.fixture
def service(storage) -> AttachmentService:
    return AttachmentService(storage)


# ── Reference rules ──────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_no_upload_on_create_gives_sentinel(service: AttachmentService):
    assert await service.resolve(None, None) == NO_ATTACHMENT


@pytest.mark.asyncio
async def test_no_upload_on_update_keeps_existing_reference(service: AttachmentService):
    assert await service.resolve("receipt.png", None) == "receipt.png"


@pytest.mark.asyncio
async def test_upload_with_empty_filename_counts_as_no_upload(service: AttachmentService, upload_dir):
    result = await service.resolve("old.png", UploadedFile(filename="", content=b""))

    assert result == "old.png"
    assert list(upload_dir.iterdir()) == []


@pytest.mark.asyncio
async def test_upload_is_written_under_its_original_name(service: AttachmentService, upload_dir):
    result = await service.resolve(None, UploadedFile(filename="receipt.png", content=b"\x89PNG"))

    assert result == "receipt.png"
    assert (upload_dir / "receipt.png").read_bytes() == b"\x89PNG"


@pytest.mark.asyncio
async def test_new_upload_replaces_existing_reference(service: AttachmentService):
    result = await service.resolve("old.png", UploadedFile(filename="new.png", content=b"new"))
    assert result == "new.png"


@pytest.mark.asyncio
async def test_same_name_upload_overwrites(service: AttachmentService, upload_dir):
    await service.resolve(None, UploadedFile(filename="scan.pdf", content=b"first"))
    await service.resolve(None, UploadedFile(filename="scan.pdf", content=b"second"))

    assert (upload_dir / "scan.pdf").read_bytes() == b"second"
    assert len(list(upload_dir.iterdir())) == 1


# ── Write failures ───────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_tolerated_write_failure_still_returns_reference(failing_storage):
    service = AttachmentService(failing_storage, failure_policy="tolerate")

    result = await service.resolve(None, UploadedFile(filename="scan.pdf", content=b"x"))

    assert result == "scan.pdf"
    assert failing_storage.attempts == ["scan.pdf"]


@pytest.mark.asyncio
async def test_propagated_write_failure_raises(failing_storage):
    service = AttachmentService(failing_storage, failure_policy="propagate")

    with pytest.raises(StorageWriteError) as exc_info:
        await service.resolve("old.png", UploadedFile(filename="scan.pdf", content=b"x"))

    assert exc_info.value.filename == "scan.pdf"


# ── LocalFileStorage ─────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_directory_parts_are_stripped(storage: LocalFileStorage, upload_dir):
    stored = await storage.store_attachment(b"data", "../../etc/evil.txt")

    assert stored == "evil.txt"
    assert (upload_dir / "evil.txt").exists()
    assert not (upload_dir.parent / "evil.txt").exists()


@pytest.mark.asyncio
async def test_windows_paths_are_stripped(storage: LocalFileStorage):
    assert await storage.store_attachment(b"data", r"C:\Users\jane\photo.jpg") == "photo.jpg"


@pytest.mark.asyncio
async def test_unique_names_are_prefixed(upload_dir):
    storage = LocalFileStorage(upload_dir=str(upload_dir), unique_names=True)

    first = await storage.store_attachment(b"1", "scan.pdf")
    second = await storage.store_attachment(b"2", "scan.pdf")

    assert first != second
    assert first.endswith("_scan.pdf") and second.endswith("_scan.pdf")
    assert (upload_dir / first).read_bytes() == b"1"
    assert (upload_dir / second).read_bytes() == b"2"


@pytest.mark.asyncio
async def test_os_error_becomes_storage_write_error(storage: LocalFileStorage, upload_dir):
    # A directory already sitting at the target path makes the write fail
    (upload_dir / "blocked.txt").mkdir()

    with pytest.raises(StorageWriteError) as exc_info:
        await storage.store_attachment(b"data", "blocked.txt")

    assert exc_info.value.filename == "blocked.txt"
