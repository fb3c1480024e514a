import asyncio
import io

import pytest
from fastapi import UploadFile

from app.config import settings
from app.errors import ValidationError
from app.services.storage_service import LocalFileStorage
from tests.conftest import PNG_BYTES, stored_file


def _upload(name: str, content: bytes = PNG_BYTES) -> UploadFile:
    return UploadFile(file=io.BytesIO(content), filename=name)


def test_store_writes_unique_files(upload_root):
    storage = LocalFileStorage()
    first = asyncio.run(storage.store(_upload("photo.png"), "gallery"))
    second = asyncio.run(storage.store(_upload("photo.png"), "gallery"))

    assert first != second
    assert first.startswith("/uploads/gallery/") and first.endswith(".png")
    assert stored_file(upload_root, first).read_bytes() == PNG_BYTES
    assert storage.exists(second)


def test_store_rejects_oversized_file(upload_root, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE", 4)
    storage = LocalFileStorage()
    with pytest.raises(ValidationError):
        asyncio.run(storage.store(_upload("big.png"), "gallery"))
    assert not (upload_root / "gallery").exists() or not any((upload_root / "gallery").iterdir())


def test_delete_is_idempotent(upload_root):
    storage = LocalFileStorage()
    url = asyncio.run(storage.store(_upload("photo.png"), "thumbnails"))

    storage.delete(url)
    storage.delete(url)

    assert not stored_file(upload_root, url).exists()


def test_delete_ignores_paths_outside_upload_root(upload_root, tmp_path):
    outside = tmp_path / "secret.txt"
    outside.write_text("keep me")
    storage = LocalFileStorage()

    storage.delete("/uploads/../secret.txt")
    storage.delete(str(outside))

    assert outside.exists()
