"""Local-disk file storage for uploaded images."""

import logging
import os
import uuid

from fastapi import UploadFile

from app.config import settings
from app.errors import StorageError, ValidationError
from app.utils.helpers import file_extension

logger = logging.getLogger(__name__)

URL_PREFIX = "/uploads/"


class LocalFileStorage:
    """Stores files under settings.UPLOAD_DIR and addresses them as /uploads/<folder>/<name> URLs."""

    def __init__(self, root: str | None = None):
        self._root = root

    @property
    def root(self) -> str:
        # resolved per call so tests can repoint settings.UPLOAD_DIR
        return self._root or settings.UPLOAD_DIR

    def url_to_path(self, url: str) -> str | None:
        if not url or not url.startswith(URL_PREFIX):
            return None
        rel_path = url[len(URL_PREFIX):]
        if ".." in rel_path.split("/"):
            return None
        return os.path.join(self.root, rel_path.replace("/", os.sep))

    async def store(self, file: UploadFile, folder: str) -> str:
        ext = file_extension(file.filename)
        content = await file.read()
        if len(content) > settings.MAX_UPLOAD_SIZE:
            raise ValidationError(f"file exceeds {settings.MAX_UPLOAD_SIZE // (1024 * 1024)} MB limit: {file.filename}")

        directory = os.path.join(self.root, folder)
        filename = f"{uuid.uuid4().hex}.{ext}" if ext else uuid.uuid4().hex
        path = os.path.join(directory, filename)
        try:
            os.makedirs(directory, exist_ok=True)
            with open(path, "wb") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
        except OSError as exc:
            raise StorageError(f"failed to save {file.filename}: {exc}") from exc

        url = f"{URL_PREFIX}{folder}/{filename}".replace("\\", "/")
        logger.info("[storage] stored %s (%d bytes)", url, len(content))
        return url

    def delete(self, url: str) -> None:
        path = self.url_to_path(url)
        if path is None:
            logger.warning("[storage] refusing to delete path outside upload root: %s", url)
            return
        try:
            os.remove(path)
        except FileNotFoundError:
            return
        except OSError as exc:
            raise StorageError(f"failed to delete {url}: {exc}") from exc
        logger.info("[storage] deleted %s", url)

    def exists(self, url: str) -> bool:
        path = self.url_to_path(url)
        return path is not None and os.path.isfile(path)


_default_storage = LocalFileStorage()


def get_storage() -> LocalFileStorage:
    return _default_storage
