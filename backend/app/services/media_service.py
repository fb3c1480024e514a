"""Media reconciliation for entities that own a thumbnail and an image gallery.

An update submits a change-set (new thumbnail or delete flag, new gallery
files, which existing gallery paths to keep or drop). Reconciliation runs in
a fixed order so storage never references a deleted file:

1. ``plan_media`` computes the outcome and validates it. Nothing touches disk.
2. ``reconcile_media`` stores the new files. If any store fails the files
   already written by this call are removed and the error propagates.
3. The caller persists the resulting ``MediaSet``. On failure it calls
   ``discard_stored``.
4. After the commit the caller calls ``commit_deletions`` to remove the
   superseded files. Delete failures are logged and left on disk.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from app.config import settings
from app.errors import StorageError, ValidationError
from app.utils.helpers import file_extension

logger = logging.getLogger(__name__)


@dataclass
class MediaSet:
    thumbnail: Optional[str] = None
    gallery: List[str] = field(default_factory=list)


@dataclass
class ChangeSet:
    new_thumbnail_file: Any = None
    thumbnail_deleted: bool = False
    new_gallery_files: List[Any] = field(default_factory=list)
    # None means "not submitted"; an empty list means "keep/delete nothing"
    kept_existing_gallery_paths: Optional[List[str]] = None
    deleted_existing_gallery_paths: Optional[List[str]] = None


@dataclass(frozen=True)
class MediaRequirements:
    thumbnail_required: bool = False
    gallery_required: bool = False


@dataclass(frozen=True)
class MediaFolders:
    thumbnail: str = "thumbnails"
    gallery: str = "gallery"


@dataclass
class MediaPlan:
    thumbnail: Optional[str]
    new_thumbnail_file: Any
    kept_gallery: List[str]
    new_gallery_files: List[Any]
    to_delete: List[str]


@dataclass
class MediaResult:
    media: MediaSet
    stored: List[str] = field(default_factory=list)
    to_delete: List[str] = field(default_factory=list)


def _has_file(file) -> bool:
    return file is not None and bool(getattr(file, "filename", None))


def _unique(paths: Iterable[Optional[str]]) -> List[str]:
    seen = set()
    result = []
    for path in paths:
        if not path or path in seen:
            continue
        seen.add(path)
        result.append(path)
    return result


def resolve_kept_gallery(previous: List[str], change: ChangeSet) -> List[str]:
    """Existing gallery paths that survive the change, in submission order.

    The kept list and the deleted list are two spellings of the same intent:
    with only a deleted list, every previous path not named in it is kept;
    with a kept list, it is authoritative, minus anything also marked deleted.
    With neither, the gallery is untouched.
    """
    deleted = set(change.deleted_existing_gallery_paths or [])
    if change.kept_existing_gallery_paths is not None:
        kept = change.kept_existing_gallery_paths
    else:
        kept = previous
    return [path for path in _unique(kept) if path not in deleted]


def _check_extensions(files: Iterable[Any]) -> None:
    allowed = {ext.lower() for ext in settings.ALLOWED_IMAGE_EXTENSIONS}
    for file in files:
        ext = file_extension(file.filename)
        if ext not in allowed:
            raise ValidationError(
                f"unsupported image type '{ext}' for {file.filename}. Allowed: {', '.join(sorted(allowed))}"
            )


def plan_media(
    previous: MediaSet,
    change: ChangeSet,
    requirements: MediaRequirements = MediaRequirements(),
) -> MediaPlan:
    """Compute the reconciliation outcome and validate it without touching storage."""
    to_delete: List[Optional[str]] = []

    new_thumbnail_file = change.new_thumbnail_file if _has_file(change.new_thumbnail_file) else None
    if new_thumbnail_file is not None:
        # upload wins over the delete flag
        to_delete.append(previous.thumbnail)
        thumbnail = None
    elif change.thumbnail_deleted:
        to_delete.append(previous.thumbnail)
        thumbnail = None
    else:
        thumbnail = previous.thumbnail or None

    kept_gallery = resolve_kept_gallery(previous.gallery, change)
    kept_set = set(kept_gallery)
    to_delete.extend(path for path in previous.gallery if path not in kept_set)
    new_gallery_files = [f for f in change.new_gallery_files or [] if _has_file(f)]

    if requirements.thumbnail_required and new_thumbnail_file is None and not thumbnail:
        raise ValidationError("thumbnail required")
    if requirements.gallery_required and not kept_gallery and not new_gallery_files:
        raise ValidationError("at least one image required")

    uploads = new_gallery_files + ([new_thumbnail_file] if new_thumbnail_file is not None else [])
    _check_extensions(uploads)

    surviving = kept_set | ({thumbnail} if thumbnail else set())
    return MediaPlan(
        thumbnail=thumbnail,
        new_thumbnail_file=new_thumbnail_file,
        kept_gallery=kept_gallery,
        new_gallery_files=new_gallery_files,
        to_delete=[path for path in _unique(to_delete) if path not in surviving],
    )


async def reconcile_media(
    previous: MediaSet,
    change: ChangeSet,
    storage,
    requirements: MediaRequirements = MediaRequirements(),
    folders: MediaFolders = MediaFolders(),
) -> MediaResult:
    """Validate the change-set and store its new files.

    Returns the final MediaSet plus the superseded paths. No existing file is
    deleted here; see ``commit_deletions``.
    """
    plan = plan_media(previous, change, requirements)

    stored: List[str] = []
    try:
        thumbnail = plan.thumbnail
        if plan.new_thumbnail_file is not None:
            thumbnail = await storage.store(plan.new_thumbnail_file, folders.thumbnail)
            stored.append(thumbnail)
        new_gallery = []
        for file in plan.new_gallery_files:
            url = await storage.store(file, folders.gallery)
            stored.append(url)
            new_gallery.append(url)
    except Exception:
        logger.warning("[media] store failed, removing %d file(s) written by this request", len(stored))
        _delete_quietly(stored, storage)
        raise

    return MediaResult(
        media=MediaSet(thumbnail=thumbnail, gallery=plan.kept_gallery + new_gallery),
        stored=stored,
        to_delete=plan.to_delete,
    )


def _delete_quietly(paths: Iterable[str], storage) -> List[str]:
    failed = []
    for path in paths:
        try:
            storage.delete(path)
        except StorageError as exc:
            logger.warning("[media] could not delete %s, leaving it on disk: %s", path, exc)
            failed.append(path)
    return failed


def commit_deletions(result: MediaResult, storage) -> List[str]:
    """Remove superseded files once the new MediaSet is persisted. Returns paths that could not be removed."""
    if result.to_delete:
        logger.info("[media] removing %d superseded file(s)", len(result.to_delete))
    return _delete_quietly(result.to_delete, storage)


def discard_stored(result: MediaResult, storage) -> List[str]:
    """Roll back the files stored for a MediaSet that was never persisted."""
    return _delete_quietly(result.stored, storage)


def media_paths(media: MediaSet) -> List[str]:
    return _unique([media.thumbnail, *media.gallery])


def purge_media(media: MediaSet, storage) -> List[str]:
    """Remove every file of a deleted owner. Returns paths that could not be removed."""
    return _delete_quietly(media_paths(media), storage)
