"""Media reconciliation: thumbnail/gallery outcomes, validation before mutation, and store/delete ordering."""

import asyncio
from types import SimpleNamespace

import pytest

from app.errors import StorageError, ValidationError
from app.services import media_service
from app.services.media_service import ChangeSet, MediaRequirements, MediaSet

REQUIRED = MediaRequirements(thumbnail_required=True, gallery_required=True)


class FakeStorage:
    def __init__(self, fail_on: str | None = None, fail_delete: set | None = None):
        self.fail_on = fail_on
        self.fail_delete = fail_delete or set()
        self.stored: list[str] = []
        self.deleted: list[str] = []

    async def store(self, file, folder):
        if file.filename == self.fail_on:
            raise StorageError(f"disk full while saving {file.filename}")
        url = f"/uploads/{folder}/{len(self.stored) + 1}-{file.filename}"
        self.stored.append(url)
        return url

    def delete(self, url):
        if url in self.fail_delete:
            raise StorageError(f"permission denied: {url}")
        self.deleted.append(url)


def upload(name: str):
    return SimpleNamespace(filename=name)


def reconcile(previous, change, storage, requirements=REQUIRED):
    return asyncio.run(media_service.reconcile_media(previous, change, storage, requirements))


def test_replace_one_gallery_image_keeps_order_and_thumbnail():
    storage = FakeStorage()
    previous = MediaSet(thumbnail="/thumb/a.png", gallery=["/g/1.png", "/g/2.png"])
    change = ChangeSet(
        kept_existing_gallery_paths=["/g/1.png"],
        deleted_existing_gallery_paths=["/g/2.png"],
        new_gallery_files=[upload("x.png")],
    )

    result = reconcile(previous, change, storage)

    assert result.media.thumbnail == "/thumb/a.png"
    assert result.media.gallery == ["/g/1.png", "/uploads/gallery/1-x.png"]
    assert result.to_delete == ["/g/2.png"]
    assert storage.deleted == []


def test_final_gallery_is_kept_then_new_in_submission_order():
    storage = FakeStorage()
    previous = MediaSet(thumbnail="/t.png", gallery=["/g/1.png", "/g/2.png", "/g/3.png"])
    change = ChangeSet(
        kept_existing_gallery_paths=["/g/3.png", "/g/1.png"],
        new_gallery_files=[upload("b.png"), upload("a.png")],
    )

    result = reconcile(previous, change, storage)

    assert result.media.gallery == [
        "/g/3.png",
        "/g/1.png",
        "/uploads/gallery/1-b.png",
        "/uploads/gallery/2-a.png",
    ]
    assert result.to_delete == ["/g/2.png"]


def test_kept_list_and_deleted_list_are_equivalent():
    previous = MediaSet(thumbnail="/t.png", gallery=["/g/1.png", "/g/2.png", "/g/3.png"])
    by_kept = media_service.plan_media(previous, ChangeSet(kept_existing_gallery_paths=["/g/1.png", "/g/3.png"]))
    by_deleted = media_service.plan_media(previous, ChangeSet(deleted_existing_gallery_paths=["/g/2.png"]))

    assert by_kept.kept_gallery == by_deleted.kept_gallery == ["/g/1.png", "/g/3.png"]
    assert by_kept.to_delete == by_deleted.to_delete == ["/g/2.png"]


def test_no_gallery_instructions_leave_gallery_untouched():
    previous = MediaSet(thumbnail="/t.png", gallery=["/g/1.png", "/g/2.png"])
    plan = media_service.plan_media(previous, ChangeSet(), REQUIRED)
    assert plan.kept_gallery == ["/g/1.png", "/g/2.png"]
    assert plan.thumbnail == "/t.png"
    assert plan.to_delete == []


def test_missing_thumbnail_fails_without_touching_storage():
    storage = FakeStorage()
    previous = MediaSet(thumbnail="/t.png", gallery=["/g/1.png"])
    change = ChangeSet(thumbnail_deleted=True, new_gallery_files=[upload("x.png")])

    with pytest.raises(ValidationError, match="thumbnail required"):
        reconcile(previous, change, storage)

    assert storage.stored == []
    assert storage.deleted == []


def test_deleting_last_gallery_image_fails_without_touching_storage():
    storage = FakeStorage()
    previous = MediaSet(thumbnail="/t.png", gallery=["/g/1.png"])
    change = ChangeSet(new_thumbnail_file=upload("new.png"), deleted_existing_gallery_paths=["/g/1.png"])

    with pytest.raises(ValidationError, match="at least one image required"):
        reconcile(previous, change, storage)

    assert storage.stored == []
    assert storage.deleted == []


def test_upload_wins_over_delete_flag():
    storage = FakeStorage()
    previous = MediaSet(thumbnail="/t/old.png", gallery=["/g/1.png"])
    change = ChangeSet(new_thumbnail_file=upload("new.png"), thumbnail_deleted=True)

    result = reconcile(previous, change, storage)

    assert result.media.thumbnail == "/uploads/thumbnails/1-new.png"
    assert result.to_delete.count("/t/old.png") == 1

    media_service.commit_deletions(result, storage)
    assert storage.deleted == ["/t/old.png"]


def test_optional_thumbnail_can_be_cleared():
    storage = FakeStorage()
    result = reconcile(MediaSet(thumbnail="/profile/me.png"), ChangeSet(thumbnail_deleted=True), storage, MediaRequirements())
    assert result.media.thumbnail is None
    assert result.to_delete == ["/profile/me.png"]


def test_unsupported_extension_is_rejected_before_any_store():
    storage = FakeStorage()
    previous = MediaSet(thumbnail="/t.png", gallery=["/g/1.png"])
    change = ChangeSet(new_gallery_files=[upload("ok.png"), upload("script.exe")])

    with pytest.raises(ValidationError, match="unsupported image type"):
        reconcile(previous, change, storage)
    assert storage.stored == []


def test_store_failure_removes_files_written_by_the_request():
    storage = FakeStorage(fail_on="broken.png")
    previous = MediaSet(thumbnail="/t.png", gallery=["/g/1.png"])
    change = ChangeSet(
        new_thumbnail_file=upload("thumb.png"),
        deleted_existing_gallery_paths=["/g/1.png"],
        new_gallery_files=[upload("a.png"), upload("broken.png")],
    )

    with pytest.raises(StorageError):
        reconcile(previous, change, storage)

    # only the files from this request were rolled back; nothing old was deleted
    assert sorted(storage.deleted) == sorted(storage.stored)
    assert "/t.png" not in storage.deleted
    assert "/g/1.png" not in storage.deleted


def test_failed_superseded_delete_is_reported_not_raised():
    storage = FakeStorage(fail_delete={"/g/2.png"})
    previous = MediaSet(thumbnail="/t.png", gallery=["/g/1.png", "/g/2.png", "/g/3.png"])
    result = reconcile(previous, ChangeSet(kept_existing_gallery_paths=["/g/1.png"]), storage)

    failed = media_service.commit_deletions(result, storage)

    assert failed == ["/g/2.png"]
    assert storage.deleted == ["/g/3.png"]
    assert result.media.gallery == ["/g/1.png"]


def test_discard_stored_removes_only_new_files():
    storage = FakeStorage()
    previous = MediaSet(thumbnail="/t.png", gallery=["/g/1.png"])
    result = reconcile(previous, ChangeSet(new_thumbnail_file=upload("n.png"), new_gallery_files=[upload("m.png")]), storage)

    media_service.discard_stored(result, storage)

    assert storage.deleted == result.stored
    assert "/t.png" not in storage.deleted


def test_purge_media_schedules_every_path_once():
    storage = FakeStorage()
    media_service.purge_media(MediaSet(thumbnail="/t.png", gallery=["/g/1.png", "/g/1.png", "/g/2.png"]), storage)
    assert storage.deleted == ["/t.png", "/g/1.png", "/g/2.png"]


def test_create_against_empty_media_requires_both_images():
    storage = FakeStorage()
    with pytest.raises(ValidationError, match="at least one image required"):
        reconcile(MediaSet(), ChangeSet(new_thumbnail_file=upload("t.png")), storage)
    with pytest.raises(ValidationError, match="thumbnail required"):
        reconcile(MediaSet(), ChangeSet(new_gallery_files=[upload("g.png")]), storage)
    assert storage.stored == []
