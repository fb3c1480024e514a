"""Upload maintenance response schemas."""

from pydantic import BaseModel


class MediaCleanupOut(BaseModel):
    dry_run: bool
    referenced_count: int
    existing_count: int
    orphan_count: int
    deleted_count: int
    orphan_urls: list[str]
