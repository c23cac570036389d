"""Pydantic schemas for import/export endpoints."""

from pydantic import BaseModel


class ImportResultResponse(BaseModel):
    """Response schema for a JSON import."""

    imported_count: int
    skipped_count: int
    error_count: int
    errors: list[str]
