"""JSON import/export endpoints."""

from typing import Any, Union

from fastapi import APIRouter, Body, Depends

from tradejournal.api.deps import get_json_exporter, get_json_importer
from tradejournal.api.schemas import ImportResultResponse
from tradejournal.transfer import JsonExporter, JsonImporter

router = APIRouter(prefix="/transfer", tags=["transfer"])


@router.get("/export")
async def export_days(exporter: JsonExporter = Depends(get_json_exporter)) -> dict[str, Any]:
    """Export all non-deleted days as a backup document."""
    return await exporter.export_data()


@router.post("/import", response_model=ImportResultResponse)
async def import_days(
    document: Union[dict[str, Any], list[Any]] = Body(...),
    importer: JsonImporter = Depends(get_json_importer),
) -> ImportResultResponse:
    """Import a backup document or a bare list of days."""
    summary = await importer.import_document(document)
    return ImportResultResponse(
        imported_count=summary.imported_count,
        skipped_count=summary.skipped_count,
        error_count=summary.error_count,
        errors=summary.errors,
    )
