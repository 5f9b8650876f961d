"""Ledger import/export endpoints."""

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import Response

from networth.api.deps import (
    get_csv_exporter,
    get_csv_template_generator,
    get_ledger_import_service,
    get_owner_id,
)
from networth.api.schemas import ImportSummaryResponse
from networth.csv import CsvExporter, CsvTemplateGenerator, export_filename
from networth.csv.template import TEMPLATE_FILENAME
from networth.services import LedgerImportService

router = APIRouter(prefix="/ledger", tags=["ledger"])


def _csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("/import", response_model=ImportSummaryResponse, status_code=201)
def import_ledger(
    file: UploadFile = File(...),
    owner_id: str = Depends(get_owner_id),
    service: LedgerImportService = Depends(get_ledger_import_service),
) -> ImportSummaryResponse:
    """Replace the owner's balance history with an uploaded ledger CSV.

    Accounts the ledger names are created or recategorized first. Rows that
    cannot be imported are counted, never fatal.
    """
    content = file.file.read()
    summary = service.import_ledger(owner_id, content)
    return ImportSummaryResponse.model_validate(summary)


@router.get("/export")
def export_ledger(
    owner_id: str = Depends(get_owner_id),
    exporter: CsvExporter = Depends(get_csv_exporter),
):
    """Download the owner's balance history as a ledger CSV."""
    return _csv_response(exporter.export_text(owner_id), export_filename(owner_id))


@router.get("/template")
def download_template(
    generator: CsvTemplateGenerator = Depends(get_csv_template_generator),
):
    """Download a ledger template with header and example rows."""
    return _csv_response(generator.template_text(), TEMPLATE_FILENAME)
