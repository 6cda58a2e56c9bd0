"""
Processo Import Router

Endpoint per l'importazione in blocco di processi da PDF o fogli di calcolo.
"""
from io import BytesIO
from typing import Optional

from fastapi import APIRouter, Depends, UploadFile, File, status
from fastapi.responses import StreamingResponse
from openpyxl import Workbook

from src.core.container_config import get_configured_container
from src.core.dependencies import db_dependency, settings_dependency
from src.core.exceptions import ExceptionFactory
from src.models.processo import ProcessoStatus
from src.schemas.processo_schema import ImportResponseSchema, ImportFormatsResponseSchema
from src.services.interfaces.processo_import_service_interface import IProcessoImportService
from src.services.processo_import.field_normalizer import FIELD_ALIASES, DELIMITED_FIELDS, DELIMITER, MIN_DELIMITED_FIELDS
from src.services.processo_import.format_detector import PDF_MEDIA_TYPE, SPREADSHEET_MEDIA_TYPES, SPREADSHEET_EXTENSIONS

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

router = APIRouter(
    prefix="/api/v1/processos/importar",
    tags=["Processo Import"]
)


def get_processo_import_service(db: db_dependency) -> IProcessoImportService:
    """Dependency injection per il servizio di importazione"""
    configured_container = get_configured_container()
    return configured_container.resolve_with_session(IProcessoImportService, db)


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=ImportResponseSchema,
    response_model_exclude_none=True,
    response_description="Importazione completata"
)
async def import_processos(
    settings: settings_dependency,
    file: Optional[UploadFile] = File(None, description="File PDF o Excel (.xlsx, .xls)"),
    import_service: IProcessoImportService = Depends(get_processo_import_service)
):
    """
    Importa processi da un file PDF o da un foglio di calcolo.

    **PDF**: una riga per processo, `NUMERO|VARA|PARTES|TIPO_PERICIA|PRAZOS|STATUS`
    (almeno cinque campi, lo stato è opzionale).

    **Excel**: primo foglio, prima riga di intestazione con le colonne
    `numero, vara, partes, tipoPericia, prazos, status`.

    Le righe non valide non bloccano l'importazione: ognuna produce un avviso
    in `erros`, che è assente quando non ci sono avvisi.
    """
    if file is None or not file.filename:
        raise ExceptionFactory.no_file()

    content = await file.read()
    if not content:
        raise ExceptionFactory.no_file()
    if len(content) > settings.max_upload_size:
        raise ExceptionFactory.file_too_large(len(content), settings.max_upload_size)

    outcome = await import_service.import_file(content, file.content_type, file.filename)
    return outcome.to_dict()


@router.get(
    "/formatos",
    status_code=status.HTTP_200_OK,
    response_model=ImportFormatsResponseSchema
)
async def get_supported_formats():
    """
    Descrive i formati di file accettati dall'importazione.
    """
    return {
        "delimited_text": {
            "media_types": [PDF_MEDIA_TYPE],
            "line_format": DELIMITER.join(DELIMITED_FIELDS),
            "delimiter": DELIMITER,
            "min_fields": MIN_DELIMITED_FIELDS,
        },
        "tabular": {
            "media_types": sorted(SPREADSHEET_MEDIA_TYPES),
            "extensions": list(SPREADSHEET_EXTENSIONS),
            "columns": {field_name: list(aliases) for field_name, aliases in FIELD_ALIASES.items()},
        },
        "status": [
            {"value": processo_status.value, "label": processo_status.label}
            for processo_status in ProcessoStatus
        ],
    }


@router.get(
    "/template",
    status_code=status.HTTP_200_OK,
    response_description="Template Excel scaricato"
)
async def get_import_template():
    """
    Scarica un foglio Excel con le intestazioni attese e una riga di esempio.
    """
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = "Processos"
    worksheet.append(list(FIELD_ALIASES.keys()))
    worksheet.append(["0001234-56.2025.8.26.0100", "1a Vara Civel", "Autor vs Reu", "Medica", "2025-01-31",
                      ProcessoStatus.EM_ANDAMENTO.value])

    output = BytesIO()
    workbook.save(output)
    output.seek(0)

    return StreamingResponse(
        output,
        media_type=XLSX_MEDIA_TYPE,
        headers={
            "Content-Disposition": "attachment; filename=processos_template.xlsx"
        }
    )
