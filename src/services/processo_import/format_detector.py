"""
Format detection for uploaded case files.

Pure classification on declared media type and file name.
"""
from typing import Optional

from .models import SourceFormat

PDF_MEDIA_TYPE = "application/pdf"

SPREADSHEET_MEDIA_TYPES = frozenset({
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-excel",
})

# Suffisso case-sensitive, come nel contratto del frontend
SPREADSHEET_EXTENSIONS = (".xlsx", ".xls")


def detect_format(content_type: Optional[str], filename: Optional[str]) -> SourceFormat:
    """
    Sceglie la strategia di estrazione per un file caricato.

    Regole, in ordine:
    1. media type PDF -> DELIMITED_TEXT
    2. media type di foglio di calcolo, oppure nome che termina in .xlsx/.xls -> TABULAR
    3. altrimenti -> UNSUPPORTED
    """
    if content_type == PDF_MEDIA_TYPE:
        return SourceFormat.DELIMITED_TEXT
    if content_type in SPREADSHEET_MEDIA_TYPES or (filename or "").endswith(SPREADSHEET_EXTENSIONS):
        return SourceFormat.TABULAR
    return SourceFormat.UNSUPPORTED
