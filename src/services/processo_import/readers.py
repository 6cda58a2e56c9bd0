"""
Raw content readers for uploaded case files.

Turn the binary upload into plain text (PDF) or generic key-value rows
(spreadsheet). Any failure of the underlying library is request-fatal.
"""
import logging
from io import BytesIO
from typing import Any, Dict, List

from openpyxl import load_workbook
from pypdf import PdfReader

from src.core.exceptions import ImportFileException, ErrorCode

logger = logging.getLogger(__name__)


def read_pdf_text(content: bytes) -> str:
    """
    Estrae il testo di tutte le pagine di un PDF, separate da un a capo.

    Raises:
        ImportFileException: se il PDF non può essere letto
    """
    try:
        reader = PdfReader(BytesIO(content))
        return "\n".join(page.extract_text() or "" for page in reader.pages)
    except Exception as e:
        logger.warning(f"Unreadable PDF upload: {type(e).__name__}: {str(e)}")
        raise ImportFileException(
            "Error processing PDF file. Check the format.",
            ErrorCode.MALFORMED_FILE,
            {"reason": str(e)}
        ) from e


def read_sheet_rows(content: bytes) -> List[Dict[str, Any]]:
    """
    Legge il primo foglio di una cartella di lavoro come lista di righe.

    La prima riga è l'intestazione; ogni riga successiva diventa un
    dizionario {intestazione: valore}. Le righe completamente vuote e le
    colonne senza intestazione sono ignorate.

    Raises:
        ImportFileException: se il file non è una cartella di lavoro leggibile
    """
    workbook = None
    try:
        workbook = load_workbook(BytesIO(content), read_only=True, data_only=True)
        # In sola lettura il foglio viene analizzato solo durante iter_rows
        return _rows_from_worksheet(workbook.worksheets[0])
    except Exception as e:
        logger.warning(f"Unreadable spreadsheet upload: {type(e).__name__}: {str(e)}")
        raise ImportFileException(
            "Error processing spreadsheet. Check the format and the columns.",
            ErrorCode.MALFORMED_FILE,
            {"reason": str(e)}
        ) from e
    finally:
        if workbook is not None:
            workbook.close()


def _rows_from_worksheet(worksheet) -> List[Dict[str, Any]]:
    rows_iter = worksheet.iter_rows(values_only=True)
    header_row = next(rows_iter, None)
    if header_row is None:
        return []

    headers = [str(h).strip() if h is not None else None for h in header_row]

    rows = []
    for values in rows_iter:
        row = {
            header: value
            for header, value in zip(headers, values)
            if header and value is not None and value != ""
        }
        if row:
            rows.append(row)
    return rows
