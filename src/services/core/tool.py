from datetime import date, datetime
from typing import Any

from dateutil import parser as date_parser


def parse_deadline(value: str) -> date:
    """
    Interpreta una scadenza testuale come data di calendario (senza fuso orario).

    Prova prima il formato ISO (YYYY-MM-DD), poi il parser di dateutil per
    le altre forme ("2025-01-01 00:00:00", "Jan 5 2025", ...).

    Raises:
        ValueError: se il testo non rappresenta una data
    """
    text = (value or "").strip()
    if not text:
        raise ValueError("empty date")
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return date_parser.parse(text).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"invalid date: {text}") from e


def cell_to_text(value: Any) -> str:
    """Converte il valore di una cella di foglio di calcolo in testo senza spazi ai bordi"""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()
