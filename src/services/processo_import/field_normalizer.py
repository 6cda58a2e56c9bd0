"""
Field normalization for extracted case records.

Both extraction paths converge here on the same six-field canonical shape:
tabular rows through an explicit alias table, delimited lines by position.
"""
from typing import Any, Mapping, Optional, Sequence, Tuple

from src.models.processo import DEFAULT_STATUS
from src.services.core.tool import cell_to_text
from .models import CandidateRecord

# Campo canonico -> alias provati in ordine di priorità
FIELD_ALIASES: Mapping[str, Tuple[str, ...]] = {
    "numero": ("numero", "Numero", "NUMERO"),
    "vara": ("vara", "Vara", "VARA"),
    "partesEnvolvidas": ("partesEnvolvidas", "partes", "Partes", "PARTES"),
    "tipoPericia": ("tipoPericia", "tipo", "Tipo", "TIPO"),
    "prazos": ("prazos", "Prazos", "PRAZOS"),
    "status": ("status", "Status", "STATUS"),
}

# Ordine posizionale della riga delimitata: NUMERO|VARA|PARTES|TIPO_PERICIA|PRAZOS|STATUS
DELIMITED_FIELDS = ("numero", "vara", "partesEnvolvidas", "tipoPericia", "prazos", "status")
DELIMITER = "|"
MIN_DELIMITED_FIELDS = 5


def resolve_alias(row: Mapping[str, Any], aliases: Sequence[str]) -> Optional[Any]:
    """Restituisce il valore del primo alias presente e non vuoto, oppure None"""
    for alias in aliases:
        value = row.get(alias)
        if value is not None and value != "":
            return value
    return None


def _resolve_text(row: Mapping[str, Any], field_name: str) -> str:
    value = resolve_alias(row, FIELD_ALIASES[field_name])
    return cell_to_text(value)


def normalize_tabular_row(row: Mapping[str, Any]) -> CandidateRecord:
    """
    Converte una riga di foglio di calcolo nel record canonico.

    Un campo senza alias risolto diventa stringa vuota, così da cadere nella
    stessa validazione di una cella vuota. Lo stato senza alias risolto
    prende il valore di default.
    """
    status = resolve_alias(row, FIELD_ALIASES["status"])
    return CandidateRecord(
        numero=_resolve_text(row, "numero"),
        vara=_resolve_text(row, "vara"),
        partes_envolvidas=_resolve_text(row, "partesEnvolvidas"),
        tipo_pericia=_resolve_text(row, "tipoPericia"),
        prazos=_resolve_text(row, "prazos"),
        status=cell_to_text(status) if status is not None else DEFAULT_STATUS.value,
    )


def normalize_delimited_line(line: str) -> Optional[CandidateRecord]:
    """
    Converte una riga di testo delimitata da `|` nel record canonico.

    Restituisce None se la riga ha meno di cinque campi; i campi oltre il
    sesto sono ignorati e un sesto campo assente o vuoto lascia lo stato a None.
    """
    fields = line.split(DELIMITER)
    if len(fields) < MIN_DELIMITED_FIELDS:
        return None

    values = [value.strip() for value in fields[:len(DELIMITED_FIELDS)]]
    status = values[5] if len(values) > 5 and values[5] else None
    return CandidateRecord(
        numero=values[0],
        vara=values[1],
        partes_envolvidas=values[2],
        tipo_pericia=values[3],
        prazos=values[4],
        status=status,
    )
