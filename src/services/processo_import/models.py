"""
Data models for the case import pipeline.

Immutable dataclasses for candidate records and import outcomes.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional


class SourceFormat(enum.Enum):
    """Strategia di estrazione scelta dal format detector"""
    DELIMITED_TEXT = "delimited_text"
    TABULAR = "tabular"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class CandidateRecord:
    """
    Record estratto da un file e non ancora validato.

    Dopo la normalizzazione i cinque campi obbligatori sono sempre stringhe
    (eventualmente vuote); `status` è None quando il file non lo riporta.

    Attributes:
        numero: Numero del processo
        vara: Vara competente
        partes_envolvidas: Parti coinvolte
        tipo_pericia: Tipo di perizia
        prazos: Scadenza, testo non ancora interpretato
        status: Token di stato grezzo (opzionale)
    """
    numero: str = ""
    vara: str = ""
    partes_envolvidas: str = ""
    tipo_pericia: str = ""
    prazos: str = ""
    status: Optional[str] = None

    def has_blank_required_field(self) -> bool:
        return not all(
            value.strip()
            for value in (self.numero, self.vara, self.partes_envolvidas, self.tipo_pericia, self.prazos)
        )


@dataclass
class ImportOutcome:
    """
    Risultato di un'importazione.

    Attributes:
        inserted_count: Numero di processi inseriti
        warnings: Un messaggio per ogni riga scartata o fallita, in ordine di riga
        total_rows: Numero di record candidati elaborati
    """
    inserted_count: int = 0
    warnings: List[str] = field(default_factory=list)
    total_rows: int = 0

    @property
    def message(self) -> str:
        return f"Import completed. {self.inserted_count} records inserted."

    def to_dict(self) -> Dict[str, Any]:
        """Converte in dizionario per risposta API; `erros` è omesso se non ci sono avvisi"""
        result: Dict[str, Any] = {
            "message": self.message,
            "processosInseridos": self.inserted_count,
        }
        if self.warnings:
            result["erros"] = list(self.warnings)
        return result
