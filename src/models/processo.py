import enum
from datetime import datetime
from typing import Optional

from sqlalchemy import Integer, Column, String, Date, DateTime, Enum, func

from src.database import Base


class ProcessoStatus(str, enum.Enum):
    """Stato di lavorazione di un processo; il valore è il token usato in API e nei file importati"""
    EM_ANDAMENTO = "EM_ANDAMENTO"
    AGUARDANDO = "AGUARDANDO"
    CONCLUIDO = "CONCLUIDO"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_LABELS = {
    ProcessoStatus.EM_ANDAMENTO: "Em Andamento",
    ProcessoStatus.AGUARDANDO: "Aguardando",
    ProcessoStatus.CONCLUIDO: "Concluído",
}

DEFAULT_STATUS = ProcessoStatus.EM_ANDAMENTO

_STATUS_VALUES = frozenset(status.value for status in ProcessoStatus)


def is_valid_status(token: Optional[str]) -> bool:
    """True se il token è esattamente uno dei valori di ProcessoStatus"""
    return token in _STATUS_VALUES


def resolve_status(token: Optional[str]) -> ProcessoStatus:
    """Restituisce lo stato corrispondente al token, oppure EM_ANDAMENTO se assente o non valido"""
    if is_valid_status(token):
        return ProcessoStatus(token)
    return DEFAULT_STATUS


class Processo(Base):
    """
        Modello SQLAlchemy per la tabella 'processos'.

        Ogni istanza rappresenta un processo giudiziario con perizia. Il numero del
        processo è la chiave naturale: il vincolo di unicità sul database è l'unica
        garanzia reale contro i duplicati, anche tra importazioni concorrenti.

        Attributes:
            id_processo (Column): Chiave primaria, assegnata dal database.
            numero (Column): Numero del processo, univoco.
            vara (Column): Vara (tribunale) competente.
            partes_envolvidas (Column): Parti coinvolte.
            tipo_pericia (Column): Tipo di perizia richiesta.
            prazos (Column): Scadenza, come data di calendario senza fuso orario.
            status (Column): Stato di lavorazione, default EM_ANDAMENTO.
            created_at (Column): Timestamp di inserimento, non modificabile.
    """
    __tablename__ = "processos"

    id_processo = Column(Integer, primary_key=True, index=True)
    numero = Column(String(100), unique=True, index=True, nullable=False)
    vara = Column(String(200), nullable=False)
    partes_envolvidas = Column(String(500), nullable=False)
    tipo_pericia = Column(String(200), nullable=False)
    prazos = Column(Date, nullable=False)
    status = Column(Enum(ProcessoStatus, name="processo_status"), default=DEFAULT_STATUS, nullable=False)
    created_at = Column(DateTime, default=datetime.now, server_default=func.now(), nullable=False)
