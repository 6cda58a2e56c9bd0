from datetime import date, datetime
from typing import Optional, List

from pydantic import BaseModel, Field, computed_field

from src.models.processo import ProcessoStatus


class ProcessoSchema(BaseModel):
    """
        Schema per la creazione manuale di un processo.

        I nomi dei campi in ingresso seguono il contratto JSON del frontend
        (camelCase). Tutti i campi tranne `status` sono obbligatori e non possono
        essere vuoti dopo il trim; `prazos` resta testo e viene interpretato come
        data dal service, con lo stesso parser usato dall'importazione.

        Attributes:
        - numero (str): Numero del processo, univoco.
        - vara (str): Vara competente.
        - partes_envolvidas (str): Parti coinvolte (`partesEnvolvidas`).
        - tipo_pericia (str): Tipo di perizia (`tipoPericia`).
        - prazos (str): Scadenza in formato testuale.
        - status (Optional[str]): Token di stato; se assente o non valido vale EM_ANDAMENTO.
    """
    numero: str = Field(..., min_length=1, max_length=100)
    vara: str = Field(..., min_length=1, max_length=200)
    partes_envolvidas: str = Field(..., alias="partesEnvolvidas", min_length=1, max_length=500)
    tipo_pericia: str = Field(..., alias="tipoPericia", min_length=1, max_length=200)
    prazos: str = Field(..., min_length=1)
    status: Optional[str] = None

    model_config = {"populate_by_name": True, "str_strip_whitespace": True}


class ProcessoResponseSchema(BaseModel):
    id_processo: int = Field(serialization_alias="id")
    numero: str
    vara: str
    partes_envolvidas: str = Field(serialization_alias="partesEnvolvidas")
    tipo_pericia: str = Field(serialization_alias="tipoPericia")
    prazos: date
    status: ProcessoStatus
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = {"from_attributes": True}

    @computed_field(alias="statusLabel")
    @property
    def status_label(self) -> str:
        return self.status.label


class ImportResponseSchema(BaseModel):
    message: str
    processos_inseridos: int = Field(alias="processosInseridos")
    erros: Optional[List[str]] = None


class ImportFormatsResponseSchema(BaseModel):
    delimited_text: dict = Field(serialization_alias="delimitedText")
    tabular: dict
    status: List[dict]
