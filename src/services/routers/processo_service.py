"""
Processo Service seguendo i principi SOLID
"""
import logging
from typing import List, Any
from src.services.interfaces.processo_service_interface import IProcessoService
from src.repository.interfaces.processo_repository_interface import IProcessoRepository
from src.schemas.processo_schema import ProcessoSchema
from src.models.processo import Processo, resolve_status
from src.services.core.tool import parse_deadline
from src.core.exceptions import (
    DuplicateProcessoException,
    ExceptionFactory,
)

logger = logging.getLogger(__name__)


class ProcessoService(IProcessoService):
    """Processo Service seguendo SRP, OCP, LSP, ISP, DIP"""

    def __init__(self, processo_repository: IProcessoRepository):
        self._processo_repository = processo_repository

    async def create_processo(self, processo_data: ProcessoSchema) -> Processo:
        """Crea un nuovo processo con validazioni business"""
        await self.validate_business_rules(processo_data)

        # Business Rule: il numero deve essere unico
        if self._processo_repository.exists_by_numero(processo_data.numero):
            raise DuplicateProcessoException(processo_data.numero)

        try:
            prazos = parse_deadline(processo_data.prazos)
        except ValueError:
            raise ExceptionFactory.invalid_date(processo_data.prazos)

        processo = Processo(
            numero=processo_data.numero,
            vara=processo_data.vara,
            partes_envolvidas=processo_data.partes_envolvidas,
            tipo_pericia=processo_data.tipo_pericia,
            prazos=prazos,
            status=resolve_status(processo_data.status),
        )
        processo = self._processo_repository.insert(processo)
        logger.info(f"Processo {processo.numero} created with id {processo.id_processo}")
        return processo

    async def get_processos(self) -> List[Processo]:
        """Ottiene tutti i processi, dal più recente"""
        return self._processo_repository.get_all_newest_first()

    async def validate_business_rules(self, data: Any) -> None:
        """Valida che i campi obbligatori non siano vuoti"""
        for field_name in ("numero", "vara", "partes_envolvidas", "tipo_pericia", "prazos"):
            if not getattr(data, field_name, None):
                raise ExceptionFactory.required_field_missing(field_name)
