"""
Interfaccia per Processo Service seguendo ISP
"""
from abc import abstractmethod
from typing import List
from src.core.interfaces import IBaseService
from src.schemas.processo_schema import ProcessoSchema
from src.models.processo import Processo


class IProcessoService(IBaseService):
    """Interface per il servizio processi"""

    @abstractmethod
    async def create_processo(self, processo_data: ProcessoSchema) -> Processo:
        """Crea un nuovo processo"""
        pass

    @abstractmethod
    async def get_processos(self) -> List[Processo]:
        """Ottiene tutti i processi, dal più recente"""
        pass
