"""
Interfaccia per il servizio di importazione processi
"""
from abc import abstractmethod
from typing import Optional
from src.core.interfaces import IBaseService
from src.services.processo_import.models import ImportOutcome


class IProcessoImportService(IBaseService):
    """Interface per l'importazione di processi da file"""

    @abstractmethod
    async def import_file(
        self,
        content: bytes,
        content_type: Optional[str],
        filename: Optional[str]
    ) -> ImportOutcome:
        """Importa i processi contenuti nel file"""
        pass
