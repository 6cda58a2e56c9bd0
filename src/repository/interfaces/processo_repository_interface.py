"""
Interfaccia per Processo Repository seguendo ISP
"""
from abc import abstractmethod
from typing import List
from src.core.interfaces import IRepository
from src.models.processo import Processo


class IProcessoRepository(IRepository[Processo]):
    """
    Interface per la repository dei processi.

    È l'unico punto di contatto con lo store: l'importazione usa soltanto
    `exists_by_numero` e `insert`.
    """

    @abstractmethod
    def exists_by_numero(self, numero: str) -> bool:
        """Verifica se esiste già un processo con questo numero"""
        pass

    @abstractmethod
    def get_all_newest_first(self) -> List[Processo]:
        """Ottiene tutti i processi, dal più recente"""
        pass

    @abstractmethod
    def insert(self, processo: Processo) -> Processo:
        """
        Inserisce un nuovo processo.

        Raises:
            DuplicateProcessoException: se il vincolo di unicità sul numero viene violato
            InfrastructureException: per altri errori del database
        """
        pass
