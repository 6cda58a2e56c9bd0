"""
Processo Repository seguendo SOLID
"""
import logging
from typing import List
from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from src.models.processo import Processo
from src.repository.interfaces.processo_repository_interface import IProcessoRepository
from src.core.base_repository import BaseRepository
from src.core.exceptions import InfrastructureException, DuplicateProcessoException

logger = logging.getLogger(__name__)


class ProcessoRepository(BaseRepository[Processo], IProcessoRepository):
    """Processo Repository seguendo SOLID"""

    def __init__(self, session: Session):
        super().__init__(session, Processo)

    def exists_by_numero(self, numero: str) -> bool:
        """Verifica se esiste già un processo con questo numero"""
        try:
            return self._session.query(Processo.id_processo).filter(
                Processo.numero == numero
            ).first() is not None
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error checking processo existence: {str(e)}")

    def get_all_newest_first(self) -> List[Processo]:
        """Ottiene tutti i processi ordinati per data di creazione decrescente"""
        return self.get_all(desc(Processo.created_at), desc(Processo.id_processo))

    def insert(self, processo: Processo) -> Processo:
        """Inserisce il processo; una violazione del vincolo di unicità diventa DuplicateProcessoException"""
        return self.create(processo)

    def _integrity_error(self, processo: Processo, error: IntegrityError) -> DuplicateProcessoException:
        logger.info(f"Unique constraint rejected processo {processo.numero}: {error.orig}")
        return DuplicateProcessoException(processo.numero)
