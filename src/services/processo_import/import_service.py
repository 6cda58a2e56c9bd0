"""
Case Import Service - Main orchestration service.

Coordinates the import workflow: format detection, extraction,
per-row validation and commit, report.
"""
import logging
import time
from typing import Optional

from src.core.exceptions import ExceptionFactory
from src.repository.interfaces.processo_repository_interface import IProcessoRepository
from src.services.interfaces.processo_import_service_interface import IProcessoImportService
from .batch_committer import BatchCommitter
from .extractors import get_extractor
from .format_detector import detect_format
from .models import ImportOutcome, SourceFormat

logger = logging.getLogger(__name__)


class ProcessoImportService(IProcessoImportService):
    """
    Service principale per l'importazione di processi da file.

    Il flusso è strettamente in avanti: file -> formato -> estrattore ->
    record candidati -> validazione/commit -> esito. Gli errori che
    riguardano il file intero (formato non supportato, file illeggibile,
    nessun record) bloccano l'importazione prima di qualsiasi inserimento;
    gli errori di riga diventano avvisi nell'esito.
    """

    def __init__(self, processo_repository: IProcessoRepository):
        self._processo_repository = processo_repository

    async def import_file(
        self,
        content: bytes,
        content_type: Optional[str],
        filename: Optional[str]
    ) -> ImportOutcome:
        """
        Importa i processi contenuti in un file PDF o in un foglio di calcolo.

        Args:
            content: Contenuto del file
            content_type: Media type dichiarato dal client
            filename: Nome del file

        Returns:
            ImportOutcome con numero di inserimenti e avvisi per riga

        Raises:
            ImportFileException: formato non supportato, file illeggibile o senza record
            InfrastructureException: store non raggiungibile durante il lotto
        """
        started_at = time.time()
        await self.validate_business_rules(content)

        source_format = detect_format(content_type, filename)
        if source_format is SourceFormat.UNSUPPORTED:
            raise ExceptionFactory.unsupported_file(filename, content_type)

        logger.info(f"Importing '{filename}' ({content_type}) as {source_format.value}")

        candidates = get_extractor(source_format).extract_from_bytes(content)
        if not candidates:
            raise ExceptionFactory.no_records_found()

        logger.info(f"Extracted {len(candidates)} candidate records from '{filename}'")

        outcome = BatchCommitter(self._processo_repository).commit(candidates)

        logger.info(
            f"Import of '{filename}' completed: {outcome.inserted_count}/{outcome.total_rows} inserted, "
            f"{len(outcome.warnings)} warnings in {time.time() - started_at:.2f}s"
        )
        return outcome

    async def validate_business_rules(self, data) -> None:
        """Il contenuto da importare deve essere una sequenza di byte non vuota"""
        if not isinstance(data, (bytes, bytearray)) or not data:
            raise ExceptionFactory.no_file()
