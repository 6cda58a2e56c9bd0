"""
Batch validation and commit of candidate case records.

Rows are processed strictly in order, one at a time: each row is either
inserted or produces exactly one warning, and a bad row never stops the batch.
"""
import logging
from typing import Iterable

from src.core.exceptions import DuplicateProcessoException, InfrastructureException
from src.models.processo import Processo, resolve_status
from src.repository.interfaces.processo_repository_interface import IProcessoRepository
from src.services.core.tool import parse_deadline
from .models import CandidateRecord, ImportOutcome

logger = logging.getLogger(__name__)


class BatchCommitter:
    """
    Valida e inserisce i record candidati.

    Per ogni riga (numerata da 1):
    1. campi obbligatori non vuoti
    2. numero non ancora presente (controllo preventivo, solo diagnostico)
    3. scadenza interpretabile come data
    4. stato valido, altrimenti EM_ANDAMENTO
    5. inserimento; il vincolo di unicità dello store resta l'arbitro finale

    Un errore di connessione durante il controllo di esistenza non è un
    problema della riga: si propaga e interrompe l'importazione, lasciando
    committate le righe già inserite.
    """

    def __init__(self, processo_repository: IProcessoRepository):
        self._processo_repository = processo_repository

    def commit(self, candidates: Iterable[CandidateRecord]) -> ImportOutcome:
        outcome = ImportOutcome()

        for row_number, candidate in enumerate(candidates, start=1):
            outcome.total_rows += 1
            warning = self._process_row(row_number, candidate)
            if warning is None:
                outcome.inserted_count += 1
            else:
                logger.warning(warning)
                outcome.warnings.append(warning)

        return outcome

    def _process_row(self, row_number: int, candidate: CandidateRecord):
        """Restituisce None se la riga è stata inserita, altrimenti il messaggio di avviso"""
        if candidate.has_blank_required_field():
            return f"Row {row_number}: required fields blank"

        numero = candidate.numero.strip()
        if self._processo_repository.exists_by_numero(numero):
            return f"Row {row_number}: case {numero} already exists"

        try:
            prazos = parse_deadline(candidate.prazos)
        except ValueError:
            return f"Row {row_number}: invalid date - {candidate.prazos}"

        processo = Processo(
            numero=numero,
            vara=candidate.vara.strip(),
            partes_envolvidas=candidate.partes_envolvidas.strip(),
            tipo_pericia=candidate.tipo_pericia.strip(),
            prazos=prazos,
            status=resolve_status(candidate.status),
        )

        try:
            self._processo_repository.insert(processo)
        except (DuplicateProcessoException, InfrastructureException) as e:
            logger.info(f"Insert rejected for processo {numero}: {e.message}")
            return f"Row {row_number}: failed to insert case {numero}"

        return None
