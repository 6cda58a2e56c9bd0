"""
Test per la validazione e il commit riga per riga
"""
from datetime import date

import pytest

from src.core.exceptions import InfrastructureException
from src.models.processo import ProcessoStatus
from src.services.processo_import.batch_committer import BatchCommitter
from src.services.processo_import.models import CandidateRecord
from tests.helpers.fakes import FakeProcessoRepository


def candidate(numero="1", prazos="2025-01-01", status=None, **overrides) -> CandidateRecord:
    fields = {
        "numero": numero,
        "vara": "1a Vara",
        "partes_envolvidas": "A vs B",
        "tipo_pericia": "Medica",
        "prazos": prazos,
        "status": status,
    }
    fields.update(overrides)
    return CandidateRecord(**fields)


@pytest.fixture
def repository() -> FakeProcessoRepository:
    return FakeProcessoRepository()


def test_commit_inserts_valid_rows(repository):
    outcome = BatchCommitter(repository).commit([candidate("1"), candidate("2", status="CONCLUIDO")])

    assert outcome.inserted_count == 2
    assert outcome.warnings == []
    assert repository.processos["1"].status is ProcessoStatus.EM_ANDAMENTO
    assert repository.processos["2"].status is ProcessoStatus.CONCLUIDO
    assert repository.processos["1"].prazos == date(2025, 1, 1)


def test_blank_required_field_is_reported_and_skipped(repository):
    outcome = BatchCommitter(repository).commit([candidate(numero=""), candidate("2", vara="   ")])

    assert outcome.inserted_count == 0
    assert outcome.warnings == ["Row 1: required fields blank", "Row 2: required fields blank"]
    assert repository.exists_calls == []


def test_existing_case_is_reported(repository):
    BatchCommitter(repository).commit([candidate("1")])

    outcome = BatchCommitter(repository).commit([candidate("1"), candidate("2")])

    assert outcome.inserted_count == 1
    assert outcome.warnings == ["Row 1: case 1 already exists"]


def test_duplicate_within_same_batch_sees_earlier_insert(repository):
    outcome = BatchCommitter(repository).commit([candidate("1"), candidate("1")])

    assert outcome.inserted_count == 1
    assert outcome.warnings == ["Row 2: case 1 already exists"]


def test_invalid_date_warning_contains_literal_value(repository):
    outcome = BatchCommitter(repository).commit([candidate("1", prazos="not-a-date")])

    assert outcome.inserted_count == 0
    assert outcome.warnings == ["Row 1: invalid date - not-a-date"]
    assert repository.processos == {}


def test_invalid_status_defaults_to_em_andamento(repository):
    BatchCommitter(repository).commit([candidate("1", status="INVALID_TOKEN")])

    assert repository.processos["1"].status is ProcessoStatus.EM_ANDAMENTO


def test_unique_constraint_race_is_a_row_failure(repository):
    repository.hidden_numeros.add("2")

    outcome = BatchCommitter(repository).commit([candidate("1"), candidate("2"), candidate("3")])

    assert outcome.inserted_count == 2
    assert outcome.warnings == ["Row 2: failed to insert case 2"]


def test_insert_error_does_not_stop_batch(repository):
    repository.failing_numeros.add("1")

    outcome = BatchCommitter(repository).commit([candidate("1"), candidate("2")])

    assert outcome.inserted_count == 1
    assert outcome.warnings == ["Row 1: failed to insert case 1"]


def test_unreachable_store_aborts_batch(repository):
    repository.exists_error = True

    with pytest.raises(InfrastructureException):
        BatchCommitter(repository).commit([candidate("1")])


def test_every_row_has_exactly_one_outcome(repository):
    candidates = [
        candidate("1"),
        candidate(""),
        candidate("1"),
        candidate("4", prazos="31/31/2025"),
        candidate("5", status="AGUARDANDO"),
    ]

    outcome = BatchCommitter(repository).commit(candidates)

    assert outcome.total_rows == 5
    assert outcome.inserted_count + len(outcome.warnings) == outcome.total_rows
    assert outcome.warnings == [
        "Row 2: required fields blank",
        "Row 3: case 1 already exists",
        "Row 4: invalid date - 31/31/2025",
    ]


def test_outcome_omits_warnings_when_clean(repository):
    outcome = BatchCommitter(repository).commit([candidate("1")])

    assert outcome.to_dict() == {
        "message": "Import completed. 1 records inserted.",
        "processosInseridos": 1,
    }
