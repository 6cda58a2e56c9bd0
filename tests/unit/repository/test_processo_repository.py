"""
Test per ProcessoRepository su SQLite in memoria
"""
from datetime import date

import pytest
from sqlalchemy.exc import OperationalError

from src.core.exceptions import DuplicateProcessoException, InfrastructureException
from src.models.processo import Processo, ProcessoStatus
from src.repository.processo_repository import ProcessoRepository


def make_processo(numero: str, **overrides) -> Processo:
    fields = {
        "numero": numero,
        "vara": "1a Vara",
        "partes_envolvidas": "A vs B",
        "tipo_pericia": "Medica",
        "prazos": date(2025, 1, 1),
        "status": ProcessoStatus.EM_ANDAMENTO,
    }
    fields.update(overrides)
    return Processo(**fields)


class TestProcessoRepository:

    def test_insert_assigns_id_and_created_at(self, db_session):
        repository = ProcessoRepository(db_session)

        processo = repository.insert(make_processo("1"))

        assert processo.id_processo is not None
        assert processo.created_at is not None
        assert repository.exists_by_numero("1")
        assert not repository.exists_by_numero("2")

    def test_unique_constraint_becomes_duplicate(self, db_session):
        repository = ProcessoRepository(db_session)
        repository.insert(make_processo("1"))

        with pytest.raises(DuplicateProcessoException) as exc_info:
            repository.insert(make_processo("1", vara="Outra Vara"))

        assert exc_info.value.numero == "1"
        # La sessione resta utilizzabile dopo il rollback
        repository.insert(make_processo("2"))
        assert db_session.query(Processo).count() == 2

    def test_other_database_errors_become_infrastructure(self, db_session, monkeypatch):
        repository = ProcessoRepository(db_session)

        def failing_commit():
            raise OperationalError("INSERT INTO processos", {}, Exception("database is locked"))

        monkeypatch.setattr(db_session, "commit", failing_commit)

        with pytest.raises(InfrastructureException) as exc_info:
            repository.insert(make_processo("1"))

        assert exc_info.value.status_code == 500

    def test_get_all_newest_first(self, db_session):
        repository = ProcessoRepository(db_session)
        for numero in ("a", "b", "c"):
            repository.insert(make_processo(numero))

        assert [p.numero for p in repository.get_all_newest_first()] == ["c", "b", "a"]
