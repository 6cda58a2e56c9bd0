"""
Test di integrazione per gli endpoint Processo
Testa sia i casi OK che gli errori (400)
"""
import pytest
from httpx import AsyncClient

from src.models.processo import Processo, ProcessoStatus
from tests.helpers.asserts import assert_error_response


def processo_body(**overrides) -> dict:
    body = {
        "numero": "0001234-56.2025.8.26.0100",
        "vara": "1a Vara Civel",
        "partesEnvolvidas": "Fulano vs Beltrano",
        "tipoPericia": "Medica",
        "prazos": "2025-01-31",
    }
    body.update(overrides)
    return body


def test_create_processo(client, db_session):
    response = client.post("/api/v1/processos/", json=processo_body(status="AGUARDANDO"))

    assert response.status_code == 201
    data = response.json()
    assert data["numero"] == "0001234-56.2025.8.26.0100"
    assert data["partesEnvolvidas"] == "Fulano vs Beltrano"
    assert data["tipoPericia"] == "Medica"
    assert data["prazos"] == "2025-01-31"
    assert data["status"] == "AGUARDANDO"
    assert data["statusLabel"] == "Aguardando"
    assert data["id"] > 0
    assert "createdAt" in data

    model = db_session.query(Processo).filter(Processo.numero == "0001234-56.2025.8.26.0100").first()
    assert model is not None
    assert model.status is ProcessoStatus.AGUARDANDO


def test_create_processo_defaults_invalid_status(client):
    response = client.post("/api/v1/processos/", json=processo_body(status="ARQUIVADO"))

    assert response.status_code == 201
    assert response.json()["status"] == "EM_ANDAMENTO"


def test_create_processo_without_status(client):
    response = client.post("/api/v1/processos/", json=processo_body())

    assert response.status_code == 201
    assert response.json()["status"] == "EM_ANDAMENTO"


def test_create_processo_missing_required_field(client):
    body = processo_body()
    del body["vara"]

    response = client.post("/api/v1/processos/", json=body)

    assert_error_response(response, 400, "VALIDATION_ERROR", "required fields")
    assert "vara" in response.json()["details"]["fields"]


def test_create_processo_blank_required_field(client):
    response = client.post("/api/v1/processos/", json=processo_body(tipoPericia="   "))

    assert_error_response(response, 400, "VALIDATION_ERROR")


def test_create_processo_duplicate_numero(client):
    assert client.post("/api/v1/processos/", json=processo_body()).status_code == 201

    response = client.post("/api/v1/processos/", json=processo_body(vara="Outra Vara"))

    assert_error_response(response, 400, "ALREADY_EXISTS", "already exists")


def test_create_processo_invalid_date(client):
    response = client.post("/api/v1/processos/", json=processo_body(prazos="not-a-date"))

    assert_error_response(response, 400, "INVALID_DATE", "not-a-date")


def test_list_processos_newest_first(client):
    for numero in ("1", "2", "3"):
        assert client.post("/api/v1/processos/", json=processo_body(numero=numero)).status_code == 201

    response = client.get("/api/v1/processos/")

    assert response.status_code == 200
    assert [p["numero"] for p in response.json()] == ["3", "2", "1"]


def test_list_processos_empty(client):
    response = client.get("/api/v1/processos/")

    assert response.status_code == 200
    assert response.json() == []


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_create_and_list_async(async_client: AsyncClient):
    created = await async_client.post("/api/v1/processos/", json=processo_body(prazos="15/03/2025"))
    assert created.status_code == 201
    assert created.json()["prazos"] == "2025-03-15"

    response = await async_client.get("/api/v1/processos/")

    assert response.status_code == 200
    assert response.json()[0]["id"] == created.json()["id"]
    assert response.headers["X-Request-ID"]
