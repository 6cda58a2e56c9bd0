"""
Processo Router seguendo i principi SOLID
"""
from typing import List
from fastapi import APIRouter, Depends, status
from src.services.interfaces.processo_service_interface import IProcessoService
from src.schemas.processo_schema import ProcessoSchema, ProcessoResponseSchema
from src.core.container_config import get_configured_container
from src.core.dependencies import db_dependency

router = APIRouter(
    prefix="/api/v1/processos",
    tags=["Processo"],
)


def get_processo_service(db: db_dependency) -> IProcessoService:
    """Dependency injection per Processo Service"""
    configured_container = get_configured_container()
    return configured_container.resolve_with_session(IProcessoService, db)


@router.get("/", status_code=status.HTTP_200_OK, response_model=List[ProcessoResponseSchema])
async def get_all_processos(
    processo_service: IProcessoService = Depends(get_processo_service)
):
    """
    Restituisce tutti i processi, dal più recente al meno recente.
    """
    return await processo_service.get_processos()


@router.post("/", status_code=status.HTTP_201_CREATED, response_model=ProcessoResponseSchema,
             response_description="Processo creato correttamente")
async def create_processo(
    processo_data: ProcessoSchema,
    processo_service: IProcessoService = Depends(get_processo_service)
):
    """
    Crea un nuovo processo con i dati forniti.

    - **numero**, **vara**, **partesEnvolvidas**, **tipoPericia**, **prazos**: obbligatori.
    - **status**: EM_ANDAMENTO, AGUARDANDO o CONCLUIDO; se assente o non valido vale EM_ANDAMENTO.
    """
    return await processo_service.create_processo(processo_data)
