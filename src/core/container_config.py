"""
Configurazione del container di dependency injection
"""
from src.core.container import container
from src.repository.interfaces.processo_repository_interface import IProcessoRepository
from src.repository.processo_repository import ProcessoRepository
from src.services.interfaces.processo_service_interface import IProcessoService
from src.services.routers.processo_service import ProcessoService
from src.services.interfaces.processo_import_service_interface import IProcessoImportService
from src.services.processo_import.import_service import ProcessoImportService


def configure_container():
    """Configura il container con tutte le dipendenze"""
    # Repositories
    container.register_transient(IProcessoRepository, ProcessoRepository)

    # Services
    container.register_transient(IProcessoService, ProcessoService)
    container.register_transient(IProcessoImportService, ProcessoImportService)


def get_configured_container():
    """Ottiene il container configurato"""
    if not container.is_registered(IProcessoRepository):
        configure_container()
    return container
