"""
Dependency Injection Container seguendo il principio DIP (Dependency Inversion Principle)
"""
import inspect
import logging
from typing import TypeVar, Dict, Type

T = TypeVar('T')

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency Injection Container seguendo DIP.

    Ogni registrazione è transient: a ogni richiesta viene creata una nuova
    istanza legata alla sessione DB della richiesta.
    """

    def __init__(self):
        self._transients: Dict[str, Type] = {}

    def register_transient(self, interface: Type[T], implementation: Type[T]):
        """Registra un servizio come transient (nuova istanza ogni volta)"""
        key = self._get_key(interface)
        self._transients[key] = implementation
        logger.debug(f"Registered {implementation.__name__} for {key}")

    def resolve_with_session(self, interface: Type[T], session) -> T:
        """
        Risolve una dipendenza iniettando una sessione DB.

        I parametri chiamati ``session`` ricevono la sessione; gli altri
        vengono risolti ricorsivamente con la stessa sessione.
        """
        key = self._get_key(interface)
        if key not in self._transients:
            raise ValueError(f"Cannot resolve {interface.__name__} with session")

        implementation = self._transients[key]
        kwargs = {}
        for param_name, param in inspect.signature(implementation.__init__).parameters.items():
            if param_name == 'self':
                continue
            if param_name == 'session':
                kwargs[param_name] = session
            elif self.is_registered(param.annotation):
                kwargs[param_name] = self.resolve_with_session(param.annotation, session)
            elif param.default is not inspect.Parameter.empty:
                kwargs[param_name] = param.default
            else:
                raise ValueError(f"Cannot resolve parameter {param_name} of {implementation.__name__}")
        return implementation(**kwargs)

    def is_registered(self, interface) -> bool:
        """Verifica se un'interfaccia è registrata"""
        if not inspect.isclass(interface):
            return False
        return self._get_key(interface) in self._transients

    def _get_key(self, interface: Type[T]) -> str:
        """Ottiene la chiave per un'interfaccia"""
        return interface.__name__


# Global container instance
container = Container()
