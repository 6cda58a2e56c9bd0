"""
Interfacce base per il sistema seguendo ISP (Interface Segregation Principle)
"""
from abc import ABC, abstractmethod
from typing import Generic, TypeVar, List, Any

T = TypeVar('T')


class IRepository(Generic[T], ABC):
    """Interface base per repository seguendo ISP"""

    @abstractmethod
    def get_all(self, *order_by) -> List[T]:
        """Ottiene tutte le entità nell'ordine indicato"""
        pass

    @abstractmethod
    def create(self, entity: T) -> T:
        """Crea una nuova entità"""
        pass


class IBaseService(ABC):
    """Interface base per i servizi"""

    @abstractmethod
    async def validate_business_rules(self, data: Any) -> None:
        """Valida le regole business"""
        pass
