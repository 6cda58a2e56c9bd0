"""
Base Repository implementation seguendo SRP e OCP
"""
from typing import Generic, TypeVar, List, Type
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from src.core.interfaces import IRepository
from src.core.exceptions import BaseApplicationException, InfrastructureException

T = TypeVar('T')


class BaseRepository(Generic[T], IRepository[T]):
    """
    Repository base: lettura ordinata e inserimento con commit immediato.

    Ogni errore SQLAlchemy viene convertito in InfrastructureException dopo il
    rollback; le violazioni di vincoli passano da `_integrity_error`, che le
    sottoclassi ridefiniscono per restituire un'eccezione di dominio.
    """

    def __init__(self, session: Session, model_class: Type[T]):
        self._session = session
        self._model_class = model_class

    def get_all(self, *order_by) -> List[T]:
        try:
            return self._session.query(self._model_class).order_by(*order_by).all()
        except SQLAlchemyError as e:
            raise InfrastructureException(f"Database error retrieving {self._model_class.__name__} list: {str(e)}")

    def create(self, entity: T) -> T:
        try:
            self._session.add(entity)
            self._session.commit()
            self._session.refresh(entity)
            return entity
        except IntegrityError as e:
            self._session.rollback()
            raise self._integrity_error(entity, e)
        except SQLAlchemyError as e:
            self._session.rollback()
            raise InfrastructureException(f"Database error creating {self._model_class.__name__}: {str(e)}")

    def _integrity_error(self, entity: T, error: IntegrityError) -> BaseApplicationException:
        return InfrastructureException(f"Constraint violation creating {self._model_class.__name__}: {error.orig}")
