"""
Entity store abstraction and its SQLAlchemy implementation.

Repositories talk to a store through a small criteria-based contract
(find/insert/update/delete) so the business rules can be tested against
an in-memory double and run against any backing database.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, List, Type, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..domain.entities import utc_now
from ..domain.exceptions import StoreException
from ..logging_config import get_logger

E = TypeVar("E")

logger = get_logger(__name__)


class IEntityStore(ABC, Generic[E]):
    """
    Abstract store for one entity type.

    Criteria are field equality filters, e.g.
    ``await store.find(site_id="1", company_code="C1")``.
    Any method may raise on infrastructure failure.
    """

    @abstractmethod
    async def find_all(self) -> List[E]:
        """
        Return every stored entity.

        Returns:
            List of entities (possibly empty)
        """
        pass

    @abstractmethod
    async def find(self, **criteria: Any) -> List[E]:
        """
        Return entities whose fields equal all given criteria.

        Args:
            **criteria: Field name to value filters

        Returns:
            Matching entities (possibly empty)
        """
        pass

    @abstractmethod
    async def insert(self, entity: E) -> bool:
        """
        Insert a new entity.

        Returns:
            True if stored, False if the store rejected it
        """
        pass

    @abstractmethod
    async def update(self, entity: E) -> bool:
        """
        Persist changes to an entity previously returned by this store.

        Returns:
            True if a stored row was updated
        """
        pass

    @abstractmethod
    async def delete(self, **criteria: Any) -> bool:
        """
        Delete entities matching the criteria.

        Returns:
            True if at least one entity was deleted
        """
        pass


class SqlAlchemyStore(IEntityStore[E]):
    """
    SQLAlchemy ORM implementation of the entity store.

    Opens one session per call. Rows are mapped to dataclass entities
    through the entity's ``FIELDS`` list plus ``id`` and ``last_modified``.
    """

    def __init__(
        self,
        session_factory: Callable[[], Session],
        model: Type[Any],
        entity_type: Type[E],
    ):
        """
        Initialize store.

        Args:
            session_factory: Callable returning a new SQLAlchemy session
            model: ORM model class backing the entity
            entity_type: Domain dataclass produced by this store
        """
        self._session_factory = session_factory
        self.model = model
        self.entity_type = entity_type
        self._table = model.__tablename__

    async def find_all(self) -> List[E]:
        """Return all rows ordered by primary key."""
        try:
            with self._session_factory() as session:
                rows = session.scalars(select(self.model).order_by(self.model.id)).all()
                return [self._map_to_entity(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error("Error reading all rows", table=self._table, error=str(e))
            raise StoreException("find_all", str(e)) from e

    async def find(self, **criteria: Any) -> List[E]:
        """Return rows matching the equality criteria."""
        try:
            with self._session_factory() as session:
                stmt = select(self.model).filter_by(**criteria).order_by(self.model.id)
                rows = session.scalars(stmt).all()
                return [self._map_to_entity(row) for row in rows]
        except SQLAlchemyError as e:
            logger.error("Error finding rows", table=self._table, criteria=criteria, error=str(e))
            raise StoreException("find", str(e)) from e

    async def insert(self, entity: E) -> bool:
        """Insert a row; a unique constraint violation yields False."""
        with self._session_factory() as session:
            try:
                row = self.model(**self._field_values(entity), last_modified=utc_now())
                session.add(row)
                session.commit()
                entity.id = row.id
                entity.last_modified = row.last_modified
                return True
            except IntegrityError as e:
                session.rollback()
                logger.warning(
                    "Insert rejected by constraint", table=self._table, error=str(e.orig)
                )
                return False
            except SQLAlchemyError as e:
                session.rollback()
                logger.error("Error inserting row", table=self._table, error=str(e))
                raise StoreException("insert", str(e)) from e

    async def update(self, entity: E) -> bool:
        """Write all listed fields of the entity onto its row by id."""
        if entity.id is None:
            logger.warning("Update skipped, entity has no id", table=self._table)
            return False

        with self._session_factory() as session:
            try:
                row = session.get(self.model, entity.id)
                if row is None:
                    return False
                for name, value in self._field_values(entity).items():
                    setattr(row, name, value)
                row.last_modified = utc_now()
                session.commit()
                entity.last_modified = row.last_modified
                return True
            except IntegrityError as e:
                session.rollback()
                logger.warning(
                    "Update rejected by constraint", table=self._table, error=str(e.orig)
                )
                return False
            except SQLAlchemyError as e:
                session.rollback()
                logger.error("Error updating row", table=self._table, error=str(e))
                raise StoreException("update", str(e)) from e

    async def delete(self, **criteria: Any) -> bool:
        """Delete rows matching the criteria."""
        with self._session_factory() as session:
            try:
                stmt = delete(self.model).filter_by(**criteria)
                result = session.execute(stmt)
                session.commit()
                return result.rowcount > 0
            except SQLAlchemyError as e:
                session.rollback()
                logger.error("Error deleting rows", table=self._table, criteria=criteria, error=str(e))
                raise StoreException("delete", str(e)) from e

    def _field_values(self, entity: E) -> dict:
        return {name: getattr(entity, name) for name in self.entity_type.FIELDS}

    def _map_to_entity(self, row: Any) -> E:
        """Map database model to domain entity."""
        values = {name: getattr(row, name) for name in self.entity_type.FIELDS}
        return self.entity_type(id=row.id, last_modified=row.last_modified, **values)
