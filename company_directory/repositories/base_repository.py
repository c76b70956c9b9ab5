"""
Code-keyed repository over an entity store.

Implements the create/update/delete rules shared by companies and
employees: (site_id, code) uniqueness on create, partial merge on update
with a no-op short circuit, and boolean not-found on delete. Every store
interaction runs through the retry executor.
"""

from typing import Any, Generic, List, Optional, Type, TypeVar

from ..domain.entities import OperationResult
from ..domain.merge import entities_equal, merge_into
from ..logging_config import get_logger
from ..metrics import repository_operations_total
from .retry import RetryExecutor
from .store import IEntityStore

E = TypeVar("E")


class RepositoryMessages:
    """User-facing result messages for one entity type."""

    def __init__(
        self,
        duplicate: str,
        saved: str,
        save_failed: str,
        not_found: str,
        unchanged: str,
        updated: str,
        update_failed: str,
    ):
        self.duplicate = duplicate
        self.saved = saved
        self.save_failed = save_failed
        self.not_found = not_found
        self.unchanged = unchanged
        self.updated = updated
        self.update_failed = update_failed


class BaseRepository(Generic[E]):
    """
    Repository for entities identified by a business code.

    Subclasses set ``entity_type``, ``label`` and ``messages``; the code
    and name fields come from the entity class.
    """

    entity_type: Type[Any]
    label: str
    messages: RepositoryMessages

    def __init__(
        self,
        store: IEntityStore[E],
        retry_executor: Optional[RetryExecutor] = None,
        logger: Optional[Any] = None,
    ):
        """
        Initialize repository.

        Args:
            store: Backing entity store
            retry_executor: Retry wrapper for store calls
            logger: Structured logger (defaults to one bound to this repository)
        """
        if store is None:
            raise ValueError("store is required")
        self.store = store
        self._logger = logger or get_logger(__name__, repository=type(self).__name__)
        self.retry = retry_executor or RetryExecutor(logger=self._logger)

    @property
    def code_field(self) -> str:
        return self.entity_type.CODE_FIELD

    @property
    def name_field(self) -> str:
        return self.entity_type.NAME_FIELD

    async def get_all(self) -> List[E]:
        """Return all entities."""
        return await self.retry.execute(
            self.store.find_all,
            f"Exception occurred while fetching all {self.label}s.",
            name=f"{self.label}.get_all",
        )

    async def get_by_code(self, code: str) -> Optional[E]:
        """Return the first entity with this code, or None."""

        async def operation() -> Optional[E]:
            found = await self.store.find(**{self.code_field: code})
            return found[0] if found else None

        return await self.retry.execute(
            operation,
            f"Exception occurred while fetching {self.label} using {self.label} code: {code}",
            name=f"{self.label}.get_by_code",
        )

    async def get_by_name(self, name: str) -> Optional[E]:
        """Return the first entity with this name, or None."""

        async def operation() -> Optional[E]:
            found = await self.store.find(**{self.name_field: name})
            return found[0] if found else None

        return await self.retry.execute(
            operation,
            f"Exception occurred while fetching {self.label} by {self.label} name: {name}",
            name=f"{self.label}.get_by_name",
        )

    async def create(self, entity: E) -> OperationResult:
        """
        Insert ``entity`` unless the same (site_id, code) pair exists.

        Returns:
            Failed result for duplicates or a rejected insert
        """
        code = getattr(entity, self.code_field)

        async def operation() -> OperationResult:
            existing = await self.store.find(
                site_id=entity.site_id, **{self.code_field: code}
            )
            if existing:
                self._logger.info(
                    "Duplicate create rejected", code=code, site_id=entity.site_id
                )
                return self._result("create", False, self.messages.duplicate)

            inserted = await self.store.insert(entity)
            return self._result(
                "create",
                inserted,
                self.messages.saved if inserted else self.messages.save_failed,
            )

        return await self.retry.execute(
            operation,
            f"Exception occurred while saving {self.label} details: {entity}",
            name=f"{self.label}.create",
        )

    async def update_by_code(self, code: str, incoming: E) -> OperationResult:
        """
        Merge non-None fields of ``incoming`` into the stored entity.

        Payloads that change no stored field succeed without writing.
        """

        async def operation() -> OperationResult:
            found = await self.store.find(**{self.code_field: code})
            if not found:
                return self._result("update", False, self.messages.not_found)

            existing = found[0]
            if entities_equal(existing, incoming):
                return self._result("update", True, self.messages.unchanged)

            changed = merge_into(existing, incoming)
            if not changed:
                return self._result("update", True, self.messages.unchanged)

            updated = await self.store.update(existing)
            self._logger.info(
                "Merged update", code=code, changed_fields=changed, persisted=updated
            )
            return self._result(
                "update",
                updated,
                self.messages.updated if updated else self.messages.update_failed,
            )

        return await self.retry.execute(
            operation,
            f"Exception occurred while updating {self.label} using {self.label} code: {code}",
            name=f"{self.label}.update_by_code",
        )

    async def delete_by_code(self, code: str) -> bool:
        """Delete by code; False when nothing matched."""

        async def operation() -> bool:
            found = await self.store.find(**{self.code_field: code})
            if not found:
                self._logger.warning(
                    f"{self.label.capitalize()} with {self.label} code {code} not available."
                )
                repository_operations_total.labels(
                    entity=self.label, operation="delete", result="not_found"
                ).inc()
                return False

            deleted = await self.store.delete(**{self.code_field: code})
            repository_operations_total.labels(
                entity=self.label,
                operation="delete",
                result="success" if deleted else "failure",
            ).inc()
            return deleted

        return await self.retry.execute(
            operation,
            f"Exception occurred while deleting {self.label} using {self.label} code: {code}",
            name=f"{self.label}.delete_by_code",
        )

    def _result(self, operation: str, success: bool, message: str) -> OperationResult:
        repository_operations_total.labels(
            entity=self.label,
            operation=operation,
            result="success" if success else "failure",
        ).inc()
        return OperationResult(is_success=success, message=message)
