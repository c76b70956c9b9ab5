"""
Shared orchestration for directory services.

Every public operation goes through ``_execute``: unexpected exceptions
(including store failures that outlived the repository's retries) are
logged with their cause and replaced by a default value, so callers never
see an exception from this layer.
"""

from typing import Any, Awaitable, Callable, Generic, List, Optional, TypeVar

from ..logging_config import get_logger
from ..repositories.base_repository import BaseRepository
from .schemas import ResultInfo

EntityT = TypeVar("EntityT")
InfoT = TypeVar("InfoT")
T = TypeVar("T")

ERROR_MESSAGE = "An error occurred while processing the request."


class BaseService(Generic[EntityT, InfoT]):
    """
    Service over a code-keyed repository.

    Subclasses provide ``label`` and the info/entity mapping functions.
    """

    label: str

    def __init__(
        self,
        repository: BaseRepository[EntityT],
        to_entity: Callable[[InfoT], EntityT],
        to_info: Callable[[EntityT], InfoT],
        logger: Optional[Any] = None,
    ):
        """
        Initialize service.

        Args:
            repository: Repository for the entity type
            to_entity: Maps an info object to an entity
            to_info: Maps an entity to an info object
            logger: Structured logger (defaults to one bound to this service)
        """
        if repository is None:
            raise ValueError("repository is required")
        self._repository = repository
        self._to_entity = to_entity
        self._to_info = to_info
        self._logger = logger or get_logger(__name__, service=type(self).__name__)

    async def get_all(self) -> List[InfoT]:
        async def operation() -> List[InfoT]:
            entities = await self._repository.get_all()
            return [self._to_info(entity) for entity in entities or []]

        return await self._execute(operation, default=[])

    async def get_by_code(self, code: str) -> Optional[InfoT]:
        async def operation() -> Optional[InfoT]:
            entity = await self._repository.get_by_code(code)
            if entity is None:
                self._logger.warning(f"{self.label} with code {code} not found.")
                return None
            return self._to_info(entity)

        return await self._execute(operation, default=None)

    async def get_by_name(self, name: str) -> Optional[InfoT]:
        async def operation() -> Optional[InfoT]:
            entity = await self._repository.get_by_name(name)
            if entity is None:
                self._logger.warning(f"{self.label} with name {name} not found.")
                return None
            return self._to_info(entity)

        return await self._execute(operation, default=None)

    async def create(self, info: InfoT) -> ResultInfo:
        """Create from ``info``; the repository message is passed through."""

        async def operation() -> ResultInfo:
            result = await self._repository.create(self._to_entity(info))
            return ResultInfo(
                is_success=result.is_success,
                message=result.message,
                timestamp=result.timestamp,
            )

        return await self._execute(operation, default=self._failure())

    async def update_by_code(self, code: str, info: InfoT) -> ResultInfo:
        """Partial update; None fields in ``info`` keep their stored values."""

        async def operation() -> ResultInfo:
            result = await self._repository.update_by_code(code, self._to_entity(info))
            if not result.is_success:
                self._logger.warning(
                    f"{self.label} with code {code} was not updated.", reason=result.message
                )
            return ResultInfo(
                is_success=result.is_success,
                message=result.message,
                timestamp=result.timestamp,
            )

        return await self._execute(operation, default=self._failure())

    async def delete_by_code(self, code: str) -> ResultInfo:
        async def operation() -> ResultInfo:
            deleted = await self._repository.delete_by_code(code)
            if not deleted:
                self._logger.warning(f"{self.label} with code {code} not found.")
                return ResultInfo(is_success=False, message=f"{self.label} not found.")
            return ResultInfo(
                is_success=True,
                message=f"{self.label} with code {code} was successfully deleted.",
            )

        return await self._execute(operation, default=self._failure())

    async def _execute(self, operation: Callable[[], Awaitable[T]], default: T) -> T:
        try:
            return await operation()
        except Exception as e:
            cause = e.__cause__ or e.__context__
            self._logger.error(
                f"{type(self).__name__}: An error occurred while processing the request",
                error=str(e),
                error_type=type(e).__name__,
                cause=str(cause) if cause else None,
                exc_info=True,
            )
            return default

    @staticmethod
    def _failure() -> ResultInfo:
        return ResultInfo(is_success=False, message=ERROR_MESSAGE)
