import abc
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Generic, TypeVar, Optional

from sqlalchemy import Executable

from src.shared.database.base_mapper import BaseEntityMapper
from src.shared.database.database import Database
from src.shared.exceptions import StoreReadTimeout

logger = logging.getLogger(__name__)

TEntity = TypeVar("TEntity")
TModel = TypeVar("TModel")


class BaseRepository(abc.ABC, Generic[TEntity, TModel]):
    """
    Read-only repository base.

    Every read runs under a request-level timeout. A read that does not
    complete in time raises StoreReadTimeout instead of returning partial data.
    """

    def __init__(
        self,
        db: Database,
        mapper: BaseEntityMapper[TModel, TEntity],
        read_timeout: float | None = None,
    ):
        self.db = db
        self.mapper = mapper
        self.read_timeout = read_timeout

    async def find_one(self, statement: Executable) -> Optional[TModel]:
        async with self._deadline("find_one"):
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                entity = result.scalars().first()
        if entity is None:
            return None
        return self.mapper.to_model(entity)

    async def find_all(self, statement: Executable) -> list[TModel]:
        async with self._deadline("find_all"):
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                entities = list(result.scalars().all())
        return self.mapper.to_models(entities)

    @asynccontextmanager
    async def _deadline(self, operation: str) -> AsyncIterator[None]:
        name = f"{type(self).__name__}.{operation}"
        try:
            async with asyncio.timeout(self.read_timeout):
                yield
        except TimeoutError as e:
            logger.error("Store read %s timed out after %.2fs", name, self.read_timeout)
            raise StoreReadTimeout(name, self.read_timeout or 0.0) from e
