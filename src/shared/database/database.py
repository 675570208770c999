import logging

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

Base = declarative_base()


class DatabaseSettings(BaseModel):
    db_url: str
    echo: bool = False


class Database:
    """Holds the async engine and session factory for the document store."""

    def __init__(self, db_settings: DatabaseSettings) -> None:
        self._engine = create_async_engine(db_settings.db_url, echo=db_settings.echo)
        self.session_maker: async_sessionmaker[AsyncSession] = async_sessionmaker(self._engine, expire_on_commit=False)

    async def create_tables(self) -> None:
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self._engine.dispose()
