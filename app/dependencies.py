from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import Settings, get_settings
from app.core.journal import Journal, get_journal
from app.db.session import get_db_session
from app.services.history.store import HistoryStore
from app.services.pipeline.dispatcher import TransformDispatcher


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Journal dependency
JournalDep = Annotated[Journal, Depends(get_journal)]

# Database session dependency
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session."""
    async with get_db_session() as session:
        yield session

DbSessionDep = Annotated[AsyncSession, Depends(get_db)]


def get_history(db: DbSessionDep, journal: JournalDep, settings: SettingsDep) -> HistoryStore:
    """Get history store bound to the request session."""
    return HistoryStore(db, journal, settings.history_preview_length)

HistoryDep = Annotated[HistoryStore, Depends(get_history)]


def get_dispatcher(settings: SettingsDep) -> TransformDispatcher:
    """Get transform dispatcher."""
    return TransformDispatcher(settings)

DispatcherDep = Annotated[TransformDispatcher, Depends(get_dispatcher)]
