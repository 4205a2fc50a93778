import random
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.journal import Journal, truncate
from app.models.database import Operation
from app.models.schemas import OperationHistoryItem, OperationType


class HistoryStore:
    """
    Persistent history of operations.

    Each entry gets a random display "frequency" between 140 and 150 MHz and
    keeps only a short preview of the text it was made from. Removals,
    clears and exports are written to the journal.
    """

    FREQUENCY_RANGE = (140.0, 150.0)

    def __init__(self, session: AsyncSession, journal: Journal, preview_length: int = 30):
        self.session = session
        self.journal = journal
        self.preview_length = preview_length

    async def add(self, operation_type: OperationType, codec_name: str, text: str) -> Operation:
        """Record an operation."""
        low, high = self.FREQUENCY_RANGE
        entry = Operation(
            frequency=round(random.uniform(low, high), 2),
            operation_type=operation_type.value,
            codec_name=codec_name,
            preview=truncate(text, self.preview_length),
        )
        self.session.add(entry)
        await self.session.flush()
        return entry

    async def list_entries(self, page: int = 1, page_size: int = 20) -> tuple[list[Operation], int]:
        """
        Get a page of history, most recent first.

        Returns:
            Tuple of (entries on the page, total number of entries)
        """
        total_result = await self.session.execute(select(func.count()).select_from(Operation))
        total = total_result.scalar() or 0

        query = (
            select(Operation)
            .order_by(Operation.created_at.desc(), Operation.id.desc())
            .offset((page - 1) * page_size)
            .limit(page_size)
        )
        result = await self.session.execute(query)
        return list(result.scalars().all()), total

    async def remove(self, operation_id: int) -> bool:
        """Delete one entry; returns False if it does not exist."""
        entry = await self.session.get(Operation, operation_id)
        if entry is None:
            return False

        await self.session.delete(entry)
        await self.session.flush()
        self.journal.record(
            "HISTORY_REMOVE",
            f"Removed entry: {entry.operation_type} | {entry.codec_name} | {entry.preview}",
        )
        return True

    async def clear(self) -> int:
        """Delete every entry; returns how many were removed."""
        result = await self.session.execute(delete(Operation))
        self.journal.record("HISTORY_CLEAR", "Operation history cleared")
        return result.rowcount or 0

    async def export(self) -> list[dict[str, Any]]:
        """Dump the full history, oldest first, as JSON-ready dicts."""
        result = await self.session.execute(
            select(Operation).order_by(Operation.created_at, Operation.id)
        )
        entries = [
            OperationHistoryItem.model_validate(entry).model_dump(mode="json")
            for entry in result.scalars().all()
        ]
        self.journal.record("HISTORY_EXPORT", f"Exported {len(entries)} entries")
        return entries
