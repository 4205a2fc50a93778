from fastapi import APIRouter, Query, status

from app.dependencies import JournalDep
from app.models.schemas import JournalResponse

router = APIRouter()


@router.get(
    "",
    response_model=JournalResponse,
    summary="Read journal",
    description="Return the most recent journal lines, oldest first.",
)
async def read_journal(
    journal: JournalDep,
    lines: int = Query(50, ge=1, le=1000, description="Number of lines"),
) -> JournalResponse:
    """Get recent journal lines."""
    return JournalResponse(lines=journal.recent_lines(lines), total=journal.count())


@router.delete(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Clear journal",
    description="Truncate the journal file.",
)
async def clear_journal(journal: JournalDep) -> None:
    """Clear the journal."""
    journal.clear()
