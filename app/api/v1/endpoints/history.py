from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import JSONResponse

from app.dependencies import HistoryDep
from app.models.schemas import (
    ErrorResponse,
    HistoryResponse,
    OperationHistoryItem,
)

router = APIRouter()


@router.get(
    "",
    response_model=HistoryResponse,
    summary="Get operation history",
    description="Retrieve paginated history of encode, decode and sign operations.",
)
async def get_history(
    history: HistoryDep,
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(20, ge=1, le=100, description="Items per page"),
) -> HistoryResponse:
    """
    Get paginated operation history.

    Results are ordered by creation date, most recent first.
    """
    entries, total = await history.list_entries(page, page_size)

    return HistoryResponse(
        items=[OperationHistoryItem.model_validate(entry) for entry in entries],
        total=total,
        page=page,
        page_size=page_size,
    )


@router.get(
    "/export",
    summary="Export history",
    description="Download the full operation history as a JSON file.",
)
async def export_history(history: HistoryDep) -> JSONResponse:
    """Export all history entries, oldest first."""
    entries = await history.export()
    return JSONResponse(
        content=entries,
        headers={"Content-Disposition": 'attachment; filename="history.json"'},
    )


@router.delete(
    "",
    summary="Clear history",
    description="Delete every history entry.",
)
async def clear_history(history: HistoryDep) -> dict[str, int]:
    """Clear the operation history."""
    removed = await history.clear()
    return {"removed": removed}


@router.delete(
    "/{operation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={
        404: {"model": ErrorResponse, "description": "Entry not found"},
    },
    summary="Remove history entry",
    description="Delete a single history entry by ID.",
)
async def remove_history_entry(operation_id: int, history: HistoryDep) -> None:
    """Remove one history entry."""
    if not await history.remove(operation_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"History entry with ID {operation_id} not found",
        )
