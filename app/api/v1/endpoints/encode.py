from fastapi import APIRouter

from app.core.journal import truncate
from app.dependencies import DispatcherDep, HistoryDep, JournalDep
from app.models.schemas import ErrorResponse, OperationType, TransformRequest, TransformResponse

router = APIRouter()


@router.post(
    "",
    response_model=TransformResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Codec not supported"},
    },
    summary="Encode text",
    description="Encode text with a codec. Shift and layout are used only by codecs that need them.",
)
async def encode_text(
    request: TransformRequest,
    dispatcher: DispatcherDep,
    history: HistoryDep,
    journal: JournalDep,
) -> TransformResponse:
    """
    Encode text with the selected codec.

    Successful calls are written to the journal and the operation history.
    """
    result = dispatcher.encode(request.codec, request.text, request.shift, request.layout)
    engine = dispatcher.get_engine(request.codec)

    journal.record("ENCODE", f"{engine.name}: {truncate(request.text)}")
    await history.add(OperationType.ENCODE, engine.name, request.text)

    return TransformResponse(
        result=result.text,
        codec=result.codec_type,
        direction=result.direction,
        shift_used=result.shift,
        layout_used=result.layout,
    )
