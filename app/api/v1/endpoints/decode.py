from fastapi import APIRouter

from app.core.journal import truncate
from app.dependencies import DispatcherDep, HistoryDep, JournalDep
from app.models.schemas import ErrorResponse, OperationType, TransformRequest, TransformResponse

router = APIRouter()


@router.post(
    "",
    response_model=TransformResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Empty or invalid input"},
        404: {"model": ErrorResponse, "description": "Codec not supported"},
        422: {"model": ErrorResponse, "description": "Text is not valid for the codec"},
    },
    summary="Decode text",
    description="Decode text with a codec. Input is validated before any output is produced.",
)
async def decode_text(
    request: TransformRequest,
    dispatcher: DispatcherDep,
    history: HistoryDep,
    journal: JournalDep,
) -> TransformResponse:
    """
    Decode text with the selected codec.

    Decoding either succeeds as a whole or fails with a typed error;
    only successful calls reach the journal and history.
    """
    result = dispatcher.decode(request.codec, request.text, request.shift, request.layout)
    engine = dispatcher.get_engine(request.codec)

    journal.record("DECODE", f"{engine.name}: {truncate(request.text)}")
    await history.add(OperationType.DECODE, engine.name, request.text)

    return TransformResponse(
        result=result.text,
        codec=result.codec_type,
        direction=result.direction,
        shift_used=result.shift,
        layout_used=result.layout,
    )
