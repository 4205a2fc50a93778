from fastapi import APIRouter

from app.core.journal import truncate
from app.dependencies import JournalDep
from app.models.schemas import RecognizeRequest, RecognizeResponse
from app.services.detection.recognizer import CodecRecognizer

router = APIRouter()


@router.post(
    "",
    response_model=RecognizeResponse,
    summary="Recognize codec",
    description="Guess which codec produced a text from its character composition. Best effort only.",
)
async def recognize_text(
    request: RecognizeRequest,
    journal: JournalDep,
) -> RecognizeResponse:
    """Rank codec hypotheses for a text."""
    recognizer = CodecRecognizer()
    hypotheses = recognizer.recognize(request.text)

    best = hypotheses[0]
    guess = best.codec_type.value if best.codec_type else "unknown"
    journal.record("RECOGNIZE", f"{guess}: {truncate(request.text)}")

    return RecognizeResponse(best_guess=best, hypotheses=hypotheses)
