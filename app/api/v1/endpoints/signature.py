from fastapi import APIRouter

from app.core.journal import truncate
from app.dependencies import HistoryDep, JournalDep
from app.models.schemas import (
    ErrorResponse,
    OperationType,
    SignRequest,
    SignResponse,
    VerifyRequest,
    VerifyResponse,
)
from app.services.signature.signer import TextSigner

router = APIRouter()


@router.post(
    "/sign",
    response_model=SignResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Empty input"},
    },
    summary="Sign text",
    description="Create a salted SHA-256 signature of the form 'salt:hexdigest'.",
)
async def sign_text(
    request: SignRequest,
    history: HistoryDep,
    journal: JournalDep,
) -> SignResponse:
    """Sign text and record the operation."""
    signature = TextSigner().sign(request.text)

    journal.record("SIGN", truncate(request.text))
    await history.add(OperationType.SIGN, "Signature", request.text)

    return SignResponse(signature=signature)


@router.post(
    "/verify",
    response_model=VerifyResponse,
    summary="Verify signature",
    description="Check a 'salt:hexdigest' signature against a text.",
)
async def verify_signature(request: VerifyRequest) -> VerifyResponse:
    """Verify a signature."""
    return VerifyResponse(valid=TextSigner().verify(request.text, request.signature))
