from fastapi import APIRouter

from app.api.v1.endpoints import codecs, decode, encode, history, journal, recognize, signature

api_router = APIRouter()

api_router.include_router(
    codecs.router,
    prefix="/codecs",
    tags=["Codecs"],
)

api_router.include_router(
    encode.router,
    prefix="/encode",
    tags=["Encoding"],
)

api_router.include_router(
    decode.router,
    prefix="/decode",
    tags=["Decoding"],
)

api_router.include_router(
    recognize.router,
    prefix="/recognize",
    tags=["Recognition"],
)

api_router.include_router(
    signature.router,
    prefix="/signature",
    tags=["Signature"],
)

api_router.include_router(
    history.router,
    prefix="/history",
    tags=["History"],
)

api_router.include_router(
    journal.router,
    prefix="/journal",
    tags=["Journal"],
)
