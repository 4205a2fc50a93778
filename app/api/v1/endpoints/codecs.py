from fastapi import APIRouter, Query

from app.models.schemas import CodecFamily, CodecInfo
from app.services.engines.registry import EngineRegistry

router = APIRouter()


@router.get(
    "",
    response_model=list[CodecInfo],
    summary="List codecs",
    description=(
        "List registered codecs and whether each takes a shift or a layout mode. "
        "Pass a family to list only the codecs in it."
    ),
)
async def list_codecs(
    family: CodecFamily | None = Query(None, description="Only codecs of this family"),
) -> list[CodecInfo]:
    """List registered codecs, optionally filtered by family."""
    registry = EngineRegistry()
    if family is None:
        engines = registry.get_all_engines()
    else:
        engines = registry.get_engines_by_family(family)
    return [engine.info() for engine in engines]
