"""
Transform dispatcher.

Routes a (codec, direction) request to the matching engine with the
shift amount and layout mode that engine needs. Blank encode input, input
length and the shift range are rejected here, at the boundary, so the
engines themselves stay pure functions of their input.
"""

import logging
from dataclasses import dataclass

from app.core.config import Settings, get_settings
from app.core.exceptions import (
    EmptyInputError,
    EngineNotFoundError,
    InvalidShiftError,
    TextTooLongError,
)
from app.models.schemas import CodecType, Direction, LayoutMode
from app.services.engines.base import CodecEngine, TransformParams
from app.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


@dataclass
class TransformResult:
    """Outcome of a dispatched transform."""

    text: str
    codec_type: CodecType
    direction: Direction
    shift: int | None
    layout: LayoutMode | None


class TransformDispatcher:
    """Selects an engine and applies it in the requested direction."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.registry = EngineRegistry()

    def get_engine(self, codec_type: CodecType) -> CodecEngine:
        """
        Look up the engine for a codec type.

        Raises:
            EngineNotFoundError: If no engine is registered for the type
        """
        engine = self.registry.get_engine(codec_type)
        if engine is None:
            raise EngineNotFoundError(str(codec_type))
        return engine

    def encode(
        self,
        codec_type: CodecType,
        text: str,
        shift: int | None = None,
        layout: LayoutMode | None = None,
    ) -> TransformResult:
        """Encode text with the selected codec."""
        return self.transform(codec_type, Direction.ENCODE, text, shift, layout)

    def decode(
        self,
        codec_type: CodecType,
        text: str,
        shift: int | None = None,
        layout: LayoutMode | None = None,
    ) -> TransformResult:
        """Decode text with the selected codec."""
        return self.transform(codec_type, Direction.DECODE, text, shift, layout)

    def transform(
        self,
        codec_type: CodecType,
        direction: Direction,
        text: str,
        shift: int | None = None,
        layout: LayoutMode | None = None,
    ) -> TransformResult:
        """
        Run one transform.

        Args:
            codec_type: Codec to use
            direction: Encode or decode
            text: Input text
            shift: Shift amount; defaults to settings, only used by shift codecs
            layout: Layout mode; defaults to settings, only used by script-aware codecs

        Returns:
            TransformResult with the output and the parameters actually used

        Raises:
            TextTooLongError: If text exceeds the configured maximum
            InvalidShiftError: If shift is outside the configured range
            EmptyInputError: If text is blank
            InvalidFormatError: If the input is malformed for the codec
        """
        if direction == Direction.ENCODE and (not text or text.isspace()):
            raise EmptyInputError("encode")
        if len(text) > self.settings.max_text_length:
            raise TextTooLongError(len(text), self.settings.max_text_length)

        engine = self.get_engine(codec_type)
        params = self._build_params(engine, shift, layout)

        if direction == Direction.ENCODE:
            output = engine.encode(text, params)
        else:
            output = engine.decode(text, params)

        logger.debug(
            "%s %s: %d chars -> %d chars",
            direction.value, codec_type.value, len(text), len(output),
        )

        return TransformResult(
            text=output,
            codec_type=codec_type,
            direction=direction,
            shift=params.shift if engine.uses_shift else None,
            layout=params.layout if engine.uses_layout else None,
        )

    def _build_params(
        self,
        engine: CodecEngine,
        shift: int | None,
        layout: LayoutMode | None,
    ) -> TransformParams:
        if shift is None:
            shift = self.settings.default_shift
        if layout is None:
            layout = LayoutMode(self.settings.default_layout)

        if engine.uses_shift and not (self.settings.shift_min <= shift <= self.settings.shift_max):
            raise InvalidShiftError(shift, self.settings.shift_min, self.settings.shift_max)

        return TransformParams(shift=shift, layout=layout)
