from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from app.core.exceptions import EmptyInputError
from app.models.schemas import CodecFamily, CodecInfo, CodecType, LayoutMode


@dataclass(frozen=True)
class TransformParams:
    """Parameters handed to an engine for a single transform."""

    shift: int = 0
    layout: LayoutMode = LayoutMode.AUTO


class CodecEngine(ABC):
    """
    Abstract base class for all codec engines.

    Each codec implementation must provide:
    - encode(): Transform plain text into the codec's representation
    - _decode(): Transform the representation back into text

    decode() rejects blank input with EmptyInputError before delegating to
    _decode(), so every engine fails the same way on empty input.
    Engines are stateless; a single instance may serve concurrent callers.
    """

    # Codec metadata
    name: str
    codec_type: CodecType
    codec_family: CodecFamily
    description: str

    uses_shift: ClassVar[bool] = False
    uses_layout: ClassVar[bool] = False

    @abstractmethod
    def encode(self, text: str, params: TransformParams) -> str:
        """
        Encode text.

        Encoding never fails on string input; characters without a mapping
        degrade to the codec's unknown marker or pass through.

        Args:
            text: The text to encode
            params: Shift amount and layout mode

        Returns:
            Encoded text
        """
        pass

    def decode(self, text: str, params: TransformParams) -> str:
        """
        Decode text.

        Args:
            text: The text to decode
            params: Shift amount and layout mode

        Returns:
            Decoded text

        Raises:
            EmptyInputError: If text is empty or whitespace only
            InvalidFormatError: If text is not valid for this codec
        """
        if not text or text.isspace():
            raise EmptyInputError()
        return self._decode(text, params)

    @abstractmethod
    def _decode(self, text: str, params: TransformParams) -> str:
        """Decode non-blank text."""
        pass

    def info(self) -> CodecInfo:
        """Describe this engine."""
        return CodecInfo(
            codec_type=self.codec_type,
            codec_family=self.codec_family,
            name=self.name,
            description=self.description,
            uses_shift=self.uses_shift,
            uses_layout=self.uses_layout,
        )
