from typing import ClassVar

from app.core.exceptions import InvalidFormatError
from app.models.schemas import CodecFamily, CodecType
from app.services.engines.base import CodecEngine, TransformParams
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class BinaryEngine(CodecEngine):
    """
    Binary codec engine.

    Every UTF-8 byte of the text becomes an 8-digit binary group; groups
    are separated by spaces. Cyrillic letters take two groups each.
    """

    name = "Binary Code"
    codec_type = CodecType.BINARY
    codec_family = CodecFamily.NUMERIC
    description = "Each UTF-8 byte written as eight binary digits, separated by spaces."

    BITS: ClassVar[int] = 8
    DIGITS: ClassVar[frozenset[str]] = frozenset("01")

    def encode(self, text: str, params: TransformParams) -> str:
        return " ".join(format(byte, "08b") for byte in text.encode("utf-8"))

    def _decode(self, text: str, params: TransformParams) -> str:
        groups = text.split()

        for group in groups:
            if len(group) != self.BITS or not set(group) <= self.DIGITS:
                raise InvalidFormatError(
                    "Text is not valid binary code. Binary code must consist of "
                    "8-bit groups of 0 and 1 separated by spaces.",
                    {"token": group},
                )

        data = bytes(int(group, 2) for group in groups)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise InvalidFormatError(
                "Binary code does not spell valid UTF-8 text.",
                {"position": e.start},
            ) from e
