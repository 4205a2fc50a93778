from typing import ClassVar

from app.core.exceptions import InvalidFormatError, OutOfRangeError
from app.models.schemas import CodecFamily, CodecType
from app.services.engines.base import CodecEngine, TransformParams
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class AsciiCodesEngine(CodecEngine):
    """
    Decimal character-code engine.

    Assumes one byte per character: code points 0-255 are written as-is,
    anything wider is written as the code of '?'.
    """

    name = "ASCII Codes"
    codec_type = CodecType.ASCII
    codec_family = CodecFamily.NUMERIC
    description = "Each character written as its decimal code (0-255), separated by spaces."

    MAX_CODE: ClassVar[int] = 255
    UNKNOWN: ClassVar[int] = ord("?")

    def encode(self, text: str, params: TransformParams) -> str:
        codes = []
        for char in text:
            code = ord(char)
            codes.append(str(code if code <= self.MAX_CODE else self.UNKNOWN))
        return " ".join(codes)

    def _decode(self, text: str, params: TransformParams) -> str:
        codes = []
        for token in text.split():
            if not token.isdigit() or not token.isascii():
                raise InvalidFormatError(
                    "Text is not a valid list of ASCII codes. Expected numbers "
                    "from 0 to 255 separated by spaces.",
                    {"token": token},
                )
            code = int(token)
            if code > self.MAX_CODE:
                raise OutOfRangeError(token, 0, self.MAX_CODE)
            codes.append(code)

        return bytes(codes).decode("latin-1")
