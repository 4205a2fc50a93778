import base64
import binascii
from typing import ClassVar

from app.core.exceptions import InvalidFormatError
from app.models.schemas import CodecFamily, CodecType
from app.services.engines.base import CodecEngine, TransformParams
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class Base64Engine(CodecEngine):
    """
    Base64 engine, a thin wrapper over the standard library.

    Whitespace inside the encoded text (line wrapping) is ignored on decode.
    """

    name = "Base64"
    codec_type = CodecType.BASE64
    codec_family = CodecFamily.RADIX
    description = "Standard Base64 encoding of the UTF-8 bytes of the text."

    ENCODING: ClassVar[str] = "utf-8"

    def encode(self, text: str, params: TransformParams) -> str:
        return base64.b64encode(text.encode(self.ENCODING)).decode("ascii")

    def _decode(self, text: str, params: TransformParams) -> str:
        try:
            data = base64.b64decode("".join(text.split()), validate=True)
            return data.decode(self.ENCODING)
        except (binascii.Error, ValueError) as e:
            raise InvalidFormatError(
                "Text is not a valid Base64 string.",
                {"reason": str(e)},
            ) from e
