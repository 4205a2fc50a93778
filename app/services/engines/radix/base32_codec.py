from typing import ClassVar

from app.core.exceptions import InvalidFormatError
from app.models.schemas import CodecFamily, CodecType
from app.services.engines.base import CodecEngine, TransformParams
from app.services.engines.registry import EngineRegistry

BASE32_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
PADDING = "="

_SYMBOL_VALUES: dict[str, int] = {symbol: value for value, symbol in enumerate(BASE32_ALPHABET)}


def encode_bytes(data: bytes) -> str:
    """
    Encode bytes as RFC 4648 Base32.

    The input is read as one continuous bit stream, most significant bit
    first, and cut into 5-bit groups. The last group is padded with zero
    bits and the output is padded with '=' to a multiple of 8 characters.
    """
    result = []
    buffer = 0
    bits = 0

    for byte in data:
        buffer = (buffer << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            result.append(BASE32_ALPHABET[(buffer >> bits) & 0x1F])
        buffer &= (1 << bits) - 1

    if bits:
        result.append(BASE32_ALPHABET[(buffer << (5 - bits)) & 0x1F])

    result.append(PADDING * (-len(result) % 8))
    return "".join(result)


def decode_bytes(text: str) -> bytes:
    """
    Decode RFC 4648 Base32 into bytes.

    Trailing padding is stripped and the input is upper-cased before
    validation. Leftover bits that do not fill a whole byte are dropped.

    Raises:
        InvalidFormatError: If a character is not in the Base32 alphabet
    """
    symbols = text.strip().rstrip(PADDING).upper()

    for char in symbols:
        if char not in _SYMBOL_VALUES:
            raise InvalidFormatError(
                f"Invalid character '{char}' in Base32 string",
                {"char": char},
            )

    result = bytearray()
    buffer = 0
    bits = 0

    for char in symbols:
        buffer = (buffer << 5) | _SYMBOL_VALUES[char]
        bits += 5
        if bits >= 8:
            bits -= 8
            result.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1

    return bytes(result)


@EngineRegistry.register
class Base32Engine(CodecEngine):
    """Base32 engine over the UTF-8 bytes of the text."""

    name = "Base32"
    codec_type = CodecType.BASE32
    codec_family = CodecFamily.RADIX
    description = "RFC 4648 Base32 encoding of the UTF-8 bytes of the text, padded with '='."

    ENCODING: ClassVar[str] = "utf-8"

    def encode(self, text: str, params: TransformParams) -> str:
        return encode_bytes(text.encode(self.ENCODING))

    def _decode(self, text: str, params: TransformParams) -> str:
        data = decode_bytes(text)
        try:
            return data.decode(self.ENCODING)
        except UnicodeDecodeError as e:
            raise InvalidFormatError(
                "Text is not a valid Base32 string.",
                {"position": e.start},
            ) from e
