from typing import ClassVar

from app.models.schemas import CodecFamily, CodecType
from app.services.engines.base import CodecEngine, TransformParams
from app.services.engines.registry import EngineRegistry


@EngineRegistry.register
class RotEngine(CodecEngine):
    """
    ROT-n engine over the printable ASCII range.

    Rotates every character between space (32) and tilde (126) by n places
    within that 95-character range. Characters outside the range, including
    all Cyrillic letters, are left untouched, so the layout mode has no
    effect here.
    """

    name = "ROT-n"
    codec_type = CodecType.ROT
    codec_family = CodecFamily.SHIFT
    description = (
        "Rotation of all printable ASCII characters (space through tilde) "
        "by a fixed amount."
    )

    uses_shift = True

    START: ClassVar[int] = 32
    END: ClassVar[int] = 126
    RANGE: ClassVar[int] = END - START + 1

    def encode(self, text: str, params: TransformParams) -> str:
        return self.rotate(text, params.shift, True)

    def _decode(self, text: str, params: TransformParams) -> str:
        return self.rotate(text, params.shift, False)

    def rotate(self, text: str, amount: int, encrypt: bool) -> str:
        """Rotate printable characters forward (encrypt) or back."""
        if not text:
            return text

        effective = (amount if encrypt else -amount) % self.RANGE
        result = []

        for char in text:
            code = ord(char)
            if self.START <= code <= self.END:
                result.append(chr((code - self.START + effective) % self.RANGE + self.START))
            else:
                result.append(char)

        return "".join(result)
