import string
from typing import ClassVar

from app.models.schemas import CodecFamily, CodecType
from app.services.engines.base import CodecEngine, TransformParams
from app.services.engines.registry import EngineRegistry
from app.services.preprocessing.layout import resolve_for_latin_table


@EngineRegistry.register
class A1Z26Engine(CodecEngine):
    """
    A1Z26 engine: each letter becomes its position in the alphabet.

    Encoding resolves the layout first, so Cyrillic letters are numbered by
    their Latin transliteration. Anything that is not a letter is kept as a
    literal token. Decoding never fails: whitespace around a number is
    ignored, and tokens that are not a number in 1..26 come back verbatim.
    """

    name = "A1Z26"
    codec_type = CodecType.A1Z26
    codec_family = CodecFamily.NUMERIC
    description = "Letters replaced by their alphabet position (A=1 ... Z=26), joined by hyphens."

    uses_layout = True

    ALPHABET: ClassVar[str] = string.ascii_uppercase
    SEPARATOR: ClassVar[str] = "-"

    def encode(self, text: str, params: TransformParams) -> str:
        tokens = []
        for char in text:
            key = resolve_for_latin_table(char, params.layout)
            idx = self.ALPHABET.find(key) if len(key) == 1 else -1
            tokens.append(str(idx + 1) if idx >= 0 else char)
        return self.SEPARATOR.join(tokens)

    def _decode(self, text: str, params: TransformParams) -> str:
        pieces: list[tuple[str, bool]] = []

        for token in text.split(self.SEPARATOR):
            if not token:
                continue
            number = token.strip()
            if number.isdigit() and number.isascii():
                num = int(number)
                if 1 <= num <= len(self.ALPHABET):
                    pieces.append((self.ALPHABET[num - 1], False))
                else:
                    pieces.append((number, True))
            else:
                pieces.append((token, False))

        # Numbers passed through keep their hyphens so they stay readable
        result = []
        prev_numeric = False
        for i, (piece, numeric) in enumerate(pieces):
            if i > 0 and (numeric or prev_numeric):
                result.append(self.SEPARATOR)
            result.append(piece)
            prev_numeric = numeric

        return "".join(result)
