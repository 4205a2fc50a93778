import re
from typing import ClassVar

from app.core.exceptions import InvalidFormatError
from app.models.schemas import CodecFamily, CodecType
from app.services.engines.base import CodecEngine, TransformParams
from app.services.engines.registry import EngineRegistry
from app.services.preprocessing.layout import resolve_for_latin_table

MORSE_TABLE: dict[str, str] = {
    "A": ".-", "B": "-...", "C": "-.-.", "D": "-..", "E": ".",
    "F": "..-.", "G": "--.", "H": "....", "I": "..", "J": ".---",
    "K": "-.-", "L": ".-..", "M": "--", "N": "-.", "O": "---",
    "P": ".--.", "Q": "--.-", "R": ".-.", "S": "...", "T": "-",
    "U": "..-", "V": "...-", "W": ".--", "X": "-..-", "Y": "-.--",
    "Z": "--..",
    "0": "-----", "1": ".----", "2": "..---", "3": "...--",
    "4": "....-", "5": ".....", "6": "-....", "7": "--...",
    "8": "---..", "9": "----.",
    " ": "/", ".": ".-.-.-", ",": "--..--", "?": "..--..",
    "!": "-.-.--", "@": ".--.-.",
}

REVERSE_MORSE_TABLE: dict[str, str] = {code: char for char, code in MORSE_TABLE.items()}


@EngineRegistry.register
class MorseEngine(CodecEngine):
    """
    International Morse code engine.

    Letters are looked up after layout resolution and upper-casing.
    Cyrillic letters are transliterated to Latin since the table is
    Latin-only. Characters with no code become '?'. A space is encoded as
    the word separator '/'.
    """

    name = "Morse Code"
    codec_type = CodecType.MORSE
    codec_family = CodecFamily.SYMBOLIC
    description = (
        "Letters, digits and basic punctuation as sequences of dots and "
        "dashes; codes are separated by spaces and words by '/'."
    )

    uses_layout = True

    UNKNOWN: ClassVar[str] = "?"
    WORD_SEPARATOR: ClassVar[str] = "/"
    SYMBOLS: ClassVar[frozenset[str]] = frozenset(".-")

    _SEPARATOR_RE: ClassVar[re.Pattern[str]] = re.compile(r"\s*/\s*")

    def encode(self, text: str, params: TransformParams) -> str:
        codes = []
        for char in text:
            key = resolve_for_latin_table(char, params.layout)
            codes.append(MORSE_TABLE.get(key, self.UNKNOWN))
        return " ".join(codes).rstrip()

    def _decode(self, text: str, params: TransformParams) -> str:
        stripped = "".join(text.split()).replace(self.WORD_SEPARATOR, "")
        bad = sorted(set(stripped) - self.SYMBOLS)
        if bad:
            raise InvalidFormatError(
                "Text is not valid Morse code. Morse may only contain '.', '-', "
                "spaces and '/' between words.",
                {"invalid_chars": bad},
            )

        words = []
        for word in self._SEPARATOR_RE.split(text.strip()):
            letters = [REVERSE_MORSE_TABLE.get(code, self.UNKNOWN) for code in word.split()]
            words.append("".join(letters))

        return " ".join(words).strip()
