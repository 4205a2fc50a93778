from typing import ClassVar

from app.models.schemas import CodecFamily, CodecType, LayoutMode
from app.services.engines.base import CodecEngine, TransformParams
from app.services.engines.registry import EngineRegistry
from app.services.preprocessing.layout import resolve
from app.services.preprocessing.script import (
    CYRILLIC_LOWER,
    CYRILLIC_UPPER,
    LATIN_LOWER,
    LATIN_UPPER,
    Script,
)


@EngineRegistry.register
class CaesarEngine(CodecEngine):
    """
    Caesar cipher engine over the Latin and Cyrillic alphabets.

    Latin letters shift modulo 26 and Cyrillic letters modulo 32. Ё is not
    part of the 32-letter alphabet, so it never moves. Which alphabet a
    letter is shifted in depends on the layout mode: in Latin mode a
    Cyrillic letter is transliterated and then shifted as Latin, and vice
    versa. That transliteration is lossy, so decoding forced-mode output
    does not recover the original script.
    """

    name = "Caesar Cipher"
    codec_type = CodecType.CAESAR
    codec_family = CodecFamily.SHIFT
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount "
        "within its own alphabet (26 Latin or 32 Cyrillic letters)."
    )

    uses_shift = True
    uses_layout = True

    ALPHABETS: ClassVar[dict[Script, tuple[str, str]]] = {
        Script.LATIN: (LATIN_LOWER, LATIN_UPPER),
        Script.CYRILLIC: (CYRILLIC_LOWER, CYRILLIC_UPPER),
    }

    def encode(self, text: str, params: TransformParams) -> str:
        """Encrypt text with the given shift."""
        return self.shift(text, params.shift, True, params.layout)

    def _decode(self, text: str, params: TransformParams) -> str:
        """Decrypt by shifting in reverse."""
        return self.shift(text, params.shift, False, params.layout)

    def shift(
        self,
        text: str,
        amount: int,
        encrypt: bool,
        layout: LayoutMode = LayoutMode.AUTO,
    ) -> str:
        """
        Shift every letter of text within its alphabet.

        Args:
            text: Input text
            amount: Shift amount (any integer)
            encrypt: True to shift forward, False to shift back
            layout: Layout mode used to pick the alphabet per character

        Returns:
            Shifted text; empty input is returned unchanged
        """
        if not text:
            return text

        direction = 1 if encrypt else -1
        result = []

        for char in text:
            resolved = resolve(char, layout)
            result.append(self._shift_char(resolved.char, resolved.script, amount * direction))

        return "".join(result)

    def _shift_char(self, char: str, script: Script, amount: int) -> str:
        """Shift one character, preserving case."""
        alphabets = self.ALPHABETS.get(script)
        if alphabets is None:
            return char

        for alphabet in alphabets:
            idx = alphabet.find(char)
            if idx >= 0:
                return alphabet[(idx + amount) % len(alphabet)]

        # Ё is Cyrillic but outside the shifting alphabet
        return char
