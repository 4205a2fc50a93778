import string
from enum import Enum

LATIN_LOWER = string.ascii_lowercase
LATIN_UPPER = string.ascii_uppercase

# 32-letter alphabet; Ё sits outside the contiguous а..я block
CYRILLIC_LOWER = "абвгдежзийклмнопрстуфхцчшщъыьэюя"
CYRILLIC_UPPER = CYRILLIC_LOWER.upper()
CYRILLIC_YO = "ёЁ"

_LATIN = frozenset(LATIN_LOWER + LATIN_UPPER)
_CYRILLIC = frozenset(CYRILLIC_LOWER + CYRILLIC_UPPER)


class Script(str, Enum):
    """Script a single character belongs to."""

    LATIN = "latin"
    CYRILLIC = "cyrillic"
    OTHER = "other"


def classify(char: str) -> Script:
    """Classify one character as a Latin letter, Cyrillic letter, or other."""
    if char in _LATIN:
        return Script.LATIN
    if char in _CYRILLIC or char in CYRILLIC_YO:
        return Script.CYRILLIC
    return Script.OTHER


def detect_script(text: str) -> str:
    """Detect the dominant script of a text.

    Returns:
        'latin', 'cyrillic', 'mixed', or 'other' (no letters at all)
    """
    scripts = {classify(ch) for ch in text} - {Script.OTHER}
    if len(scripts) > 1:
        return "mixed"
    if scripts:
        return scripts.pop().value
    return Script.OTHER.value
