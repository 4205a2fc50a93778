"""Cyrillic <-> Latin single-letter transliteration tables.

Each Cyrillic letter maps to exactly one Latin character, so several
Cyrillic letters collapse onto the same Latin one (Е/Ё/Э -> E, Ж/З -> Z,
Ц/Ч -> C, Ш/Щ -> S, Ъ/Ь -> '). LATIN_TO_CYRILLIC is therefore only a
best-effort inverse: going Cyrillic -> Latin -> Cyrillic is lossy for
those letters.
"""

_CYRILLIC_TO_LATIN_LOWER: dict[str, str] = {
    "а": "a", "б": "b", "в": "v", "г": "g", "д": "d",
    "е": "e", "ё": "e", "ж": "z", "з": "z", "и": "i",
    "й": "i", "к": "k", "л": "l", "м": "m", "н": "n",
    "о": "o", "п": "p", "р": "r", "с": "s", "т": "t",
    "у": "u", "ф": "f", "х": "h", "ц": "c", "ч": "c",
    "ш": "s", "щ": "s", "ъ": "'", "ы": "y", "ь": "'",
    "э": "e", "ю": "u", "я": "y",
}

_LATIN_TO_CYRILLIC_LOWER: dict[str, str] = {
    "a": "а", "b": "б", "c": "ц", "d": "д", "e": "е",
    "f": "ф", "g": "г", "h": "х", "i": "и", "j": "й",
    "k": "к", "l": "л", "m": "м", "n": "н", "o": "о",
    "p": "п", "q": "к", "r": "р", "s": "с", "t": "т",
    "u": "у", "v": "в", "w": "в", "x": "х", "y": "ы",
    "z": "з",
}


def _with_uppercase(table: dict[str, str]) -> dict[str, str]:
    full = dict(table)
    full.update({src.upper(): dst.upper() for src, dst in table.items()})
    return full


CYRILLIC_TO_LATIN: dict[str, str] = _with_uppercase(_CYRILLIC_TO_LATIN_LOWER)
LATIN_TO_CYRILLIC: dict[str, str] = _with_uppercase(_LATIN_TO_CYRILLIC_LOWER)


def to_latin(char: str) -> str:
    """Transliterate a Cyrillic letter; other characters are returned as-is."""
    return CYRILLIC_TO_LATIN.get(char, char)


def to_cyrillic(char: str) -> str:
    """Transliterate a Latin letter; other characters are returned as-is."""
    return LATIN_TO_CYRILLIC.get(char, char)

