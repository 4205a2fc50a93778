from typing import NamedTuple

from app.models.schemas import LayoutMode
from app.services.preprocessing.script import Script, classify
from app.services.preprocessing.transliteration import to_cyrillic, to_latin


class ResolvedChar(NamedTuple):
    """Character to transform together with the alphabet to transform it in."""

    char: str
    script: Script


def resolve(char: str, mode: LayoutMode) -> ResolvedChar:
    """
    Decide which character and alphabet a script-aware codec should use.

    Latin mode re-scripts Cyrillic letters to Latin, Cyrillic mode re-scripts
    Latin letters to Cyrillic. Auto mode, letters already in the forced
    script and non-letters pass through unchanged.

    Args:
        char: A single character
        mode: The configured layout mode

    Returns:
        ResolvedChar with the (possibly transliterated) character and its script
    """
    script = classify(char)

    if mode == LayoutMode.LATIN and script == Script.CYRILLIC:
        substitute = to_latin(char)
        return ResolvedChar(substitute, classify(substitute))

    if mode == LayoutMode.CYRILLIC and script == Script.LATIN:
        substitute = to_cyrillic(char)
        return ResolvedChar(substitute, classify(substitute))

    return ResolvedChar(char, script)


def resolve_for_latin_table(char: str, mode: LayoutMode) -> str:
    """
    Resolve a character for lookup in a Latin-only table (Morse, A1Z26).

    The character is resolved under the layout mode and upper-cased. A
    Cyrillic letter that survives resolution has no entry in such tables,
    so it falls back to its Latin transliteration.
    """
    resolved = resolve(char, mode)
    if resolved.script == Script.CYRILLIC:
        return to_latin(resolved.char).upper()
    return resolved.char.upper()
