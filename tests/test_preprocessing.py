"""Tests for script classification, transliteration and layout resolution."""

import pytest

from app.models.schemas import LayoutMode
from app.services.preprocessing.layout import resolve, resolve_for_latin_table
from app.services.preprocessing.script import (
    CYRILLIC_LOWER,
    Script,
    classify,
    detect_script,
)
from app.services.preprocessing.transliteration import (
    CYRILLIC_TO_LATIN,
    LATIN_TO_CYRILLIC,
    to_cyrillic,
    to_latin,
)


class TestScriptClassifier:
    def test_latin(self):
        assert classify("a") == Script.LATIN
        assert classify("Z") == Script.LATIN

    def test_cyrillic(self):
        assert classify("а") == Script.CYRILLIC
        assert classify("Я") == Script.CYRILLIC

    def test_yo_special_case(self):
        """Ё lies outside the contiguous block but is still Cyrillic."""
        assert "ё" not in CYRILLIC_LOWER
        assert classify("ё") == Script.CYRILLIC
        assert classify("Ё") == Script.CYRILLIC

    @pytest.mark.parametrize("char", ["1", " ", "!", "'", "é", "ß", "中"])
    def test_other(self, char):
        assert classify(char) == Script.OTHER

    def test_alphabet_size(self):
        assert len(CYRILLIC_LOWER) == 32

    def test_detect_script(self):
        assert detect_script("hello") == "latin"
        assert detect_script("привет") == "cyrillic"
        assert detect_script("hello мир") == "mixed"
        assert detect_script("123 !") == "other"


class TestTransliteration:
    def test_covers_all_cyrillic_letters(self):
        letters = CYRILLIC_LOWER + "ё"
        for char in letters + letters.upper():
            assert char in CYRILLIC_TO_LATIN

    def test_covers_all_latin_letters(self):
        for code in range(ord("a"), ord("z") + 1):
            assert chr(code) in LATIN_TO_CYRILLIC
            assert chr(code).upper() in LATIN_TO_CYRILLIC

    def test_case_preserved(self):
        assert to_latin("Б") == "B"
        assert to_latin("б") == "b"
        assert to_cyrillic("D") == "Д"

    def test_unmapped_pass_through(self):
        assert to_latin("x") == "x"
        assert to_cyrillic("я") == "я"
        assert to_latin("5") == "5"

    def test_not_injective(self):
        """Several Cyrillic letters share one Latin letter."""
        assert to_latin("Е") == to_latin("Ё") == to_latin("Э") == "E"
        assert to_latin("Ч") == to_latin("Ц") == "C"
        assert to_latin("Щ") == to_latin("Ш") == "S"
        assert to_latin("Ъ") == to_latin("Ь") == "'"

    @pytest.mark.parametrize("char", ["ё", "ч", "щ", "э", "ю", "я", "ж"])
    def test_roundtrip_lossy_for_collisions(self, char):
        assert to_cyrillic(to_latin(char)) != char

    def test_roundtrip_exact_for_simple_letters(self):
        for char in "абвгдиклмнопрстуф":
            assert to_cyrillic(to_latin(char)) == char


class TestLayoutResolver:
    def test_auto_passes_through(self):
        assert resolve("ж", LayoutMode.AUTO) == ("ж", Script.CYRILLIC)
        assert resolve("z", LayoutMode.AUTO) == ("z", Script.LATIN)

    def test_latin_mode_rescripts_cyrillic(self):
        assert resolve("Ж", LayoutMode.LATIN) == ("Z", Script.LATIN)

    def test_latin_mode_keeps_latin(self):
        assert resolve("q", LayoutMode.LATIN) == ("q", Script.LATIN)

    def test_cyrillic_mode_rescripts_latin(self):
        assert resolve("d", LayoutMode.CYRILLIC) == ("д", Script.CYRILLIC)

    def test_signs_become_other(self):
        """Ъ maps to an apostrophe, which is not a letter."""
        assert resolve("ъ", LayoutMode.LATIN) == ("'", Script.OTHER)

    def test_other_never_changes(self):
        for mode in LayoutMode:
            assert resolve("7", mode) == ("7", Script.OTHER)

    def test_resolve_for_latin_table(self):
        assert resolve_for_latin_table("ж", LayoutMode.AUTO) == "Z"
        assert resolve_for_latin_table("w", LayoutMode.CYRILLIC) == "V"
        assert resolve_for_latin_table("a", LayoutMode.LATIN) == "A"
        assert resolve_for_latin_table("!", LayoutMode.AUTO) == "!"
