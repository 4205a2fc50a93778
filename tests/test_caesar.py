"""Tests for Caesar and ROT-n engines."""

import string

import pytest

from app.core.exceptions import EmptyInputError
from app.models.schemas import LayoutMode
from app.services.engines.base import TransformParams
from app.services.engines.shift.caesar import CaesarEngine
from app.services.engines.shift.rot import RotEngine


class TestCaesarEngine:
    """Test suite for Caesar cipher engine."""

    @pytest.fixture
    def engine(self):
        return CaesarEngine()

    @pytest.fixture
    def sample_plaintext(self):
        return "Hello, World! Привет, мир! 123"

    def test_encrypt_decrypt_roundtrip(self, engine, sample_plaintext):
        """Test that encrypt followed by decrypt returns original."""
        for shift in range(1, 26):
            params = TransformParams(shift=shift)
            ciphertext = engine.encode(sample_plaintext, params)
            assert engine.decode(ciphertext, params) == sample_plaintext

    def test_latin_roundtrip_all_modes(self, engine):
        """Latin-only text survives every layout mode unchanged."""
        plaintext = string.ascii_letters
        for layout in (LayoutMode.AUTO, LayoutMode.LATIN):
            for shift in range(1, 26):
                params = TransformParams(shift=shift, layout=layout)
                assert engine.decode(engine.encode(plaintext, params), params) == plaintext

    def test_encrypt_shift_7(self, engine):
        """Test specific encryption with shift 7."""
        assert engine.encode("HELLO", TransformParams(shift=7)) == "OLSSV"

    def test_decrypt_shift_7(self, engine):
        """Test specific decryption with shift 7."""
        assert engine.decode("OLSSV", TransformParams(shift=7)) == "HELLO"

    def test_case_preserved(self, engine):
        assert engine.encode("HeLLo", TransformParams(shift=1)) == "IfMMp"

    def test_latin_wraps_mod_26(self, engine):
        assert engine.encode("xyz", TransformParams(shift=3)) == "abc"

    def test_cyrillic_shift(self, engine):
        """Cyrillic letters shift within the 32-letter alphabet."""
        assert engine.encode("привет", TransformParams(shift=3)) == "тулеих"

    def test_cyrillic_wraps_mod_32(self, engine):
        assert engine.encode("Яя", TransformParams(shift=1)) == "Аа"

    def test_yo_is_fixed_point(self, engine):
        """Ё is outside the shifting alphabet and never moves."""
        params = TransformParams(shift=5)
        assert engine.encode("ёЁ", params) == "ёЁ"
        assert engine.encode("ёж", TransformParams(shift=1)) == "ёз"

    def test_non_letters_pass_through(self, engine):
        assert engine.encode("123 !?,.", TransformParams(shift=4)) == "123 !?,."

    def test_empty_encode_returns_empty(self, engine, params):
        assert engine.encode("", params) == ""

    def test_empty_decode_raises(self, engine, params):
        with pytest.raises(EmptyInputError):
            engine.decode("   ", params)

    def test_shift_normalized(self, engine):
        """Shifts beyond the alphabet size wrap around."""
        assert engine.shift("abc", 27, True) == engine.shift("abc", 1, True)
        assert engine.shift("абв", 33, True) == engine.shift("абв", 1, True)

    def test_latin_mode_transliterates_cyrillic(self, engine):
        """In Latin mode a Cyrillic letter is shifted as its Latin counterpart."""
        params = TransformParams(shift=1, layout=LayoutMode.LATIN)
        # Ж -> Z -> A
        assert engine.encode("Ж", params) == "A"
        assert engine.encode("Привет", params) == "Qsjwfu"

    def test_latin_mode_is_lossy(self, engine):
        """Decoding forced-mode output does not recover the Cyrillic original."""
        params = TransformParams(shift=1, layout=LayoutMode.LATIN)
        assert engine.decode(engine.encode("Привет", params), params) == "Privet"

    def test_cyrillic_mode_transliterates_latin(self, engine):
        params = TransformParams(shift=1, layout=LayoutMode.CYRILLIC)
        # a -> а -> б, b -> б -> в, c -> ц -> ч
        assert engine.encode("abc", params) == "бвч"

    def test_auto_mode_keeps_scripts(self, engine):
        params = TransformParams(shift=1, layout=LayoutMode.AUTO)
        assert engine.encode("aа", params) == "bб"


class TestRotEngine:
    """Test suite for printable rotation engine."""

    @pytest.fixture
    def engine(self):
        return RotEngine()

    @pytest.fixture
    def printable(self):
        return "".join(chr(code) for code in range(32, 127))

    def test_roundtrip_all_shifts(self, engine, printable):
        for shift in range(1, 95):
            params = TransformParams(shift=shift)
            assert engine.decode(engine.encode(printable, params), params) == printable

    def test_shift_one(self, engine):
        assert engine.encode("AB", TransformParams(shift=1)) == "BC"

    def test_wraps_at_tilde(self, engine):
        assert engine.encode("~", TransformParams(shift=1)) == " "
        assert engine.decode("A ", TransformParams(shift=1)) == "@~"

    def test_space_rotates(self, engine):
        assert engine.encode(" ", TransformParams(shift=1)) == "!"

    def test_shift_47(self, engine):
        assert engine.rotate("Hello", 47, True) == "w5<<?"
        assert engine.rotate("w5<<?", 47, False) == "Hello"

    def test_full_cycle_is_identity(self, engine, printable):
        assert engine.rotate(printable, 95, True) == printable

    def test_cyrillic_untouched(self, engine):
        assert engine.encode("Привет", TransformParams(shift=10)) == "Привет"

    def test_layout_ignored(self, engine):
        text = "Hello Мир"
        latin = engine.encode(text, TransformParams(shift=5, layout=LayoutMode.LATIN))
        auto = engine.encode(text, TransformParams(shift=5, layout=LayoutMode.AUTO))
        assert latin == auto

    def test_empty_decode_raises(self, engine, params):
        with pytest.raises(EmptyInputError):
            engine.decode("", params)
