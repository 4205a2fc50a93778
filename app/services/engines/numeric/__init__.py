"""Numeric codec engines."""

from app.services.engines.numeric.a1z26 import A1Z26Engine
from app.services.engines.numeric.ascii_codes import AsciiCodesEngine
from app.services.engines.numeric.binary import BinaryEngine

__all__ = [
    "A1Z26Engine",
    "AsciiCodesEngine",
    "BinaryEngine",
]
