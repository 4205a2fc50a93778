"""Shift-based codec engines."""

from app.services.engines.shift.caesar import CaesarEngine
from app.services.engines.shift.rot import RotEngine

__all__ = [
    "CaesarEngine",
    "RotEngine",
]
