"""Symbol-table codec engines."""

from app.services.engines.symbolic.morse import MorseEngine

__all__ = ["MorseEngine"]
