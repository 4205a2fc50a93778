"""Binary-to-text codec engines."""

from app.services.engines.radix.base32_codec import Base32Engine
from app.services.engines.radix.base64_codec import Base64Engine

__all__ = [
    "Base32Engine",
    "Base64Engine",
]
