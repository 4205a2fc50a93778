import hashlib
import hmac
import secrets
from typing import ClassVar

from app.core.exceptions import EmptyInputError


class TextSigner:
    """
    Salted SHA-256 text signatures.

    A signature has the form "salt:hexdigest", where salt is random hex and
    the digest is SHA-256 over the UTF-8 bytes of text + salt. This only
    detects accidental changes; anyone can compute a valid signature.
    """

    SALT_BYTES: ClassVar[int] = 8
    SEPARATOR: ClassVar[str] = ":"

    def sign(self, text: str) -> str:
        """
        Sign text with a fresh random salt.

        Raises:
            EmptyInputError: If text is empty or whitespace
        """
        if not text or text.isspace():
            raise EmptyInputError("sign")

        salt = secrets.token_hex(self.SALT_BYTES)
        return f"{salt}{self.SEPARATOR}{self._digest(text, salt)}"

    def verify(self, text: str, signature: str) -> bool:
        """Check a signature; malformed or blank input is simply invalid."""
        if not text or text.isspace() or not signature:
            return False

        parts = signature.strip().split(self.SEPARATOR)
        if len(parts) != 2:
            return False

        salt, digest = parts
        expected = self._digest(text, salt)
        return hmac.compare_digest(digest.lower().encode("utf-8"), expected.encode("utf-8"))

    def _digest(self, text: str, salt: str) -> str:
        return hashlib.sha256((text + salt).encode("utf-8")).hexdigest()
