"""Text signature services."""

from app.services.signature.signer import TextSigner

__all__ = ["TextSigner"]
