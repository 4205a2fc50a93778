"""
Transform pipeline.

Routes encode and decode requests to the registered codec engines,
applying shift and layout defaults from settings.
"""

from app.services.pipeline.dispatcher import TransformDispatcher, TransformResult

__all__ = [
    "TransformDispatcher",
    "TransformResult",
]
