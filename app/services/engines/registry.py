from typing import Type

from app.models.schemas import CodecFamily, CodecType
from app.services.engines.base import CodecEngine


class EngineRegistry:
    """
    Registry of codec engines.

    Engine classes register themselves with the class decorator; instances
    are created on first lookup and shared afterwards, since engines are
    stateless.
    """

    _engines: dict[CodecType, Type[CodecEngine]] = {}
    _instances: dict[CodecType, CodecEngine] = {}

    @classmethod
    def register(cls, engine_class: Type[CodecEngine]) -> Type[CodecEngine]:
        """
        Class decorator adding an engine under its codec type.

            @EngineRegistry.register
            class MorseEngine(CodecEngine):
                ...
        """
        cls._engines[engine_class.codec_type] = engine_class
        return engine_class

    def get_engine(self, codec_type: CodecType) -> CodecEngine | None:
        """Shared engine instance for a codec type, or None if unregistered."""
        engine_class = self._engines.get(codec_type)
        if engine_class is None:
            return None
        if codec_type not in self._instances:
            self._instances[codec_type] = engine_class()
        return self._instances[codec_type]

    def get_all_engines(self) -> list[CodecEngine]:
        """Every registered engine, in registration order."""
        return [self.get_engine(codec_type) for codec_type in self._engines]

    def get_engines_by_family(self, family: CodecFamily) -> list[CodecEngine]:
        """Registered engines belonging to one codec family."""
        return [engine for engine in self.get_all_engines() if engine.codec_family == family]


def _load_engines() -> None:
    """Import the engine packages so their classes register themselves."""
    from app.services.engines import numeric, radix, shift, symbolic  # noqa: F401


_load_engines()
