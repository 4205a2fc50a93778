from typing import Any


class CodecError(Exception):
    """Base exception for all codec errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CodecError):
    """Raised when input validation fails."""

    pass


class EmptyInputError(ValidationError):
    """Raised when a decode operation receives blank input."""

    def __init__(self, operation: str = "decode"):
        super().__init__(
            f"Enter some text to {operation}",
            {"operation": operation},
        )


class TextTooLongError(ValidationError):
    """Raised when input text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class InvalidShiftError(ValidationError):
    """Raised when a shift amount is outside the allowed range."""

    def __init__(self, shift: int, minimum: int, maximum: int):
        super().__init__(
            f"Shift {shift} is outside the allowed range {minimum}..{maximum}",
            {"shift": shift, "min": minimum, "max": maximum},
        )


class InvalidFormatError(ValidationError):
    """Raised when input does not match the shape required by a codec."""

    pass


class OutOfRangeError(InvalidFormatError):
    """Raised when a numeric token falls outside its allowed interval."""

    def __init__(self, token: str, minimum: int, maximum: int):
        super().__init__(
            f"Value '{token}' is outside the range {minimum}..{maximum}",
            {"token": token, "min": minimum, "max": maximum},
        )


class EngineError(CodecError):
    """Base exception for codec engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested codec engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Codec engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )
