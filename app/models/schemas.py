from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Enums
# ============================================================================


class CodecFamily(str, Enum):
    """Supported codec families."""

    SHIFT = "shift"
    SYMBOLIC = "symbolic"
    NUMERIC = "numeric"
    RADIX = "radix"


class CodecType(str, Enum):
    """Specific codec types."""

    CAESAR = "caesar"
    ROT = "rot"
    MORSE = "morse"
    BINARY = "binary"
    A1Z26 = "a1z26"
    BASE32 = "base32"
    BASE64 = "base64"
    ASCII = "ascii"


class LayoutMode(str, Enum):
    """Which script script-aware codecs treat as canonical."""

    AUTO = "auto"
    CYRILLIC = "cyrillic"
    LATIN = "latin"


class Direction(str, Enum):
    """Transform direction."""

    ENCODE = "encode"
    DECODE = "decode"


class OperationType(str, Enum):
    """Operation kinds recorded in history."""

    ENCODE = "ENCODE"
    DECODE = "DECODE"
    SIGN = "SIGN"


# ============================================================================
# Codec Schemas
# ============================================================================


class CodecInfo(BaseModel):
    """Description of a registered codec engine."""

    codec_type: CodecType
    codec_family: CodecFamily
    name: str
    description: str
    uses_shift: bool
    uses_layout: bool


class CodecHypothesis(BaseModel):
    """A guess about which codec produced a text."""

    codec_family: CodecFamily
    codec_type: CodecType | None = None
    confidence: float = Field(ge=0.0, le=1.0)
    label: str
    reasoning: list[str] = []


# ============================================================================
# Request Schemas
# ============================================================================


class TransformRequest(BaseModel):
    """Request schema for /encode and /decode endpoints."""

    text: str = Field(max_length=100_000)
    codec: CodecType
    shift: int | None = None
    layout: LayoutMode | None = None


class RecognizeRequest(BaseModel):
    """Request schema for /recognize endpoint."""

    text: str = Field(min_length=1, max_length=100_000)


class SignRequest(BaseModel):
    """Request schema for /signature/sign endpoint."""

    text: str = Field(max_length=100_000)


class VerifyRequest(BaseModel):
    """Request schema for /signature/verify endpoint."""

    text: str = Field(max_length=100_000)
    signature: str = Field(max_length=256)


# ============================================================================
# Response Schemas
# ============================================================================


class TransformResponse(BaseModel):
    """Response schema for /encode and /decode endpoints."""

    result: str
    codec: CodecType
    direction: Direction
    shift_used: int | None = None
    layout_used: LayoutMode | None = None


class RecognizeResponse(BaseModel):
    """Response schema for /recognize endpoint."""

    best_guess: CodecHypothesis
    hypotheses: list[CodecHypothesis]


class SignResponse(BaseModel):
    """Response schema for /signature/sign endpoint."""

    signature: str


class VerifyResponse(BaseModel):
    """Response schema for /signature/verify endpoint."""

    valid: bool


class OperationHistoryItem(BaseModel):
    """Single history item."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    frequency: float
    operation_type: OperationType
    codec_name: str
    preview: str
    created_at: datetime


class HistoryResponse(BaseModel):
    """Response schema for /history endpoint."""

    items: list[OperationHistoryItem]
    total: int
    page: int
    page_size: int


class JournalResponse(BaseModel):
    """Response schema for /journal endpoint."""

    lines: list[str]
    total: int


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
