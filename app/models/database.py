from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""

    pass


class Operation(Base):
    """Stores history of encode, decode and sign operations."""

    __tablename__ = "operations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Display "frequency" in MHz, random within 140-150
    frequency: Mapped[float] = mapped_column(Float)

    operation_type: Mapped[str] = mapped_column(String(16), index=True)
    codec_name: Mapped[str] = mapped_column(String(32))
    preview: Mapped[str] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
    )
