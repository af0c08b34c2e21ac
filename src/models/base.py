"""Base entity class for all domain models."""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class BaseEntity(BaseModel):
    """Base class for all domain entities.

    Provides:
    - Unique ID (UUID)
    - Creation timestamp
    - Immutability: state changes produce new instances via model_copy
    """

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        validate_default=True,
        from_attributes=True,
    )

    id: UUID = Field(default_factory=uuid4, description="Unique entity identifier")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="When entity was created",
    )
