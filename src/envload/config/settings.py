"""
Typed loader settings using Pydantic.

These settings control how envload itself reads records; they are not
populated from the environment.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoaderConfig(BaseModel):
    """Configuration for an EnvLoader."""

    model_config = ConfigDict(frozen=True)

    metadata_key: str = Field(
        default="env",
        description="Field metadata key holding the directive string",
    )

    @field_validator("metadata_key")
    @classmethod
    def validate_metadata_key(cls, v: str) -> str:
        """Ensure the metadata key is a plain identifier."""
        if not v.isidentifier():
            msg = f"metadata_key must be a non-empty identifier, got: {v!r}"
            raise ValueError(msg)
        return v
