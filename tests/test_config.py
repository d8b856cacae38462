"""Tests for loader configuration."""

import pytest
from pydantic import ValidationError

from envload.config import LoaderConfig


class TestLoaderConfig:
    """Tests for LoaderConfig."""

    def test_defaults(self) -> None:
        """Test default metadata key."""
        assert LoaderConfig().metadata_key == "env"

    def test_custom_key(self) -> None:
        """Test a custom metadata key."""
        assert LoaderConfig(metadata_key="cfg").metadata_key == "cfg"

    @pytest.mark.parametrize("key", ["", "env key", "1env"])
    def test_invalid_key(self, key: str) -> None:
        """Test that non-identifier keys are rejected."""
        with pytest.raises(ValidationError, match="non-empty identifier"):
            LoaderConfig(metadata_key=key)

    def test_frozen(self) -> None:
        """Test that config cannot be modified."""
        config = LoaderConfig()
        with pytest.raises(ValidationError):
            config.metadata_key = "other"  # type: ignore[misc]
