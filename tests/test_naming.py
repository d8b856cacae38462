"""Tests for environment variable name derivation."""

import pytest

from envload.naming import to_env_name


class TestToEnvName:
    """Tests for to_env_name."""

    @pytest.mark.parametrize(
        ("identifier", "expected"),
        [
            ("helloGoodWorld", "HELLO_GOOD_WORLD"),
            ("HelloGentleMoon", "HELLO_GENTLE_MOON"),
            ("someoneReallyLikesACRONYMS", "SOMEONE_REALLY_LIKES_ACRONYMS"),
            ("foo", "FOO"),
        ],
    )
    def test_case_change(self, identifier: str, expected: str) -> None:
        """Test conversion of camelCase and PascalCase identifiers."""
        assert to_env_name(identifier) == expected

    def test_acronym_followed_by_word(self) -> None:
        """Test that a capital run only splits after a later lowercase letter."""
        assert to_env_name("HTTPServerPort") == "HTTPSERVER_PORT"

    def test_snake_case_kept(self) -> None:
        """Test that snake_case attribute names are only upper-cased."""
        assert to_env_name("api_key") == "API_KEY"

    def test_single_uppercase_word(self) -> None:
        """Test that an all-caps identifier is returned unchanged."""
        assert to_env_name("URL") == "URL"

    def test_non_ascii_letters(self) -> None:
        """Test that case boundaries use Unicode character classes."""
        assert to_env_name("größeÜber") == "GRÖSSE_ÜBER"

    def test_empty_identifier(self) -> None:
        """Test that an empty identifier is rejected."""
        with pytest.raises(ValueError, match="empty identifier"):
            to_env_name("")
