"""Tests for configuration and environment variable helpers."""

import os

import pytest

from typing import TYPE_CHECKING

from getblock.helpers.config import (
    get_getblock_endpoint,
    get_getblock_token,
    get_optional_env,
)
from getblock.helpers.constants import DEFAULT_ENDPOINT


if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def clean_env() -> "Generator[None]":
    """Clean environment variables before and after test."""
    # Save current env
    saved_env = {
        "TEST_KEY": os.environ.get("TEST_KEY"),
        "GETBLOCK_TOKEN": os.environ.get("GETBLOCK_TOKEN"),
        "GETBLOCK_ENDPOINT": os.environ.get("GETBLOCK_ENDPOINT"),
    }

    # Clear test keys
    for key in saved_env:
        if key in os.environ:
            del os.environ[key]

    yield

    # Restore env
    for key, value in saved_env.items():
        if value is not None:
            os.environ[key] = value
        elif key in os.environ:
            del os.environ[key]


@pytest.mark.usefixtures("clean_env")
class TestGetOptionalEnv:
    """Tests for get_optional_env function."""

    def test_returns_none_when_not_set(self) -> None:
        """Test that get_optional_env returns None when not set."""
        assert get_optional_env("TEST_KEY") is None

    def test_returns_env_value_over_default(self) -> None:
        """Test that get_optional_env prefers env value over default."""
        os.environ["TEST_KEY"] = "env_value"
        assert get_optional_env("TEST_KEY", "default") == "env_value"


@pytest.mark.usefixtures("clean_env")
class TestGetGetblockToken:
    """Tests for get_getblock_token function."""

    def test_parameter_takes_precedence(self) -> None:
        """Test that the parameter wins over the environment."""
        os.environ["GETBLOCK_TOKEN"] = "from-env"
        assert get_getblock_token("from-param") == "from-param"

    def test_returns_env_value(self) -> None:
        """Test that the token is read from GETBLOCK_TOKEN."""
        os.environ["GETBLOCK_TOKEN"] = "from-env"
        assert get_getblock_token() == "from-env"

    def test_missing_token_is_empty(self) -> None:
        """Test that a missing token means no auth rather than an error."""
        assert get_getblock_token() == ""


@pytest.mark.usefixtures("clean_env")
class TestGetGetblockEndpoint:
    """Tests for get_getblock_endpoint function."""

    def test_returns_parameter(self) -> None:
        """Test that the parameter is returned as is."""
        url = "https://eth.getblock.io/sepolia/"
        assert get_getblock_endpoint(url) == url

    def test_returns_env_value(self) -> None:
        """Test that GETBLOCK_ENDPOINT overrides the default."""
        os.environ["GETBLOCK_ENDPOINT"] = "https://node.example/"
        assert get_getblock_endpoint() == "https://node.example/"

    def test_defaults_to_mainnet(self) -> None:
        """Test fallback to the mainnet endpoint."""
        assert get_getblock_endpoint() == DEFAULT_ENDPOINT
