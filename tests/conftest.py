"""Pytest configuration and shared fixtures."""

from dataclasses import dataclass

import pytest

from envload import env_field


@dataclass
class SampleConfig:
    """Record exercising every directive form."""

    foo: str = env_field("-", default="")
    bar: str = env_field("required", default="")
    baz: str = env_field("default=hello world", default="")
    zab: bool = env_field("name=ZaB", default=False)
    rab: str = env_field("name=RaB;default=goodnight moon", default="")
    oof: str = env_field("name=oOF;required", default="")
    uwa: int = 0
    wou: int = env_field("name=wou", default=0)
    eew: float = 0.0


@pytest.fixture
def sample_config() -> SampleConfig:
    """Return a fresh SampleConfig with zero values."""
    return SampleConfig()


@pytest.fixture
def full_environ() -> dict[str, str]:
    """Environment satisfying every field of SampleConfig."""
    return {
        "FOO": "foo value",
        "BAR": "bar value",
        "BAZ": "baz value",
        "ZaB": "YES",
        "oOF": "oof value",
        "wou": "5",
        "EEW": "6.7",
    }
