"""
envload: declarative environment-variable configuration.

Populates dataclass or pydantic records from environment variables, driven by
per-field directives such as ``required``, ``name=VAR`` and ``default=value``.
"""

import logging
from importlib.metadata import version

from envload.coercion import ScalarKind, coerce_value
from envload.config import LoaderConfig
from envload.directives import Directive, parse_directive
from envload.errors import (
    CoercionError,
    DirectiveError,
    EnvLoadError,
    ErrorCollector,
    FieldError,
    LoadError,
    MalformedPropertyError,
    MissingRequiredError,
    SchemaError,
    UnknownPropertyError,
    UnsupportedTypeError,
)
from envload.loader import EnvLoader, load
from envload.naming import to_env_name
from envload.schema import FieldDescriptor, describe_fields, env_field

__version__ = version("envload")

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CoercionError",
    "Directive",
    "DirectiveError",
    "EnvLoadError",
    "EnvLoader",
    "ErrorCollector",
    "FieldDescriptor",
    "FieldError",
    "LoadError",
    "LoaderConfig",
    "MalformedPropertyError",
    "MissingRequiredError",
    "ScalarKind",
    "SchemaError",
    "UnknownPropertyError",
    "UnsupportedTypeError",
    "__version__",
    "coerce_value",
    "describe_fields",
    "env_field",
    "load",
    "parse_directive",
    "to_env_name",
]
