"""
Exception hierarchy for environment loading.

Two disjoint classes of failure exist:

- ``SchemaError`` and its subclasses describe a broken record schema
  (malformed directive, unsupported field type). They are raised immediately
  and abort the load.
- ``FieldError`` and its subclasses describe a problem with one field's runtime
  value (missing required variable, value that cannot be coerced). They are
  collected across all fields and raised together as a ``LoadError``.
"""

from collections.abc import Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from envload.coercion import ScalarKind


class EnvLoadError(Exception):
    """Base class for all envload errors."""


class SchemaError(EnvLoadError):
    """The record schema itself is invalid."""


class DirectiveError(SchemaError):
    """A field directive string could not be parsed."""

    def __init__(self, message: str, directive: str, field_name: str | None = None) -> None:
        self.directive = directive
        self.field_name = field_name
        if field_name is not None:
            message = f"{message} (field {field_name!r})"
        super().__init__(message)


class UnknownPropertyError(DirectiveError):
    """A key=value property uses a key other than name or default."""

    def __init__(self, key: str, directive: str, field_name: str | None = None) -> None:
        self.key = key
        super().__init__(f"unknown property in directive: {key}", directive, field_name)


class MalformedPropertyError(DirectiveError):
    """A property contains more than one '='."""

    def __init__(self, prop: str, directive: str, field_name: str | None = None) -> None:
        self.prop = prop
        super().__init__(f"invalid property format in directive: {prop}", directive, field_name)


class UnsupportedTypeError(SchemaError):
    """A field is declared with a type outside the supported scalar set."""

    def __init__(self, annotation: object, field_name: str | None = None) -> None:
        self.annotation = annotation
        self.field_name = field_name
        where = f" for field {field_name!r}" if field_name is not None else ""
        super().__init__(
            f"unsupported field type{where}: {annotation!r} "
            "(only str, int, float and bool are supported)"
        )


class FieldError(EnvLoadError):
    """A recoverable problem with a single field's value."""

    def __init__(self, message: str, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(message)


class MissingRequiredError(FieldError):
    """A required field has neither an environment value nor a default."""

    def __init__(self, field_name: str, env_name: str) -> None:
        self.env_name = env_name
        super().__init__(
            f"missing env value for required field: {field_name} (variable {env_name})",
            field_name,
        )


class CoercionError(FieldError, ValueError):
    """A raw string could not be converted to the field's declared type."""

    def __init__(
        self, field_name: str, raw: str, kind: "ScalarKind", reason: str = "invalid syntax"
    ) -> None:
        self.raw = raw
        self.kind = kind
        self.reason = reason
        super().__init__(
            f"cannot parse {raw!r} as {kind.value} for field {field_name}: {reason}",
            field_name,
        )


class LoadError(EnvLoadError):
    """Composite of every per-field error recorded during one load."""

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors: tuple[FieldError, ...] = tuple(errors)
        lines = "\n".join(f"  - {error}" for error in self.errors)
        super().__init__(f"{len(self.errors)} field error(s) while loading environment:\n{lines}")

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[FieldError]:
        return iter(self.errors)


class ErrorCollector:
    """
    Accumulates per-field errors during a load.

    Example:
        collector = ErrorCollector()
        collector.add(MissingRequiredError("port", "PORT"))
        collector.raise_if_any()  # raises LoadError with one entry
    """

    def __init__(self) -> None:
        self._errors: list[FieldError] = []

    def add(self, error: FieldError) -> None:
        self._errors.append(error)

    @property
    def errors(self) -> tuple[FieldError, ...]:
        return tuple(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def raise_if_any(self) -> None:
        """Raise a LoadError if at least one error was collected."""
        if self._errors:
            raise LoadError(self._errors)
