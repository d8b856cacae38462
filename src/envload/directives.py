"""
Field directive parsing.

A directive is a semicolon-separated list of properties attached to a field:

    -                      the field is ignored
    required               a value must be present in the environment
    name=<variable>        look up <variable> instead of the derived name
    default=<value>        used when the variable is unset or empty

Example: ``"name=PUFF;default=19"``.
"""

from pydantic import BaseModel, ConfigDict, Field

from envload.errors import MalformedPropertyError, UnknownPropertyError

PROPERTY_SEPARATOR = ";"
KEY_VALUE_SEPARATOR = "="

IGNORE_FLAG = "-"
REQUIRED_FLAG = "required"


class Directive(BaseModel):
    """Parsed behaviour flags for one field."""

    model_config = ConfigDict(frozen=True)

    name: str | None = Field(default=None, description="Override for the variable name")
    default: str | None = Field(default=None, description="Raw default value")
    required: bool = Field(default=False, description="Record an error when no value is found")
    ignored: bool = Field(default=False, description="Skip the field entirely")


def parse_directive(raw: str, field_name: str | None = None) -> Directive:
    """
    Parse a directive string.

    Unknown bare flags are ignored so newer directives stay readable by
    older versions; unknown keys are not.

    Args:
        raw: Directive string, possibly empty.
        field_name: Field the directive belongs to, used in error messages.

    Returns:
        Parsed Directive.

    Raises:
        UnknownPropertyError: A key other than name or default was used.
        MalformedPropertyError: A property contains more than one '='.
    """
    if not raw:
        return Directive()

    values: dict[str, str | bool] = {}
    for prop in raw.split(PROPERTY_SEPARATOR):
        parts = prop.split(KEY_VALUE_SEPARATOR)
        if len(parts) == 1:
            if prop == IGNORE_FLAG:
                values["ignored"] = True
            elif prop == REQUIRED_FLAG:
                values["required"] = True
        elif len(parts) == 2:
            key, value = parts
            if key not in ("name", "default"):
                raise UnknownPropertyError(key, raw, field_name)
            values[key] = value
        else:
            raise MalformedPropertyError(prop, raw, field_name)

    return Directive(**values)
