"""
Field introspection for configuration records.

Records are instances of dataclasses or pydantic models. Each field may carry
a directive string under a metadata key (``"env"`` by default):

    @dataclass
    class Settings:
        port: int = env_field("default=8080")
        api_key: str = env_field("name=SERVICE_API_KEY;required", default="")

    class Settings(BaseModel):
        port: int = Field(default=0, json_schema_extra={"env": "default=8080"})
"""

import dataclasses
from dataclasses import dataclass
from typing import Any, get_type_hints

from pydantic import BaseModel

from envload.coercion import ScalarKind, scalar_kind_for


@dataclass(frozen=True)
class FieldDescriptor:
    """One configurable slot of a record."""

    name: str
    annotation: Any
    kind: ScalarKind
    directive: str
    frozen: bool = False


def env_field(directive: str = "", *, metadata_key: str = "env", **kwargs: Any) -> Any:
    """
    Declare a dataclass field carrying a directive.

    Args:
        directive: Directive string, e.g. ``"required"`` or ``"name=PORT;default=80"``.
        metadata_key: Metadata key the loader reads the directive from.
        **kwargs: Passed on to ``dataclasses.field`` (default, default_factory, ...).

    Returns:
        A dataclass field definition.
    """
    metadata = {**(kwargs.pop("metadata", None) or {}), metadata_key: directive}
    return dataclasses.field(metadata=metadata, **kwargs)


def _is_dataclass_instance(record: Any) -> bool:
    return dataclasses.is_dataclass(record) and not isinstance(record, type)


def ensure_writable_record(record: Any) -> None:
    """
    Check that a record can be loaded into.

    Raises:
        TypeError: The value is a class, not a dataclass/pydantic instance,
            or a frozen record.
    """
    if isinstance(record, type):
        msg = f"Expected a record instance, got the class {record.__name__}"
        raise TypeError(msg)
    if _is_dataclass_instance(record):
        if type(record).__dataclass_params__.frozen:  # type: ignore[attr-defined]
            msg = f"Cannot load into frozen dataclass {type(record).__name__}"
            raise TypeError(msg)
        return
    if isinstance(record, BaseModel):
        if record.model_config.get("frozen"):
            msg = f"Cannot load into frozen model {type(record).__name__}"
            raise TypeError(msg)
        return
    msg = f"Expected a dataclass or pydantic model instance, got {type(record).__name__}"
    raise TypeError(msg)


def _dataclass_fields(record: Any, metadata_key: str) -> list[FieldDescriptor]:
    hints = get_type_hints(type(record))
    descriptors = []
    for f in dataclasses.fields(record):
        annotation = hints.get(f.name, f.type)
        descriptors.append(
            FieldDescriptor(
                name=f.name,
                annotation=annotation,
                kind=scalar_kind_for(annotation, f.name),
                directive=str(f.metadata.get(metadata_key, "")),
            )
        )
    return descriptors


def _model_fields(record: BaseModel, metadata_key: str) -> list[FieldDescriptor]:
    descriptors = []
    for name, info in type(record).model_fields.items():
        extra = info.json_schema_extra
        # Callable json_schema_extra cannot carry a directive.
        directive = extra.get(metadata_key, "") if isinstance(extra, dict) else ""
        descriptors.append(
            FieldDescriptor(
                name=name,
                annotation=info.annotation,
                kind=scalar_kind_for(info.annotation, name),
                directive=str(directive),
                frozen=bool(info.frozen),
            )
        )
    return descriptors


def describe_fields(record: Any, metadata_key: str = "env") -> list[FieldDescriptor]:
    """
    List the fields of a record in declaration order.

    Args:
        record: Dataclass or pydantic model instance.
        metadata_key: Key holding the directive string.

    Returns:
        One descriptor per field.

    Raises:
        TypeError: The record is not a writable dataclass/pydantic instance.
        UnsupportedTypeError: A field has a type that cannot be loaded.
    """
    ensure_writable_record(record)
    if isinstance(record, BaseModel):
        return _model_fields(record, metadata_key)
    return _dataclass_fields(record, metadata_key)
