"""
Environment loading orchestration.

Resolves every field of a record against the environment:

1. The variable name is derived from the field name, unless the directive
   overrides it with ``name=``.
2. Ignored fields (``-``) are skipped.
3. A non-empty environment value wins, then a non-empty ``default=``.
4. Otherwise a ``required`` field records an error and any other field is
   left untouched.

Per-field errors are collected and raised together as a LoadError once all
fields have been processed. Schema errors are raised immediately.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from envload.coercion import coerce_value
from envload.config.settings import LoaderConfig
from envload.directives import Directive, parse_directive
from envload.errors import CoercionError, ErrorCollector, MissingRequiredError
from envload.naming import to_env_name
from envload.schema import FieldDescriptor, describe_fields
from envload.utils.logging import get_logger, log_context

log = get_logger(__name__)


@dataclass(frozen=True)
class FieldPlan:
    """A field together with its parsed directive and resolved variable name."""

    field: FieldDescriptor
    directive: Directive
    env_name: str


class EnvLoader:
    """
    Loads environment variables into dataclass or pydantic records.

    Example:
        @dataclass
        class Settings:
            host: str = env_field("required", default="")
            port: int = env_field("default=8080", default=0)

        settings = Settings()
        EnvLoader().load(settings)
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        config: LoaderConfig | None = None,
    ) -> None:
        """
        Initialize loader.

        Args:
            environ: Variable mapping to read from. Defaults to os.environ,
                read at load time.
            config: Loader settings. Defaults to LoaderConfig().
        """
        self._environ = environ
        self.config = config or LoaderConfig()

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def plan(self, record: Any) -> list[FieldPlan]:
        """
        Describe how each field of a record will be resolved.

        Args:
            record: Dataclass or pydantic model instance.

        Returns:
            One plan per field, in declaration order.

        Raises:
            TypeError: The record is not a writable record instance, or a
                field that is not ignored is frozen.
            SchemaError: A field has an invalid directive or unsupported type.
        """
        plans = []
        for field in describe_fields(record, self.config.metadata_key):
            directive = parse_directive(field.directive, field.name)
            if field.frozen and not directive.ignored:
                msg = f"Cannot load into frozen field {type(record).__name__}.{field.name}"
                raise TypeError(msg)
            env_name = directive.name if directive.name else to_env_name(field.name)
            plans.append(FieldPlan(field=field, directive=directive, env_name=env_name))
        return plans

    def load(self, record: Any) -> None:
        """
        Populate a record from the environment in place.

        Fields that resolve successfully are written even if other fields
        fail.

        Args:
            record: Dataclass or pydantic model instance.

        Raises:
            TypeError: The record is not a writable record instance.
            SchemaError: A field has an invalid directive or unsupported type.
            LoadError: One or more fields were missing or could not be parsed.
        """
        plans = self.plan(record)
        collector = ErrorCollector()

        with log_context(record=type(record).__name__):
            for plan in plans:
                self._resolve_field(record, plan, collector)

            log.debug("Loaded record from environment", fields=len(plans), errors=len(collector))

        collector.raise_if_any()

    def _resolve_field(self, record: Any, plan: FieldPlan, collector: ErrorCollector) -> None:
        field, directive = plan.field, plan.directive

        if directive.ignored:
            log.debug("Skipping ignored field", field=field.name)
            return

        # An empty variable counts as unset.
        raw = self.environ.get(plan.env_name) or None
        source = "environment"
        if raw is None and directive.default:
            raw = directive.default
            source = "default"

        if raw is None:
            if directive.required:
                error = MissingRequiredError(field.name, plan.env_name)
                log.warning("Missing required field", field=field.name, variable=plan.env_name)
                collector.add(error)
            else:
                log.debug("Field unset", field=field.name, variable=plan.env_name)
            return

        try:
            value = coerce_value(field.kind, raw, field.name)
        except CoercionError as e:
            log.warning(
                "Failed to parse field value",
                field=field.name,
                variable=plan.env_name,
                source=source,
                kind=field.kind.value,
            )
            collector.add(e)
            return

        try:
            setattr(record, field.name, value)
        except ValidationError as e:
            # validate_assignment models apply field constraints on write.
            reason = "; ".join(err["msg"] for err in e.errors())
            log.warning(
                "Field value rejected by model",
                field=field.name,
                variable=plan.env_name,
                source=source,
            )
            collector.add(CoercionError(field.name, raw, field.kind, reason))
            return

        log.debug("Resolved field", field=field.name, variable=plan.env_name, source=source)


def load(record: Any, environ: Mapping[str, str] | None = None) -> None:
    """
    Populate a record from the environment using default settings.

    See EnvLoader.load.
    """
    EnvLoader(environ=environ).load(record)
