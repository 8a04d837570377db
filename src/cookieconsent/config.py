"""Application configuration for cookieconsent.

ConsentConfig is the single, immutable configuration object of a site. It is
built once at startup (from code or a JSON file) and passed to whichever
layer needs it; per-request policies are derived from it.

Example config file:

    {
        "compliance_type": "opt-in",
        "extra_categories": {
            "newsletter": {"label": "Newsletter", "hint": "Signup tracking."}
        },
        "disabled_categories": ["behavior"],
        "logging": {"log_level": "INFO"}
    }

Example usage:
    config = ConsentConfig.load_from_file(config_path)
    policy = config.build_policy(cookies=request.cookies)
"""

from __future__ import annotations

__all__ = [
    "ConsentConfig",
    "LoggingConfig",
]

import json
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Literal, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    ValidationError,
    field_serializer,
    field_validator,
    model_validator,
)

from cookieconsent.engine.categories import CategoryDefinition, CategoryRegistry
from cookieconsent.engine.policy import ConsentPolicy
from cookieconsent.engine.sources import (
    CookieSource,
    OverrideSource,
    RequestContextPredicate,
    StatusSource,
    always_live,
)
from cookieconsent.engine.status import ComplianceType, ConsentStatus
from cookieconsent.exceptions import ConfigError
from cookieconsent.telemetry.decision_logger import DecisionEventLogger, create_decision_logger
from cookieconsent.telemetry.system_logger import configure_system_logger_file, get_system_logger
from cookieconsent.utils.file_helpers import (
    format_validation_error,
    load_validated_json,
    require_file_exists,
)


class LoggingConfig(BaseModel):
    """Logging configuration settings.

    Attributes:
        log_level: Minimum level of the system logger on stderr.
        system_log_file: JSONL file receiving system warnings and errors.
        decision_log_file: JSONL file receiving every consent decision.
            Decision logging is off when unset.
    """

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    system_log_file: str | None = Field(default=None, min_length=1)
    decision_log_file: str | None = Field(default=None, min_length=1)

    model_config = ConfigDict(frozen=True, extra="forbid")

    def configure(self) -> DecisionEventLogger | None:
        """Apply the settings to the package loggers.

        Returns:
            A DecisionEventLogger if decision_log_file is set, else None.
        """
        system_logger = get_system_logger()
        system_logger.setLevel(self.log_level)

        if self.system_log_file:
            configure_system_logger_file(Path(self.system_log_file).expanduser())

        if self.decision_log_file:
            return DecisionEventLogger(create_decision_logger(Path(self.decision_log_file).expanduser()))
        return None


def _invalid_config(error: ValidationError) -> ConfigError:
    return ConfigError("Invalid consent configuration:\n" + "\n".join(format_validation_error(error)))


class ConsentConfig(BaseModel):
    """Site-wide consent configuration.

    Constructing the model directly raises ConfigError for invalid settings.
    Collections are stored read-only (tuples and a mapping proxy), so the
    registry built at validation time always matches the fields.

    Attributes:
        compliance_type: info, opt-in or opt-out.
        extra_categories: Custom categories, either identifiers or a
            mapping of identifier to {label, hint}.
        disabled_categories: Categories hidden from the settings form.
            session and usagehelper are ignored here.
        logging: Logging settings.
    """

    compliance_type: ComplianceType
    extra_categories: tuple[str, ...] | Mapping[str, CategoryDefinition | None] = ()
    disabled_categories: tuple[str, ...] = ()
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(frozen=True, extra="forbid")

    _registry: CategoryRegistry = PrivateAttr()

    def __init__(self, /, **data: Any) -> None:
        """Validate settings.

        Raises:
            ConfigError: If any setting is invalid.
        """
        try:
            super().__init__(**data)
        except ValidationError as e:
            raise _invalid_config(e) from e

    @field_validator("extra_categories", mode="before")
    @classmethod
    def reject_id_fields(cls, v: Any) -> Any:
        """Reject "id" inside definitions; the mapping key is the identifier."""
        if isinstance(v, Mapping):
            for identifier, payload in v.items():
                if isinstance(payload, Mapping) and "id" in payload:
                    raise ValueError(
                        f'Do not set "id" for extra category items (found in "{identifier}").'
                    )
        return v

    @field_validator("extra_categories", mode="after")
    @classmethod
    def freeze_definitions(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return MappingProxyType(dict(v))
        return v

    @field_serializer("extra_categories")
    def serialize_extra_categories(self, v: Any) -> list[str] | dict[str, Any]:
        """Dump as the JSON shapes accepted on load (list or object)."""
        if isinstance(v, Mapping):
            return {k: d.model_dump() if d is not None else None for k, d in v.items()}
        return list(v)

    @model_validator(mode="after")
    def build_category_registry(self) -> Self:
        """Normalize categories once so invalid identifiers fail at load time."""
        try:
            self._registry = CategoryRegistry(self.extra_categories, self.disabled_categories)
        except ConfigError as e:
            raise ValueError(e.message) from e
        return self

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ConsentConfig:
        """Validate a configuration mapping.

        Raises:
            ConfigError: If any setting is invalid.
        """
        try:
            return cls.model_validate(dict(data))
        except ValidationError as e:
            raise _invalid_config(e) from e

    @classmethod
    def load_from_file(cls, config_path: Path) -> ConsentConfig:
        """Load configuration from JSON file.

        Raises:
            FileNotFoundError: If config file doesn't exist.
            ConfigError: If config file is invalid.
        """
        require_file_exists(config_path, file_type="configuration")
        return load_validated_json(config_path, cls, file_type="config")

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to JSON file, creating parent directories."""
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        """Copy the configuration, validating updates and rebuilding the registry.

        Raises:
            ConfigError: If an updated setting is invalid.
        """
        if not update:
            return super().model_copy(deep=deep)
        return type(self)(**{**self.model_dump(), **update})

    @property
    def registry(self) -> CategoryRegistry:
        """Registry built from extra and disabled categories."""
        return self._registry

    def build_policy(
        self,
        *,
        cookies: Mapping[str, Any] | None = None,
        status: ConsentStatus | str | None = None,
        status_source: StatusSource | None = None,
        override_source: OverrideSource | None = None,
        request_context: RequestContextPredicate = always_live,
        decision_logger: DecisionEventLogger | None = None,
    ) -> ConsentPolicy:
        """Build a policy for one visitor.

        Args:
            cookies: Parsed request cookies, used when no explicit sources are given.
            status: Explicit consent status, overrides the status cookie.
            status_source: Custom status source.
            override_source: Custom per-category override source.
            request_context: Live-request predicate.
            decision_logger: Optional decision event logger.

        Raises:
            ConfigError: If status is invalid.
        """
        if status_source is None:
            status_source = CookieSource(cookies)
        return ConsentPolicy(
            self.compliance_type,
            status=status,
            registry=self._registry,
            status_source=status_source,
            override_source=override_source,
            request_context=request_context,
            decision_logger=decision_logger,
        )
