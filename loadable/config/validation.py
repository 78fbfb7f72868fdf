"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import CellParams, LoggingParams

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in VALID_LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(VALID_LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp", "include_caller"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=f"logging.{flag}",
                    message="Must be a boolean",
                    value=params[flag]
                ))

        errors.extend(_unknown_keys("logging", params, LoggingParams))

        return errors

    @staticmethod
    def validate_cell_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate cell parameters."""
        errors = []

        for flag in ("raise_on_stale", "log_transitions"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=f"cell.{flag}",
                    message="Must be a boolean",
                    value=params[flag]
                ))

        errors.extend(_unknown_keys("cell", params, CellParams))

        return errors

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate a complete merged configuration."""
        errors = []

        for section in ("logging", "cell"):
            if section in config and not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))

        if isinstance(config.get("logging"), dict):
            errors.extend(cls.validate_logging_params(config["logging"]))
        if isinstance(config.get("cell"), dict):
            errors.extend(cls.validate_cell_params(config["cell"]))

        return errors


def _unknown_keys(section: str, params: dict[str, Any], params_class: type) -> list[ValidationError]:
    """Report keys that name no field of ``params_class``."""
    known = {f.name for f in fields(params_class)}
    return [
        ValidationError(
            field=f"{section}.{key}",
            message=f"Unknown key; expected one of {', '.join(sorted(known))}",
            value=params[key]
        )
        for key in params
        if key not in known
    ]
