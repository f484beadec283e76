"""Configuration validation utilities."""

import logging
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationIssue:
    """Represents a configuration validation problem."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_analytics_params(params: dict[str, Any]) -> list[ValidationIssue]:
        """Validate analytics parameters."""
        errors = []

        if "vwap_window_minutes" in params:
            value = params["vwap_window_minutes"]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
                errors.append(ValidationIssue(
                    field="vwap_window_minutes",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationIssue]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or not isinstance(logging.getLevelName(value.upper()), int):
                errors.append(ValidationIssue(
                    field="level",
                    message="Must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationIssue(
                    field=flag,
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationIssue]:
        """Validate complete configuration."""
        errors = []

        if "analytics" in config:
            errors.extend(ConfigValidator.validate_analytics_params(config["analytics"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
