"""Configuration validation utilities."""

import logging
from dataclasses import dataclass
from typing import Any

PLAN_INT_FIELDS = ("base_price_cents", "price_per_additional_cents", "base_quantity")
REQUIRED_PLAN_FIELDS = ("base_price_cents", "base_quantity")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_non_negative_int(value: Any) -> bool:
    # bool is an int subclass but never a valid count or price
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


class ConfigValidator:
    """Validates configuration parameters and plan catalog entries."""

    @staticmethod
    def validate_pricing_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate pricing parameters."""
        errors = []

        if "default_price_per_additional_cents" in params:
            value = params["default_price_per_additional_cents"]
            if not _is_non_negative_int(value):
                errors.append(ValidationError(
                    field="default_price_per_additional_cents",
                    message="Must be a non-negative integer number of cents",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or not isinstance(
                    logging.getLevelName(value.upper()), int):
                errors.append(ValidationError(
                    field="level",
                    message="Must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_plan_entry(name: str, entry: Any) -> list[ValidationError]:
        """Validate a single plan catalog entry."""
        if not isinstance(entry, dict):
            return [ValidationError(
                field=name,
                message="Plan definition must be a mapping",
                value=entry
            )]

        errors = []

        for field_name in REQUIRED_PLAN_FIELDS:
            if field_name not in entry:
                errors.append(ValidationError(
                    field=f"{name}.{field_name}",
                    message="Required field is missing",
                    value=None
                ))

        for field_name in PLAN_INT_FIELDS:
            if field_name in entry and not _is_non_negative_int(entry[field_name]):
                errors.append(ValidationError(
                    field=f"{name}.{field_name}",
                    message="Must be a non-negative integer",
                    value=entry[field_name]
                ))

        return errors

    @staticmethod
    def validate_catalog(entries: dict[str, Any]) -> list[ValidationError]:
        """Validate every plan in the catalog."""
        errors = []
        for name, entry in entries.items():
            errors.extend(ConfigValidator.validate_plan_entry(name, entry))
        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "pricing" in config:
            errors.extend(ConfigValidator.validate_pricing_params(config["pricing"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        return errors
