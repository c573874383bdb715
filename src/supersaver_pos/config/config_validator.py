"""
Configuration Validator
Validates POS configuration with clear error messages
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from supersaver_pos.config.pos_config import (
    LOG_LEVELS,
    DiscountPolicy,
    MalformedRowPolicy,
)


@dataclass
class ValidationErrorDetail:
    """Validation error detail"""
    field: str
    message: str
    value: Optional[Any] = None


@dataclass
class ValidationResult:
    """Validation result"""
    valid: bool
    errors: List[ValidationErrorDetail] = field(default_factory=list)


class ConfigValidator:
    """
    ConfigValidator class
    Provides validation for POS configuration dictionaries
    """

    def __init__(self) -> None:
        self._errors: List[ValidationErrorDetail] = []

    def validate(self, config: Dict[str, Any]) -> ValidationResult:
        """
        Validate the entire configuration dictionary

        Args:
            config: Configuration dictionary to validate

        Returns:
            ValidationResult with any errors
        """
        self._errors = []

        self._validate_non_empty(config)
        self._validate_prefixes(config)
        self._validate_ranges(config)
        self._validate_policies(config)
        self._validate_log_level(config)

        return ValidationResult(
            valid=len(self._errors) == 0,
            errors=self._errors.copy()
        )

    def validate_or_raise(self, config: Dict[str, Any]) -> None:
        """
        Validate and raise if invalid

        Args:
            config: Configuration dictionary to validate

        Raises:
            ValidationError: If configuration is invalid
        """
        from supersaver_pos.exceptions import ValidationError

        result = self.validate(config)
        if not result.valid:
            error_messages = "; ".join(
                f"{e.field}: {e.message}" for e in result.errors
            )
            raise ValidationError(f"Configuration validation failed: {error_messages}")

    def _validate_non_empty(self, config: Dict[str, Any]) -> None:
        """Validate string fields that may be given are not blank"""
        string_fields = [
            "catalog_path",
            "receipts_dir",
            "store_name",
            "currency_marker",
            "receipt_prefix",
            "report_prefix",
        ]

        for field_name in string_fields:
            value = config.get(field_name)
            if value is None:
                continue
            if not isinstance(value, str):
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} must be a string",
                    value=value
                ))
            elif value.strip() == "":
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} cannot be empty",
                    value=value
                ))

    def _validate_prefixes(self, config: Dict[str, Any]) -> None:
        """Validate file name prefixes"""
        for field_name in ("receipt_prefix", "report_prefix"):
            value = config.get(field_name)
            if isinstance(value, str) and ("/" in value or "\\" in value):
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} must not contain path separators",
                    value=value
                ))

        receipt_prefix = config.get("receipt_prefix")
        report_prefix = config.get("report_prefix")
        if (
            isinstance(receipt_prefix, str)
            and isinstance(report_prefix, str)
            and receipt_prefix
            and report_prefix.startswith(receipt_prefix)
        ):
            self._errors.append(ValidationErrorDetail(
                field="report_prefix",
                message="report_prefix must not start with receipt_prefix",
                value=report_prefix
            ))

    def _validate_ranges(self, config: Dict[str, Any]) -> None:
        """Validate numeric ranges"""
        pending_id_start = config.get("pending_id_start")
        if pending_id_start is not None:
            if (
                isinstance(pending_id_start, bool)
                or not isinstance(pending_id_start, int)
                or pending_id_start < 1
            ):
                self._errors.append(ValidationErrorDetail(
                    field="pending_id_start",
                    message="pending_id_start must be a positive integer",
                    value=pending_id_start
                ))

        max_discount = config.get("max_discount")
        if max_discount is not None:
            if isinstance(max_discount, bool) or not isinstance(max_discount, (int, float)):
                self._errors.append(ValidationErrorDetail(
                    field="max_discount",
                    message="max_discount must be a number (percent)",
                    value=max_discount
                ))
            elif max_discount < 0 or max_discount > 100:
                self._errors.append(ValidationErrorDetail(
                    field="max_discount",
                    message="max_discount must be between 0 and 100",
                    value=max_discount
                ))

    def _validate_policies(self, config: Dict[str, Any]) -> None:
        """Validate policy enum values"""
        checks = (
            ("discount_policy", DiscountPolicy),
            ("malformed_row_policy", MalformedRowPolicy),
        )
        for field_name, enum_cls in checks:
            value = config.get(field_name)
            if value is None:
                continue
            valid_values = [e.value for e in enum_cls]
            raw = value.value if isinstance(value, enum_cls) else value
            if raw not in valid_values:
                self._errors.append(ValidationErrorDetail(
                    field=field_name,
                    message=f"{field_name} must be one of: {', '.join(valid_values)}",
                    value=value
                ))

    def _validate_log_level(self, config: Dict[str, Any]) -> None:
        """Validate logging level name"""
        log_level = config.get("log_level")
        if log_level is not None:
            if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
                self._errors.append(ValidationErrorDetail(
                    field="log_level",
                    message=f"log_level must be one of: {', '.join(LOG_LEVELS)}",
                    value=log_level
                ))
