"""
Configuration module
"""

from supersaver_pos.config.pos_config import (
    PosConfig,
    DiscountPolicy,
    MalformedRowPolicy,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)
from supersaver_pos.config.config_loader import ConfigLoader
from supersaver_pos.config.config_validator import (
    ConfigValidator,
    ValidationResult,
    ValidationErrorDetail,
)

__all__ = [
    "PosConfig",
    "DiscountPolicy",
    "MalformedRowPolicy",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    "ConfigLoader",
    "ConfigValidator",
    "ValidationResult",
    "ValidationErrorDetail",
]
