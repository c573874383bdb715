"""
SuperSaver POS Configuration Types and Schema
Type-safe configuration objects for the POS terminal
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, field_validator, model_validator


class DiscountPolicy(str, Enum):
    """How catalog discounts above the business cap are handled"""
    REJECT = "reject"
    CLAMP = "clamp"


class MalformedRowPolicy(str, Enum):
    """How malformed catalog rows are handled"""
    SKIP = "skip"
    ABORT = "abort"


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigDefaults:
    """Default configuration values"""
    CATALOG_PATH = "items.csv"
    RECEIPTS_DIR = "."
    STORE_NAME = "Super-Saving Supermarket"
    CURRENCY_MARKER = "Rs."
    RECEIPT_PREFIX = "Bill_"
    REPORT_PREFIX = "Revenue_Report_"
    PENDING_ID_START = 1001
    DISCOUNT_POLICY = DiscountPolicy.REJECT
    MAX_DISCOUNT = 75.0
    MALFORMED_ROW_POLICY = MalformedRowPolicy.SKIP
    LOG_LEVEL = "WARNING"


# Environment variable mapping
ENV_VAR_MAPPING = {
    "POS_CATALOG_PATH": "catalog_path",
    "POS_RECEIPTS_DIR": "receipts_dir",
    "POS_STORE_NAME": "store_name",
    "POS_CURRENCY_MARKER": "currency_marker",
    "POS_RECEIPT_PREFIX": "receipt_prefix",
    "POS_REPORT_PREFIX": "report_prefix",
    "POS_PENDING_ID_START": "pending_id_start",
    "POS_DISCOUNT_POLICY": "discount_policy",
    "POS_MAX_DISCOUNT": "max_discount",
    "POS_MALFORMED_ROW_POLICY": "malformed_row_policy",
    "POS_LOG_LEVEL": "log_level",
    "POS_LOG_FILE": "log_file",
}


class PosConfig(BaseModel):
    """
    Main POS Configuration class
    Defines all configuration options for a POS terminal
    """

    # Files
    catalog_path: str = Field(
        default=ConfigDefaults.CATALOG_PATH,
        description="Path to the comma-separated item catalog",
        min_length=1
    )
    receipts_dir: str = Field(
        default=ConfigDefaults.RECEIPTS_DIR,
        description="Directory receipts and revenue reports are written to",
        min_length=1
    )

    # Receipt layout
    store_name: str = Field(
        default=ConfigDefaults.STORE_NAME,
        description="Store name printed in receipt and report headers",
        min_length=1
    )
    currency_marker: str = Field(
        default=ConfigDefaults.CURRENCY_MARKER,
        description="Currency marker preceding every amount",
        min_length=1
    )
    receipt_prefix: str = Field(
        default=ConfigDefaults.RECEIPT_PREFIX,
        description="File name prefix of finalized receipts",
        min_length=1
    )
    report_prefix: str = Field(
        default=ConfigDefaults.REPORT_PREFIX,
        description="File name prefix of revenue reports",
        min_length=1
    )

    # Pending bills
    pending_id_start: int = Field(
        default=ConfigDefaults.PENDING_ID_START,
        description="First id handed out to a pending bill",
        ge=1
    )

    # Catalog rules
    discount_policy: DiscountPolicy = Field(
        default=ConfigDefaults.DISCOUNT_POLICY,
        description="'reject' or 'clamp' discounts outside 0..max_discount"
    )
    max_discount: float = Field(
        default=ConfigDefaults.MAX_DISCOUNT,
        description="Business cap on catalog discount percentages",
        ge=0,
        le=100
    )
    malformed_row_policy: MalformedRowPolicy = Field(
        default=ConfigDefaults.MALFORMED_ROW_POLICY,
        description="'skip' malformed catalog rows with a warning or 'abort' loading"
    )

    # Logging
    log_level: str = Field(
        default=ConfigDefaults.LOG_LEVEL,
        description="Logging level for diagnostics"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional file diagnostics are also written to"
    )

    model_config = {
        "str_strip_whitespace": True,
        "validate_assignment": True,
    }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log_level is a standard logging level name"""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("receipt_prefix", "report_prefix")
    @classmethod
    def validate_prefix(cls, v: str) -> str:
        """Validate file name prefixes contain no path separators"""
        if "/" in v or "\\" in v:
            raise ValueError("file name prefixes must not contain path separators")
        return v

    @model_validator(mode="after")
    def validate_report_prefix_distinct(self) -> "PosConfig":
        """Reports must not match the receipt file pattern"""
        if self.report_prefix.startswith(self.receipt_prefix):
            raise ValueError("report_prefix must not start with receipt_prefix")
        return self
