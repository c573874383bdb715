"""
SuperSaver POS

Single-terminal point-of-sale: item catalog, interactive billing,
pending bills, receipt files and revenue reports
"""

from supersaver_pos.exceptions import (
    PosError,
    PosErrorCategory,
    ValidationError,
    ConfigError,
    CatalogError,
    CatalogParseError,
    ItemNotFoundError,
    PendingBillNotFoundError,
    ReceiptWriteError,
    ReceiptFormatError,
    ReportWriteError,
)

# Configuration
from supersaver_pos.config import (
    PosConfig,
    DiscountPolicy,
    MalformedRowPolicy,
    ConfigLoader,
    ConfigValidator,
    ENV_VAR_MAPPING,
    ConfigDefaults,
)

# Models
from supersaver_pos.models import (
    Item,
    Bill,
    RevenueSummary,
    SkippedReceipt,
)

# Catalog
from supersaver_pos.catalog import (
    Catalog,
    CatalogLoader,
    CatalogLoadResult,
)

# Receipts
from supersaver_pos.receipts import (
    RECEIPT_FORMAT_VERSION,
    RevenueAggregator,
)

# Session
from supersaver_pos.services import (
    PosSession,
    PendingBillSummary,
)

__version__ = "1.1.0"

__all__ = [
    # Exceptions
    "PosError",
    "PosErrorCategory",
    "ValidationError",
    "ConfigError",
    "CatalogError",
    "CatalogParseError",
    "ItemNotFoundError",
    "PendingBillNotFoundError",
    "ReceiptWriteError",
    "ReceiptFormatError",
    "ReportWriteError",
    # Configuration
    "PosConfig",
    "DiscountPolicy",
    "MalformedRowPolicy",
    "ConfigLoader",
    "ConfigValidator",
    "ENV_VAR_MAPPING",
    "ConfigDefaults",
    # Models
    "Item",
    "Bill",
    "RevenueSummary",
    "SkippedReceipt",
    # Catalog
    "Catalog",
    "CatalogLoader",
    "CatalogLoadResult",
    # Receipts
    "RECEIPT_FORMAT_VERSION",
    "RevenueAggregator",
    # Session
    "PosSession",
    "PendingBillSummary",
]
