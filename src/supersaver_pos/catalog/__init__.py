"""
Catalog module
"""

from supersaver_pos.catalog.catalog import Catalog
from supersaver_pos.catalog.catalog_loader import (
    CatalogLoader,
    CatalogLoadResult,
    RejectedRow,
    CATALOG_FIELDS,
)

__all__ = [
    "Catalog",
    "CatalogLoader",
    "CatalogLoadResult",
    "RejectedRow",
    "CATALOG_FIELDS",
]
