"""Exception classes for SuperSaver POS"""

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union


class PosErrorCategory(str, Enum):
    """POS error category codes"""
    CATALOG = "CATALOG"
    ITEM = "ITEM"
    PENDING = "PENDING"
    RECEIPT = "RECEIPT"
    REPORT = "REPORT"
    VALIDATION = "VAL"
    CONFIG = "CONFIG"
    UNKNOWN = "UNKNOWN"


class PosError(Exception):
    """
    Base exception for POS errors

    All errors raised by the package extend from this class.
    The category is derived from the error code prefix.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.cause = cause
        self.details = details
        self.timestamp = datetime.now()
        self.category = self._determine_category(code)

    def _determine_category(self, code: Optional[str]) -> PosErrorCategory:
        """Determine error category from code"""
        if not code:
            return PosErrorCategory.UNKNOWN

        for category in PosErrorCategory:
            if category is not PosErrorCategory.UNKNOWN and code.startswith(category.value):
                return category

        return PosErrorCategory.UNKNOWN

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary"""
        return {
            "name": self.__class__.__name__,
            "message": str(self),
            "code": self.code,
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat(),
            "details": self.details,
        }

    def has_code(self, code: str) -> bool:
        """Check if error has a specific code"""
        return self.code == code

    def is_category(self, category: PosErrorCategory) -> bool:
        """Check if error belongs to a category"""
        return self.category == category

    def get_description(self) -> str:
        """Get human-readable error description"""
        if self.code:
            return f"[{self.code}] {self}"
        return str(self)


class ValidationError(PosError):
    """Validation error"""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.field = field


class ConfigError(PosError):
    """Configuration error"""

    def __init__(
        self,
        message: str,
        code: str = "CONFIG01",
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=code, cause=cause, details=details)


class CatalogError(PosError):
    """Catalog file could not be read"""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        code: str = "CATALOG_IO_ERROR",
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, code=code, cause=cause)
        self.path = str(path) if path is not None else None


class CatalogParseError(CatalogError):
    """
    A catalog row could not be turned into an item

    Carries the 1-based line number of the offending row.
    """

    def __init__(
        self,
        message: str,
        line_no: int,
        line: str = "",
        path: Optional[Union[str, Path]] = None,
    ) -> None:
        super().__init__(message, path=path, code="CATALOG_PARSE_ERROR")
        self.line_no = line_no
        self.line = line
        self.details = {"line_no": line_no, "line": line}


class ItemNotFoundError(PosError):
    """No catalog item exists for the given code"""

    def __init__(self, item_code: str) -> None:
        super().__init__(
            f"Item not found: {item_code}",
            code="ITEM_NOT_FOUND",
            details={"item_code": item_code},
        )
        self.item_code = item_code


class PendingBillNotFoundError(PosError):
    """No pending bill is stored under the given id"""

    def __init__(self, bill_id: int) -> None:
        super().__init__(
            f"No pending bill found with ID: {bill_id}",
            code="PENDING_NOT_FOUND",
            details={"bill_id": bill_id},
        )
        self.bill_id = bill_id


class ReceiptWriteError(PosError):
    """Receipt file could not be written"""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, code="RECEIPT_WRITE_ERROR", cause=cause)
        self.path = str(path) if path is not None else None


class ReceiptFormatError(PosError):
    """A file does not follow the receipt line format"""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, code="RECEIPT_FORMAT_ERROR", cause=cause)
        self.path = str(path) if path is not None else None


class ReportWriteError(PosError):
    """Revenue report file could not be written"""

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        cause: Optional[Exception] = None,
    ) -> None:
        super().__init__(message, code="REPORT_WRITE_ERROR", cause=cause)
        self.path = str(path) if path is not None else None
