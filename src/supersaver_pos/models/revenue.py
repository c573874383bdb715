"""Revenue aggregation models"""

from datetime import date
from typing import List

from pydantic import BaseModel, Field


class SkippedReceipt(BaseModel):
    """A receipt-named file left out of aggregation"""

    file_name: str = Field(..., description="Name of the skipped file")
    reason: str = Field(..., description="Why the file was skipped")


class RevenueSummary(BaseModel):
    """Result of aggregating receipts over a date range"""

    start_date: date = Field(..., description="First day of the range (inclusive)")
    end_date: date = Field(..., description="Last day of the range (inclusive)")
    total_revenue: float = Field(0.0, description="Sum of included receipt totals")
    included: List[str] = Field(default_factory=list, description="Receipt files counted")
    skipped: List[SkippedReceipt] = Field(default_factory=list, description="Files that failed to parse")

    @property
    def receipt_count(self) -> int:
        return len(self.included)
