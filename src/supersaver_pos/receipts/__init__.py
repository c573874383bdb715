"""
Receipts module
"""

from supersaver_pos.receipts.receipt_format import (
    RECEIPT_FORMAT_VERSION,
    RECEIPT_MARKER,
    render_receipt,
    render_report,
    receipt_file_name,
    report_file_name,
    parse_receipt_date,
    parse_receipt_total,
)
from supersaver_pos.receipts.receipt_writer import write_text_atomic
from supersaver_pos.receipts.revenue_aggregator import RevenueAggregator

__all__ = [
    "RECEIPT_FORMAT_VERSION",
    "RECEIPT_MARKER",
    "render_receipt",
    "render_report",
    "receipt_file_name",
    "report_file_name",
    "parse_receipt_date",
    "parse_receipt_total",
    "write_text_atomic",
    "RevenueAggregator",
]
