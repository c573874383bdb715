"""
Revenue aggregation over finalized receipts
Scans receipt files in a directory and sums totals within a date range
"""

import logging
from datetime import date
from pathlib import Path
from typing import Iterator, Optional, Tuple, Union

from supersaver_pos.config.pos_config import ConfigDefaults, PosConfig
from supersaver_pos.exceptions import (
    ReceiptFormatError,
    ReportWriteError,
    ValidationError,
)
from supersaver_pos.models.revenue import RevenueSummary, SkippedReceipt
from supersaver_pos.receipts.receipt_format import (
    RECEIPT_SUFFIX,
    is_receipt_header,
    parse_receipt_date,
    parse_receipt_total,
    render_report,
    report_file_name,
)
from supersaver_pos.receipts.receipt_writer import write_text_atomic


logger = logging.getLogger(__name__)


class RevenueAggregator:
    """
    Revenue aggregator

    Each receipt file is handled in isolation: a file that cannot be read
    or parsed is recorded as skipped and the scan carries on.

    Example:
        >>> aggregator = RevenueAggregator("./receipts")
        >>> summary, path = aggregator.generate_report(date(2025, 3, 1), date(2025, 3, 31))
        >>> print(summary.total_revenue)
    """

    def __init__(
        self,
        receipts_dir: Union[str, Path] = ConfigDefaults.RECEIPTS_DIR,
        receipt_prefix: str = ConfigDefaults.RECEIPT_PREFIX,
        report_prefix: str = ConfigDefaults.REPORT_PREFIX,
        store_name: str = ConfigDefaults.STORE_NAME,
        currency_marker: str = ConfigDefaults.CURRENCY_MARKER,
    ) -> None:
        self.receipts_dir = Path(receipts_dir)
        self.receipt_prefix = receipt_prefix
        self.report_prefix = report_prefix
        self.store_name = store_name
        self.currency_marker = currency_marker

    @classmethod
    def from_config(cls, config: PosConfig) -> "RevenueAggregator":
        return cls(
            receipts_dir=config.receipts_dir,
            receipt_prefix=config.receipt_prefix,
            report_prefix=config.report_prefix,
            store_name=config.store_name,
            currency_marker=config.currency_marker,
        )

    def receipt_files(self) -> Iterator[Path]:
        """Yield receipt-named files in the receipts directory, sorted by name"""
        if not self.receipts_dir.is_dir():
            logger.warning("Receipts directory not found: %s", self.receipts_dir)
            return
        pattern = f"{self.receipt_prefix}*{RECEIPT_SUFFIX}"
        for path in sorted(self.receipts_dir.glob(pattern)):
            if path.is_file():
                yield path

    def read_receipt(self, path: Path, start_date: date, end_date: date) -> Optional[float]:
        """
        Read one receipt file

        Args:
            path: Receipt file
            start_date: First day of the range (inclusive)
            end_date: Last day of the range (inclusive)

        Returns:
            The receipt total if its date falls in range, otherwise None

        Raises:
            ReceiptFormatError: If the file is unreadable or not a receipt
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                first_line = f.readline()
                if not is_receipt_header(first_line):
                    raise ReceiptFormatError("first line is not a receipt header", path=path)

                receipt_date = parse_receipt_date(f.readline().rstrip("\n"))
                if receipt_date < start_date or receipt_date > end_date:
                    return None

                last_line = ""
                for line in f:
                    if line.strip():
                        last_line = line.rstrip("\n")
                return parse_receipt_total(last_line, self.currency_marker)
        except ReceiptFormatError:
            raise
        except (OSError, UnicodeDecodeError, ValueError) as e:
            raise ReceiptFormatError(str(e), path=path, cause=e) from e

    def aggregate(self, start_date: date, end_date: date) -> RevenueSummary:
        """
        Sum receipt totals dated within [start_date, end_date]

        Raises:
            ValidationError: If start_date is after end_date
        """
        if start_date > end_date:
            raise ValidationError(
                f"Start date {start_date} is after end date {end_date}",
                field="start_date",
            )

        summary = RevenueSummary(start_date=start_date, end_date=end_date)

        for path in self.receipt_files():
            try:
                total = self.read_receipt(path, start_date, end_date)
            except ReceiptFormatError as e:
                logger.warning("Skipping receipt file %s: %s", path.name, e)
                summary.skipped.append(SkippedReceipt(file_name=path.name, reason=str(e)))
                continue

            if total is not None:
                summary.total_revenue += total
                summary.included.append(path.name)

        logger.info(
            "Aggregated %d receipt(s) from %s to %s: %.2f (%d skipped)",
            summary.receipt_count,
            start_date,
            end_date,
            summary.total_revenue,
            len(summary.skipped),
        )
        return summary

    def report_path(self, start_date: date, end_date: date) -> Path:
        return self.receipts_dir / report_file_name(start_date, end_date, self.report_prefix)

    def write_report(self, summary: RevenueSummary) -> Path:
        """
        Write a revenue report file, replacing any existing one

        Raises:
            ReportWriteError: If the file cannot be written
        """
        content = render_report(
            summary.start_date,
            summary.end_date,
            summary.total_revenue,
            store_name=self.store_name,
            currency_marker=self.currency_marker,
        )
        return write_text_atomic(
            self.report_path(summary.start_date, summary.end_date),
            content,
            error_cls=ReportWriteError,
        )

    def generate_report(self, start_date: date, end_date: date) -> Tuple[RevenueSummary, Path]:
        """Aggregate and write the report in one step"""
        summary = self.aggregate(start_date, end_date)
        return summary, self.write_report(summary)
