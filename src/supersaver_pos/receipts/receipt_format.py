"""
Receipt and revenue report line format

Receipts are read back by the revenue aggregator, so the layout is a
versioned contract: line 1 carries RECEIPT_MARKER, line 2 the date and
time, and the last non-empty line the total after the currency marker.
Bump RECEIPT_FORMAT_VERSION whenever the layout changes.
"""

import math
from datetime import date
from typing import TYPE_CHECKING, List

from supersaver_pos.config.pos_config import ConfigDefaults

if TYPE_CHECKING:
    from supersaver_pos.models.bill import Bill


RECEIPT_FORMAT_VERSION = 1

RECEIPT_MARKER = "Bill Receipt"
REPORT_MARKER = "Revenue Report"
RECEIPT_SUFFIX = ".txt"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
SEPARATOR = "-" * 52


def receipt_header(store_name: str = ConfigDefaults.STORE_NAME) -> str:
    return f"{store_name} - {RECEIPT_MARKER}"


def report_header(store_name: str = ConfigDefaults.STORE_NAME) -> str:
    return f"{store_name} - {REPORT_MARKER}"


def format_amount(amount: float, currency_marker: str = ConfigDefaults.CURRENCY_MARKER) -> str:
    """Format an amount to two decimal places behind the currency marker"""
    return f"{currency_marker}{amount:.2f}"


def render_receipt(
    bill: "Bill",
    store_name: str = ConfigDefaults.STORE_NAME,
    currency_marker: str = ConfigDefaults.CURRENCY_MARKER,
) -> str:
    """
    Render a bill as receipt text

    Args:
        bill: Bill to render
        store_name: Store name for the header line
        currency_marker: Currency marker preceding amounts

    Returns:
        Receipt text terminated by a newline
    """
    lines: List[str] = [
        receipt_header(store_name),
        f"Date & Time: {bill.created_at.strftime(DATETIME_FORMAT)}",
        f"Cashier: {bill.cashier_name}, Branch: {bill.branch}, Customer: {bill.customer_name}",
        "",
        "Item Details:",
        SEPARATOR,
    ]
    for item in bill.items:
        lines.append(
            f"{item.item_name} - {format_amount(item.price, currency_marker)} "
            f"(Discounted: {format_amount(item.discounted_price, currency_marker)})"
        )
    lines.append("")
    lines.append(f"Total Cost: {format_amount(bill.get_total(), currency_marker)}")
    return "\n".join(lines) + "\n"


def render_report(
    start_date: date,
    end_date: date,
    total_revenue: float,
    store_name: str = ConfigDefaults.STORE_NAME,
    currency_marker: str = ConfigDefaults.CURRENCY_MARKER,
) -> str:
    """Render a revenue report"""
    lines = [
        report_header(store_name),
        f"Date Range: {start_date.isoformat()} to {end_date.isoformat()}",
        f"Total Revenue: {format_amount(total_revenue, currency_marker)}",
    ]
    return "\n".join(lines) + "\n"


def receipt_file_name(token: object, prefix: str = ConfigDefaults.RECEIPT_PREFIX) -> str:
    return f"{prefix}{token}{RECEIPT_SUFFIX}"


def report_file_name(
    start_date: date,
    end_date: date,
    prefix: str = ConfigDefaults.REPORT_PREFIX,
) -> str:
    return f"{prefix}{start_date.isoformat()}_to_{end_date.isoformat()}{RECEIPT_SUFFIX}"


def is_receipt_header(line: str) -> bool:
    return RECEIPT_MARKER in line


def parse_receipt_date(line: str) -> date:
    """
    Parse the calendar date out of a receipt date line

    Raises:
        ValueError: If the line does not carry an ISO date after ": "
    """
    parts = line.split(": ", 1)
    if len(parts) != 2:
        raise ValueError(f"no date in line: {line!r}")
    return date.fromisoformat(parts[1].strip().split(" ", 1)[0])


def parse_receipt_total(
    line: str,
    currency_marker: str = ConfigDefaults.CURRENCY_MARKER,
) -> float:
    """
    Parse the amount after the currency marker of a total line

    Raises:
        ValueError: If the marker is missing or the amount is not numeric
    """
    if currency_marker not in line:
        raise ValueError(f"no {currency_marker} amount in line: {line!r}")
    amount = float(line.rsplit(currency_marker, 1)[1].strip())
    if not math.isfinite(amount):
        raise ValueError(f"non-finite amount in line: {line!r}")
    return amount
