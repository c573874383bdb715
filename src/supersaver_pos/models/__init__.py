"""Models module initialization"""

from supersaver_pos.models.item import Item
from supersaver_pos.models.bill import Bill, GUEST_CUSTOMER
from supersaver_pos.models.revenue import RevenueSummary, SkippedReceipt

__all__ = [
    "Item",
    "Bill",
    "GUEST_CUSTOMER",
    "RevenueSummary",
    "SkippedReceipt",
]
