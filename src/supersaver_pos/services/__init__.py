"""Services module initialization"""

from supersaver_pos.services.session import PosSession, PendingBillSummary

__all__ = [
    "PosSession",
    "PendingBillSummary",
]
