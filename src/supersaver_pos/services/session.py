"""
POS session store
Holds the catalog and the table of pending bills for one terminal
"""

import logging
from typing import Dict, Iterator, NamedTuple, Optional

from supersaver_pos.catalog.catalog import Catalog
from supersaver_pos.catalog.catalog_loader import CatalogLoader
from supersaver_pos.config.pos_config import ConfigDefaults, PosConfig
from supersaver_pos.exceptions import (
    CatalogError,
    CatalogParseError,
    ItemNotFoundError,
    PendingBillNotFoundError,
)
from supersaver_pos.models.bill import Bill
from supersaver_pos.models.item import Item


logger = logging.getLogger(__name__)


class PendingBillSummary(NamedTuple):
    """One row of the pending bill listing"""
    bill_id: int
    customer_name: str
    total: float


class PosSession:
    """
    Session state for a single POS terminal

    Pending bills live in memory for the lifetime of the session only.
    Ids are handed out from ``pending_id_start`` upwards and are never
    reused, even after a bill has been retrieved.

    Example:
        >>> session = PosSession(catalog)
        >>> bill_id = session.save_pending(bill)
        >>> session.retrieve_pending(bill_id) is bill
        True
    """

    def __init__(
        self,
        catalog: Optional[Catalog] = None,
        pending_id_start: int = ConfigDefaults.PENDING_ID_START,
    ) -> None:
        self.catalog = catalog if catalog is not None else Catalog()
        self._pending: Dict[int, Bill] = {}
        self._next_pending_id = pending_id_start

    @classmethod
    def from_config(cls, config: PosConfig) -> "PosSession":
        """
        Create a session with the catalog named in the configuration

        A catalog that cannot be read is logged and the session starts
        with an empty catalog. Malformed rows follow the configured
        policy; under ``abort`` the CatalogParseError propagates.

        Args:
            config: Resolved POS configuration

        Returns:
            New PosSession
        """
        loader = CatalogLoader.from_config(config)
        try:
            catalog = loader.load(config.catalog_path).catalog
        except CatalogParseError:
            raise
        except CatalogError as e:
            logger.error("%s; starting with an empty catalog", e)
            catalog = Catalog()
        return cls(catalog=catalog, pending_id_start=config.pending_id_start)

    def find(self, item_code: str) -> Optional[Item]:
        return self.catalog.get(item_code)

    def lookup(self, item_code: str) -> Item:
        """
        Look up a catalog item

        Raises:
            ItemNotFoundError: If no item has this code
        """
        item = self.catalog.get(item_code)
        if item is None:
            raise ItemNotFoundError(item_code)
        return item

    def save_pending(self, bill: Bill) -> int:
        """Park a bill and return its newly assigned id"""
        bill_id = self._next_pending_id
        self._pending[bill_id] = bill
        self._next_pending_id += 1
        logger.info("Bill saved as pending with id %d", bill_id)
        return bill_id

    def retrieve_pending(self, bill_id: int) -> Bill:
        """
        Remove and return a pending bill

        Raises:
            PendingBillNotFoundError: If no pending bill has this id
        """
        try:
            bill = self._pending.pop(bill_id)
        except KeyError:
            raise PendingBillNotFoundError(bill_id) from None
        logger.info("Pending bill %d retrieved", bill_id)
        return bill

    def list_pending(self) -> Iterator[PendingBillSummary]:
        """Yield pending bills in ascending id order"""
        for bill_id in sorted(self._pending):
            bill = self._pending[bill_id]
            yield PendingBillSummary(bill_id, bill.customer_name, bill.get_total())

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @property
    def next_pending_id(self) -> int:
        return self._next_pending_id
