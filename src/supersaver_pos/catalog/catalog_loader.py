"""
Catalog Loader
Parses the comma-separated item file into a Catalog
"""

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from supersaver_pos.catalog.catalog import Catalog
from supersaver_pos.config.pos_config import (
    ConfigDefaults,
    DiscountPolicy,
    MalformedRowPolicy,
    PosConfig,
)
from supersaver_pos.exceptions import CatalogError, CatalogParseError
from supersaver_pos.models.item import Item


logger = logging.getLogger(__name__)

CATALOG_FIELDS = (
    "item_code",
    "item_name",
    "price",
    "size",
    "manufacture_date",
    "expiry_date",
    "manufacturer",
    "discount",
)


@dataclass
class RejectedRow:
    """Catalog row that was skipped"""
    line_no: int
    line: str
    reason: str


@dataclass
class CatalogLoadResult:
    """Outcome of loading a catalog file"""
    catalog: Catalog
    path: str
    rejected: List[RejectedRow] = field(default_factory=list)

    @property
    def loaded_count(self) -> int:
        return len(self.catalog)


class CatalogLoader:
    """
    CatalogLoader class

    The first line of the file is a header and is always skipped.
    Blank lines are ignored. Every other line must hold exactly eight
    comma-separated fields (no quoting is supported).

    Example:
        >>> loader = CatalogLoader()
        >>> result = loader.load("items.csv")
        >>> result.catalog.get("A1").discounted_price
        45.0
    """

    def __init__(
        self,
        discount_policy: DiscountPolicy = ConfigDefaults.DISCOUNT_POLICY,
        max_discount: float = ConfigDefaults.MAX_DISCOUNT,
        malformed_row_policy: MalformedRowPolicy = ConfigDefaults.MALFORMED_ROW_POLICY,
    ) -> None:
        self.discount_policy = discount_policy
        self.max_discount = max_discount
        self.malformed_row_policy = malformed_row_policy

    @classmethod
    def from_config(cls, config: PosConfig) -> "CatalogLoader":
        return cls(
            discount_policy=config.discount_policy,
            max_discount=config.max_discount,
            malformed_row_policy=config.malformed_row_policy,
        )

    def load(self, path: Union[str, Path]) -> CatalogLoadResult:
        """
        Load a catalog file

        Args:
            path: Path to the catalog file

        Returns:
            CatalogLoadResult with the catalog and any rejected rows

        Raises:
            CatalogError: If the file cannot be read
            CatalogParseError: If a row is malformed and the policy is abort
        """
        file_path = Path(path)

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise CatalogError(
                f"Error reading catalog file {file_path}: {e}",
                path=file_path,
                cause=e,
            ) from e

        result = CatalogLoadResult(catalog=Catalog(), path=str(file_path))

        for line_no, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue

            try:
                item = self.parse_row(line)
            except ValueError as e:
                reason = str(e)
                if self.malformed_row_policy == MalformedRowPolicy.ABORT:
                    raise CatalogParseError(
                        f"Malformed catalog row at line {line_no}: {reason}",
                        line_no=line_no,
                        line=line,
                        path=file_path,
                    ) from e
                logger.warning("Skipping catalog line %d: %s", line_no, reason)
                result.rejected.append(RejectedRow(line_no=line_no, line=line, reason=reason))
                continue

            if item.item_code in result.catalog:
                logger.warning(
                    "Duplicate item code %s at line %d replaces earlier entry",
                    item.item_code,
                    line_no,
                )
            result.catalog.add(item)

        logger.info(
            "Loaded %d item(s) from %s (%d row(s) rejected)",
            result.loaded_count,
            file_path,
            len(result.rejected),
        )
        return result

    def parse_row(self, line: str) -> Item:
        """
        Parse one catalog row

        Raises:
            ValueError: If the row is malformed
        """
        fields = [value.strip() for value in line.split(",")]
        if len(fields) != len(CATALOG_FIELDS):
            raise ValueError(f"expected {len(CATALOG_FIELDS)} fields, got {len(fields)}")

        values = dict(zip(CATALOG_FIELDS, fields))
        price = self._parse_number("price", values["price"])
        discount = self._apply_discount_policy(
            values["item_code"],
            self._parse_number("discount", values["discount"]),
        )

        # pydantic's ValidationError is a ValueError
        return Item(
            item_code=values["item_code"],
            item_name=values["item_name"],
            price=price,
            size=values["size"],
            manufacture_date=values["manufacture_date"],
            expiry_date=values["expiry_date"],
            manufacturer=values["manufacturer"],
            discount=discount,
        )

    def _parse_number(self, name: str, raw: str) -> float:
        try:
            value = float(raw)
        except ValueError:
            raise ValueError(f"{name} is not a number: {raw!r}") from None
        if not math.isfinite(value):
            raise ValueError(f"{name} is not a finite number: {raw!r}")
        return value

    def _apply_discount_policy(self, item_code: str, discount: float) -> float:
        """Reject or clamp a discount outside 0..max_discount"""
        if 0 <= discount <= self.max_discount:
            return discount

        if self.discount_policy == DiscountPolicy.CLAMP:
            clamped = min(max(discount, 0.0), self.max_discount)
            logger.warning(
                "Discount %s%% for item %s clamped to %s%%",
                discount,
                item_code,
                clamped,
            )
            return clamped

        raise ValueError(
            f"discount {discount} outside allowed range 0-{self.max_discount:g}"
        )
