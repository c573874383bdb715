"""Bill model"""

from datetime import datetime
from pathlib import Path
from typing import List, Union

from pydantic import BaseModel, Field, field_validator

from supersaver_pos.config.pos_config import ConfigDefaults
from supersaver_pos.models.item import Item


GUEST_CUSTOMER = "Guest"


class Bill(BaseModel):
    """
    A customer's bill

    Holds an ordered list of items; the same item may appear more than
    once. The total is recomputed from the items on every call.
    """

    cashier_name: str = Field("", description="Cashier operating the terminal")
    branch: str = Field("", description="Branch name")
    customer_name: str = Field(GUEST_CUSTOMER, description="Customer name")
    created_at: datetime = Field(
        default_factory=datetime.now,
        description="Creation timestamp, fixed for the life of the bill"
    )
    items: List[Item] = Field(default_factory=list, description="Line items in entry order")

    model_config = {
        "str_strip_whitespace": True,
    }

    @field_validator("customer_name")
    @classmethod
    def default_blank_customer(cls, v: str) -> str:
        """Blank customer names become Guest"""
        return v or GUEST_CUSTOMER

    def add_item(self, item: Item) -> None:
        """Append an item as a new line"""
        self.items.append(item)

    def get_total(self) -> float:
        """Sum of discounted prices over all lines"""
        return sum(item.discounted_price for item in self.items)

    @property
    def item_count(self) -> int:
        return len(self.items)

    def to_receipt_text(
        self,
        store_name: str = ConfigDefaults.STORE_NAME,
        currency_marker: str = ConfigDefaults.CURRENCY_MARKER,
    ) -> str:
        """Render this bill in the receipt file format"""
        from supersaver_pos.receipts.receipt_format import render_receipt

        return render_receipt(self, store_name=store_name, currency_marker=currency_marker)

    def finalize(
        self,
        path: Union[str, Path],
        store_name: str = ConfigDefaults.STORE_NAME,
        currency_marker: str = ConfigDefaults.CURRENCY_MARKER,
    ) -> Path:
        """
        Write this bill as a receipt file

        Args:
            path: Receipt file path
            store_name: Store name for the receipt header
            currency_marker: Currency marker preceding amounts

        Returns:
            Path of the written receipt

        Raises:
            ReceiptWriteError: If the file cannot be written
        """
        from supersaver_pos.receipts.receipt_writer import write_text_atomic

        return write_text_atomic(
            path,
            self.to_receipt_text(store_name=store_name, currency_marker=currency_marker),
        )
