"""Catalog item model"""

from pydantic import BaseModel, Field


class Item(BaseModel):
    """Catalog item, immutable once loaded"""

    item_code: str = Field(..., description="Unique item code", min_length=1)
    item_name: str = Field(..., description="Display name")
    price: float = Field(..., description="Unit list price", ge=0)
    size: str = Field("", description="Size descriptor, e.g. 100g")
    manufacture_date: str = Field("", description="Manufacture date as printed in the catalog")
    expiry_date: str = Field("", description="Expiry date as printed in the catalog")
    manufacturer: str = Field("", description="Manufacturer name")
    discount: float = Field(0.0, description="Discount percentage", ge=0, le=100)

    model_config = {
        "frozen": True,
        "str_strip_whitespace": True,
    }

    @property
    def discounted_price(self) -> float:
        """Price after applying the discount percentage"""
        return self.price * (1 - self.discount / 100)
