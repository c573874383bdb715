"""
Shared test fixtures
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List

import pytest

from supersaver_pos.catalog import Catalog
from supersaver_pos.models import Bill, Item
from supersaver_pos.services import PosSession


CATALOG_HEADER = "ItemCode,ItemName,Price,Size,ManufactureDate,ExpiryDate,Manufacturer,Discount"


class ScriptedInput:
    """Input function fed from a fixed list of answers; raises EOFError when exhausted"""

    def __init__(self, *answers: str) -> None:
        self.answers: List[str] = list(answers)
        self.prompts: List[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


def write_catalog(path: Path, *rows: str) -> Path:
    path.write_text("\n".join((CATALOG_HEADER,) + rows) + "\n", encoding="utf-8")
    return path


def write_receipt(directory: Path, name: str, when: str, total: str) -> Path:
    """Write a receipt file by hand in the layout finalized bills use"""
    path = directory / name
    path.write_text(
        "Super-Saving Supermarket - Bill Receipt\n"
        f"Date & Time: {when}\n"
        "Cashier: Ann, Branch: Colombo, Customer: Guest\n"
        "\n"
        "Item Details:\n"
        "----------------------------------------------------\n"
        "Soap - Rs.50.00 (Discounted: Rs.45.00)\n"
        "\n"
        f"Total Cost: Rs.{total}\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def soap() -> Item:
    return Item(
        item_code="A1",
        item_name="Soap",
        price=50.00,
        size="100g",
        manufacture_date="2024-01-01",
        expiry_date="2025-01-01",
        manufacturer="Acme",
        discount=10,
    )


@pytest.fixture
def rice() -> Item:
    return Item(item_code="B1", item_name="Rice", price=100.00, size="1kg", discount=0)


@pytest.fixture
def session(soap: Item, rice: Item) -> PosSession:
    return PosSession(Catalog([soap, rice]))


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2025, 3, 12, 14, 30, 5)


@pytest.fixture
def bill(fixed_time: datetime) -> Bill:
    return Bill(cashier_name="Ann", branch="Colombo", customer_name="", created_at=fixed_time)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handlers installed by configure_logging during a test"""
    yield
    logger = logging.getLogger("supersaver_pos")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def make_catalog():
    return write_catalog


@pytest.fixture
def make_receipt():
    return write_receipt


@pytest.fixture
def scripted():
    return ScriptedInput
