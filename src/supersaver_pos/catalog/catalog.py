"""Item catalog lookup table"""

from typing import Dict, Iterable, Iterator, List, Optional

from supersaver_pos.models.item import Item


class Catalog:
    """Mapping from item code to Item; adding an existing code replaces it"""

    def __init__(self, items: Optional[Iterable[Item]] = None) -> None:
        self._items: Dict[str, Item] = {}
        for item in items or ():
            self.add(item)

    def add(self, item: Item) -> None:
        self._items[item.item_code] = item

    def get(self, item_code: str) -> Optional[Item]:
        return self._items.get(item_code)

    def codes(self) -> List[str]:
        return list(self._items)

    def __contains__(self, item_code: object) -> bool:
        return item_code in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items.values())

    def __repr__(self) -> str:
        return f"Catalog({len(self)} items)"
