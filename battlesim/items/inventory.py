"""
Inventory module for the battle simulator.

The party inventory is an external collaborator of the battle engine: the
resolver only consumes item stock through `use_item`. This implementation
mirrors the demo's consumables and stacking rules.
"""

from pydantic import BaseModel, Field

from battlesim.core.logging import log_debug


class ItemDef(BaseModel):
    """Static description of an inventory item."""

    id: str = Field(description="The identifier of the item.")
    name: str = Field(description="The display name of the item.")
    type: str = Field("consumable", description="The item type.")
    max_stack: int = Field(9, ge=1, description="Maximum count per stack.")
    description: str = Field("", description="A brief description of the item.")


ITEM_DEFS: dict[str, ItemDef] = {
    "POTION": ItemDef(id="POTION", name="Potion", description="Restores 50 HP"),
    "ETHER": ItemDef(id="ETHER", name="Ether", description="Restores 20 MP"),
    "ANTIDOTE": ItemDef(id="ANTIDOTE", name="Antidote", description="Cures POISON"),
    "PHOENIX_DOWN": ItemDef(
        id="PHOENIX_DOWN",
        name="Phoenix Down",
        description="Revives with 1 HP",
    ),
}

STARTING_STOCK: dict[str, int] = {
    "POTION": 5,
    "ETHER": 2,
    "ANTIDOTE": 3,
    "PHOENIX_DOWN": 1,
}


class Inventory:
    """
    Stack-based item storage.

    An item whose count drops to zero is removed from the inventory and
    frees its slot.

    Attributes:
        max_slots (int): The maximum number of distinct items.
        items (dict[str, int]): Item counts indexed by item id.

    """

    def __init__(
        self,
        stock: dict[str, int] | None = None,
        max_slots: int = 20,
    ) -> None:
        self.max_slots = max_slots
        self.items: dict[str, int] = {}
        for item_id, count in (STARTING_STOCK if stock is None else stock).items():
            self.add_item(item_id, count)

    def item_count(self, item_id: str) -> int:
        return self.items.get(item_id, 0)

    def use_item(self, item_id: str) -> bool:
        """
        Consumes one unit of an item.

        Returns:
            bool: True if an item was consumed, False if none was in stock.

        """
        return self.remove_item(item_id, 1)

    def remove_item(self, item_id: str, count: int = 1) -> bool:
        """
        Removes `count` units of an item.

        Returns:
            bool: False, leaving the stock untouched, if fewer than `count`
            units are available.

        """
        if count <= 0 or self.item_count(item_id) < count:
            return False
        self.items[item_id] -= count
        if self.items[item_id] == 0:
            del self.items[item_id]
        log_debug(f"Removed {count}x {item_id}", {"left": self.item_count(item_id)})
        return True

    def add_item(self, item_id: str, count: int = 1) -> int:
        """
        Adds units of an item, capped at the item's max stack.

        Args:
            item_id (str): The item to add.
            count (int): How many units to add.

        Returns:
            int: The number of units actually added.

        """
        if count <= 0:
            return 0
        if item_id not in self.items and len(self.items) >= self.max_slots:
            return 0
        max_stack = ITEM_DEFS[item_id].max_stack if item_id in ITEM_DEFS else 9
        before = self.item_count(item_id)
        after = min(before + count, max_stack)
        self.items[item_id] = after
        return after - before
