from .inventory import ITEM_DEFS, STARTING_STOCK, Inventory, ItemDef

__all__ = [
    "ITEM_DEFS",
    "STARTING_STOCK",
    "Inventory",
    "ItemDef",
]
