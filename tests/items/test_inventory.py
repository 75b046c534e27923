"""
Tests for the party inventory.
"""

from battlesim.items.inventory import ITEM_DEFS, STARTING_STOCK, Inventory


def test_starting_stock():
    inventory = Inventory()
    for item_id, count in STARTING_STOCK.items():
        assert inventory.item_count(item_id) == count


def test_use_item_consumes_one():
    inventory = Inventory()
    assert inventory.use_item("POTION")
    assert inventory.item_count("POTION") == 4


def test_use_item_without_stock_fails():
    inventory = Inventory(stock={})
    assert not inventory.use_item("POTION")
    assert inventory.item_count("POTION") == 0


def test_last_unit_frees_the_slot():
    inventory = Inventory(stock={"PHOENIX_DOWN": 1})
    assert inventory.use_item("PHOENIX_DOWN")
    assert "PHOENIX_DOWN" not in inventory.items


def test_remove_item_fails_when_short():
    """
    Test that removing more units than available leaves the stock untouched.
    """
    inventory = Inventory(stock={"ETHER": 2})
    assert not inventory.remove_item("ETHER", 3)
    assert inventory.item_count("ETHER") == 2
    assert inventory.remove_item("ETHER", 2)
    assert inventory.item_count("ETHER") == 0


def test_add_item_is_capped_at_max_stack():
    """
    Test that a stack never exceeds the item's max stack.
    """
    inventory = Inventory(stock={})
    assert inventory.add_item("POTION", 7) == 7
    assert inventory.add_item("POTION", 7) == ITEM_DEFS["POTION"].max_stack - 7
    assert inventory.item_count("POTION") == 9


def test_add_item_respects_slot_limit():
    inventory = Inventory(stock={"POTION": 1}, max_slots=1)
    assert inventory.add_item("ETHER") == 0
    assert inventory.add_item("POTION") == 1
