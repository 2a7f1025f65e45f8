"""Shop, inventory and equipment slots with drag-and-drop fitting commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union

SHOP_SIZE = 30
ITEM_PRICE = 800

SLOT_LABELS = (
    "Left Mouse Button",
    "Right Mouse Button",
    "Middle Mouse Button",
    "Space",
    '"1"',
    '"2"',
    '"3"',
)


@dataclass
class Slot:
    """An equipment slot that holds at most one item."""

    id: int
    label: str
    item: Optional[str] = None


@dataclass(frozen=True)
class Unfit:
    """Remove the item from a slot."""

    target_slot: int


@dataclass(frozen=True)
class Fit:
    """Put an inventory item into a slot."""

    target_slot: int
    item: str


@dataclass(frozen=True)
class Refit:
    """Move the item from one slot to another."""

    target_slot: int
    origin_slot: int


FittingCommand = Union[Unfit, Fit, Refit]


def _default_slots() -> list[Slot]:
    return [Slot(id=number, label=label) for number, label in enumerate(SLOT_LABELS, start=1)]


@dataclass
class Fitting:
    """Bought items and the slots they can be fitted into."""

    inventory: list[str] = field(default_factory=list)
    slots: list[Slot] = field(default_factory=_default_slots)
    item_dragging: bool = False

    def _slot(self, slot_id: int) -> Optional[Slot]:
        return next((slot for slot in self.slots if slot.id == slot_id), None)

    def buy(self, index: int) -> str:
        """Buy shop item number index into the inventory."""
        if not 0 <= index < SHOP_SIZE:
            raise ValueError(f"the shop has no item {index}")
        item = f"Item {index}"
        self.inventory.append(item)
        return item

    def set_item(self, slot_id: int, item: Optional[str]) -> None:
        """Set the item of a slot; unknown slot ids are ignored."""
        slot = self._slot(slot_id)
        if slot is not None:
            slot.item = item

    def apply(self, command: Optional[FittingCommand]) -> None:
        """Carry out a fitting command; None does nothing."""
        match command:
            case None:
                return
            case Unfit(target_slot=target):
                self.set_item(target, None)
            case Fit(target_slot=target, item=item):
                self.set_item(target, item)
            case Refit(target_slot=target, origin_slot=origin):
                origin_slot = self._slot(origin)
                origin_item = origin_slot.item if origin_slot is not None else None
                self.set_item(target, origin_item)
                self.set_item(origin, None)
            case _:
                raise TypeError(f"not a fitting command: {command!r}")

    def drop_from_slot(self, slot_id: int, target: Optional[int]) -> FittingCommand:
        """Command for dropping a slot's item onto target, or outside any slot."""
        slot = self._slot(slot_id)
        if slot is None:
            raise KeyError(slot_id)
        if slot.item is None:
            raise ValueError("a slot without an item cannot be dragged")
        if target is None:
            return Unfit(target_slot=slot_id)
        return Refit(target_slot=target, origin_slot=slot_id)

    def drop_from_inventory(self, index: int, target: Optional[int]) -> Optional[FittingCommand]:
        """Command for dropping inventory item index onto target; None if dropped nowhere."""
        item = self.inventory[index]
        self.item_dragging = False
        if target is None:
            return None
        return Fit(target_slot=target, item=item)