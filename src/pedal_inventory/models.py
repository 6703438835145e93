"""Pydantic models for components, templates, orders and shopping lists."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from pedal_inventory.constants import MSG_NO_ORDERS, MSG_ORDER_PLACED


class ComponentItem(BaseModel):
    """A catalog component and the category it belongs to."""

    model_config = ConfigDict(frozen=True)
    name: str
    category: str


class Template(BaseModel):
    """A pedal design: component quantities needed to build one unit."""

    name: str = Field(description="Pedal name, trimmed")
    components: dict[str, NonNegativeInt] = Field(
        default_factory=dict, description="Component name -> quantity per build"
    )

    def used_components(self) -> list[tuple[str, int]]:
        """Return (component, quantity) pairs with a positive quantity."""
        return [(n, q) for n, q in self.components.items() if q > 0]

    @property
    def part_count(self) -> int:
        return len(self.used_components())


class OrderResult(BaseModel):
    """Outcome of applying an order request to the inventory.

    ``placed`` is False when no template had a positive quantity. In that
    case ``inventory`` is the untouched input and ``applied`` is empty.
    """

    inventory: dict[str, int]
    applied: list[str] = Field(default_factory=list)
    placed: bool = False

    def summary(self) -> str:
        if not self.placed:
            return MSG_NO_ORDERS
        return MSG_ORDER_PLACED.format(lines=", ".join(self.applied))


class ShoppingListEntry(BaseModel):
    """A component at or below zero stock."""

    model_config = ConfigDict(frozen=True)
    name: str
    category: str
    quantity: int


class ShoppingList:
    """Restartable view over the components that need buying.

    Entries are produced in catalog order each time the list is iterated.
    An empty list means every catalog component is in stock.
    """

    def __init__(self, entries: list[ShoppingListEntry]):
        self._entries = entries

    def __iter__(self) -> Iterator[ShoppingListEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    @property
    def is_empty(self) -> bool:
        return not self._entries

    @property
    def fully_stocked(self) -> bool:
        """True when there is nothing to buy."""
        return self.is_empty

    def names(self) -> list[str]:
        return [e.name for e in self._entries]

    def to_list(self) -> list[dict]:
        return [e.model_dump() for e in self._entries]
