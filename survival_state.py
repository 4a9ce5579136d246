from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Tuple

from errors import InvalidStateError

TICK_WRAP = 10
MAX_QUANTITY = 255


# --- ITEMS ---
class ItemKind(Enum):
    WOOD = auto()
    FIBRE = auto()
    WATER = auto()

    @property
    def label(self) -> str:
        return ITEM_LABELS[self]


ITEM_LABELS = {
    ItemKind.WOOD: "wood",
    ItemKind.FIBRE: "fibre",
    ItemKind.WATER: "water",
}


# --- INPUT COMMANDS ---
class Command(Enum):
    QUIT = auto()
    NEXT_TAB = auto()
    PREVIOUS_TAB = auto()
    NOOP = auto()


DEFAULT_TABS = ("Tab1", "Tab2", "Tab3", "Tab4")
DEFAULT_INVENTORY = (
    (ItemKind.WOOD, 10),
    (ItemKind.FIBRE, 3),
    (ItemKind.WATER, 13),
)


# --- APP STATE ---
@dataclass
class AppState:
    """Everything the screen shows.

    Only the loop driver mutates it: tab moves come from key presses and
    ``tick_counter`` advances once per tick. ``tick_counter`` is kept for
    animation but nothing draws it yet.
    """

    tabs: Tuple[str, ...] = DEFAULT_TABS
    current_tab: int = 0
    tick_counter: int = 0
    inventory: Tuple[Tuple[ItemKind, int], ...] = field(default=DEFAULT_INVENTORY)

    def __post_init__(self):
        self.tabs = tuple(str(t) for t in self.tabs)
        self.inventory = tuple((kind, int(qty)) for kind, qty in self.inventory)

        if not self.tabs:
            raise InvalidStateError("at least one tab is required")
        if not 0 <= self.current_tab < len(self.tabs):
            raise InvalidStateError(
                f"current_tab {self.current_tab} out of range for {len(self.tabs)} tabs"
            )
        if not 0 <= self.tick_counter < TICK_WRAP:
            raise InvalidStateError(f"tick_counter must be in [0, {TICK_WRAP}), got {self.tick_counter}")
        for kind, qty in self.inventory:
            if not isinstance(kind, ItemKind):
                raise InvalidStateError(f"unknown item kind: {kind!r}")
            if not 0 <= qty <= MAX_QUANTITY:
                raise InvalidStateError(f"{kind.label} quantity {qty} outside 0..{MAX_QUANTITY}")

    @property
    def current_title(self) -> str:
        return self.tabs[self.current_tab]

    def advance_tab(self):
        self.current_tab = (self.current_tab + 1) % len(self.tabs)

    def retreat_tab(self):
        self.current_tab = (self.current_tab - 1 + len(self.tabs)) % len(self.tabs)

    def on_tick(self):
        self.tick_counter = (self.tick_counter + 1) % TICK_WRAP

    def apply(self, command: Command) -> bool:
        """Apply a decoded command. Returns False when the session should end."""
        if command is Command.QUIT:
            return False
        if command is Command.NEXT_TAB:
            self.advance_tab()
        elif command is Command.PREVIOUS_TAB:
            self.retreat_tab()
        return True
