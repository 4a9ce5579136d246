"""The two screens: a tab bar over a placeholder panel, and a side
inventory column."""

import curses
from collections import namedtuple
from enum import Enum

# ---------------- LAYOUT ----------------
Rect = namedtuple("Rect", "row col height width")

TAB_BAR_HEIGHT = 3
MAIN_COLUMN_PERCENT = 80
TAB_DIVIDER = " │ "
QUANTITY_GAP = "     "
# A_ITALIC is only defined when ncurses was built with it
ITALIC = getattr(curses, "A_ITALIC", 0)


class Layout(Enum):
    TABS = "tabs"
    INVENTORY = "inventory"


def full_rect(screen):
    return Rect(0, 0, screen.height, screen.width)


def split_vertical(rect, head):
    head = min(head, rect.height)
    top = Rect(rect.row, rect.col, head, rect.width)
    rest = Rect(rect.row + head, rect.col, rect.height - head, rect.width)
    return top, rest


def split_horizontal(rect, percent):
    left_w = rect.width * percent // 100
    left = Rect(rect.row, rect.col, rect.height, left_w)
    right = Rect(rect.row, rect.col + left_w, rect.height, rect.width - left_w)
    return left, right


# ---------------- TABS SCREEN ----------------
def draw_tabs(screen, app):
    bar, body = split_vertical(full_rect(screen), TAB_BAR_HEIGHT)

    screen.box(bar, "Tabs")
    # one column of padding before the first title
    col = bar.col + 2
    row = bar.row + 1
    for i, title in enumerate(app.tabs):
        if i:
            screen.text(row, col, TAB_DIVIDER)
            col += len(TAB_DIVIDER)
        attr = curses.A_BOLD | curses.A_REVERSE if i == app.current_tab else 0
        screen.text(row, col, title, attr)
        col += len(title)

    screen.box(body, f"Inner {app.current_tab}")


# ---------------- INVENTORY SCREEN ----------------
def format_item(kind, qty):
    return f"{kind.label}{QUANTITY_GAP}{qty}/256"


def draw_inventory(screen, app):
    _, side = split_horizontal(full_rect(screen), MAIN_COLUMN_PERCENT)
    screen.box(side, "Inventory", curses.A_BOLD)

    inner_w = side.width - 2
    right = side.col + side.width - 1
    for i, (kind, qty) in enumerate(app.inventory):
        row = side.row + 1 + i
        if row >= side.row + side.height - 1:
            break
        label = kind.label
        qty_text = f"{qty}/256"
        # right-aligned inside the border, cut off before it
        start = side.col + 1 + max(0, inner_w - len(format_item(kind, qty)))
        qty_col = start + len(label) + len(QUANTITY_GAP)
        screen.text(row, start, label[: max(0, right - start)], curses.A_UNDERLINE)
        screen.text(row, qty_col, qty_text[: max(0, right - qty_col)], ITALIC)


DRAWERS = {
    Layout.TABS: draw_tabs,
    Layout.INVENTORY: draw_inventory,
}


def draw_for(layout):
    return DRAWERS[Layout(layout)]
