"""
Row Adapter - binds the ordered item sequence to the visible rows.

This service is pure Python with no Streamlit dependencies. The host asks
for a row binding per position; every mutation tells observers that the
whole data set changed so the host re-derives all rows.
"""

import logging
from typing import Callable

from models.entities import Item, RenderedRow

logger = logging.getLogger(__name__)


class RowAdapter:
    """Owns the shopping list items and produces per-position row bindings."""

    def __init__(self):
        self._items: list[Item] = []
        self._observers: list[Callable[[], None]] = []

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> tuple[Item, ...]:
        """Snapshot of the current sequence."""
        return tuple(self._items)

    # ==========================================
    # Observers
    # ==========================================

    def register_observer(self, callback: Callable[[], None]):
        """Register a callback fired after every change to the item sequence."""
        if callback not in self._observers:
            self._observers.append(callback)

    def unregister_observer(self, callback: Callable[[], None]):
        """Stop notifying a previously registered callback."""
        if callback in self._observers:
            self._observers.remove(callback)

    def notify_data_set_changed(self):
        """Invalidate every row. Observers are not told which position changed."""
        for callback in list(self._observers):
            callback()

    # ==========================================
    # Mutation
    # ==========================================

    def count(self) -> int:
        """Number of items, i.e. the number of rows the host should render."""
        return len(self._items)

    def add(self, item: Item):
        """Append an item to the end of the list. Empty and duplicate names are accepted."""
        self._items.append(item)
        logger.debug(f"Added item {item.name!r} at position {len(self._items) - 1}")
        self.notify_data_set_changed()

    def remove(self, item: Item):
        """
        Remove the first occurrence of an item, matched by identity.

        Removing an item that is not in the list does nothing.
        """
        for position, current in enumerate(self._items):
            if current is item:
                del self._items[position]
                logger.debug(f"Removed item {item.name!r} from position {position}")
                self.notify_data_set_changed()
                return
        logger.debug(f"Ignored removal of absent item {item.name!r}")

    # ==========================================
    # Rendering
    # ==========================================

    def render(self, index: int) -> RenderedRow:
        """
        Build the row binding for one position.

        Args:
            index: Position in [0, count())

        Returns:
            RenderedRow whose remove trigger removes the item bound here
        """
        if not 0 <= index < len(self._items):
            raise IndexError(f"Row index {index} out of range for {len(self._items)} items")

        item = self._items[index]
        return RenderedRow(
            index=index,
            label_text=item.name,
            on_remove=lambda: self.remove(item),
        )

    def rows(self) -> list[RenderedRow]:
        """Render every position in order."""
        return [self.render(index) for index in range(len(self._items))]
