"""
Shopping Controller - wires the input field and buttons to the row adapter.

This controller handles:
- Keeping one RowAdapter alive for the browser session
- Reading the input field and adding an item on "Add"
- Removing items through the adapter
- Tracking a revision number that changes on every list mutation
"""

import logging
from typing import MutableMapping, Optional

import streamlit as st

from config.settings import Settings, get_settings
from models import Item, RenderedRow
from services.row_adapter import RowAdapter

logger = logging.getLogger(__name__)

INPUT_KEY = "shopping_item_input"


class ShoppingController:
    """Controller for the shopping list screen."""

    def __init__(
        self,
        state: Optional[MutableMapping] = None,
        settings: Optional[Settings] = None,
    ):
        self._state = st.session_state if state is None else state
        self.settings = settings if settings is not None else get_settings()
        self._init_session_state()

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "shopping" not in self._state:
            shopping = {
                "adapter": RowAdapter(),
                "revision": 0,  # Bumped on every mutation; folded into row widget keys
            }

            def _on_data_set_changed():
                shopping["revision"] += 1

            shopping["adapter"].register_observer(_on_data_set_changed)
            self._state["shopping"] = shopping
        if INPUT_KEY not in self._state:
            self._state[INPUT_KEY] = ""

    @property
    def adapter(self) -> RowAdapter:
        return self._state["shopping"]["adapter"]

    # ==========================================
    # Session State
    # ==========================================

    def get_input_text(self) -> str:
        """Get the current text of the input field."""
        return self._state.get(INPUT_KEY, "")

    def set_input_text(self, text: str):
        """Set the text of the input field."""
        self._state[INPUT_KEY] = text

    def get_revision(self) -> int:
        """Get the list revision. Changes whenever items are added or removed."""
        return self._state["shopping"]["revision"]

    # ==========================================
    # Item Operations
    # ==========================================

    def on_add(self) -> Item:
        """
        Add the current input text as a new item.

        The text is used as-is, including when it is empty. The input field
        is cleared afterwards only if clear_input_after_add is enabled.
        """
        item = Item(name=self.get_input_text())
        self.adapter.add(item)
        logger.info(f"Added shopping item {item.name!r} ({self.adapter.count()} total)")

        if self.settings.clear_input_after_add:
            self.set_input_text("")
        return item

    def remove_item(self, item: Item):
        """Remove an item from the list. Unknown items are ignored."""
        self.adapter.remove(item)

    def count(self) -> int:
        """Number of items in the list."""
        return self.adapter.count()

    def get_rows(self) -> list[RenderedRow]:
        """Row bindings for every item, in list order."""
        return self.adapter.rows()
