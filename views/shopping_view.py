"""
Shopping View - UI for building a shopping list.

This view handles:
- The item text field and "Add" button
- The item count
- The scrollable list of items, each with its own remove button
"""

import streamlit as st

from controllers.shopping_controller import ShoppingController, INPUT_KEY
from views.components.shopping_item import render_item_list
from views.components.shopping_stats import render_shopping_stats


class ShoppingView:
    """View for shopping list UI."""

    def __init__(self):
        self.controller = ShoppingController()

    def render(self):
        """Main render method."""
        st.title(self.controller.settings.app_title)

        self._render_input()

        st.markdown("---")

        self._render_list()

    def _render_input(self):
        """Render the item text field and the add button."""
        col_input, col_add = st.columns([4, 1], vertical_alignment="bottom")

        with col_input:
            st.text_input("Item", key=INPUT_KEY, placeholder="e.g. Milk")

        with col_add:
            st.button(
                "Add",
                key="add_item",
                type="primary",
                use_container_width=True,
                on_click=self.controller.on_add,
            )

    def _render_list(self):
        """Render the item count and the rows."""
        render_shopping_stats(self.controller.count())

        if self.controller.count() == 0:
            st.info("Your shopping list is empty. Type an item above and press **Add**.")
            return

        render_item_list(
            rows=self.controller.get_rows(),
            revision=self.controller.get_revision(),
            height=self.controller.settings.list_height,
        )
