"""
Shopping list statistics component.
"""

import streamlit as st


def render_shopping_stats(total: int):
    """
    Render the shopping list item count.

    Args:
        total: Total number of items
    """
    st.metric("Items", total)
