"""
Shopping list item components.

Provides the single item row and the scrollable list that hosts the rows.
"""

import streamlit as st

from models import RenderedRow


def render_item_row(row: RenderedRow, revision: int):
    """
    Render one shopping list row.

    Args:
        row: Row binding from the adapter
        revision: Current list revision, part of the widget key so every
            mutation recreates the row widgets
    """
    col_item, col_remove = st.columns([6, 1])

    with col_item:
        st.text(row.label_text)

    with col_remove:
        st.button(
            "✕",
            key=f"remove_{revision}_{row.index}",
            help="Remove item",
            on_click=row.on_remove,
        )


def render_item_list(rows: list[RenderedRow], revision: int, height: int = 400):
    """
    Render all rows in a scrollable container.

    Args:
        rows: Row bindings in list order
        revision: Current list revision
        height: Container height in pixels
    """
    list_container = st.container(height=height)
    with list_container:
        for row in rows:
            render_item_row(row, revision)
