"""
Reusable UI components.
"""

from views.components.shopping_item import render_item_row, render_item_list
from views.components.shopping_stats import render_shopping_stats

__all__ = [
    "render_item_row",
    "render_item_list",
    "render_shopping_stats",
]
