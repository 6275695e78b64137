"""
Models layer - shopping list data records.
"""

from models.entities import Item, RenderedRow

__all__ = ["Item", "RenderedRow"]
