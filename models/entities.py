"""
Shopping list entities.

These are plain in-memory records. Nothing here is persisted.
"""

from dataclasses import dataclass
from typing import Callable


@dataclass(eq=False)
class Item:
    """
    A single shopping list entry.

    The name is kept exactly as typed. Items compare by identity, so two
    entries with the same name are still two separate rows.
    """
    name: str


@dataclass(frozen=True)
class RenderedRow:
    """Row binding for one visible position: label text and a remove trigger."""
    index: int
    label_text: str
    on_remove: Callable[[], None]
