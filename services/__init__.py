"""
Services layer - pure business logic, no Streamlit dependencies.
"""

from services.row_adapter import RowAdapter

__all__ = ["RowAdapter"]
