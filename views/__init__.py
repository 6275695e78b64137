"""
Views layer - UI presentation components.
"""

from views.shopping_view import ShoppingView

__all__ = ["ShoppingView"]
