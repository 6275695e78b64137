"""
Controllers layer - orchestration and session state management.
"""

from controllers.shopping_controller import ShoppingController, INPUT_KEY

__all__ = ["ShoppingController", "INPUT_KEY"]
