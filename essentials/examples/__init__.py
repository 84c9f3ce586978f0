"""Example view-models built on the command system."""
from .cart_viewmodel import CartViewModel

__all__ = ["CartViewModel"]
