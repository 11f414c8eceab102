"""Order domain - prototype pattern."""

from .order import Order, Product

__all__ = ["Order", "Product"]
