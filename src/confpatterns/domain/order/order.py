"""Order aggregate - prototype pattern.

Orders own copies of their products, so cloning an order never shares
product state with the original.
"""
import copy
from dataclasses import dataclass, field
from typing import List

from confpatterns.domain.core.exceptions import OrderValidationError


@dataclass
class Product:
    """A priced product line."""
    name: str
    price: float

    def __post_init__(self):
        """Post initialization validation."""
        if self.price < 0:
            raise OrderValidationError("price", self.price)

    def clone(self) -> "Product":
        return copy.copy(self)

    def render(self) -> str:
        return f"Product: {self.name}, Price: {self.price:g}"


@dataclass
class Order:
    """Order aggregate root."""
    shipping_cost: float
    discount: float
    payment_method: str
    products: List[Product] = field(default_factory=list)

    def __post_init__(self):
        """Post initialization validation."""
        if self.shipping_cost < 0:
            raise OrderValidationError("shipping_cost", self.shipping_cost)
        if self.discount < 0:
            raise OrderValidationError("discount", self.discount)
        # The order owns its products
        self.products = [product.clone() for product in self.products]

    def add_product(self, product: Product) -> None:
        """Add a copy of ``product`` to the order."""
        self.products.append(product.clone())

    def clone(self) -> "Order":
        """Return an independent copy of the order and its products."""
        return Order(
            shipping_cost=self.shipping_cost,
            discount=self.discount,
            payment_method=self.payment_method,
            products=self.products,
        )

    def total(self) -> float:
        """Sum of product prices plus shipping, minus the discount."""
        return sum(product.price for product in self.products) + self.shipping_cost - self.discount

    def render(self) -> str:
        lines = ["Order details:"]
        lines.extend(product.render() for product in self.products)
        lines.append(
            f"Shipping Cost: {self.shipping_cost:g}, "
            f"Discount: {self.discount:g}, "
            f"Payment: {self.payment_method}"
        )
        return "\n".join(lines)
