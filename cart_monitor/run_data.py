from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass
class HomeData:
    loaded: bool = False


@dataclass
class ProductSummary:
    name: str
    price: Decimal


@dataclass
class CartLineItem:
    name: str
    quantity: int
    line_total: Decimal


@dataclass
class CartSummary:
    line_items: list[CartLineItem] = field(default_factory=list)
    displayed_total: Decimal = Decimal(0)

    @property
    def computed_total(self) -> Decimal:
        return sum((item.line_total for item in self.line_items), Decimal(0))

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self.line_items)


@dataclass
class RunData:
    home:     Optional[HomeData]     = None
    products: list[ProductSummary]   = field(default_factory=list)
    cart:     Optional[CartSummary]  = None
