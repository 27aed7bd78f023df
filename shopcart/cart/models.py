"""Cart snapshot models with Decimal-based pricing."""
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Iterable, Optional, Tuple

from shopcart.models import CatalogProduct
from shopcart.services.money import parse_price, to_decimal, round_money, multiply, add


@dataclass(frozen=True)
class CartItem:
    """Single line in the cart; `amount` is the quantity the user picked."""
    id: int
    title: str
    price: Decimal
    image: str = ""
    amount: int = 1

    def __post_init__(self):
        # Frozen, so normalize through object.__setattr__
        object.__setattr__(self, "price", to_decimal(self.price))

    @property
    def subtotal(self) -> Decimal:
        """Price for all units of this line."""
        return round_money(multiply(self.price, self.amount))

    def with_amount(self, amount: int) -> "CartItem":
        """Copy of this line with a different quantity."""
        return replace(self, amount=amount)

    @classmethod
    def from_catalog(cls, product: CatalogProduct, amount: int = 1) -> "CartItem":
        return cls(
            id=product.id,
            title=product.title,
            price=product.price,
            image=product.image,
            amount=amount,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "title": self.title,
            "price": str(self.price),
            "image": self.image,
            "amount": self.amount,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CartItem":
        """Create from dictionary."""
        return cls(
            id=int(data["id"]),
            title=data["title"],
            price=parse_price(data["price"]),
            image=data.get("image", ""),
            amount=int(data["amount"]),
        )


@dataclass(frozen=True)
class Cart:
    """Immutable cart snapshot: ordered, unique by product id."""
    items: Tuple[CartItem, ...] = field(default_factory=tuple)

    def __post_init__(self):
        items = tuple(self.items)
        ids = [item.id for item in items]
        if len(ids) != len(set(ids)):
            raise ValueError("Cart items must be unique by id")
        object.__setattr__(self, "items", items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    @property
    def ids(self) -> Tuple[int, ...]:
        return tuple(item.id for item in self.items)

    @property
    def total_items(self) -> int:
        """Total number of units in cart."""
        return sum(item.amount for item in self.items)

    @property
    def total(self) -> Decimal:
        """Sum of line subtotals."""
        total = Decimal("0")
        for item in self.items:
            total = add(total, item.subtotal)
        return round_money(total)

    def get(self, product_id: int) -> Optional[CartItem]:
        return next((item for item in self.items if item.id == product_id), None)

    def to_list(self) -> list:
        """Convert to the JSON array persisted by DurableStore."""
        return [item.to_dict() for item in self.items]

    @classmethod
    def from_list(cls, data: Iterable[dict]) -> "Cart":
        """Create from the persisted JSON array."""
        return cls(items=tuple(CartItem.from_dict(item) for item in data))
