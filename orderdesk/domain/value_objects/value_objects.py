"""Domain value objects - pure Python immutable types."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional
from uuid import UUID, uuid4

CENTS = Decimal("0.01")


def round_money(amount: Decimal) -> Decimal:
    """Round a monetary amount to 2 places, halves away from zero."""
    return Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class ProductSnapshot:
    """
    Product fields as read from the catalog at query time.

    CRITICAL: price is always a Decimal, never float!
    """

    product_id: int
    name: str
    price: Decimal
    stock: int
    description: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            object.__setattr__(self, "price", Decimal(str(self.price)))
        if self.price < 0:
            raise ValueError(f"Product price cannot be negative: {self.price}")
        if self.stock < 0:
            raise ValueError(f"Product stock cannot be negative: {self.stock}")

    def has_stock_for(self, quantity: int) -> bool:
        """Check whether the current stock covers the requested quantity."""
        return quantity <= self.stock


@dataclass(frozen=True)
class OwnerSummary:
    """Reduced view of the user owning an order."""

    user_id: int
    name: str
    email: str


@dataclass(frozen=True)
class ExecutionID:
    """Unique identifier for workflow execution tracing."""

    value: UUID

    @classmethod
    def generate(cls) -> "ExecutionID":
        """Generate a new ExecutionID."""
        return cls(value=uuid4())

    def __str__(self) -> str:
        """Return string representation."""
        return str(self.value)
