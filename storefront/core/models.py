"""Domain models for the storefront core.

All models in this module use only Python standard library types,
keeping the core free of external dependencies.
"""

import math
from dataclasses import dataclass
from typing import Any, Literal, TypeAlias

ChargeStatus: TypeAlias = Literal["success", "failed"]

PAYMENT_ERROR = "payment_error"


@dataclass(frozen=True)
class ShippingQuote:
    """A quote returned by a shipping-rate source."""

    cost: float
    estimated_days: int

    def __post_init__(self) -> None:
        """Validate quote invariants on creation."""
        if not math.isfinite(self.cost) or self.cost <= 0:
            raise ValueError(f"cost must be positive, got {self.cost}")
        if (
            isinstance(self.estimated_days, bool)
            or not isinstance(self.estimated_days, int)
            or self.estimated_days <= 0
        ):
            raise ValueError(
                f"estimated_days must be a positive whole number, got {self.estimated_days}"
            )


@dataclass(frozen=True)
class Order:
    """An order awaiting payment."""

    total_amount: float

    def __post_init__(self) -> None:
        """Validate order invariants on creation."""
        if not math.isfinite(self.total_amount) or self.total_amount < 0:
            raise ValueError(
                f"total_amount must be a finite non-negative amount, got {self.total_amount}"
            )


@dataclass(frozen=True)
class PaymentMethod:
    """Opaque card details handed to the payment charger."""

    card_number: str

    def __post_init__(self) -> None:
        """Validate payment method invariants on creation."""
        if not self.card_number or not self.card_number.strip():
            raise ValueError("card_number must be a non-empty string")


@dataclass(frozen=True)
class ChargeResult:
    """Outcome reported by the payment charger for one charge attempt."""

    status: ChargeStatus

    @property
    def is_success(self) -> bool:
        return self.status == "success"


@dataclass(frozen=True)
class OrderResult:
    """Outcome of submitting an order.

    A declined charge is a business failure and is carried here with an
    error code rather than raised.
    """

    success: bool
    error: str | None = None

    def __post_init__(self) -> None:
        if self.success and self.error is not None:
            raise ValueError("successful order results cannot carry an error")
        if not self.success and not self.error:
            raise ValueError("failed order results must carry an error code")

    @classmethod
    def succeeded(cls) -> "OrderResult":
        return cls(success=True)

    @classmethod
    def payment_failed(cls) -> "OrderResult":
        return cls(success=False, error=PAYMENT_ERROR)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire shape used by the CLI."""
        if self.success:
            return {"success": True}
        return {"success": False, "error": self.error}


@dataclass(frozen=True)
class EmailMessage:
    """A (recipient, body) pair handed to the email sender."""

    recipient: str
    body: str


@dataclass(frozen=True)
class OneTimeCode:
    """A login code produced by the code generator."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"code value must be non-negative, got {self.value}")

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Coupon:
    """A discount code and its fractional discount."""

    code: str
    discount: float

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("code must be a non-empty string")
        if not 0 < self.discount < 1:
            raise ValueError(
                f"discount must be between 0 and 1, got {self.discount}"
            )


@dataclass(frozen=True)
class Product:
    """A product submitted for publication."""

    name: str
    price: float


@dataclass(frozen=True)
class ProductError:
    """Reason a product could not be published."""

    code: Literal["invalid_name", "invalid_price"]
    message: str


@dataclass(frozen=True)
class ProductResult:
    """Outcome of publishing a product."""

    success: bool
    message: str | None = None
    error: ProductError | None = None


__all__ = [
    "PAYMENT_ERROR",
    "ChargeResult",
    "ChargeStatus",
    "Coupon",
    "EmailMessage",
    "OneTimeCode",
    "Order",
    "OrderResult",
    "PaymentMethod",
    "Product",
    "ProductError",
    "ProductResult",
    "ShippingQuote",
]
