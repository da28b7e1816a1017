"""
Value objects exchanged with external collaborators.

These are plain dataclasses: they are never persisted locally.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


@dataclass(frozen=True)
class CourseItem:
    """A course line item in a Magento order."""

    sku: str
    name: str = ""
    price: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CourseItem:
        return cls(
            sku=str(data.get("sku", "")),
            name=data.get("name") or "",
            price=int(data.get("price") or 0),
        )


@dataclass(frozen=True)
class OrderSnapshot:
    """Read-only view of a Magento order."""

    order_id: str
    courses: list[CourseItem] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> OrderSnapshot:
        return cls(
            order_id=str(data.get("order_id", "")),
            courses=[CourseItem.from_dict(item) for item in data.get("courses") or []],
        )


@dataclass(frozen=True)
class UserSnapshot:
    """Read-only view of a Magento customer."""

    user_id: str
    phone: str | None = None
    email: str = ""
    full_name: str = ""

    @property
    def has_phone(self) -> bool:
        """Check if the user left a non-blank phone number."""
        return bool(self.phone and self.phone.strip())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserSnapshot:
        return cls(
            user_id=str(data.get("user_id", "")),
            phone=data.get("phone"),
            email=data.get("email") or "",
            full_name=data.get("full_name") or "",
        )


@dataclass(frozen=True)
class FailureEvent:
    """
    Status notification for Bifrost and Marol.

    Attributes:
        id: Charge ID for transaction updates, empty for contact updates
        status: PaymentStatus value being reported
    """

    id: str
    status: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "status": self.status}


@dataclass(frozen=True)
class HttpResult:
    """Outcome of an outbound HTTP call that got an answer."""

    status_code: int
    body: Any = None
