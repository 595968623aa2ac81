from enum import Enum
from typing import TypedDict

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.core.capture import ParseResult


class OrderStatus(str, Enum):
    PENDING = "pendiente"
    PREPARING = "en_preparacion"
    ON_THE_WAY = "en_camino"
    DELIVERED = "entregado"
    CANCELLED = "cancelado"

    @property
    def label(self) -> str:
        return STATUS_LABELS[self]


STATUS_LABELS = {
    OrderStatus.PENDING: "Pendiente",
    OrderStatus.PREPARING: "En Preparación",
    OrderStatus.ON_THE_WAY: "En Camino",
    OrderStatus.DELIVERED: "Entregado",
    OrderStatus.CANCELLED: "Cancelado",
}

# Orders not yet delivered nor cancelled.
OPEN_STATUSES = (OrderStatus.PENDING, OrderStatus.PREPARING, OrderStatus.ON_THE_WAY)


class Order(BaseModel):
    """Delivery order as submitted from the order form."""
    recipient_name: str = Field(min_length=3)
    recipient_phone: str = Field(min_length=7)
    recipient_address: str = Field(min_length=5)
    delivery_date: str = Field(min_length=1)
    delivery_time: str = Field(min_length=1)
    gps_url: str | None = None
    delivery_notes: str | None = None
    dedication: str | None = None
    client_name: str = Field(min_length=3)
    client_phone: str = Field(min_length=7)
    client_tax_id: str | None = None
    client_email: EmailStr | None = None
    product_code: str = Field(min_length=1)
    extras: str | None = None
    observations: str | None = None
    price: float | None = None
    billed: bool = False
    status: OrderStatus = OrderStatus.PENDING

    @field_validator("client_email", mode="before")
    @classmethod
    def _empty_email_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class OrderFormState(TypedDict, total=False):
    # --- Recipient ---
    recipient_name: str
    recipient_phone: str
    recipient_address: str
    gps_url: str
    dedication: str

    # --- Delivery ---
    delivery_date: str
    delivery_time: str
    delivery_notes: str

    # --- Client ---
    client_name: str
    client_phone: str
    client_tax_id: str
    client_email: str

    # --- Product ---
    product_code: str
    extras: str
    observations: str

    # --- UI ---
    needs_attention: list[str]           # fields to flag for manual correction


class StaleDeliveryDateError(Exception):
    """A capture was refused because its delivery date is in the past."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def apply_capture(form: OrderFormState, result: ParseResult) -> OrderFormState:
    """Merge a parse result into a copy of the form state.

    Captured fields overwrite the form; fields the parser left unset keep
    their current value. `needs_attention` is replaced by the fields the
    parser could not recover.
    """
    if result.aborted:
        raise StaleDeliveryDateError(result.abort_reason or "Delivery date is in the past")

    merged: OrderFormState = {**form, **result.fields.model_dump(exclude_none=True)}
    merged["needs_attention"] = sorted(result.missing_fields)
    return merged


def validate_order(form: OrderFormState) -> Order:
    """Build an Order from a form state. Raises pydantic.ValidationError."""
    data = {k: v for k, v in form.items() if k != "needs_attention"}
    return Order(**data)


class OrderSummary(BaseModel):
    """Totals over a set of orders, as shown on the billing report."""
    total_sales: float = 0.0
    order_count: int = 0
    delivered_count: int = 0
    pending_count: int = 0


def summarize_orders(orders: list[Order]) -> OrderSummary:
    """Sum prices (unpriced orders count as 0) and count orders by status."""
    return OrderSummary(
        total_sales=sum(order.price or 0 for order in orders),
        order_count=len(orders),
        delivered_count=sum(1 for order in orders if order.status == OrderStatus.DELIVERED),
        pending_count=sum(1 for order in orders if order.status in OPEN_STATUSES),
    )
