"""Caller-supplied inputs: order items, job specifications and customizations."""

from datetime import datetime, timezone
from typing import Any

from pydantic import Field, field_validator

from ...shared.base import ValueObject
from .enums import JobComplexity, JobPriority


def as_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC so comparisons never mix kinds."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class OrderItem(ValueObject):
    """A single line item of a new order; immutable input to the engine."""

    part_name: str = ""
    description: str = ""
    material: str | None = None
    quantity: int | None = None
    assigned_processes: tuple[str, ...] = ()
    specifications: str | None = None

    @property
    def display_name(self) -> str:
        """Part name, falling back to the free-text description."""
        return self.part_name or self.description


class JobSpecification(ValueObject):
    """Bare job specification used for performance prediction."""

    part_name: str
    processes: tuple[str, ...] = ()
    quantity: int = Field(default=1, ge=0)
    complexity: JobComplexity | None = None
    material: str | None = None


class TargetPartSpecs(ValueObject):
    """Part that inherits processes from an archived job."""

    part_name: str
    material: str | None = None
    quantity: int | None = None
    dimensions: dict[str, Any] = Field(default_factory=dict)
    tolerances: dict[str, Any] = Field(default_factory=dict)


class JobCustomizations(ValueObject):
    """Caller overrides applied on top of a suggestion when creating a job."""

    delivery_date: datetime | None = None
    priority: JobPriority | None = None
    special_requirements: tuple[str, ...] = ()
    quality_requirements: dict[str, Any] = Field(default_factory=dict)

    @field_validator("delivery_date")
    @classmethod
    def normalize_delivery_date(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)


class OrderLineItem(ValueObject):
    """Order item fields checked before job creation; null means missing."""

    part_name: str | None = None
    assigned_processes: tuple[str, ...] | None = None
    quantity: int | None = None


class JobCreationOrderData(ValueObject):
    """Order data submitted for job creation."""

    order_id: str | None = None
    order_number: str | None = None
    client_name: str | None = None
    item: OrderLineItem = Field(default_factory=OrderLineItem)
    due_date: datetime | None = None

    @field_validator("item", mode="before")
    @classmethod
    def default_missing_item(cls, v: Any) -> Any:
        return OrderLineItem() if v is None else v

    @field_validator("due_date")
    @classmethod
    def normalize_due_date(cls, v: datetime | None) -> datetime | None:
        return as_utc(v)
