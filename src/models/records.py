"""Record models for rows handed over by the dashboard's data layer.

Rows arrive as plain dicts (ISO date strings, extra columns, missing optional
columns). These models coerce types only; they do not reject business-level
inconsistencies such as negative quantities or an expiry before the
reference date.
"""

from datetime import date as Date, datetime, timezone
from enum import Enum
from typing import Any, Iterable, List, Optional, Type, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class LedgerStatus(str, Enum):
    """Lifecycle status of a stock lot or usage record."""
    ACTIVE = "active"
    USED = "used"
    EXPIRED = "expired"


class LifecycleRecord(BaseModel):
    """
    A date-bounded record (batch, ingredient lot, license, document).

    Attributes:
        record_id: Identifier of the record
        name: Display name (batch number, license name, ...)
        reference_date: Manufacturing, issue or purchase date
        expiry_date: Expiry date (None if the record never expires)
    """
    record_id: str = Field(
        ...,
        validation_alias=AliasChoices("record_id", "id"),
        description="Record identifier",
    )
    name: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("name", "batch_number", "license_name", "document_name"),
        description="Display name",
    )
    reference_date: Date = Field(
        ...,
        validation_alias=AliasChoices(
            "reference_date", "manufacturing_date", "issue_date", "purchase_date"
        ),
        description="Manufacturing, issue or purchase date",
    )
    expiry_date: Optional[Date] = Field(None, description="Expiry date")

    model_config = ConfigDict(extra="ignore", frozen=True, from_attributes=True)

    @field_validator("record_id", mode="before")
    @classmethod
    def record_id_as_string(cls, v):
        """Database ids may be integers or UUIDs."""
        return v if isinstance(v, str) else str(v)

    @property
    def has_inverted_dates(self) -> bool:
        """True when the expiry date precedes the reference date."""
        return self.expiry_date is not None and self.expiry_date < self.reference_date


class LedgerEntry(BaseModel):
    """
    One stock, purchase or usage record.

    Stock lots carry ``original_quantity`` (quantity at purchase). A ``used``
    entry without it is a usage event: it records consumption only and was
    never acquired as a lot.

    Attributes:
        quantity: Quantity currently on the record (remaining for lots, consumed for usage)
        unit: Unit of measure
        cost_per_unit: Cost per unit (None if unknown)
        status: active | used | expired
        timestamp: When the record was created (purchase or usage time), UTC
        original_quantity: Quantity at acquisition (stock lots only)
    """
    quantity: float = Field(default=0.0, description="Quantity on the record")
    unit: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("unit", "default_unit"),
        description="Unit of measure",
    )
    cost_per_unit: Optional[float] = Field(None, description="Cost per unit")
    status: LedgerStatus = Field(default=LedgerStatus.ACTIVE, description="Lifecycle status")
    timestamp: Optional[datetime] = Field(
        None,
        validation_alias=AliasChoices("timestamp", "purchase_date", "usage_date", "created_at"),
        description="Creation time of the record",
    )
    original_quantity: Optional[float] = Field(None, description="Quantity at acquisition")

    model_config = ConfigDict(extra="ignore", frozen=True, from_attributes=True)

    @field_validator("timestamp")
    @classmethod
    def timestamp_as_utc(cls, v):
        """Plain dates and naive times are taken as UTC so all timestamps compare."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @property
    def is_usage_event(self) -> bool:
        return self.status == LedgerStatus.USED and self.original_quantity is None

    @property
    def acquired_quantity(self) -> float:
        if self.is_usage_event:
            return 0.0
        if self.original_quantity is not None:
            return self.original_quantity
        return self.quantity

    @property
    def consumed_quantity(self) -> float:
        if self.is_usage_event:
            return self.quantity
        if self.status == LedgerStatus.USED:
            return self.original_quantity
        return 0.0

    @property
    def purchase_cost(self) -> float:
        """Spend on the lot at purchase (acquired quantity x cost per unit)."""
        return self.acquired_quantity * (self.cost_per_unit or 0.0)

    @property
    def line_cost(self) -> float:
        return self.quantity * (self.cost_per_unit or 0.0)


class ChecklistItem(BaseModel):
    """A compliance checklist item."""
    completed: bool = Field(default=False, description="Whether the item is done")
    verified_at: Optional[datetime] = Field(None, description="Verification time")
    title: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("title", "checklist_item"),
        description="Checklist item text",
    )

    model_config = ConfigDict(extra="ignore", frozen=True, from_attributes=True)


class StockPosition(BaseModel):
    """Stock level of a batch or ingredient together with its earliest expiry."""
    record: LifecycleRecord
    stock_level: float = Field(default=0.0, description="Units in stock")
    reorder_level: float = Field(default=0.0, description="Reorder threshold")
    recalled: bool = Field(default=False, description="Batch has been recalled")

    model_config = ConfigDict(extra="ignore", frozen=True, from_attributes=True)


ModelT = TypeVar("ModelT", bound=BaseModel)


def coerce_records(model: Type[ModelT], rows: Iterable[Any]) -> List[ModelT]:
    """
    Convert raw rows into ``model`` instances.

    Instances of ``model`` are kept as-is; anything else goes through
    ``model.model_validate`` (dicts, or objects read through their attributes).

    Raises:
        pydantic.ValidationError: If a row cannot be coerced
    """
    return [row if isinstance(row, model) else model.model_validate(row) for row in rows]
