"""
Request models for Easy Ship composite parameters.

These Pydantic models give type safety and validation to the structured
values Easy Ship operations take. Field aliases are the MWS field names, so
a model dumped by alias flattens straight into request parameters. Models
accept either the MWS names or snake_case names on input.

The facade does not require these models: plain mappings are passed
through just the same.
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

__all__ = [
    "PackageDimensions",
    "PackageWeight",
    "PickupSlot",
    "Item",
    "PackageRequestDetails",
    "ScheduledPackageId",
    "ScheduledPackageUpdateDetails",
    "UpdateDetailsListAdapter",
]


class _MWSModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class PackageDimensions(_MWSModel):
    """Package dimensions in centimetres."""
    length: Decimal = Field(..., alias="Length", gt=0)
    width: Decimal = Field(..., alias="Width", gt=0)
    height: Decimal = Field(..., alias="Height", gt=0)
    unit: Literal["Cm"] = Field(default="Cm", alias="Unit")
    identifier: Optional[str] = Field(default=None, alias="Identifier",
                                      description="Seller-defined package dimension preset")


class PackageWeight(_MWSModel):
    """Package weight in grams."""
    value: Decimal = Field(..., alias="Value", gt=0)
    unit: Literal["g"] = Field(default="g", alias="Unit")


class PickupSlot(_MWSModel):
    """A pickup time window, as returned by ListPickupSlots."""
    slot_id: str = Field(..., alias="SlotId", min_length=1)
    pickup_time_start: Optional[datetime] = Field(default=None, alias="PickupTimeStart")
    pickup_time_end: Optional[datetime] = Field(default=None, alias="PickupTimeEnd")


class Item(_MWSModel):
    """An order item in the package."""
    order_item_id: str = Field(..., alias="OrderItemId", min_length=1)
    order_item_serial_number_list: List[str] = Field(
        default_factory=list,
        alias="OrderItemSerialNumberList",
        description="Serial numbers; a warranty document is generated when present",
    )


class PackageRequestDetails(_MWSModel):
    """Package to schedule with CreateScheduledPackage."""
    package_dimensions: PackageDimensions = Field(..., alias="PackageDimensions")
    package_weight: PackageWeight = Field(..., alias="PackageWeight")
    package_pickup_slot: PickupSlot = Field(..., alias="PackagePickupSlot")
    package_item_list: List[Item] = Field(default_factory=list, alias="PackageItemList")
    package_identifier: Optional[str] = Field(default=None, alias="PackageIdentifier")


class ScheduledPackageId(_MWSModel):
    """Identifies a scheduled package."""
    amazon_order_id: str = Field(..., alias="AmazonOrderId", min_length=1)
    package_id: Optional[str] = Field(default=None, alias="PackageId")


class ScheduledPackageUpdateDetails(_MWSModel):
    """New pickup slot for an existing scheduled package."""
    scheduled_package_id: ScheduledPackageId = Field(..., alias="ScheduledPackageId")
    package_pickup_slot: PickupSlot = Field(..., alias="PackagePickupSlot")


# Validates the list argument of UpdateScheduledPackages
UpdateDetailsListAdapter = TypeAdapter(List[ScheduledPackageUpdateDetails])
