"""
Easy Ship Operations Facade.

One method per Easy Ship action. Each method builds the action's parameter
mapping, hands it to the shared client and returns the client's result.
Easy Ship lets sellers in India manage Amazon Easy Ship orders: find pickup
slots, schedule and reschedule pickups, and fetch package details.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Sequence, Tuple, Union

from pydantic import BaseModel

from ..client_types import SharedClient, Transport
from ..settings import Settings
from ..shared_client import MWSClient

VERSION = "2018-09-01"
PATH = f"/EasyShip/{VERSION}"

# Parameter keys each action expects, in submission order
OPERATION_KEYS: Dict[str, Tuple[str, ...]] = {
    "ListPickupSlots": ("MarketplaceId", "AmazonOrderId", "PackageDimensions", "PackageWeight"),
    "CreateScheduledPackage": ("MarketplaceId", "AmazonOrderId", "PackageRequestDetails"),
    "UpdateScheduledPackages": ("MarketplaceId", "ScheduledPackageUpdateDetailsList"),
    "GetScheduledPackage": ("MarketplaceId", "ScheduledPackageId"),
    "GetServiceStatus": (),
}

Structured = Union[Mapping[str, Any], BaseModel]


class EasyShipClient:
    """
    Facade over a shared MWS client for the Easy Ship API section.

    Design Notes:

    - Stateless except for the injected shared client
    - Exactly one run() per method call, no retries
    - No local validation or error translation: whatever the shared client
      raises reaches the caller as raised
    - Composite values are handed over unchanged; flattening them into
      name/value pairs is the shared client's job
    """

    def __init__(self, client: SharedClient):
        self.client = client

    @classmethod
    def from_settings(cls, settings: Settings, transport: Transport) -> EasyShipClient:
        """
        Build a facade over an MWSClient bound to the Easy Ship section.

        Args:
            settings: Endpoint and seller configuration
            transport: Sends prepared requests

        Returns:
            EasyShipClient ready to use
        """
        return cls(MWSClient(settings, transport, path=PATH, version=VERSION))

    def list_pickup_slots(self, marketplace_id: str, amazon_order_id: str,
                          package_dimensions: Structured, package_weight: Structured) -> Any:
        """
        List pickup time slots for a package of the given size and weight.

        Args:
            marketplace_id: Marketplace of the order
            amazon_order_id: Order to ship
            package_dimensions: Length, Width, Height and Unit
            package_weight: Value and Unit

        Returns:
            Parsed response with the available time slots
        """
        self.client.operation("ListPickupSlots").add({
            "MarketplaceId": marketplace_id,
            "AmazonOrderId": amazon_order_id,
            "PackageDimensions": package_dimensions,
            "PackageWeight": package_weight,
        })
        return self.client.run()

    def create_scheduled_package(self, marketplace_id: str, amazon_order_id: str,
                                 package_request_details: Structured) -> Any:
        """
        Schedule a package pickup in one of the listed slots.

        The order moves to WaitingForPickup, and a shipping label and an
        invoice are generated. A warranty document is generated too when the
        items carry serial numbers.

        Args:
            marketplace_id: Marketplace of the order
            amazon_order_id: Order to ship
            package_request_details: Dimensions, weight, items and pickup slot

        Returns:
            Parsed response with the scheduled package
        """
        self.client.operation("CreateScheduledPackage").add({
            "MarketplaceId": marketplace_id,
            "AmazonOrderId": amazon_order_id,
            "PackageRequestDetails": package_request_details,
        })
        return self.client.run()

    def update_scheduled_packages(self, marketplace_id: str,
                                  scheduled_package_update_details_list: Sequence[Structured]) -> Any:
        """
        Move existing scheduled packages to new pickup slots.

        Args:
            marketplace_id: Marketplace of the orders
            scheduled_package_update_details_list: ScheduledPackageId and new
                PackagePickupSlot for each package

        Returns:
            Parsed response with the updated packages
        """
        self.client.operation("UpdateScheduledPackages").add({
            "MarketplaceId": marketplace_id,
            "ScheduledPackageUpdateDetailsList": scheduled_package_update_details_list,
        })
        return self.client.run()

    def get_scheduled_package(self, marketplace_id: str, scheduled_package_id: Structured) -> Any:
        """
        Get a scheduled package's dimensions, weight, pickup slot, items and status.

        Args:
            marketplace_id: Marketplace of the order
            scheduled_package_id: AmazonOrderId and optional PackageId

        Returns:
            Parsed response with the package details
        """
        self.client.operation("GetScheduledPackage").add({
            "MarketplaceId": marketplace_id,
            "ScheduledPackageId": scheduled_package_id,
        })
        return self.client.run()

    def get_service_status(self) -> Any:
        """Get the operational status (GREEN, YELLOW or RED) of the Easy Ship section."""
        self.client.operation("GetServiceStatus")
        return self.client.run()
