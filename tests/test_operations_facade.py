"""
Test EasyShipClient facade wiring.

Validates that each facade method submits exactly the documented parameter
keys to the shared client, runs exactly once, and returns or raises whatever
the shared client does.
"""
from __future__ import annotations

from unittest.mock import Mock

import pytest

from mws_easy_ship.client_types import PreparedRequest
from mws_easy_ship.models import PackageDimensions, PackageWeight
from mws_easy_ship.operations import OPERATION_KEYS, PATH, VERSION, EasyShipClient
from mws_easy_ship.shared_client import MWSClient
from tests.fakes.fake_shared_client import FakeSharedClient


REQUEST_DETAILS = {
    "PackageDimensions": {"Length": 10, "Width": 8, "Height": 5},
    "PackageWeight": {"Value": 500},
    "PackagePickupSlot": {"SlotId": "SLOT1"},
}
UPDATE_LIST = [
    {"ScheduledPackageId": {"AmazonOrderId": "ORDER1"}, "PackagePickupSlot": {"SlotId": "SLOT2"}},
]
PACKAGE_ID = {"AmazonOrderId": "ORDER1", "PackageId": "PKG1"}


def _call_each(facade: EasyShipClient, dims, weight) -> None:
    facade.list_pickup_slots("MKT1", "ORDER1", dims, weight)
    facade.create_scheduled_package("MKT1", "ORDER1", REQUEST_DETAILS)
    facade.update_scheduled_packages("MKT1", UPDATE_LIST)
    facade.get_scheduled_package("MKT1", PACKAGE_ID)
    facade.get_service_status()


class TestEasyShipClientFacade:
    """Test parameter mappings submitted by each operation."""

    def test_facade_initialization(self, shared_client):
        facade = EasyShipClient(shared_client)
        assert facade.client is shared_client

    def test_list_pickup_slots_mapping(self, shared_client, dims, weight):
        """Test list_pickup_slots submits exactly the given values."""
        EasyShipClient(shared_client).list_pickup_slots("MKT1", "ORDER1", dims, weight)

        op = shared_client.operations[0]
        assert op.name == "ListPickupSlots"
        assert op.params == {
            "MarketplaceId": "MKT1",
            "AmazonOrderId": "ORDER1",
            "PackageDimensions": dims,
            "PackageWeight": weight,
        }

    def test_composite_values_passed_through_unchanged(self, shared_client):
        """Test composite inputs reach the shared client as the same objects."""
        dims = PackageDimensions(length=10, width=8, height=5)
        weight = PackageWeight(value=500)

        EasyShipClient(shared_client).list_pickup_slots("MKT1", "ORDER1", dims, weight)

        params = shared_client.operations[0].params
        assert params["PackageDimensions"] is dims
        assert params["PackageWeight"] is weight

    def test_create_scheduled_package_mapping(self, shared_client):
        EasyShipClient(shared_client).create_scheduled_package("MKT1", "ORDER1", REQUEST_DETAILS)

        op = shared_client.operations[0]
        assert op.name == "CreateScheduledPackage"
        assert op.params == {
            "MarketplaceId": "MKT1",
            "AmazonOrderId": "ORDER1",
            "PackageRequestDetails": REQUEST_DETAILS,
        }

    def test_update_scheduled_packages_mapping(self, shared_client):
        EasyShipClient(shared_client).update_scheduled_packages("MKT1", UPDATE_LIST)

        op = shared_client.operations[0]
        assert op.name == "UpdateScheduledPackages"
        assert op.params == {
            "MarketplaceId": "MKT1",
            "ScheduledPackageUpdateDetailsList": UPDATE_LIST,
        }
        assert op.params["ScheduledPackageUpdateDetailsList"] is UPDATE_LIST

    def test_get_scheduled_package_mapping(self, shared_client):
        EasyShipClient(shared_client).get_scheduled_package("MKT1", PACKAGE_ID)

        op = shared_client.operations[0]
        assert op.name == "GetScheduledPackage"
        assert op.params == {"MarketplaceId": "MKT1", "ScheduledPackageId": PACKAGE_ID}

    def test_get_service_status_has_no_parameters(self, shared_client):
        """Test get_service_status never calls add()."""
        EasyShipClient(shared_client).get_service_status()

        op = shared_client.operations[0]
        assert op.name == "GetServiceStatus"
        assert op.add_calls == []

    def test_keys_match_operation_table(self, shared_client, dims, weight):
        """Test every submitted mapping has exactly the keys in OPERATION_KEYS, in order."""
        _call_each(EasyShipClient(shared_client), dims, weight)

        assert [op.name for op in shared_client.operations] == list(OPERATION_KEYS)
        for op in shared_client.operations:
            assert tuple(op.params) == OPERATION_KEYS[op.name]
            assert len(op.add_calls) <= 1


class TestEasyShipClientRuns:
    """Test run() delegation and result/error pass-through."""

    def test_one_run_per_call(self, shared_client, dims, weight):
        _call_each(EasyShipClient(shared_client), dims, weight)

        assert len(shared_client.runs) == len(OPERATION_KEYS)
        assert shared_client.runs == shared_client.operations

    def test_returns_shared_client_result(self):
        client = Mock()
        client.run.return_value = sentinel = object()

        result = EasyShipClient(client).get_scheduled_package("MKT1", PACKAGE_ID)

        assert result is sentinel
        client.operation.assert_called_once_with("GetScheduledPackage")
        client.operation.return_value.add.assert_called_once_with(
            {"MarketplaceId": "MKT1", "ScheduledPackageId": PACKAGE_ID}
        )
        client.run.assert_called_once_with()

    def test_identical_calls_are_independent(self, shared_client, dims, weight):
        """Test two identical calls produce two runs with identical mappings."""
        facade = EasyShipClient(shared_client)

        first = facade.list_pickup_slots("MKT1", "ORDER1", dims, weight)
        second = facade.list_pickup_slots("MKT1", "ORDER1", dims, weight)

        assert len(shared_client.runs) == 2
        assert shared_client.runs[0] is not shared_client.runs[1]
        assert shared_client.runs[0].params == shared_client.runs[1].params
        assert first != second

    def test_errors_propagate_unchanged(self, dims, weight):
        error = ConnectionError("service unavailable")
        shared_client = FakeSharedClient(error=error)

        with pytest.raises(ConnectionError) as exc_info:
            EasyShipClient(shared_client).list_pickup_slots("MKT1", "ORDER1", dims, weight)

        assert exc_info.value is error
        assert len(shared_client.runs) == 1


class TestFromSettings:
    """Test facade construction over MWSClient."""

    def test_binds_easy_ship_path_and_version(self, settings, transport):
        facade = EasyShipClient.from_settings(settings, transport)

        assert isinstance(facade.client, MWSClient)
        assert facade.client.path == PATH == "/EasyShip/2018-09-01"
        assert facade.client.version == VERSION

    def test_end_to_end_dry_run(self, settings, transport, dims, weight):
        """Test a facade call flattens through MWSClient into one prepared request."""
        facade = EasyShipClient.from_settings(settings, transport)

        request = facade.list_pickup_slots("A21TJRUUN4KGV", "ORDER1", dims, weight)

        assert isinstance(request, PreparedRequest)
        assert transport.sent == [request]
        assert request.url == "https://mws.amazonservices.in/EasyShip/2018-09-01"
        assert request.params == {
            "Action": "ListPickupSlots",
            "SellerId": "SELLER1",
            "MarketplaceId": "A21TJRUUN4KGV",
            "AmazonOrderId": "ORDER1",
            "PackageDimensions.Length": "10",
            "PackageDimensions.Width": "8",
            "PackageDimensions.Height": "5",
            "PackageDimensions.Unit": "Cm",
            "PackageWeight.Value": "500",
            "PackageWeight.Unit": "g",
            "Version": "2018-09-01",
        }

    def test_update_list_flattens_members(self, settings, transport):
        facade = EasyShipClient.from_settings(settings, transport)

        request = facade.update_scheduled_packages("MKT1", UPDATE_LIST)

        prefix = "ScheduledPackageUpdateDetailsList.member.1"
        assert request.params[f"{prefix}.ScheduledPackageId.AmazonOrderId"] == "ORDER1"
        assert request.params[f"{prefix}.PackagePickupSlot.SlotId"] == "SLOT2"
