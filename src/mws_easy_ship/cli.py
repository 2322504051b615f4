"""
MWS Easy Ship CLI

Builds Easy Ship requests without sending them:
- operations: List supported operations and their parameters
- preview <operation>: Show the flattened request an operation would send

Composite values (dimensions, weight, package details) are passed as JSON
using MWS field names, e.g. '{"Length": 10, "Width": 10, "Height": 5}'.
"""
from __future__ import annotations

import logging
import typer
from typing import Optional

from .cli_context import CLIContext
from .models import (
    PackageDimensions, PackageRequestDetails, PackageWeight, ScheduledPackageId,
    UpdateDetailsListAdapter,
)
from .operations import OPERATION_KEYS, run_and_exit
from .operations.printers import print_operations, print_prepared_request

app = typer.Typer(name="mws-easy-ship", help="MWS Easy Ship CLI")
preview_app = typer.Typer(help="Build an Easy Ship request and print it without sending it")
app.add_typer(preview_app, name="preview")

_MARKETPLACE_HELP = "Marketplace ID (defaults to MWS_MARKETPLACE_ID)"
_JSON_HELP = "Print parameters as JSON"

@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging")
) -> None:
    """MWS Easy Ship CLI."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

@app.command()
def operations() -> None:
    """List supported operations and the parameters each one submits."""
    print_operations(OPERATION_KEYS)

@preview_app.command("list-pickup-slots")
def list_pickup_slots(
    amazon_order_id: str = typer.Argument(..., help="Amazon order ID"),
    dimensions: str = typer.Option(..., "--dimensions", help="PackageDimensions as JSON"),
    weight: str = typer.Option(..., "--weight", help="PackageWeight as JSON"),
    marketplace_id: Optional[str] = typer.Option(None, "--marketplace-id", help=_MARKETPLACE_HELP),
    as_json: bool = typer.Option(False, "--json", help=_JSON_HELP),
) -> None:
    """Preview a ListPickupSlots request."""

    def _preview() -> None:
        context = CLIContext.from_env()
        request = context.client.list_pickup_slots(
            context.marketplace_id(marketplace_id),
            amazon_order_id,
            PackageDimensions.model_validate_json(dimensions),
            PackageWeight.model_validate_json(weight),
        )
        print_prepared_request(request, as_json=as_json)

    run_and_exit(_preview)

@preview_app.command("create-scheduled-package")
def create_scheduled_package(
    amazon_order_id: str = typer.Argument(..., help="Amazon order ID"),
    details: str = typer.Option(..., "--details", help="PackageRequestDetails as JSON"),
    marketplace_id: Optional[str] = typer.Option(None, "--marketplace-id", help=_MARKETPLACE_HELP),
    as_json: bool = typer.Option(False, "--json", help=_JSON_HELP),
) -> None:
    """Preview a CreateScheduledPackage request."""

    def _preview() -> None:
        context = CLIContext.from_env()
        request = context.client.create_scheduled_package(
            context.marketplace_id(marketplace_id),
            amazon_order_id,
            PackageRequestDetails.model_validate_json(details),
        )
        print_prepared_request(request, as_json=as_json)

    run_and_exit(_preview)

@preview_app.command("update-scheduled-packages")
def update_scheduled_packages(
    updates: str = typer.Option(..., "--updates", help="List of ScheduledPackageUpdateDetails as JSON"),
    marketplace_id: Optional[str] = typer.Option(None, "--marketplace-id", help=_MARKETPLACE_HELP),
    as_json: bool = typer.Option(False, "--json", help=_JSON_HELP),
) -> None:
    """Preview an UpdateScheduledPackages request."""

    def _preview() -> None:
        context = CLIContext.from_env()
        request = context.client.update_scheduled_packages(
            context.marketplace_id(marketplace_id),
            UpdateDetailsListAdapter.validate_json(updates),
        )
        print_prepared_request(request, as_json=as_json)

    run_and_exit(_preview)

@preview_app.command("get-scheduled-package")
def get_scheduled_package(
    amazon_order_id: str = typer.Argument(..., help="Amazon order ID"),
    package_id: Optional[str] = typer.Option(None, "--package-id", help="Package ID within the order"),
    marketplace_id: Optional[str] = typer.Option(None, "--marketplace-id", help=_MARKETPLACE_HELP),
    as_json: bool = typer.Option(False, "--json", help=_JSON_HELP),
) -> None:
    """Preview a GetScheduledPackage request."""

    def _preview() -> None:
        context = CLIContext.from_env()
        request = context.client.get_scheduled_package(
            context.marketplace_id(marketplace_id),
            ScheduledPackageId(amazon_order_id=amazon_order_id, package_id=package_id),
        )
        print_prepared_request(request, as_json=as_json)

    run_and_exit(_preview)

@preview_app.command("get-service-status")
def get_service_status(
    as_json: bool = typer.Option(False, "--json", help=_JSON_HELP),
) -> None:
    """Preview a GetServiceStatus request."""

    def _preview() -> None:
        context = CLIContext.from_env()
        print_prepared_request(context.client.get_service_status(), as_json=as_json)

    run_and_exit(_preview)


if __name__ == "__main__":
    app()
