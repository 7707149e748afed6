# ev_platform/client/cli.py
"""
Command-line front end for the vehicles API.

Usage:
  ev-vehicles list [--search TEXT] [--condition New|Used] [--sort price|range_km|location] [--desc]
  ev-vehicles show ID
  ev-vehicles create --file payload.json
  ev-vehicles update ID price=52000 accidents=false
  ev-vehicles delete ID
"""

import argparse
import json
import sys

from ev_platform.client.api_client import VehicleApiClient, VehicleApiError
from ev_platform.client.carousel import ImageCarousel
from ev_platform.client.catalog import VehicleCatalog
from ev_platform.client.form_validation import FormValidationError
from ev_platform.client.listing import ALL_CONDITIONS, SORT_KEYS

TEXT_FIELDS = {"brand", "model", "color", "condition", "drivetrain", "location", "accident_description"}


def parse_assignment(item: str) -> tuple:
    """'price=52000' → ('price', 52000). Text fields stay strings; everything else is read as JSON."""
    if "=" not in item:
        raise argparse.ArgumentTypeError(f"Expected key=value, got '{item}'")
    key, raw = item.split("=", 1)
    key = key.strip()
    if key in TEXT_FIELDS:
        return key, raw
    try:
        return key, json.loads(raw)
    except json.JSONDecodeError:
        return key, raw


def format_row(vehicle) -> str:
    return (f"{vehicle.id}  {vehicle.brand} {vehicle.model} ({vehicle.year})  "
            f"${vehicle.price:,.0f}  {vehicle.range_km:,.0f} km  {vehicle.condition}  {vehicle.location}")


def print_details(vehicle):
    print(f"🚗 {vehicle.brand} {vehicle.model} ({vehicle.year}) — {vehicle.condition}")
    print(f"   ID:            {vehicle.id}")
    print(f"   Price:         ${vehicle.price:,.2f}")
    print(f"   Range:         {vehicle.range_km:,.0f} km")
    print(f"   Battery:       {vehicle.battery_capacity_kWh} kWh, charging {vehicle.charging_speed_kW} kW")
    print(f"   Drivetrain:    {vehicle.drivetrain}, {vehicle.seats} seats, {vehicle.color}")
    print(f"   Kilometers:    {vehicle.kilometer_count:,}")
    print(f"   Location:      {vehicle.location}")
    print(f"   Autopilot:     {'yes' if vehicle.autopilot else 'no'}")
    if vehicle.accidents:
        print(f"   Accidents:     {vehicle.accident_description}")
    else:
        print("   Accidents:     none reported")
    carousel = ImageCarousel(vehicle.images)
    print(f"   Primary image: {carousel.primary}")
    for image in carousel.images[1:]:
        print(f"                  {image}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ev-vehicles", description="Browse and edit EV listings")
    parser.add_argument("--api", default=None, help="API base URL (default: API_BASE_URL setting)")
    sub = parser.add_subparsers(dest="command", required=True)

    p_list = sub.add_parser("list", help="List vehicles")
    p_list.add_argument("--search", default="", help="Substring of brand or model")
    p_list.add_argument("--condition", default=ALL_CONDITIONS, choices=[ALL_CONDITIONS, "New", "Used"])
    p_list.add_argument("--sort", default=None, choices=SORT_KEYS)
    p_list.add_argument("--desc", action="store_true", help="Sort descending")

    p_show = sub.add_parser("show", help="Show one vehicle")
    p_show.add_argument("vehicle_id")

    p_create = sub.add_parser("create", help="Create a vehicle from a JSON file")
    p_create.add_argument("--file", required=True)

    p_update = sub.add_parser("update", help="Update fields of a vehicle")
    p_update.add_argument("vehicle_id")
    p_update.add_argument("changes", nargs="+", type=parse_assignment, metavar="key=value")

    p_delete = sub.add_parser("delete", help="Delete a vehicle")
    p_delete.add_argument("vehicle_id")
    return parser


def run(args, catalog: VehicleCatalog) -> int:
    if args.command == "list":
        if not catalog.load():
            print(f"❌ {catalog.error}")
            return 1
        catalog.set_search(args.search)
        catalog.set_condition(args.condition)
        catalog.set_sort(args.sort, args.desc)
        view = catalog.view
        if not view:
            print("No vehicles found.")
        for vehicle in view:
            print(format_row(vehicle))
        return 0

    if args.command == "show":
        try:
            vehicle = catalog.client.get_vehicle(args.vehicle_id)
        except VehicleApiError as e:
            print(f"❌ {e}")
            return 1
        print_details(vehicle)
        return 0

    if args.command == "create":
        with open(args.file, encoding="utf-8") as f:
            form = json.load(f)
        created = catalog.add(form)
        if created is None:
            print(f"❌ {catalog.error}")
            return 1
        print(f"✅ Created {format_row(created)}")
        return 0

    if args.command == "update":
        updated = catalog.edit(args.vehicle_id, dict(args.changes))
        if updated is None:
            print(f"❌ {catalog.error}")
            return 1
        print(f"✅ Updated {format_row(updated)}")
        return 0

    if args.command == "delete":
        if not catalog.remove(args.vehicle_id):
            print(f"❌ {catalog.error}")
            return 1
        print(f"🗑️  Deleted {args.vehicle_id}")
        return 0

    return 2


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    catalog = VehicleCatalog(VehicleApiClient(base_url=args.api))
    try:
        return run(args, catalog)
    except FormValidationError as e:
        print("❌ Validation failed:")
        for field, message in e.errors.items():
            print(f"   {field}: {message}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
