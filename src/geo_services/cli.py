from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table

from geo_services.errors import is_error
from geo_services.providers.factory import Services, build_services


def _route_table(envelope: Dict[str, Any]) -> Table:
    route = envelope["route"]
    table = Table(title=f"Route: {route.get('distance', '')} ({route.get('formattedTime', '')})")
    table.add_column("#")
    table.add_column("Turn")
    table.add_column("Narrative")
    table.add_column("Distance")
    table.add_column("Time")
    for i, d in enumerate(route.get("directions") or [], start=1):
        table.add_row(str(i), d["turnType"], d["narrative"], f"{d['distance']:.2f}", d["time"])
    return table


def _midpoint_table(envelope: Dict[str, Any], source: str, destination: str) -> Table:
    mid = envelope["midway"]
    table = Table(title="Route midpoint")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Mid lat")
    table.add_column("Mid lng")
    table.add_row(source, destination, f"{mid['lat']:.6f}", f"{mid['lng']:.6f}")
    return table


def _run(args: argparse.Namespace, services: Services) -> Dict[str, Any]:
    if args.command == "route":
        return services.directions.get_route(args.source, args.destination)
    if args.command == "midpoint":
        return services.directions.get_midpoint(args.source, args.destination)
    if args.command == "geocode":
        if args.address:
            return services.location.get_coordinates_using_address(args.address)
        return services.location.get_coordinates_using_components(
            args.street, args.city, args.state, args.postal_code
        )
    if args.command == "reverse":
        return services.location.get_address(args.lat, args.lng)
    return services.places.get_venues(args.lat, args.lng)


def _parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="geo-services")
    ap.add_argument("--provider", default=None, help="Route provider: mapquest or mock (default from settings)")
    ap.add_argument("--debug", action="store_true")
    sub = ap.add_subparsers(dest="command", required=True)

    for name in ("route", "midpoint"):
        p = sub.add_parser(name)
        p.add_argument("source", help="Origin as 'lat,lng'")
        p.add_argument("destination", help="Destination as 'lat,lng'")

    p = sub.add_parser("geocode")
    p.add_argument("address", nargs="?", default=None)
    p.add_argument("--street")
    p.add_argument("--city")
    p.add_argument("--state")
    p.add_argument("--postal-code", dest="postal_code")

    for name in ("reverse", "venues"):
        p = sub.add_parser(name)
        p.add_argument("lat")
        p.add_argument("lng")

    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s [geo-services] %(levelname)s %(name)s %(message)s",
    )

    services = build_services(route_provider=args.provider)
    envelope = _run(args, services)

    console = Console()
    if is_error(envelope):
        console.print(f"[red]{envelope['error']['message']}[/red]")
        console.print_json(json.dumps(envelope))
        return 1

    if args.command == "route":
        console.print(_route_table(envelope))
    elif args.command == "midpoint":
        console.print(_midpoint_table(envelope, args.source, args.destination))
    else:
        console.print_json(json.dumps(envelope))
    return 0


if __name__ == "__main__":
    sys.exit(main())
