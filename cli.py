#!/usr/bin/env python
"""
Command-line interface for Overpass Places

Usage:
    python cli.py ids-by-name "Berlin"
    python cli.py ids-by-location --lat 52.52 --lon 13.405
    python cli.py features --relation-id 62422 --name Berlin --output berlin.json
"""

import os
import sys
import json
import argparse

from loguru import logger
from overpass_places.config import get_config, validate_config
from overpass_places.collectors import OverpassCollector
from overpass_places.collectors.overpass import get_policy
from overpass_places.models import Place


def setup_logging(verbose: bool = False):
    """Configure logging"""
    logger.remove()
    level = "DEBUG" if verbose else "INFO"
    logger.add(
        sys.stderr,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{message}</cyan>",
        level=level
    )


def _build_collector(args) -> OverpassCollector:
    policy = get_policy(args.policy) if getattr(args, "policy", None) else None
    return OverpassCollector(policy=policy)


def cmd_ids_by_name(args):
    """Print relation ids of administrative boundaries with the given name"""
    relation_ids = _build_collector(args).load_relation_ids_by_name(args.name)
    print(json.dumps(relation_ids))
    return 0


def cmd_ids_by_location(args):
    """Print relation ids of areas containing a point"""
    relation_ids = _build_collector(args).load_relation_ids_by_location(args.lat, args.lon)
    print(json.dumps(relation_ids))
    return 0


def cmd_features(args):
    """Load museums and lodging for a relation into a place"""
    place = Place(name=args.name, relation_id=args.relation_id)
    _build_collector(args).load_features_by_relation_id(args.relation_id, place)

    payload = json.dumps(place.model_dump(), indent=2, ensure_ascii=False)
    if args.output:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(payload)
        logger.info(f"✓ Saved {len(place.features)} features to {args.output}")
    else:
        print(payload)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Overpass Places CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Find relations by name
  python cli.py ids-by-name "Berlin"

  # Find relations containing a point
  python cli.py ids-by-location --lat 52.52 --lon 13.405

  # Museums and hotels of a relation, node-only classification
  python cli.py features --relation-id 62422 --policy node_tourism
        """
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    name_parser = subparsers.add_parser("ids-by-name", help="Find administrative relations by exact name")
    name_parser.add_argument("name", help="Relation name")
    name_parser.set_defaults(func=cmd_ids_by_name)

    loc_parser = subparsers.add_parser("ids-by-location", help="Find relations containing a point")
    loc_parser.add_argument("--lat", type=float, required=True, help="Latitude")
    loc_parser.add_argument("--lon", type=float, required=True, help="Longitude")
    loc_parser.set_defaults(func=cmd_ids_by_location)

    feat_parser = subparsers.add_parser("features", help="Load museums and lodging for a relation")
    feat_parser.add_argument("--relation-id", type=int, required=True, help="OSM relation id")
    feat_parser.add_argument("--name", help="Place name stored with the result")
    feat_parser.add_argument("--policy", help="Classification policy (tourism_amenity, node_tourism)")
    feat_parser.add_argument("--output", "-o", help="Output JSON file (prints to stdout if omitted)")
    feat_parser.set_defaults(func=cmd_features)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)

    try:
        validate_config(get_config())
        if getattr(args, "policy", None):
            get_policy(args.policy)
    except ValueError as e:
        logger.error(str(e))
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
