"""Command-line interface for tankmates.

Subcommands:
- lookup: show the catalog entry for a species or tank
- list: list animals, tanks or food in the data pack
- check: infer the minimum viable tank for a group of species
- validate: check every exhibit of an aquarium file
- expand: find exhibits of an aquarium that can take new animals
"""

import argparse
import itertools
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .aquarium import SpeciesCount, animals_from_counts
from .catalog import CatalogError, GameData
from .check import check_for_viable_tank, try_expand_tank, validate_aquarium
from .constants import DATA_ROOT_ENV_VAR, DEFAULT_DATA_ROOT, DEFAULT_SCHEMA_DIR
from .environment import environment_for_exhibit
from .loader import DataLoadError, load_aquarium, load_game_data
from .report import (
    environment_differences,
    format_aquarium_result,
    format_check_result,
    violation_messages,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def species_count(value: str) -> SpeciesCount:
    """argparse type for SPECIES=COUNT"""
    species, sep, count = value.rpartition("=")
    if not sep or not species:
        raise argparse.ArgumentTypeError(f"expected SPECIES=COUNT, got '{value}'")
    try:
        count = int(count)
    except ValueError:
        raise argparse.ArgumentTypeError(f"count must be a number in '{value}'")
    if count < 1:
        raise argparse.ArgumentTypeError(f"count must be positive in '{value}'")
    return SpeciesCount(species, count)


def default_data_root() -> Path:
    return Path(os.environ.get(DATA_ROOT_ENV_VAR, DEFAULT_DATA_ROOT))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tankmates",
        description="Aquarium stocking compatibility checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Minimum tank for five tangs and two clownfish, fully grown
  tankmates check yellow_tang=5 clownfish=2 --assume-fully-grown

  # Validate a saved aquarium
  tankmates validate my_aquarium.yaml

  # Where could three shrimp go?
  tankmates expand my_aquarium.yaml cleaner_shrimp=3 --all
        """,
    )
    parser.add_argument(
        "--data", type=Path, default=None, metavar="DIR",
        help=f"Data pack directory (default: ${DATA_ROOT_ENV_VAR}, else {DEFAULT_DATA_ROOT})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    lookup = subparsers.add_parser("lookup", help="Show a species or tank model")
    lookup.add_argument("term", help="Substring of a species or tank id")

    listing = subparsers.add_parser("list", help="List catalog entries")
    listing.add_argument("kind", choices=["animals", "tanks", "food"])

    check = subparsers.add_parser("check", help="Find the minimum viable tank for some species")
    check.add_argument("species", nargs="+", type=species_count, metavar="SPECIES=COUNT")
    check.add_argument(
        "-a", "--assume-fully-grown", action="store_true",
        help="Treat every animal as fully grown instead of at its earliest stage",
    )
    check.add_argument("-d", "--debug", action="store_true", help="Print raw environment")

    validate = subparsers.add_parser("validate", help="Check every exhibit of an aquarium")
    validate.add_argument("aquarium", type=Path, metavar="AQUARIUM.yaml")
    validate.add_argument("-d", "--debug", action="store_true", help="Print raw environments")

    expand = subparsers.add_parser("expand", help="Find exhibits that can take new animals")
    expand.add_argument("aquarium", type=Path, metavar="AQUARIUM.yaml")
    expand.add_argument("species", nargs="+", type=species_count, metavar="SPECIES=COUNT")
    expand.add_argument("-a", "--all", action="store_true", help="Also report exhibits that cannot take them")

    return parser


# ============================================================================
# Subcommands
# ============================================================================

def run_lookup(data: GameData, args) -> int:
    # plain substring match, juvenile entries included
    found = [s for s in data.species if args.term in s.id]
    found_tanks = [t for t in data.tanks if args.term in t.id]

    if not found and not found_tanks:
        print(f"No entries found for search {args.term}")
        return EXIT_OK

    for species in found:
        print(repr(species))
    for tank in found_tanks:
        print(repr(tank))
    return EXIT_OK


def run_list(data: GameData, args) -> int:
    if args.kind == "animals":
        print("Animals:")
        names = [s.id for s in data.species]
    elif args.kind == "tanks":
        print("Tanks:")
        names = [t.id for t in data.tanks]
    else:
        print("Food:")
        names = list(data.food)

    for name in names:
        print(f"- {name}")
    return EXIT_OK


def run_check(data: GameData, args) -> int:
    counts, animals = animals_from_counts(data, args.species, args.assume_fully_grown)
    result = check_for_viable_tank(data, animals)
    print(format_check_result(counts, result, args.debug))
    return EXIT_OK if result.is_okay() else EXIT_VIOLATIONS


def run_validate(data: GameData, args) -> int:
    aquarium = load_aquarium(args.aquarium, data, DEFAULT_SCHEMA_DIR)
    result = validate_aquarium(data, aquarium)
    print(format_aquarium_result(result, args.debug))
    return EXIT_OK if result.is_okay() else EXIT_VIOLATIONS


def run_expand(data: GameData, args) -> int:
    aquarium = load_aquarium(args.aquarium, data, DEFAULT_SCHEMA_DIR)

    # new animals must not collide with ids already in the aquarium
    next_id = max((a.id for e in aquarium.exhibits for a in e.animals), default=0) + 1
    counts, new_animals = animals_from_counts(data, args.species, ids=itertools.count(next_id))

    base_result = check_for_viable_tank(data, new_animals)
    if not base_result.is_okay():
        print(format_check_result(counts, base_result))
        return EXIT_VIOLATIONS

    print(f"New fish will use {base_result.minimum_viable_environment.size} additional tank size")

    can_add_somewhere = False
    for exhibit in aquarium.exhibits:
        result = try_expand_tank(data, exhibit, new_animals)
        is_okay = result.is_okay()
        can_add_somewhere = can_add_somewhere or is_okay

        if not (is_okay or args.all):
            continue

        print(f"{'Can' if is_okay else 'Cannot'} add to {exhibit.name}")
        if exhibit.animals:
            for line in violation_messages(result.violations):
                print(f"- {line}")
            current = environment_for_exhibit(exhibit)
            for line in environment_differences(current, result.minimum_viable_environment):
                print(f"- {line}")

    if not can_add_somewhere:
        print("Unable to add to current aquarium!")
        return EXIT_VIOLATIONS
    return EXIT_OK


COMMANDS = {
    "lookup": run_lookup,
    "list": run_list,
    "check": run_check,
    "validate": run_validate,
    "expand": run_expand,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Parse command-line arguments and run the selected subcommand."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    data_root = args.data or default_data_root()
    logger.debug("Using data pack %s", data_root)

    try:
        data = load_game_data(data_root, DEFAULT_SCHEMA_DIR)
        return COMMANDS[args.command](data, args)
    except (CatalogError, DataLoadError) as e:
        print(e)
        return EXIT_ERROR


def entry_point():
    sys.exit(main())


if __name__ == "__main__":
    entry_point()
