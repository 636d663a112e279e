"""
Plain-text reports for check results.

Formatting only; every function returns a string (or list of lines) and
leaves printing to the caller.
"""

from dataclasses import asdict
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .aquarium import SpeciesCount
from .check import AquariumCheckResult, ExhibitCheckResult, ExhibitValidation
from .environment import Environment, FoodAmount
from .violations import Violation


def violation_messages(violations: Sequence[Violation]) -> List[str]:
    """Messages for a list of violations, sorted with duplicates removed"""
    return sorted({str(v) for v in violations})


def _bullets(lines: Sequence[str]) -> List[str]:
    return [f"- {line}" for line in lines]


def _food_lines(food: Sequence[FoodAmount]) -> List[str]:
    return _bullets([f"{item.count}x {item.food}" for item in food])


def environment_as_dict(environment: Environment) -> Dict[str, Any]:
    """Set fields of an environment, enums as their string values"""
    result = {}
    for name, value in asdict(environment).items():
        if value is None:
            continue
        result[name] = value.value if isinstance(value, Enum) else value
    return result


def format_environment(environment: Environment, debug: bool = False) -> str:
    if debug:
        return repr(environment)
    return yaml.safe_dump(environment_as_dict(environment), sort_keys=False).rstrip()


def format_check_result(
    counts: Sequence[SpeciesCount],
    result: ExhibitCheckResult,
    debug: bool = False
) -> str:
    lines = ["For contents:"]
    lines += _bullets([f"{c.count}x {c.species}" for c in counts])

    if result.is_okay():
        lines += ["", "The minimum viable tank is:"]
        lines.append(format_environment(result.minimum_viable_environment, debug))
        lines += ["", "Will require food (average per day):"]
        lines += _food_lines(result.food)
    else:
        lines += ["", "A valid tank is not possible:"]
        lines += _bullets(violation_messages(result.violations))

    return "\n".join(lines)


def _increased(old: Optional[int], new: Optional[int]) -> bool:
    # an unset value is below any set one
    if new is None:
        return False
    if old is None:
        return True
    return old < new


def _format_optional(value) -> str:
    return "n/a" if value is None else str(value)


def environment_differences(old: Environment, new: Environment) -> List[str]:
    """
    Describe the fields that have to grow to go from `old` to `new`.

    Only size, quality, plants, rocks, caves and light are compared.
    """
    lines = []
    for name in ("size", "quality", "plants", "rocks", "caves", "light"):
        before, after = getattr(old, name), getattr(new, name)
        if _increased(before, after):
            lines.append(f"{name}: {_format_optional(before)} → {_format_optional(after)}")
    return lines


def _exhibit_environment_lines(exhibit: ExhibitValidation) -> List[str]:
    loaded = exhibit.loaded_environment
    needed = exhibit.minimum_viable_environment

    # size is needed/actual since it is an upper bound
    lines = [
        f"size: {needed.size}/{loaded.size}",
        f"quality: {needed.quality}%",
    ]

    # the rest are actual/needed
    for name in ("light", "plants", "rocks", "caves", "bogwood", "flat_surfaces",
                 "vertical_surfaces", "fluffy_foliage", "different_decorations"):
        value = getattr(needed, name)
        if value is not None:
            lines.append(f"{name}: {_format_optional(getattr(loaded, name))}/{value}")

    if needed.interior is not None:
        lines.append(f"interior: {_format_optional(loaded.interior)}/{needed.interior}")

    return _bullets(lines)


def format_aquarium_result(result: AquariumCheckResult, debug: bool = False) -> str:
    lines = [f"Checking {len(result.exhibits)} tanks..."]

    for exhibit in result.exhibits:
        lines.append(f"{exhibit.name}:")
        if debug:
            lines.append(f"loaded: {exhibit.loaded_environment!r}")
            lines.append(f"needed: {exhibit.minimum_viable_environment!r}")
        else:
            lines += _exhibit_environment_lines(exhibit)

        lines += _food_lines(exhibit.food)
        lines += _bullets(violation_messages(exhibit.violations))

    if result.is_okay():
        lines.append("No problems!")

    return "\n".join(lines)
