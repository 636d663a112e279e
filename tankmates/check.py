"""
Exhibit and aquarium checks.

Ties the aggregator and the violation checker together: infer a tank for a
group of animals, validate every exhibit of a loaded aquarium, or try adding
animals to an existing exhibit.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from .animal import AnimalRef
from .aquarium import Aquarium, Exhibit
from .catalog import GameData
from .environment import (
    Environment,
    FoodAmount,
    environment_for_exhibit,
    minimum_required_food,
    minimum_viable_environment,
)
from .violations import Violation, find_violations

logger = logging.getLogger(__name__)


@dataclass
class ExhibitCheckResult:
    violations: List[Violation]
    food: List[FoodAmount]
    minimum_viable_environment: Environment

    def is_okay(self) -> bool:
        return not self.violations


@dataclass
class ExhibitValidation:
    """Check result for one exhibit of a loaded aquarium"""
    name: str
    tank_volume: int
    loaded_environment: Environment
    minimum_viable_environment: Environment
    food: List[FoodAmount]
    violations: List[Violation]

    def is_okay(self) -> bool:
        return not self.violations


@dataclass
class AquariumCheckResult:
    exhibits: List[ExhibitValidation] = field(default_factory=list)

    def is_okay(self) -> bool:
        return all(e.is_okay() for e in self.exhibits)


def check_for_viable_tank(data: GameData, animals: Sequence[AnimalRef]) -> ExhibitCheckResult:
    """
    Infer the minimum viable tank for `animals` and check them in it.

    Raises:
        EmptyExhibitError: no animals given
    """
    environment = minimum_viable_environment(animals)
    violations = find_violations(animals, environment)
    logger.debug("Checked %d animals: %d violations", len(animals), len(violations))

    return ExhibitCheckResult(
        violations=violations,
        food=minimum_required_food(data, animals),
        minimum_viable_environment=environment,
    )


def validate_exhibit(data: GameData, exhibit: Exhibit) -> ExhibitValidation:
    """Check an exhibit against its real tank"""
    loaded = environment_for_exhibit(exhibit)
    violations = find_violations(exhibit.animals, loaded)
    logger.debug("Exhibit %s: %d violations", exhibit.name, len(violations))

    return ExhibitValidation(
        name=exhibit.name,
        tank_volume=exhibit.tank.volume(),
        loaded_environment=loaded,
        minimum_viable_environment=minimum_viable_environment(exhibit.animals),
        food=minimum_required_food(data, exhibit.animals),
        violations=violations,
    )


def validate_aquarium(data: GameData, aquarium: Aquarium) -> AquariumCheckResult:
    """Validate every non-empty exhibit, in aquarium order"""
    result = AquariumCheckResult()
    for exhibit in aquarium.exhibits:
        if not exhibit.animals:
            logger.debug("Skipping empty exhibit %s", exhibit.name)
            continue
        result.exhibits.append(validate_exhibit(data, exhibit))
    return result


def try_expand_tank(
    data: GameData,
    exhibit: Exhibit,
    new_animals: Sequence[AnimalRef]
) -> ExhibitCheckResult:
    """
    Check an exhibit's animals together with `new_animals`.

    The tank is re-inferred from the combined group rather than taken from
    the exhibit, so the result says what the exhibit would need to become.
    """
    animals = list(exhibit.animals) + list(new_animals)
    logger.debug("Expanding %s with %d animals", exhibit.name, len(new_animals))
    return check_for_viable_tank(data, animals)
