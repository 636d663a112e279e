"""
Violation checker.

Evaluates every constraint of every animal against an environment and the
rest of the group. Conflict searches always return the first matching animal
in group order, so a violation names at most one culprit even when several
would qualify.
"""

from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from . import constraints as c
from .data_types import Cohabitation, Interior
from .animal import Animal, AnimalRef
from .environment import Environment
from .constants import TERRITORIAL_TANK_FACTOR


@dataclass(frozen=True)
class Violation:
    """
    A failed constraint for one animal.

    Attributes:
        animal: Animal whose constraint failed
        constraint: The failed constraint
        conflicting: Cohabitant responsible for the failure, if any
    """
    animal: Animal
    constraint: c.Constraint
    conflicting: Optional[Animal] = None

    def __str__(self) -> str:
        return violation_message(self)


# ============================================================================
# Checking
# ============================================================================

def find_violations(animals: Sequence[AnimalRef], environment: Environment) -> List[Violation]:
    """
    Check every animal's constraints against the environment and group.

    Identical individuals each report their own violations; deduplication is
    left to reporting.

    Args:
        animals: All occupants of the tank
        environment: Tank to check against (real or hypothetical)

    Returns:
        List of violations, empty when the tank is okay
    """
    result = []
    for animal in animals:
        for constraint in animal.species.constraints():
            violation = check_constraint(animals, environment, animal, constraint)
            if violation is not None:
                result.append(violation)
    return result


def _find(animals: Sequence[AnimalRef], predicate: Callable[[AnimalRef], bool]) -> Optional[AnimalRef]:
    return next((a for a in animals if predicate(a)), None)


def _count_same_species(animals: Sequence[AnimalRef], animal: AnimalRef) -> int:
    return sum(1 for a in animals if a.species is animal.species)


def check_constraint(
    animals: Sequence[AnimalRef],
    environment: Environment,
    animal: AnimalRef,
    constraint: c.Constraint
) -> Optional[Violation]:
    """
    Evaluate a single constraint of `animal`.

    Args:
        animals: All occupants of the tank (may or may not include `animal`)
        environment: Tank to check against
        animal: Animal owning the constraint
        constraint: One of animal.species.constraints()

    Returns:
        Violation, or None if the constraint holds
    """
    def simple(is_okay: bool) -> Optional[Violation]:
        if is_okay:
            return None
        return Violation(animal.to_animal(), constraint)

    def if_conflict(other: Optional[AnimalRef]) -> Optional[Violation]:
        if other is None:
            return None
        return Violation(animal.to_animal(), constraint, other.to_animal())

    def with_conflict(is_okay: bool, other: Optional[AnimalRef]) -> Optional[Violation]:
        if is_okay:
            return None
        conflicting = other.to_animal() if other is not None else None
        return Violation(animal.to_animal(), constraint, conflicting)

    species = animal.species

    if isinstance(constraint, c.Temperature):
        t = constraint.temperature
        return with_conflict(
            t == environment.temperature,
            _find(animals, lambda a: a.species.habitat.temperature != t),
        )

    if isinstance(constraint, c.Salinity):
        s = constraint.salinity
        return with_conflict(
            s == environment.salinity,
            _find(animals, lambda a: a.species.habitat.salinity is not None
                  and a.species.habitat.salinity != s),
        )

    if isinstance(constraint, c.Quality):
        return simple(constraint.minimum <= environment.quality)

    if isinstance(constraint, c.Shoaler):
        shoaling = constraint.shoaling
        count = _count_same_species(animals, animal)
        return simple(
            (shoaling.one_ok and count == 1)
            or (shoaling.two_ok and count == 2)
            or count >= shoaling.count
        )

    if isinstance(constraint, c.NoBully):
        return if_conflict(_find(animals, lambda a: a.species.is_bully()))

    if isinstance(constraint, c.NoNibbler):
        return if_conflict(_find(animals, lambda a: a.species.is_nibbler()))

    if isinstance(constraint, c.Lighting):
        if constraint.need.dislikes:
            return with_conflict(
                environment.light == 0,
                _find(animals, lambda a: a.species.needs_light()),
            )
        return simple(environment.light is not None and environment.light >= constraint.need.amount)

    if isinstance(constraint, c.Cohabitation):
        return _check_cohabitation(animals, animal, constraint.kind, simple, if_conflict)

    if isinstance(constraint, c.Interior):
        return simple(environment.interior == constraint.interior)

    if isinstance(constraint, c.TankSize):
        return simple(environment.size >= constraint.minimum)

    if isinstance(constraint, c.Territorial):
        # tank must be a multiple of the total size of this species
        species_total = sum(a.species.maximum_size() for a in animals if a.species is species)
        return simple(environment.size >= TERRITORIAL_TANK_FACTOR * species_total)

    if isinstance(constraint, c.Predator):
        # TODO account for the predator's own growth stage; it is always
        # treated as fully grown here
        return if_conflict(_find(
            animals,
            lambda a: a.species.prey_type == constraint.prey and a.size_for_predation() <= constraint.size,
        ))

    if isinstance(constraint, c.Communal):
        distinct = len({a.species.id for a in animals})
        return simple(distinct > constraint.minimum_other_species)

    raise TypeError(f"unknown constraint {constraint!r}")


def _check_cohabitation(animals, animal, kind, simple, if_conflict) -> Optional[Violation]:
    species = animal.species

    if kind is Cohabitation.ONLY_CONGENERS:
        return if_conflict(_find(animals, lambda a: a.species.genus != species.genus))

    if kind is Cohabitation.NO_CONGENERS:
        return if_conflict(_find(animals, lambda a: a is not animal and a.species.genus == species.genus))

    if kind is Cohabitation.NO_CONSPECIFICS:
        return simple(all(a is animal or a.species is not species for a in animals))

    if kind is Cohabitation.PAIRS_ONLY:
        return simple(_count_same_species(animals, animal) % 2 == 0)

    if kind is Cohabitation.NO_FOOD_COMPETITORS:
        food = species.diet.food_id
        if food is None:
            return None
        return if_conflict(_find(
            animals,
            lambda a: a.species is not species and a.species.diet.food_id == food,
        ))

    raise TypeError(f"unknown cohabitation {kind!r}")


# ============================================================================
# Messages
# ============================================================================

def violation_message(violation: Violation) -> str:
    """Human-readable description of a violation"""
    s = violation.animal.species
    constraint = violation.constraint
    other = violation.conflicting
    o = other.species if other is not None else None

    if isinstance(constraint, c.Temperature):
        t = constraint.temperature
        if other is None:
            return f"{s} requires {t} tank"
        return f"{s} requires {t} tank but {o} requires {t.other()}"

    if isinstance(constraint, c.Salinity):
        x = constraint.salinity
        if other is None:
            return f"{s} requires {x} tank"
        return f"{s} requires {x} tank but {o} requires {x.other()}"

    if isinstance(constraint, c.Quality):
        return f"{s} requires at least quality {constraint.minimum}"

    if isinstance(constraint, c.Shoaler):
        shoaling = constraint.shoaling
        or1 = ", or 1" if shoaling.one_ok else ""
        or2 = ", or 2" if shoaling.two_ok else ""
        return f"{s} is a shoaler and needs {shoaling.count} of its species{or1}{or2}"

    if isinstance(constraint, c.NoBully):
        return f"{o} will bully {s}"

    if isinstance(constraint, c.NoNibbler):
        return f"{o} will nibble {s}"

    if isinstance(constraint, c.Lighting):
        if not constraint.need.dislikes:
            return f"{s} requires at least {constraint.need.amount} light"
        if other is None:
            return f"{s} requires no light"
        return f"{s} requires no light but {o} needs light"

    if isinstance(constraint, c.Cohabitation):
        kind = constraint.kind
        if kind is Cohabitation.ONLY_CONGENERS:
            return f"{s} requires congeners but there is {o}"
        if kind is Cohabitation.NO_CONGENERS:
            if o == s:
                return f"{s} cannot be with congeners but there are multiple {o}"
            return f"{s} cannot be with congeners but there is {o}"
        if kind is Cohabitation.NO_CONSPECIFICS:
            return f"{s} cannot be with its own species but there are multiple"
        if kind is Cohabitation.PAIRS_ONLY:
            return f"{s} must only be a multiple of two"
        return f"{s} will compete for food with {o}"

    if isinstance(constraint, c.Interior):
        shape = "rounded" if constraint.interior is Interior.ROUNDED else "kreisel"
        return f"{s} requires a {shape} tank"

    if isinstance(constraint, c.TankSize):
        return f"{s} requires a tank of size at least {constraint.minimum}"

    if isinstance(constraint, c.Territorial):
        return f"{s} is territorial, total size can only be 50% of tank size"

    if isinstance(constraint, c.Predator):
        if other is not None and not other.growth.is_final:
            return f"{s} will eat {o} (though may be fine if fully grown)"
        return f"{s} will eat {o}"

    if isinstance(constraint, c.Communal):
        return f"{s} is communal and requires at least {constraint.minimum_other_species} other species"

    return f"{s} violates {constraint}"
