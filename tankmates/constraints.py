"""
Constraint model.

A constraint is one atomic requirement a species imposes on the tank it lives
in or on the animals it shares that tank with. `species_constraints` expands a
species into the full, ordered list of constraints it imposes.

Constraint names shadow the trait enums they wrap (a
`Temperature` constraint holds a `data_types.Temperature`), so this module
refers to the enums through the `dt` alias.
"""

import math
from dataclasses import dataclass
from typing import List, TYPE_CHECKING

from . import data_types as dt
from .constants import PREDATION_SIZE_RATIO

if TYPE_CHECKING:
    from .species import Species


class Constraint:
    """Base class for all constraint variants"""
    __slots__ = ()


@dataclass(frozen=True)
class Temperature(Constraint):
    temperature: dt.Temperature


@dataclass(frozen=True)
class Salinity(Constraint):
    salinity: dt.Salinity


@dataclass(frozen=True)
class Quality(Constraint):
    minimum: int


@dataclass(frozen=True)
class Shoaler(Constraint):
    shoaling: dt.Shoaling


@dataclass(frozen=True)
class NoBully(Constraint):
    pass


@dataclass(frozen=True)
class NoNibbler(Constraint):
    pass


@dataclass(frozen=True)
class Lighting(Constraint):
    need: dt.Need


@dataclass(frozen=True)
class Cohabitation(Constraint):
    kind: dt.Cohabitation


@dataclass(frozen=True)
class Interior(Constraint):
    interior: dt.Interior


@dataclass(frozen=True)
class TankSize(Constraint):
    minimum: int


@dataclass(frozen=True)
class Territorial(Constraint):
    pass


@dataclass(frozen=True)
class Predator(Constraint):
    """Eats `prey` animals whose predation size is at most `size`"""
    prey: dt.PreyType
    size: int


@dataclass(frozen=True)
class Communal(Constraint):
    minimum_other_species: int


def predation_size(final_size: int) -> int:
    """Largest prey size a predator of `final_size` can eat"""
    return math.floor(PREDATION_SIZE_RATIO * final_size)


def species_constraints(species: 'Species') -> List[Constraint]:
    """
    Expand a species into the constraints it imposes.

    Order is stable: temperature and quality first, then every optional
    trait, then one predator constraint per prey type.

    Args:
        species: Species definition

    Returns:
        List of constraints (never empty)
    """
    habitat = species.habitat
    result: List[Constraint] = [
        Temperature(habitat.temperature),
        Quality(habitat.minimum_quality),
    ]

    if habitat.salinity is not None:
        result.append(Salinity(habitat.salinity))

    if species.shoaling is not None:
        result.append(Shoaler(species.shoaling))

    if species.fighting is dt.Fighting.WIMP:
        result.append(NoBully())

    if species.nibbling is dt.Nibbling.NIBBLEABLE:
        result.append(NoNibbler())

    if species.needs.light is not None:
        result.append(Lighting(species.needs.light))

    if species.cohabitation is not None:
        result.append(Cohabitation(species.cohabitation))

    if habitat.active_swimmer:
        result.append(TankSize(species.minimum_needed_tank_size()))

    if habitat.territorial:
        result.append(Territorial())

    if habitat.interior is not None:
        result.append(Interior(habitat.interior))

    if species.communal is not None:
        result.append(Communal(species.communal))

    size = predation_size(species.size.final_size)
    for prey in species.predation:
        result.append(Predator(prey=prey, size=size))

    return result
