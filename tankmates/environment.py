"""
Minimum viable tank inference.

Aggregates the needs of every animal in a group into one concrete
Environment: the smallest, least-decorated tank that could hold them.
The estimate is optimistic. It does not check that the group actually gets
along; that is find_violations' job.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TYPE_CHECKING

from .data_types import Temperature, Salinity, Interior, Need
from .constants import DEFAULT_SALINITY, TERRITORIAL_TANK_FACTOR
from .animal import AnimalRef

if TYPE_CHECKING:
    from .catalog import GameData
    from .aquarium import Exhibit


class EmptyExhibitError(ValueError):
    """Raised when aggregating an empty group of animals"""
    pass


# ============================================================================
# Environment
# ============================================================================

@dataclass(frozen=True)
class Environment:
    """
    Computed or actual state of a tank.

    Optional fields are None when the tank offers none of the resource (or,
    for a minimum viable tank, nobody asked for it). None is not the same as
    0: a light of 0 means "must be dark".
    """
    size: int
    temperature: Temperature
    salinity: Salinity
    quality: int
    light: Optional[int] = None
    plants: Optional[int] = None
    rocks: Optional[int] = None
    caves: Optional[int] = None
    bogwood: Optional[int] = None
    flat_surfaces: Optional[int] = None
    vertical_surfaces: Optional[int] = None
    fluffy_foliage: Optional[int] = None
    open_space: Optional[int] = None
    different_decorations: Optional[int] = None
    interior: Optional[Interior] = None


# ============================================================================
# Three-state requirements (light, plants, rocks)
# ============================================================================

class RequirementState(Enum):
    UNSET = "unset"          # nobody cares
    FORBIDDEN = "forbidden"  # someone dislikes it, must be zero
    AT_LEAST = "at-least"    # positive threshold


@dataclass(frozen=True)
class Requirement:
    """
    Aggregated Dislikes/Loves need.

    FORBIDDEN dominates everything, UNSET is the identity, and two AT_LEAST
    values combine by max or by sum depending on the resource.
    """
    state: RequirementState
    amount: int = 0

    @classmethod
    def at_least(cls, amount: int) -> 'Requirement':
        return cls(RequirementState.AT_LEAST, amount)

    @classmethod
    def from_need(cls, need: Optional[Need]) -> 'Requirement':
        if need is None:
            return UNSET
        if need.dislikes:
            return FORBIDDEN
        return cls.at_least(need.amount)

    def _combine(self, other: 'Requirement', op: Callable[[int, int], int]) -> 'Requirement':
        if self.state is RequirementState.FORBIDDEN or other.state is RequirementState.FORBIDDEN:
            return FORBIDDEN
        if self.state is RequirementState.UNSET:
            return other
        if other.state is RequirementState.UNSET:
            return self
        return Requirement.at_least(op(self.amount, other.amount))

    def combine_max(self, other: 'Requirement') -> 'Requirement':
        return self._combine(other, max)

    def combine_sum(self, other: 'Requirement') -> 'Requirement':
        return self._combine(other, lambda a, b: a + b)

    def to_optional(self) -> Optional[int]:
        """Collapse to the Environment field value"""
        if self.state is RequirementState.UNSET:
            return None
        if self.state is RequirementState.FORBIDDEN:
            return 0
        return self.amount


UNSET = Requirement(RequirementState.UNSET)
FORBIDDEN = Requirement(RequirementState.FORBIDDEN)


def _aggregate_need(
    animals: Sequence[AnimalRef],
    get_need: Callable[[AnimalRef], Optional[Need]],
    combine: Callable[[Requirement, Requirement], Requirement]
) -> Optional[int]:
    result = UNSET
    for animal in animals:
        result = combine(result, Requirement.from_need(get_need(animal)))
    return result.to_optional()


def _sum_present(values: Iterable[Optional[int]]) -> Optional[int]:
    present = [v for v in values if v is not None]
    return sum(present) if present else None


def _max_present(values: Iterable[Optional[int]]) -> Optional[int]:
    present = [v for v in values if v is not None]
    return max(present) if present else None


def _first_present(values: Iterable):
    return next((v for v in values if v is not None), None)


# ============================================================================
# Aggregation
# ============================================================================

def minimum_tank_size(animals: Sequence[AnimalRef]) -> int:
    """
    Smallest tank size that fits the group.

    Body sizes are summed, then raised to the largest single-species minimum
    (active swimmers), then raised again for each territorial species to
    twice that species' total size.
    """
    size = sum(a.species.maximum_size() for a in animals)
    size = max(size, max(a.species.minimum_needed_tank_size() for a in animals))

    seen = set()
    for animal in animals:
        species = animal.species
        if not species.habitat.territorial or species in seen:
            continue
        seen.add(species)
        species_total = sum(o.species.maximum_size() for o in animals if o.species is species)
        size = max(size, TERRITORIAL_TANK_FACTOR * species_total)

    return size


def minimum_viable_environment(animals: Sequence[AnimalRef]) -> Environment:
    """
    Guess at the minimum viable tank for the given animals.

    Temperature comes from the first animal and salinity from the first
    animal with a preference; disagreements are reported by the checker,
    not resolved here.

    Args:
        animals: Occupants (at least one)

    Returns:
        Minimum viable Environment

    Raises:
        EmptyExhibitError: no animals given
    """
    if not animals:
        raise EmptyExhibitError("need to specify at least some animals")

    def needs(a: AnimalRef):
        return a.species.needs

    return Environment(
        size=minimum_tank_size(animals),
        temperature=animals[0].species.habitat.temperature,
        salinity=_first_present(a.species.habitat.salinity for a in animals) or DEFAULT_SALINITY,
        quality=max(a.species.habitat.minimum_quality for a in animals),
        light=_aggregate_need(animals, lambda a: needs(a).light, Requirement.combine_max),
        plants=_aggregate_need(animals, lambda a: needs(a).plants, Requirement.combine_sum),
        rocks=_aggregate_need(animals, lambda a: needs(a).rocks, Requirement.combine_sum),
        caves=_sum_present(needs(a).caves for a in animals),
        bogwood=_sum_present(needs(a).bogwood for a in animals),
        flat_surfaces=_sum_present(needs(a).flat_surfaces for a in animals),
        vertical_surfaces=_sum_present(needs(a).vertical_surfaces for a in animals),
        fluffy_foliage=_sum_present(needs(a).fluffy_foliage for a in animals),
        open_space=_max_present(needs(a).open_space for a in animals),
        different_decorations=_max_present(needs(a).explorer for a in animals),
        interior=_first_present(a.species.habitat.interior for a in animals),
    )


def environment_for_exhibit(exhibit: 'Exhibit') -> Environment:
    """
    Environment of an existing exhibit.

    Size and interior come from the real tank, since some animals may not be
    grown yet and the model decides the interior shape.
    """
    result = minimum_viable_environment(exhibit.animals)
    return replace(result, size=exhibit.tank.volume(), interior=exhibit.tank.interior)


# ============================================================================
# Food
# ============================================================================

@dataclass(frozen=True)
class FoodAmount:
    food: str
    count: int


def minimum_required_food(data: 'GameData', animals: Sequence[AnimalRef]) -> List[FoodAmount]:
    """
    Average daily food needed per food type.

    Only food ids the catalog knows are reported, in catalog order, and only
    when the total is positive.
    """
    totals: Dict[str, int] = {}
    for animal in animals:
        food = animal.species.diet.food_id
        if food is not None:
            totals[food] = totals.get(food, 0) + animal.species.amount_food_eaten()

    return [
        FoodAmount(food=food, count=totals[food])
        for food in data.food
        if totals.get(food, 0) > 0
    ]
