"""
Aquarium layout and occupant construction.

An Aquarium is a list of exhibits, each one tank with its animals. Animals
can also be described by species counts, which this module expands into
individual occupants with fresh ids.
"""

import itertools
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Sequence, Tuple, TYPE_CHECKING

from .animal import AnimalRef, FINAL
from .tank import TankRef

if TYPE_CHECKING:
    from .catalog import GameData


@dataclass(frozen=True)
class SpeciesCount:
    """Number of animals of one species (species may be a search string)"""
    species: str
    count: int

    def __str__(self) -> str:
        return f"{self.species}={self.count}"


@dataclass
class Exhibit:
    name: str
    tank: TankRef
    animals: List[AnimalRef] = field(default_factory=list)


@dataclass
class Aquarium:
    exhibits: List[Exhibit] = field(default_factory=list)

    def description(self, summary: bool = False) -> Dict[str, Any]:
        """
        Plain-data form of the aquarium, in the layout load_aquarium reads.

        Args:
            summary: Describe animals as species counts instead of individuals
        """
        exhibits = []
        for exhibit in self.exhibits:
            if summary:
                animals = [
                    {'species': c.species, 'count': c.count}
                    for c in summarize(exhibit.animals)
                ]
            else:
                animals = [_describe_animal(a) for a in exhibit.animals]

            exhibits.append({
                'name': exhibit.name,
                'tank': {
                    'id': exhibit.tank.id,
                    'model': exhibit.tank.model.id,
                    'size': list(exhibit.tank.size),
                },
                'animals': animals,
            })
        return {'exhibits': exhibits}


def _describe_animal(animal: AnimalRef) -> Dict[str, Any]:
    result = {'id': animal.id, 'species': animal.species.id}
    if not animal.growth.is_final:
        result['growth'] = {'stage': animal.growth.stage, 'growth': animal.growth.growth}
    return result


def animals_from_counts(
    data: 'GameData',
    counts: Sequence[SpeciesCount],
    assume_fully_grown: bool = False,
    ids: Iterator[int] = None
) -> Tuple[List[SpeciesCount], List[AnimalRef]]:
    """
    Build occupants from species counts.

    Each species string is resolved with GameData.lookup, so partial names
    work as long as they are unambiguous.

    Args:
        data: Catalog
        counts: Requested species and counts
        assume_fully_grown: Use final growth instead of the earliest stage
        ids: Source of animal ids (default: 1, 2, 3, ...)

    Returns:
        (counts with resolved species ids, occupants)

    Raises:
        SpeciesNotFound, AmbiguousSpecies: a species string does not resolve
    """
    if ids is None:
        ids = itertools.count(1)

    resolved = []
    animals = []
    for species_count in counts:
        species = data.lookup(species_count.species)
        resolved.append(SpeciesCount(species.id, species_count.count))

        growth = FINAL if assume_fully_grown else species.earliest_growth_stage()
        for _ in range(species_count.count):
            animals.append(AnimalRef(id=next(ids), species=species, growth=growth))

    return resolved, animals


def summarize(animals: Sequence[AnimalRef]) -> List[SpeciesCount]:
    """Count occupants per species, in order of first appearance"""
    counts: Dict[str, int] = {}
    for animal in animals:
        counts[animal.species.id] = counts.get(animal.species.id, 0) + 1
    return [SpeciesCount(species, count) for species, count in counts.items()]


def expand_summary(
    data: 'GameData',
    counts: Sequence[SpeciesCount],
    ids: Iterator[int] = None
) -> List[AnimalRef]:
    """Rebuild fully grown occupants from a summary of exact species ids"""
    if ids is None:
        ids = itertools.count(1)

    return [
        AnimalRef(id=next(ids), species=data.species_ref(c.species))
        for c in counts
        for _ in range(c.count)
    ]
