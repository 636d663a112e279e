"""
Test builders.

Small factories for species and occupants so each test only spells out the
traits it cares about.
"""

import itertools
from pathlib import Path
from typing import List

from tankmates.data_types import (
    PreyType, Size, Stage, Habitat, Temperature, Salinity, Diet, Needs,
)
from tankmates.species import Species
from tankmates.animal import AnimalRef, FINAL
from tankmates.environment import Environment

DATA_ROOT = Path(__file__).parent.parent.parent / "data"

_ids = itertools.count(1000)


def make_species(
    id: str = "test_fish",
    genus: str = None,
    prey_type: PreyType = PreyType.FISH,
    final_size: int = 4,
    stages=(),
    armored: bool = False,
    immobile: bool = False,
    temperature: Temperature = Temperature.WARM,
    quality: int = 50,
    salinity: Salinity = None,
    interior=None,
    active_swimmer: bool = False,
    territorial: bool = False,
    diet: Diet = None,
    needs: Needs = None,
    **traits
) -> Species:
    """
    Build a species with sensible defaults.

    Extra keyword arguments (shoaling, fighting, predation, ...) are passed
    straight to Species.
    """
    return Species(
        id=id,
        genus=genus or id,
        prey_type=prey_type,
        size=Size(
            final_size=final_size,
            stages=tuple(Stage(size=s, duration=10) for s in stages),
            armored=armored,
            immobile=immobile,
        ),
        habitat=Habitat(
            temperature=temperature,
            minimum_quality=quality,
            salinity=salinity,
            interior=interior,
            active_swimmer=active_swimmer,
            territorial=territorial,
        ),
        diet=diet or Diet.does_not_eat(),
        needs=needs or Needs(),
        **traits
    )


def make_animal(species: Species, growth=FINAL, id: int = None) -> AnimalRef:
    return AnimalRef(id=next(_ids) if id is None else id, species=species, growth=growth)


def make_animals(species: Species, count: int) -> List[AnimalRef]:
    return [make_animal(species) for _ in range(count)]


def make_environment(**overrides) -> Environment:
    """Warm salty tank of size 100 and quality 100, with overrides"""
    values = dict(size=100, temperature=Temperature.WARM, salinity=Salinity.SALTY, quality=100)
    values.update(overrides)
    return Environment(**values)
