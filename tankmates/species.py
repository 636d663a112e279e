"""
Species definition.

A Species is loaded once from the data pack and shared by reference by every
animal of that species. Two animals are the same species only when they hold
the same Species object: equality and hashing are by identity, never by
field contents.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .data_types import (
    PreyType, Size, Habitat, Diet, DietKind, Needs, Shoaling,
    Fighting, Nibbling, Cohabitation, Breeding, BreedingKind,
)
from .constants import (
    ACTIVE_SWIMMER_TANK_FACTOR,
    GREEDY_FOOD_NUMERATOR,
    GREEDY_FOOD_DENOMINATOR,
)
from .constraints import Constraint, species_constraints, predation_size
from .animal import Growth, FINAL


@dataclass(frozen=True, eq=False)
class Species:
    """Complete species definition"""
    id: str
    genus: str
    prey_type: PreyType
    size: Size
    habitat: Habitat
    diet: Diet = field(default_factory=Diet.does_not_eat)
    needs: Needs = field(default_factory=Needs)
    greedy: bool = False
    shoaling: Optional[Shoaling] = None
    fighting: Optional[Fighting] = None
    nibbling: Optional[Nibbling] = None
    cohabitation: Optional[Cohabitation] = None
    predation: List[PreyType] = field(default_factory=list)
    communal: Optional[int] = None
    breeding: Breeding = field(default_factory=Breeding)

    def __str__(self) -> str:
        return self.id

    def is_bully(self) -> bool:
        return self.fighting is Fighting.BULLY

    def is_nibbler(self) -> bool:
        return self.nibbling is Nibbling.NIBBLER

    def needs_light(self) -> bool:
        light = self.needs.light
        return light is not None and not light.dislikes

    def is_fully_grown(self) -> bool:
        """False for juvenile catalog entries (eggs, fry)"""
        return self.breeding.kind is not BreedingKind.NOT_FULLY_GROWN

    def maximum_size(self) -> int:
        """Final body size, 0 for immobile animals"""
        if self.size.immobile:
            return 0
        return self.size.final_size

    def minimum_needed_tank_size(self) -> int:
        """Smallest tank this species can live in on its own"""
        if self.size.immobile:
            return 0
        if self.habitat.active_swimmer:
            return ACTIVE_SWIMMER_TANK_FACTOR * self.size.final_size
        return self.size.final_size

    def predation_size(self) -> int:
        return predation_size(self.size.final_size)

    def earliest_growth_stage(self) -> Growth:
        if self.size.stages:
            return Growth.growing(0, 0)
        return FINAL

    def amount_food_eaten(self) -> int:
        """
        Average food items eaten per day.

        Greedy eaters take 4/3 of their size per feed. Integer division
        throughout, matching the game's whole food items.
        """
        if self.diet.kind is not DietKind.FOOD:
            return 0

        size = self.maximum_size()
        if self.greedy:
            per_feed = (GREEDY_FOOD_NUMERATOR * size) // GREEDY_FOOD_DENOMINATOR
        else:
            per_feed = size
        return per_feed // self.diet.period

    def constraints(self) -> List[Constraint]:
        return species_constraints(self)
