"""
Data types mirroring YAML schema structures.

These enums and dataclasses are populated by loader.py from YAML files and
shared by the rule model, the environment aggregator and the checker.
"""

from dataclasses import dataclass
from typing import Optional, Tuple
from enum import Enum


# ============================================================================
# Tank Conditions
# ============================================================================

class Temperature(Enum):
    WARM = "warm"
    COLD = "cold"

    def other(self) -> 'Temperature':
        return Temperature.COLD if self is Temperature.WARM else Temperature.WARM

    def __str__(self) -> str:
        return self.value


class Salinity(Enum):
    SALTY = "salty"
    FRESH = "fresh"

    def other(self) -> 'Salinity':
        return Salinity.FRESH if self is Salinity.SALTY else Salinity.SALTY

    def __str__(self) -> str:
        return self.value


class Interior(Enum):
    ROUNDED = "rounded"
    KREISEL = "kreisel"

    def __str__(self) -> str:
        return self.value


# ============================================================================
# Species Traits
# ============================================================================

class PreyType(Enum):
    """What kind of prey an animal counts as"""
    FISH = "fish"
    STARFISH = "starfish"
    CRUSTACEAN = "crustacean"
    STONY_CORAL = "stonyCoral"
    SOFT_CORAL = "softCoral"
    CLAM = "clam"
    GORGONIAN = "gorgonian"
    ANEMONE = "anemone"
    BABY = "baby"

    def __str__(self) -> str:
        return self.value


class Fighting(Enum):
    WIMP = "wimp"
    BULLY = "bully"

    def __str__(self) -> str:
        return self.value


class Nibbling(Enum):
    NIBBLEABLE = "nibbleable"
    NIBBLER = "nibbler"

    def __str__(self) -> str:
        return self.value


class Cohabitation(Enum):
    ONLY_CONGENERS = "only-congeners"
    NO_CONSPECIFICS = "no-conspecifics"
    NO_CONGENERS = "no-congeners"
    NO_FOOD_COMPETITORS = "no-food-competitors"
    PAIRS_ONLY = "pairs-only"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Need:
    """
    Decor or light preference: either dislikes (must be absent) or
    loves at least `amount`.
    """
    dislikes: bool = False
    amount: int = 0

    @classmethod
    def dislike(cls) -> 'Need':
        return cls(dislikes=True)

    @classmethod
    def loves(cls, amount: int) -> 'Need':
        return cls(dislikes=False, amount=amount)

    def __str__(self) -> str:
        return "dislikes" if self.dislikes else f"loves {self.amount}"


@dataclass(frozen=True)
class Shoaling:
    """Shoaler requirement: needs `count` of its species, with optional 1/2 exceptions"""
    count: int
    one_ok: bool = False
    two_ok: bool = False


class DietKind(Enum):
    FOOD = "food"
    SCAVENGER = "scavenger"
    DOES_NOT_EAT = "does-not-eat"


@dataclass(frozen=True)
class Diet:
    """What an animal eats. `food` and `period` only apply to DietKind.FOOD"""
    kind: DietKind
    food: Optional[str] = None
    period: int = 1  # days per feed, always >= 1

    @classmethod
    def eats(cls, food: str, period: int = 1) -> 'Diet':
        return cls(kind=DietKind.FOOD, food=food, period=period)

    @classmethod
    def scavenger(cls) -> 'Diet':
        return cls(kind=DietKind.SCAVENGER)

    @classmethod
    def does_not_eat(cls) -> 'Diet':
        return cls(kind=DietKind.DOES_NOT_EAT)

    @property
    def food_id(self) -> Optional[str]:
        """Food id for food eaters, None for scavengers and non-eaters"""
        return self.food if self.kind is DietKind.FOOD else None


class BreedingKind(Enum):
    CANNOT_BREED = "cannot-breed"
    BREEDABLE = "breedable"
    NOT_FULLY_GROWN = "not-fully-grown"


@dataclass(frozen=True)
class Breeding:
    kind: BreedingKind = BreedingKind.CANNOT_BREED
    baby: Optional[str] = None  # species id of offspring, for BREEDABLE


# ============================================================================
# Species Components
# ============================================================================

@dataclass(frozen=True)
class Stage:
    """One juvenile growth stage"""
    size: int
    duration: int  # days spent in this stage


@dataclass(frozen=True)
class Size:
    """Growth model: juvenile stages followed by final_size"""
    final_size: int
    stages: Tuple[Stage, ...] = ()
    armored: bool = False
    immobile: bool = False


@dataclass(frozen=True)
class Habitat:
    """Tank conditions a species requires"""
    temperature: Temperature
    minimum_quality: int = 0
    salinity: Optional[Salinity] = None  # None = tolerates both
    interior: Optional[Interior] = None
    active_swimmer: bool = False
    territorial: bool = False


@dataclass(frozen=True)
class Needs:
    """Decor and light requirements"""
    light: Optional[Need] = None
    plants: Optional[Need] = None
    rocks: Optional[Need] = None
    caves: Optional[int] = None
    bogwood: Optional[int] = None
    flat_surfaces: Optional[int] = None
    vertical_surfaces: Optional[int] = None
    fluffy_foliage: Optional[int] = None
    open_space: Optional[int] = None
    explorer: Optional[int] = None  # distinct decorations wanted
