"""
Animal runtime representation.

An AnimalRef (occupant) pairs a unique id with a shared Species reference and
a growth state. It is built per check from user input or an aquarium file and
never mutated. `Animal` is the owned snapshot carried by violations and
summaries, naming the species by id only.
"""

from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .species import Species
    from .catalog import GameData


class GrowthStageError(ValueError):
    """Raised when a growth stage index is beyond a species' stages"""
    pass


@dataclass(frozen=True)
class Growth:
    """
    Growth state of one animal.

    Attributes:
        stage: Juvenile stage index, None once fully grown
        growth: Days spent in the current stage. May equal the stage length
            when the tank size stopped the animal from growing.
    """
    stage: Optional[int] = None
    growth: int = 0

    @classmethod
    def growing(cls, stage: int, growth: int = 0) -> 'Growth':
        return cls(stage=stage, growth=growth)

    @property
    def is_final(self) -> bool:
        return self.stage is None

    def __str__(self) -> str:
        if self.is_final:
            return "final"
        return f"stage {self.stage} (day {self.growth})"


FINAL = Growth()


@dataclass(frozen=True)
class Animal:
    """Owned snapshot of an animal: id, species id and growth"""
    id: int
    species: str
    growth: Growth = FINAL

    def to_ref(self, data: 'GameData') -> 'AnimalRef':
        """
        Resolve this snapshot against the catalog.

        Raises:
            SpeciesNotFound: species id is not in the catalog
            GrowthStageError: growth stage is beyond the species' stages
        """
        species = data.species_ref(self.species)
        ref = AnimalRef(id=self.id, species=species, growth=self.growth)
        ref.size()  # validates the growth stage
        return ref


@dataclass(eq=False)
class AnimalRef:
    """
    Occupant of a tank for the duration of one check.

    Compared by identity: two refs are the same occupant only if they are
    the same object.

    Attributes:
        id: Unique animal id (assigned by the caller)
        species: Shared catalog Species
        growth: Current growth state
    """
    id: int
    species: 'Species'
    growth: Growth = FINAL

    def size(self) -> int:
        """
        Current body size: the current stage's size, or final size.

        Raises:
            GrowthStageError: growth stage is beyond the species' stages
        """
        if self.growth.is_final:
            return self.species.size.final_size

        stages = self.species.size.stages
        stage = self.growth.stage
        if stage < 0 or stage >= len(stages):
            raise GrowthStageError(
                f"{self.species.id} #{self.id}: growth stage {stage} out of range "
                f"(species has {len(stages)} stages)"
            )
        return stages[stage].size

    def size_for_predation(self) -> int:
        """Size compared against a predator's limit, doubled when armored"""
        size = self.size()
        if self.species.size.armored:
            return 2 * size
        return size

    def to_animal(self) -> Animal:
        return Animal(id=self.id, species=self.species.id, growth=self.growth)
