"""
Species catalog.

Read-only view over the loaded data pack: species, tank models and food ids.
Loaded once by loader.py and shared by every check.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .species import Species
from .tank import TankModel


class CatalogError(Exception):
    """Base class for catalog lookup failures"""
    pass


class SpeciesNotFound(CatalogError):
    pass


class AmbiguousSpecies(CatalogError):
    """Raised when a search string matches more than one species"""

    def __init__(self, query: str, candidates: List[str]):
        self.query = query
        self.candidates = candidates
        super().__init__(f"Ambiguous match for '{query}': {', '.join(candidates)}")


class TankNotFound(CatalogError):
    pass


@dataclass
class GameData:
    """
    Loaded data pack.

    Attributes:
        species: All species in catalog order (adults and juveniles)
        tanks: Tank models
        food: Recognised food ids, in catalog order
    """
    species: List[Species] = field(default_factory=list)
    tanks: List[TankModel] = field(default_factory=list)
    food: List[str] = field(default_factory=list)

    def __post_init__(self):
        self._species_by_id: Dict[str, Species] = {}
        for species in self.species:
            self._species_by_id.setdefault(species.id, species)

    def try_species_ref(self, species_id: str) -> Optional[Species]:
        return self._species_by_id.get(species_id)

    def species_ref(self, species_id: str) -> Species:
        """
        Exact lookup by species id.

        Raises:
            SpeciesNotFound: id not in catalog
        """
        species = self.try_species_ref(species_id)
        if species is None:
            raise SpeciesNotFound(f"unknown species {species_id}")
        return species

    def species_search(self, search_string: str) -> List[Species]:
        """
        Fuzzy search over fully grown species.

        Every whitespace-separated token of the search string must appear
        somewhere in the species id.
        """
        parts = search_string.split()
        return [
            s for s in self.species
            if s.is_fully_grown() and all(p in s.id for p in parts)
        ]

    def lookup(self, search_string: str) -> Species:
        """
        Resolve a user-supplied species name to exactly one species.

        An exact id match wins over fuzzy matches.

        Raises:
            SpeciesNotFound: nothing matches
            AmbiguousSpecies: more than one species matches
        """
        exact = self.try_species_ref(search_string)
        if exact is not None and exact.is_fully_grown():
            return exact

        possible = self.species_search(search_string)
        if not possible:
            raise SpeciesNotFound(f"No matching species for '{search_string}'")
        if len(possible) > 1:
            raise AmbiguousSpecies(search_string, [s.id for s in possible])
        return possible[0]

    def try_tank_ref(self, tank_id: str) -> Optional[TankModel]:
        return next((t for t in self.tanks if t.id == tank_id), None)

    def tank_ref(self, tank_id: str) -> TankModel:
        tank = self.try_tank_ref(tank_id)
        if tank is None:
            raise TankNotFound(f"unknown tank {tank_id}")
        return tank
