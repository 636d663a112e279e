"""
Tank models and placed tanks.

A TankModel is a catalog entry (resizable within min/max tile dimensions);
a TankRef is one tank placed in an aquarium at a concrete size.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .data_types import Interior


@dataclass(frozen=True)
class TankModel:
    """
    Tank catalog entry.

    Attributes:
        id: Model id (e.g., "lagoon_tank")
        min_size: Smallest (width, height) in tiles
        max_size: Largest (width, height) in tiles
        double_density: Twice the water volume per tile, rounded
        interior: Interior shape this model provides, if any
    """
    id: str
    min_size: Tuple[int, int]
    max_size: Tuple[int, int]
    double_density: int
    interior: Optional[Interior] = None

    def volume(self, size: Tuple[int, int]) -> int:
        """Water volume of this model at `size` tiles"""
        width, height = size
        return (width * height * self.double_density) // 2

    def fits(self, size: Tuple[int, int]) -> bool:
        """True if `size` lies within the model's min/max dimensions"""
        return (self.min_size[0] <= size[0] <= self.max_size[0]
                and self.min_size[1] <= size[1] <= self.max_size[1])


@dataclass(frozen=True)
class TankRef:
    """A tank placed in an aquarium"""
    id: int
    model: TankModel
    size: Tuple[int, int]

    def volume(self) -> int:
        return self.model.volume(self.size)

    @property
    def interior(self) -> Optional[Interior]:
        return self.model.interior
