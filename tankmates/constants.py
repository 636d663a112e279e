"""
Central configuration constants for the stocking checker.

Defines game rule values, aggregation defaults, and data-pack configuration
used across multiple modules.
"""

from pathlib import Path

from .data_types import Salinity


# ============================================================================
# Game Rule Constants
# ============================================================================

# Prey at or below this fraction of a predator's final size gets eaten.
# Community-derived rule for the game's predation model.
PREDATION_SIZE_RATIO = 0.4

# Active swimmers need headroom beyond body size
ACTIVE_SWIMMER_TANK_FACTOR = 6

# Territorial species: tank must be this multiple of the species' total size
TERRITORIAL_TANK_FACTOR = 2

# Greedy eaters consume 4/3 of their size per feed
GREEDY_FOOD_NUMERATOR = 4
GREEDY_FOOD_DENOMINATOR = 3

# Salinity chosen when no occupant expresses a preference
DEFAULT_SALINITY = Salinity.SALTY

# Catalog ids carrying these suffixes are juvenile entries (not fully grown)
JUVENILE_ID_SUFFIXES = ('.egg', '.fry')


# ============================================================================
# Data Pack Configuration
# ============================================================================

# Environment variable naming the data pack directory
DATA_ROOT_ENV_VAR = "TANKMATES_DATA"

# Fallback data pack directory (relative to the working directory)
DEFAULT_DATA_ROOT = Path("data")

# JSON schemas bundled with the package
DEFAULT_SCHEMA_DIR = Path(__file__).parent / "schemas"

# File layout inside a data pack
SPECIES_DIR_NAME = "species"
TANKS_FILE_NAME = "tanks.yaml"
FOOD_FILE_NAME = "food.yaml"
