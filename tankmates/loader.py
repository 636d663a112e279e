"""
YAML data loader with schema validation.

Loads species, tank models, food and aquarium descriptions from YAML files
and validates them against JSON schemas.
"""

import itertools
import logging
import yaml
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import jsonschema

from .data_types import (
    PreyType, Stage, Size, Habitat, Temperature, Salinity, Interior,
    Diet, Need, Needs, Shoaling, Fighting, Nibbling, Cohabitation,
    Breeding, BreedingKind,
)
from .constants import (
    JUVENILE_ID_SUFFIXES,
    SPECIES_DIR_NAME,
    TANKS_FILE_NAME,
    FOOD_FILE_NAME,
)
from .species import Species
from .tank import TankModel, TankRef
from .animal import AnimalRef, Growth, FINAL
from .catalog import GameData, CatalogError
from .aquarium import Aquarium, Exhibit

logger = logging.getLogger(__name__)


class DataLoadError(Exception):
    """Raised when data loading or validation fails"""
    pass


def load_yaml(file_path: Path) -> Any:
    """Load YAML file and return parsed data"""
    file_path = Path(file_path)
    if not file_path.exists():
        raise DataLoadError(f"File not found: {file_path}")

    try:
        with open(file_path, 'r') as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DataLoadError(f"YAML parse error in {file_path}: {e}")


def validate_against_schema(data: Any, schema_path: Path, data_path: Path):
    """Validate data against JSON schema"""
    if not schema_path.exists():
        # Schema validation optional (custom schema dirs may omit some files)
        logger.debug("No schema at %s, skipping validation of %s", schema_path, data_path)
        return

    try:
        with open(schema_path, 'r') as f:
            schema = json.load(f)
        jsonschema.validate(instance=data, schema=schema)
    except jsonschema.ValidationError as e:
        raise DataLoadError(f"Validation error in {data_path}: {e.message}")
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Invalid JSON schema {schema_path}: {e}")


def _load_validated(file_path: Path, schema_dir: Optional[Path], schema_name: str) -> Any:
    file_path = Path(file_path)
    data = load_yaml(file_path)

    # Validate if schema available
    if schema_dir:
        validate_against_schema(data, Path(schema_dir) / schema_name, file_path)

    return data


# ============================================================================
# Species
# ============================================================================

def _parse_need(value: Any) -> Optional[Need]:
    if value is None:
        return None
    if value == "dislikes":
        return Need.dislike()
    return Need.loves(int(value))


def _parse_diet(value: Any) -> Diet:
    if value is None or value == "none":
        return Diet.does_not_eat()
    if value == "scavenger":
        return Diet.scavenger()
    period = int(value.get('period', 1))
    if period < 1:
        raise ValueError(f"diet period must be at least 1, got {period}")
    return Diet.eats(food=value['food'], period=period)


def _parse_salinity(value: Optional[str]) -> Optional[Salinity]:
    if value is None or value == "both":
        return None
    return Salinity(value)


def _parse_breeding(species_id: str, value: Optional[Dict[str, Any]]) -> Breeding:
    if species_id.endswith(JUVENILE_ID_SUFFIXES):
        return Breeding(kind=BreedingKind.NOT_FULLY_GROWN)
    if value and value.get('baby'):
        return Breeding(kind=BreedingKind.BREEDABLE, baby=value['baby'])
    return Breeding()


def _parse_species(data: Dict[str, Any]) -> Species:
    size_data = data['size']
    stages = tuple(Stage(**s) for s in size_data.get('stages', []))
    size = Size(
        final_size=size_data['final'],
        stages=stages,
        armored=size_data.get('armored', False),
        immobile=size_data.get('immobile', False),
    )

    habitat_data = data['habitat']
    interior = habitat_data.get('interior')
    habitat = Habitat(
        temperature=Temperature(habitat_data['temperature']),
        minimum_quality=habitat_data.get('quality', 0),
        salinity=_parse_salinity(habitat_data.get('salinity')),
        interior=Interior(interior) if interior else None,
        active_swimmer=habitat_data.get('active_swimmer', False),
        territorial=habitat_data.get('territorial', False),
    )

    needs_data = dict(data.get('needs') or {})
    needs = Needs(
        light=_parse_need(needs_data.pop('light', None)),
        plants=_parse_need(needs_data.pop('plants', None)),
        rocks=_parse_need(needs_data.pop('rocks', None)),
        **needs_data
    )

    shoaling_data = data.get('shoaling')
    fighting = data.get('fighting')
    nibbling = data.get('nibbling')
    cohabitation = data.get('cohabitation')

    return Species(
        id=data['id'],
        genus=data.get('genus', 'unknown'),
        prey_type=PreyType(data['prey_type']),
        size=size,
        habitat=habitat,
        diet=_parse_diet(data.get('diet')),
        needs=needs,
        greedy=data.get('greedy', False),
        shoaling=Shoaling(**shoaling_data) if shoaling_data else None,
        fighting=Fighting(fighting) if fighting else None,
        nibbling=Nibbling(nibbling) if nibbling else None,
        cohabitation=Cohabitation(cohabitation) if cohabitation else None,
        predation=[PreyType(p) for p in data.get('predation', [])],
        communal=data.get('communal'),
        breeding=_parse_breeding(data['id'], data.get('breeding')),
    )


def load_species(file_path: Path, schema_dir: Optional[Path] = None) -> List[Species]:
    """Load every species defined in one YAML file"""
    data = _load_validated(file_path, schema_dir, "species.schema.json")

    result = []
    for species_data in data['species']:
        try:
            result.append(_parse_species(species_data))
        except (KeyError, TypeError, ValueError) as e:
            species_id = species_data.get('id', 'unknown') if isinstance(species_data, dict) else 'unknown'
            raise DataLoadError(f"error reading species {species_id} in {file_path}: {e}")

    logger.debug("Loaded %d species from %s", len(result), file_path)
    return result


def load_species_registry(species_dir: Path, schema_dir: Optional[Path] = None) -> List[Species]:
    """Load all species from directory, in file name order"""
    species_dir = Path(species_dir)
    if not species_dir.exists():
        raise DataLoadError(f"Species directory not found: {species_dir}")

    registry = []
    seen = set()
    for yaml_file in sorted(species_dir.glob("*.yaml")):
        for species in load_species(yaml_file, schema_dir):
            if species.id in seen:
                raise DataLoadError(f"Duplicate species {species.id} in {yaml_file}")
            seen.add(species.id)
            registry.append(species)

    if not registry:
        raise DataLoadError(f"No species files found in {species_dir}")

    return registry


# ============================================================================
# Tanks and Food
# ============================================================================

def load_tank_models(file_path: Path, schema_dir: Optional[Path] = None) -> List[TankModel]:
    """Load tank models from YAML"""
    data = _load_validated(file_path, schema_dir, "tanks.schema.json")

    tanks = []
    for tank_data in data['tanks']:
        try:
            interior = tank_data.get('interior')
            tanks.append(TankModel(
                id=tank_data['id'],
                min_size=tuple(tank_data['min_size']),
                max_size=tuple(tank_data['max_size']),
                double_density=round(2.0 * tank_data['volume_per_tile']),
                interior=Interior(interior) if interior else None,
            ))
        except (KeyError, TypeError, ValueError) as e:
            raise DataLoadError(f"error reading tank model in {file_path}: {e}")

    return tanks


def load_food(file_path: Path, schema_dir: Optional[Path] = None) -> List[str]:
    """Load recognised food ids from YAML"""
    data = _load_validated(file_path, schema_dir, "food.schema.json")
    return [str(f) for f in data['food']]


def load_game_data(data_root: Path, schema_dir: Optional[Path] = None) -> GameData:
    """Load the complete data pack

    Expects species/*.yaml, tanks.yaml and food.yaml under data_root.
    """
    data_root = Path(data_root)

    result = GameData(
        species=load_species_registry(data_root / SPECIES_DIR_NAME, schema_dir),
        tanks=load_tank_models(data_root / TANKS_FILE_NAME, schema_dir),
        food=load_food(data_root / FOOD_FILE_NAME, schema_dir),
    )

    logger.info(
        "Loaded data pack %s: %d species, %d tanks, %d food",
        data_root, len(result.species), len(result.tanks), len(result.food)
    )
    return result


# ============================================================================
# Aquarium Descriptions
# ============================================================================

def _parse_growth(value: Any, species: Species, animal_id: int) -> Growth:
    """
    Growth state from an aquarium file.

    Stage number equal to the number of stages means fully grown; anything
    beyond it is malformed.
    """
    if value is None or value == "final":
        return FINAL

    stage = int(value.get('stage', 0))
    growth = int(value.get('growth', 0))
    stage_count = len(species.size.stages)

    if stage < 0:
        raise DataLoadError(f"animal {animal_id}: negative growth stage {stage} for {species.id}")
    if stage > stage_count:
        raise DataLoadError(
            f"animal {animal_id}: stage {stage} greater than number of stages "
            f"({stage_count}) for {species.id}"
        )
    if stage == stage_count:
        return FINAL
    return Growth.growing(stage, growth)


def _parse_tank(data: Dict[str, Any], game_data: GameData) -> TankRef:
    model = game_data.tank_ref(data['model'])
    size: Tuple[int, int] = tuple(data['size'])
    if not model.fits(size):
        logger.warning("Tank %s size %s outside model %s limits", data['id'], size, model.id)
    return TankRef(id=data['id'], model=model, size=size)


def load_aquarium(file_path: Path, game_data: GameData, schema_dir: Optional[Path] = None) -> Aquarium:
    """
    Load an aquarium description from YAML.

    Animals are either individuals (`id`, `species`, optional `growth`) or
    summaries (`species`, `count`). Summaries are expanded into fully grown
    individuals with ids following the largest explicit id.

    Raises:
        DataLoadError: unreadable file, schema violation, unknown species or
            tank model, or malformed growth state
    """
    file_path = Path(file_path)
    data = _load_validated(file_path, schema_dir, "aquarium.schema.json")

    exhibit_data = data.get('exhibits') or []
    explicit_ids = [
        a['id'] for e in exhibit_data for a in (e.get('animals') or []) if 'id' in a
    ]
    ids = itertools.count(max(explicit_ids, default=0) + 1)

    exhibits = []
    try:
        for e in exhibit_data:
            animals = []
            for a in e.get('animals') or []:
                species = game_data.species_ref(a['species'])
                if 'count' in a:
                    for _ in range(a['count']):
                        animals.append(AnimalRef(id=next(ids), species=species))
                else:
                    growth = _parse_growth(a.get('growth'), species, a['id'])
                    animals.append(AnimalRef(id=a['id'], species=species, growth=growth))

            exhibits.append(Exhibit(
                name=e['name'],
                tank=_parse_tank(e['tank'], game_data),
                animals=animals,
            ))
    except CatalogError as e:
        raise DataLoadError(f"{file_path}: {e}")
    except (KeyError, TypeError, ValueError) as e:
        raise DataLoadError(f"Malformed aquarium {file_path}: {e}")

    logger.info("Loaded aquarium %s: %d exhibits", file_path, len(exhibits))
    return Aquarium(exhibits=exhibits)
