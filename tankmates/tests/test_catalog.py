"""Tests for catalog lookup and fuzzy species search."""

import pytest

from tankmates.catalog import AmbiguousSpecies, GameData, SpeciesNotFound, TankNotFound
from tankmates.data_types import Breeding, BreedingKind
from tankmates.tank import TankModel

from tankmates.tests.builders import make_species


@pytest.fixture
def catalog():
    return GameData(
        species=[
            make_species("yellow_tang"),
            make_species("blue_tang"),
            make_species("clownfish"),
            make_species("clownfish_pair"),
            make_species("clownfish.fry", breeding=Breeding(kind=BreedingKind.NOT_FULLY_GROWN)),
        ],
        tanks=[TankModel("lagoon_tank", (2, 2), (6, 6), 25)],
        food=["flakes"],
    )


def test_species_ref_is_shared(catalog):
    """Lookups hand out the catalog's own Species object"""
    assert catalog.species_ref("blue_tang") is catalog.species[1]


def test_species_ref_unknown(catalog):
    assert catalog.try_species_ref("shark") is None
    with pytest.raises(SpeciesNotFound):
        catalog.species_ref("shark")


def test_search_requires_every_token(catalog):
    assert [s.id for s in catalog.species_search("tang")] == ["yellow_tang", "blue_tang"]
    assert [s.id for s in catalog.species_search("tang yel")] == ["yellow_tang"]
    assert catalog.species_search("tang clown") == []


def test_search_skips_juveniles(catalog):
    assert [s.id for s in catalog.species_search("fry")] == []


def test_lookup_single_match(catalog):
    assert catalog.lookup("yellow").id == "yellow_tang"


def test_lookup_exact_id_wins(catalog):
    """'clownfish' also matches clownfish_pair, but is an exact id"""
    assert catalog.lookup("clownfish").id == "clownfish"


def test_lookup_ambiguous_lists_candidates(catalog):
    with pytest.raises(AmbiguousSpecies) as excinfo:
        catalog.lookup("tang")

    assert excinfo.value.candidates == ["yellow_tang", "blue_tang"]
    assert "yellow_tang, blue_tang" in str(excinfo.value)


def test_lookup_not_found(catalog):
    with pytest.raises(SpeciesNotFound):
        catalog.lookup("shark")


def test_tank_ref(catalog):
    assert catalog.tank_ref("lagoon_tank").double_density == 25
    assert catalog.try_tank_ref("bathtub") is None
    with pytest.raises(TankNotFound):
        catalog.tank_ref("bathtub")
