"""Tests for occupant construction from species counts and summaries."""

import itertools

import pytest

from tankmates.animal import FINAL, Growth
from tankmates.aquarium import (
    Aquarium, Exhibit, SpeciesCount, animals_from_counts, expand_summary, summarize,
)
from tankmates.catalog import GameData, SpeciesNotFound
from tankmates.tank import TankModel, TankRef

from tankmates.tests.builders import make_animal, make_species


@pytest.fixture
def catalog():
    return GameData(
        species=[
            make_species("yellow_tang", stages=[2]),
            make_species("clownfish"),
        ],
        tanks=[TankModel("lagoon_tank", (2, 2), (6, 6), 25)],
    )


def test_animals_from_counts_resolves_search_strings(catalog):
    counts, animals = animals_from_counts(catalog, [SpeciesCount("yellow", 2), SpeciesCount("clown", 1)])

    assert counts == [SpeciesCount("yellow_tang", 2), SpeciesCount("clownfish", 1)]
    assert [a.id for a in animals] == [1, 2, 3]
    assert animals[0].species is animals[1].species


def test_earliest_growth_stage_unless_fully_grown(catalog):
    _, growing = animals_from_counts(catalog, [SpeciesCount("yellow_tang", 1), SpeciesCount("clownfish", 1)])
    _, grown = animals_from_counts(catalog, [SpeciesCount("yellow_tang", 1)], assume_fully_grown=True)

    assert growing[0].growth == Growth.growing(0, 0)
    # no stages at all: already final
    assert growing[1].growth == FINAL
    assert grown[0].growth == FINAL


def test_ids_come_from_caller(catalog):
    _, animals = animals_from_counts(catalog, [SpeciesCount("clownfish", 2)], ids=itertools.count(50))

    assert [a.id for a in animals] == [50, 51]


def test_unknown_species(catalog):
    with pytest.raises(SpeciesNotFound):
        animals_from_counts(catalog, [SpeciesCount("shark", 1)])


def test_summarize_first_seen_order(catalog):
    tang = catalog.species_ref("yellow_tang")
    clown = catalog.species_ref("clownfish")
    animals = [make_animal(clown), make_animal(tang), make_animal(clown)]

    assert summarize(animals) == [SpeciesCount("clownfish", 2), SpeciesCount("yellow_tang", 1)]


def test_summary_round_trip_preserves_counts(catalog):
    _, animals = animals_from_counts(catalog, [SpeciesCount("clownfish", 3), SpeciesCount("yellow_tang", 2)])

    rebuilt = expand_summary(catalog, summarize(animals))

    assert summarize(rebuilt) == summarize(animals)
    assert all(a.growth == FINAL for a in rebuilt)


def test_description(catalog):
    tank = TankRef(id=1, model=catalog.tank_ref("lagoon_tank"), size=(3, 4))
    tang = catalog.species_ref("yellow_tang")
    animals = [make_animal(tang, id=1, growth=Growth.growing(0, 4)), make_animal(tang, id=2)]
    aquarium = Aquarium(exhibits=[Exhibit(name="Reef", tank=tank, animals=animals)])

    full = aquarium.description()
    assert full["exhibits"][0]["tank"] == {"id": 1, "model": "lagoon_tank", "size": [3, 4]}
    assert full["exhibits"][0]["animals"] == [
        {"id": 1, "species": "yellow_tang", "growth": {"stage": 0, "growth": 4}},
        {"id": 2, "species": "yellow_tang"},
    ]

    short = aquarium.description(summary=True)
    assert short["exhibits"][0]["animals"] == [{"species": "yellow_tang", "count": 2}]
