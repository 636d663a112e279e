"""Tests for plain-text reports."""

from tankmates.aquarium import SpeciesCount
from tankmates.check import check_for_viable_tank, AquariumCheckResult, ExhibitValidation
from tankmates.catalog import GameData
from tankmates.data_types import Diet, Fighting, Interior, Need, Needs, Salinity, Temperature
from tankmates.environment import FoodAmount
from tankmates.report import (
    environment_as_dict,
    environment_differences,
    format_aquarium_result,
    format_check_result,
    violation_messages,
)
from tankmates.violations import find_violations

from tankmates.tests.builders import make_animal, make_animals, make_environment, make_species


def test_violation_messages_sorted_and_deduplicated():
    territorial = make_species("eel", final_size=5, territorial=True)
    bully = make_species("angel", fighting=Fighting.BULLY)
    wimp = make_species("chromis", fighting=Fighting.WIMP)
    animals = make_animals(territorial, 2) + make_animals(wimp, 2) + [make_animal(bully)]

    messages = violation_messages(find_violations(animals, make_environment(size=10)))

    assert messages == [
        "angel will bully chromis",
        "eel is territorial, total size can only be 50% of tank size",
    ]


def test_environment_as_dict_skips_unset():
    env = make_environment(light=0, interior=Interior.ROUNDED)

    assert environment_as_dict(env) == {
        "size": 100,
        "temperature": "warm",
        "salinity": "salty",
        "quality": 100,
        "light": 0,
        "interior": "rounded",
    }


def test_environment_differences():
    old = make_environment(size=50, quality=60, plants=2)
    new = make_environment(size=80, quality=60, plants=1, caves=3)

    assert environment_differences(old, new) == ["size: 50 → 80", "caves: n/a → 3"]


def test_format_check_result_okay():
    fish = make_species("tang", final_size=5, diet=Diet.eats("flakes"), needs=Needs(light=Need.loves(2)))
    animals = make_animals(fish, 2)
    result = check_for_viable_tank(GameData(food=["flakes"]), animals)

    text = format_check_result([SpeciesCount("tang", 2)], result)

    assert text.startswith("For contents:\n- 2x tang\n\nThe minimum viable tank is:\n")
    assert "size: 10" in text
    assert "light: 2" in text
    assert text.endswith("Will require food (average per day):\n- 10x flakes")


def test_format_check_result_violations():
    warm = make_species("tang")
    cold = make_species("goldfish", temperature=Temperature.COLD)
    result = check_for_viable_tank(GameData(), [make_animal(warm), make_animal(cold)])

    text = format_check_result([SpeciesCount("tang", 1), SpeciesCount("goldfish", 1)], result)

    assert text.endswith(
        "A valid tank is not possible:\n"
        "- goldfish requires cold tank but tang requires warm"
    )


def test_format_aquarium_result():
    loaded = make_environment(size=150, light=1)
    needed = make_environment(size=24, quality=70, light=3, salinity=Salinity.SALTY)
    exhibit = ExhibitValidation(
        name="Reef",
        tank_volume=150,
        loaded_environment=loaded,
        minimum_viable_environment=needed,
        food=[FoodAmount("flakes", 24)],
        violations=[],
    )

    text = format_aquarium_result(AquariumCheckResult(exhibits=[exhibit]))

    assert text.splitlines() == [
        "Checking 1 tanks...",
        "Reef:",
        "- size: 24/150",
        "- quality: 70%",
        "- light: 1/3",
        "- 24x flakes",
        "No problems!",
    ]
