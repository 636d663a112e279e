"""
Tests for the constraint model.

Verifies which constraints a species emits, their order, and the predation
size rule.
"""

from tankmates import constraints as c
from tankmates.data_types import (
    Cohabitation, Fighting, Interior, Need, Needs, Nibbling, PreyType, Salinity, Shoaling,
)
from tankmates.constraints import predation_size

from tankmates.tests.builders import make_species


def test_minimal_species_has_temperature_and_quality():
    """Species with no optional traits yields exactly two constraints"""
    species = make_species(quality=40)

    assert species.constraints() == [c.Temperature(species.habitat.temperature), c.Quality(40)]


def test_constraint_order_is_stable():
    """Every optional trait appears in the documented order"""
    species = make_species(
        salinity=Salinity.SALTY,
        interior=Interior.KREISEL,
        active_swimmer=True,
        territorial=True,
        needs=Needs(light=Need.loves(2)),
        shoaling=Shoaling(count=4),
        fighting=Fighting.WIMP,
        nibbling=Nibbling.NIBBLEABLE,
        cohabitation=Cohabitation.PAIRS_ONLY,
        communal=1,
        predation=[PreyType.FISH, PreyType.CLAM],
    )

    kinds = [type(x) for x in species.constraints()]

    assert kinds == [
        c.Temperature, c.Quality, c.Salinity, c.Shoaler, c.NoBully, c.NoNibbler,
        c.Lighting, c.Cohabitation, c.TankSize, c.Territorial, c.Interior,
        c.Communal, c.Predator, c.Predator,
    ]


def test_bully_and_nibbler_emit_nothing():
    """Only the victims carry NoBully / NoNibbler"""
    species = make_species(fighting=Fighting.BULLY, nibbling=Nibbling.NIBBLER)

    assert len(species.constraints()) == 2


def test_tank_size_uses_active_swimmer_factor():
    species = make_species(final_size=5, active_swimmer=True)

    assert c.TankSize(30) in species.constraints()


def test_predation_size_floors():
    """Predation size is 40% of final size, rounded down"""
    assert predation_size(10) == 4
    assert predation_size(7) == 2
    assert predation_size(2) == 0


def test_predator_constraints_per_prey_type():
    species = make_species(final_size=10, predation=[PreyType.FISH, PreyType.CRUSTACEAN])
    predators = [x for x in species.constraints() if isinstance(x, c.Predator)]

    assert predators == [
        c.Predator(prey=PreyType.FISH, size=4),
        c.Predator(prey=PreyType.CRUSTACEAN, size=4),
    ]


def test_dislikes_light_emits_lighting():
    species = make_species(needs=Needs(light=Need.dislike()))

    assert c.Lighting(Need.dislike()) in species.constraints()
