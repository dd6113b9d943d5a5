import astropy.units as u
import numpy as np
import pytest

from seedverse.base.atmosphere import Atmosphere
from seedverse.base.star import Star
from seedverse.exceptions import ClassificationOutOfRange
from seedverse.generation.planet import (
    classify_planet,
    generate_composition,
    generate_planet,
    mass_bracket,
    temperature_zone,
)
from seedverse.tables import GAS_ORDER
from seedverse.util.misc import frost_limit, habitable_zone
from seedverse.util.seeds import derive_rng, planet_seeds


@pytest.fixture
def sun() -> Star:
    return Star(
        {
            "seed": 0x5,
            "mass": 1 * u.M_sun,
            "luminosity": 1 * u.L_sun,
            "temperature": 5780 * u.K,
            "hz_distances": habitable_zone(5780 * u.K, 1 * u.L_sun),
            "frost_limit": frost_limit(1 * u.L_sun),
        }
    )


@pytest.mark.parametrize(
    "earth_masses, bracket",
    [(0.0, 0), (0.05, 0), (0.1, 1), (1.0, 2), (2.0, 3), (10.0, 4), (318.0, 5), (5000.0, 5)],
)
def test_mass_bracket(earth_masses, bracket) -> None:
    assert mass_bracket(earth_masses * u.M_earth) == bracket


@pytest.mark.parametrize("mass", [-1 * u.M_earth, np.nan * u.kg, np.inf * u.kg])
def test_mass_bracket_rejects(mass) -> None:
    with pytest.raises(ClassificationOutOfRange):
        mass_bracket(mass)


def test_temperature_zone() -> None:
    inner, outer = 0.75 * u.AU, 1.77 * u.AU
    assert temperature_zone(0.5 * u.AU, inner, outer) == 0
    assert temperature_zone(1.0 * u.AU, inner, outer) == 6
    assert temperature_zone(3.0 * u.AU, inner, outer) == 12
    assert classify_planet(1.0 * u.AU, 1 * u.M_earth, inner, outer) == 8


def test_composition_fills_the_volume() -> None:
    for seed in planet_seeds(0x1, 8):
        composition = generate_composition(derive_rng(seed))
        assert sum(composition.values()) == pytest.approx(1.0, abs=1e-9)
        assert set(composition) <= set(GAS_ORDER)
        assert list(composition)[0] in ("CO2", "H2")
        assert all(frac > 0 for frac in composition.values())


def test_generate_planet_is_deterministic(sun) -> None:
    a, upper_a = generate_planet(0x77, sun, 1.0 * u.AU, 0.9 * u.AU)
    b, upper_b = generate_planet(0x77, sun, 1.0, 0.9)
    assert a.dump_params(full=True) == b.dump_params(full=True)
    assert upper_a == upper_b


def test_boundary_fold(sun) -> None:
    planet, upper = generate_planet(0x77, sun, 1.0 * u.AU, 0.9 * u.AU)
    assert upper.to_value(u.AU) == pytest.approx(1.1)
    assert planet.mass > 0 * u.kg


def test_earth_orbit_planet(sun) -> None:
    planet, _ = generate_planet(0x77, sun, 1.0 * u.AU, 0.9 * u.AU)
    # Little rocky material this far from half the frost limit
    assert planet.type_index == 6
    assert planet.periodic_type == "Warm Mercurian"
    assert planet.is_in_hz
    assert planet.atmosphere is None
    assert planet.describe_composition() == ""
    assert planet.temperature.to_value(u.K) == pytest.approx(278.3, abs=0.5)
    assert planet.pole_temperature <= planet.temperature <= planet.equator_temperature
    assert planet.year.to_value(u.yr) == pytest.approx(1.0)
    assert 0.0 <= planet.habitability() <= 1.0


@pytest.mark.parametrize("seed", planet_seeds(0x2, 8))
def test_jovian_atmosphere_matches_radius(sun, seed) -> None:
    planet, upper = generate_planet(seed, sun, 4.0 * u.AU, 0 * u.AU)
    assert planet.periodic_type == "Cold Jovian"
    assert planet.is_gas_giant
    assert planet.atmosphere is not None
    assert planet.atmosphere.radius == planet.radius
    assert planet.describe_composition(long=False).split()[0] in ("CO2", "H2")
    assert planet.atmosphere.total_fraction() == pytest.approx(1.0, abs=1e-3)
    assert upper.to_value(u.AU) == pytest.approx(8.0)
    assert planet.year.to_value(u.yr) == pytest.approx(8.0)
    assert planet.habitability() == 0.0


def test_hot_planet_not_habitable(sun) -> None:
    planet, _ = generate_planet(0x9, sun, 0.3 * u.AU, 0.2 * u.AU)
    assert planet.temperature_zone == "Hot"
    assert not planet.is_in_hz
    assert planet.habitability() == 0.0


def test_inverted_boundaries_rejected(sun) -> None:
    with pytest.raises(ClassificationOutOfRange):
        generate_planet(0x9, sun, 1.0 * u.AU, 3.0 * u.AU)


def test_planet_dump_params(sun) -> None:
    planet, _ = generate_planet(0x77, sun, 1.0 * u.AU, 0.9 * u.AU, name="Sol b")
    assert set(planet.dump_params()) == {"seed", "type", "mass", "temperature"}
    full = planet.dump_params(full=True)
    assert full["name"] == "Sol b"
    assert full["star"] == sun.seed
    assert full["atmosphere"] is None
    assert "Planet object" in repr(planet)


def earth_air(pressure=1.0, **fractions):
    composition = {"N2": 0.78, "O2": 0.21, "Ar": 0.01}
    composition.update(fractions)
    return Atmosphere(6400 * u.km, pressure * u.bar, composition)


def test_breathable_atmosphere() -> None:
    air = earth_air()
    assert air.is_breathable()
    assert air.habitability() == 1.0
    assert air.partial_pressures()["O2"] == pytest.approx(0.21)
    assert air.describe(long=False) == "N2 O2 Ar"


def test_thin_or_toxic_atmosphere() -> None:
    # O2 partial pressure below 0.16 bar
    assert not earth_air(pressure=0.5).is_breathable()
    # CO2 above its partial pressure ceiling
    assert not earth_air(CO2=0.02).is_breathable()
    assert Atmosphere(6400 * u.km, 1 * u.bar, {"N2": 1.0}).habitability() == 0.0


def test_atmosphere_exists_matches_radius(sun) -> None:
    air = earth_air()
    assert air.exists() == (air.radius > 0 * u.km)
    assert air.exists()
    for seed in planet_seeds(0x2, 8):
        planet, _ = generate_planet(seed, sun, 4.0 * u.AU, 0 * u.AU)
        assert planet.atmosphere.exists() == (planet.atmosphere.radius > 0 * u.km)
        assert planet.atmosphere.exists()
