"""
Planet generation following a simplified nebular hypothesis.

Each planet accretes the protoplanetary mass between a lower and an upper
boundary around its orbit. The upper boundary of one planet is the lower
boundary of the next, so the planets of a star have to be generated in
orbital order with the boundary passed from one call to the next.
"""
import logging

import astropy.constants as const
import astropy.units as u
import numpy as np

import seedverse.util.misc as misc
from seedverse.base.atmosphere import Atmosphere
from seedverse.base.planet import Planet
from seedverse.exceptions import ClassificationOutOfRange
from seedverse.tables import (
    GAS_ORDER,
    N_MASS_BRACKETS,
    N_PLANET_CLASSES,
    gases,
    mass_brackets,
    planet_classes,
)
from seedverse.util.seeds import derive_rng

logger = logging.getLogger(__name__)

HOT_ZONE = 0
WARM_ZONE = 6
COLD_ZONE = 12

# Largest random deviation of equator and pole from the median temperature
TEMPERATURE_JITTER = 50 * u.K

# Gas index ranges offered by the first, second and all later composition runs
GAS_RUNS = ((0, 2), (2, 4), (4, len(GAS_ORDER)))


def mass_bracket(mass):
    """
    Mass bracket of a planet, 0 (Mercurian) to 5 (Jovian)

    The first bracket with min <= mass < max wins. Masses above the top
    bracket are super-jovian and stay in the Jovian bracket.
    """
    m = (mass / const.M_earth).decompose().value
    if not np.isfinite(m) or m < 0:
        raise ClassificationOutOfRange(
            "Planet mass cannot be classified", context={"mass_earth": m}
        )
    lows, highs = mass_brackets()
    for i in range(N_MASS_BRACKETS):
        if lows[i] <= m < highs[i]:
            return i
    return N_MASS_BRACKETS - 1


def temperature_zone(distance, hz_inner, hz_outer):
    """
    Row offset of the temperature zone in the periodic table of planets
    """
    zone = WARM_ZONE
    # Water evaporates
    if distance < hz_inner:
        zone = HOT_ZONE
    # Water only exists as ice
    if distance > hz_outer:
        zone = COLD_ZONE
    return zone


def classify_planet(distance, mass, hz_inner, hz_outer):
    """
    Index of the planet in the periodic table of planets
    """
    idx = temperature_zone(distance, hz_inner, hz_outer) + mass_bracket(mass)
    if not 0 <= idx < N_PLANET_CLASSES:
        raise ClassificationOutOfRange(
            "Planet class index outside the periodic table", context={"index": idx}
        )
    return idx


def generate_composition(rng):
    """
    Draw the gas mixture of an atmosphere

    Every run picks one gas, the first run among the two most common gases,
    the second among the next two and all later runs among the rest. The gas
    gets 60-100% of its nominal abundance, clipped to the remaining volume,
    until the whole volume is filled.
    Args:
        rng (numpy.random.Generator):
            Generator of the planet
    Returns:
        composition (dict):
            Volume fraction of each gas
    """
    abundance = gases()["abundance"]
    composition = {}
    total = 0.0
    run = 0
    while total < 1.0:
        lo, hi = GAS_RUNS[min(run, len(GAS_RUNS) - 1)]
        gas = GAS_ORDER[lo + int(rng.integers(hi - lo))]
        cap = abundance[gas]
        part = min(cap * 0.6 + rng.random() * cap * 0.4, 1.0 - total)
        composition[gas] = composition.get(gas, 0.0) + part
        total += part
        run += 1
    return composition


def generate_atmosphere(rng, type_index, planet_radius):
    """
    Atmosphere of a planet, or None if the planet has none.

    Gas giants always have an atmosphere whose radius equals the planet
    radius, terrestrial atmospheres reach 1-10% above the surface.
    """
    row = planet_classes().iloc[type_index]
    if rng.random() >= row["atmosphere_probability"]:
        return None

    if type_index % N_MASS_BRACKETS <= 3:
        radius = planet_radius * (1.01 + rng.random() * 0.09)
    else:
        radius = planet_radius
    pressure = misc.uniform_between(rng, row["pressure_min"], row["pressure_max"]) * u.bar
    return Atmosphere(radius, pressure, generate_composition(rng))


def generate_planet(seed, star, distance, lower_boundary, name=""):
    """
    Generate a planet of a star

    Args:
        seed (int):
            Planet seed
        star (Star):
            Fully generated parent star
        distance (astropy Quantity or float):
            Orbital distance, floats are taken as AU
        lower_boundary (astropy Quantity or float):
            Inner edge of the region the planet accretes from
        name (str):
            Name of the planet
    Returns:
        planet (Planet):
            The generated planet
        upper_boundary (astropy Quantity):
            Outer edge of the accreted region, the lower boundary of the next
            planet
    """
    rng = derive_rng(seed)
    distance = u.Quantity(distance, u.AU)
    lower_boundary = u.Quantity(lower_boundary, u.AU)

    is_in_hz = bool(star.hz_inner < distance < star.hz_outer)

    # Mirror the lower boundary around the orbit
    upper_boundary = 2 * distance - lower_boundary
    density = misc.mass_density(star.mass, star.frost_limit, distance)
    mass = (density * (upper_boundary - lower_boundary)).to(u.kg)

    temperature = misc.equilibrium_temperature(star.luminosity, distance)
    equator_temperature = temperature + rng.random() * TEMPERATURE_JITTER
    pole_temperature = temperature - rng.random() * TEMPERATURE_JITTER

    type_index = classify_planet(distance, mass, star.hz_inner, star.hz_outer)
    row = planet_classes().iloc[type_index]
    radius = (
        misc.uniform_between(rng, row["radius_min"], row["radius_max"]) * u.R_earth
    ).to(u.km)

    planet_dict = {
        "seed": seed,
        "star_seed": star.seed,
        "name": name,
        "distance": distance,
        "is_in_hz": is_in_hz,
        "mass": mass,
        "mu": (const.G * mass).to(u.km**3 / u.s**2),
        "temperature": temperature,
        "equator_temperature": equator_temperature,
        "pole_temperature": pole_temperature,
        "type_index": type_index,
        "radius": radius,
        # Heuristic day of 2 pi R[km] seconds
        "day": 2 * np.pi * radius.to_value(u.km) * u.s,
        # Kepler's third law in Earth units
        "year": (distance.to_value(u.AU) ** 1.5 * u.yr).to(u.s),
        "atmosphere": generate_atmosphere(rng, type_index, radius),
    }
    planet = Planet(planet_dict)
    logger.debug(
        "Planet 0x%016x: %s at %.3f AU", seed, planet.periodic_type, distance.value
    )
    return planet, upper_boundary
