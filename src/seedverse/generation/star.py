"""
Star generation from a star seed.

The star is complete when it leaves ``generate_star``: its habitable zone and
frost limit are known before any planet is generated around it.
"""
import logging

import astropy.constants as const
import astropy.units as u
import numpy as np

import seedverse.util.misc as misc
from seedverse.base.star import Star
from seedverse.tables import stellar_cdf, stellar_classes
from seedverse.util.seeds import derive_rng

logger = logging.getLogger(__name__)

# Upper (exclusive) bound of the planet count draw
PLANET_COUNT_LIMIT = 8


def classify_star(draw):
    """
    Index of the stellar class selected by a uniform draw
    """
    return misc.cdf_index(draw, stellar_cdf())


def generate_star(seed, max_planets=PLANET_COUNT_LIMIT, system_seed=None, name=""):
    """
    Generate all attributes of a star, without its planets

    Args:
        seed (int):
            Star seed
        max_planets (int):
            Most planets the star may host, the count is drawn uniformly in
            [0, min(8, max_planets + 1))
        system_seed (int):
            Seed of the parent system
        name (str):
            Name of the star
    Returns:
        star (Star):
            Star with an empty planet map
    """
    rng = derive_rng(seed)

    idx = classify_star(rng.random())
    row = stellar_classes().iloc[idx]

    mass = misc.uniform_between(rng, row["mass_min"], row["mass_max"]) * u.M_sun
    radius = misc.uniform_between(rng, row["radius_min"], row["radius_max"]) * u.R_sun
    temperature = (
        misc.uniform_between(rng, row["temperature_min"], row["temperature_max"]) * u.K
    )
    # Luminosity follows from the mass
    luminosity = misc.luminosity_from_mass(mass)

    subclass = misc.temperature_subclass(
        temperature, row["temperature_min"], row["temperature_max"]
    )
    stellar_type = f"{row['spectral_class']}{subclass}{row['luminosity_class']}"

    hz_distances = misc.habitable_zone(temperature, luminosity)
    frost = misc.frost_limit(luminosity)

    # Heuristic, no physical basis: pi * R[Rsun] * Rsun[km] / M[Msun] seconds
    axial_rotation = (
        np.pi
        * radius.to_value(u.R_sun)
        * const.R_sun.to_value(u.km)
        / mass.to_value(u.M_sun)
        * u.s
    )

    planet_limit = min(PLANET_COUNT_LIMIT, max_planets + 1)
    planet_count = int(rng.integers(planet_limit))

    star_dict = {
        "seed": seed,
        "system_seed": system_seed,
        "name": name,
        "type_index": idx,
        "spectral_class": row["spectral_class"],
        "luminosity_class": row["luminosity_class"],
        "temperature_subclass": subclass,
        "stellar_type": stellar_type,
        "designation": row["designation"],
        "mass": mass,
        "radius": radius,
        "luminosity": luminosity,
        "temperature": temperature,
        "color": misc.blackbody_color(temperature),
        "hz_distances": hz_distances,
        "frost_limit": frost,
        "axial_rotation": axial_rotation,
        "mu": (const.G * mass).to(u.km**3 / u.s**2),
        "planet_count": planet_count,
    }
    logger.debug(
        "Star 0x%016x: %s %s, %d planets", seed, stellar_type, mass, planet_count
    )
    return Star(star_dict)
