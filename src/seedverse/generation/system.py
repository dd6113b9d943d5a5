"""
Sector and system generation.
"""
import logging

import astropy.units as u
import numpy as np

import seedverse.util.misc as misc
from seedverse.base.sector import Sector
from seedverse.base.system import System
from seedverse.tables import multiplicity_cdf
from seedverse.util.seeds import check_seed, derive_rng, sector_seed

logger = logging.getLogger(__name__)

# Syllables of catalogue names, 32 of them so five bits of the seed pick one
SYLLABLES = (
    "ka", "ve", "lor", "an", "tis", "ur", "bel", "de",
    "mon", "ra", "xi", "sol", "em", "qua", "nor", "thi",
    "ga", "lyn", "or", "pe", "zan", "ce", "dru", "is",
    "hal", "mi", "os", "ter", "ya", "fen", "ul", "sha",
)


def catalogue_name(seed):
    """
    Pronounceable name derived from the digits of a seed

    Three syllables and a three digit number, e.g. "Kavelor-042". No random
    draws are used so the name never shifts other draws of the seed.
    """
    seed = check_seed(seed)
    syllables = []
    rest = seed
    for _ in range(3):
        rest, idx = divmod(rest, len(SYLLABLES))
        syllables.append(SYLLABLES[idx])
    return f"{''.join(syllables).capitalize()}-{seed % 1000:03d}"


def sector_grid(config):
    """
    Iterate over the integer coordinates of every sector of the galaxy

    Args:
        config (GalaxyConfig):
            Galaxy configuration
    Yields:
        position (tuple):
            (x, y, z) sector coordinates, x outermost and y innermost
    """
    (x_lo, x_hi), (y_lo, y_hi), (z_lo, z_hi) = config.sector_ranges
    for x in range(x_lo, x_hi):
        for z in range(z_lo, z_hi):
            for y in range(y_lo, y_hi):
                yield (x, y, z)


def generate_sector(galaxy_seed, x, y, z):
    """
    Create the (empty) sector at grid coordinates (x, y, z)
    """
    x, y, z = int(x), int(y), int(z)
    seed = sector_seed(galaxy_seed, x, y, z)
    sector = Sector(seed, (x, y, z), name=f"Sector {x:+d}.{y:+d}.{z:+d}")
    logger.debug("Sector 0x%016x at (%d, %d, %d)", seed, x, y, z)
    return sector


def generate_system(seed, config, sector_seed=None):
    """
    Generate a star system without its stars

    Args:
        seed (int):
            System seed
        config (GalaxyConfig):
            Galaxy configuration, provides the sector size and the star limit
        sector_seed (int):
            Seed of the parent sector
    Returns:
        system (System):
            System with an empty star map
    """
    rng = derive_rng(seed)
    position = np.array([rng.random() for _ in range(3)]) * config.sector_size_ly
    multiplicity = misc.cdf_index(rng.random(), multiplicity_cdf()) + 1
    if multiplicity > config.max_stars:
        logger.debug(
            "System 0x%016x multiplicity %d capped at %d",
            seed,
            multiplicity,
            config.max_stars,
        )
        multiplicity = config.max_stars
    system = System(
        seed,
        position * u.lyr,
        multiplicity,
        sector_seed=sector_seed,
        name=catalogue_name(seed),
    )
    logger.debug("System 0x%016x: %s", seed, system.multiplicity_name)
    return system
