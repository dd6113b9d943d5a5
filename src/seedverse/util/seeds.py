"""
Seed hierarchy of the galaxy.

Every entity seed is derived from its parent seed by adding fixed, decade
scaled offsets. The scheme has no mixing step: it is deterministic and cheap,
but offsets of distant coordinates can collide (see
``seedverse.exceptions.DegenerateSeedCollision``).
"""
import numpy as np

from seedverse.exceptions import ConfigurationError

SEED_MODULUS = 2**64

SECTOR_OFFSET = 600_000_000_000_000
SECTOR_X_STEP = 1_000_000_000
SECTOR_Z_STEP = 100_000
SECTOR_Y_STEP = 1

SYSTEM_OFFSET = 123
SYSTEM_STEP = 100_000_000_000

STAR_OFFSET = 187_600_000
STAR_STEP = 10_000

PLANET_OFFSET = 5432
PLANET_STEP = 10_001


def check_seed(seed):
    """
    Validate that a seed fits in an unsigned 64-bit integer

    Args:
        seed (int):
            Seed to check
    Returns:
        seed (int):
            The same seed as a python int
    """
    if isinstance(seed, (bool, np.bool_)) or not isinstance(seed, (int, np.integer)):
        raise ConfigurationError(
            "Seed must be an integer", context={"seed": seed, "type": type(seed)}
        )
    seed = int(seed)
    if not 0 <= seed < SEED_MODULUS:
        raise ConfigurationError(
            "Seed must be in the unsigned 64-bit range", context={"seed": seed}
        )
    return seed


def new_seed():
    """
    Draw a fresh 64-bit seed from operating system entropy
    """
    return int(np.random.SeedSequence().generate_state(1, dtype=np.uint64)[0])


def derive_rng(seed):
    """
    Create the local random generator owned by a single generation call.

    Args:
        seed (int):
            Unsigned 64-bit entity seed
    Returns:
        rng (numpy.random.Generator):
            PCG64 backed generator, the same seed always gives the same
            sequence of draws
    """
    return np.random.Generator(np.random.PCG64(check_seed(seed)))


def sector_seed(galaxy_seed, x, y, z):
    """
    Seed of the sector at integer grid coordinates (x, y, z)
    """
    galaxy_seed = check_seed(galaxy_seed)
    offset = (
        SECTOR_OFFSET
        + int(x) * SECTOR_X_STEP
        + int(z) * SECTOR_Z_STEP
        + int(y) * SECTOR_Y_STEP
    )
    return (galaxy_seed + offset) % SEED_MODULUS


def _child_seeds(parent_seed, n, offset, step):
    parent_seed = check_seed(parent_seed)
    if n < 0:
        raise ConfigurationError("Number of seeds cannot be negative", {"n": n})
    return [(parent_seed + offset + i * step) % SEED_MODULUS for i in range(int(n))]


def system_seeds(sector_seed, n):
    """
    Seeds of the first n systems of a sector
    """
    return _child_seeds(sector_seed, n, SYSTEM_OFFSET, SYSTEM_STEP)


def star_seeds(system_seed, n):
    """
    Seeds of the first n stars of a system
    """
    return _child_seeds(system_seed, n, STAR_OFFSET, STAR_STEP)


def planet_seeds(star_seed, n):
    """
    Seeds of the first n planets of a star, in orbital order
    """
    return _child_seeds(star_seed, n, PLANET_OFFSET, PLANET_STEP)
