__all__ = [
    "normal_distribution",
    "inverse_exp_distribution",
    "cdf_index",
    "luminosity_from_mass",
    "temperature_subclass",
    "habitable_zone",
    "frost_limit",
    "equilibrium_temperature",
    "mass_density",
    "blackbody_color",
    "derive_rng",
    "new_seed",
    "sector_seed",
    "system_seeds",
    "star_seeds",
    "planet_seeds",
]

from .misc import (
    normal_distribution,
    inverse_exp_distribution,
    cdf_index,
    luminosity_from_mass,
    temperature_subclass,
    habitable_zone,
    frost_limit,
    equilibrium_temperature,
    mass_density,
    blackbody_color,
)
from .seeds import (
    derive_rng,
    new_seed,
    sector_seed,
    system_seeds,
    star_seeds,
    planet_seeds,
)
