"""
Reference tables used by the generators.

The tables live as csv files in ``seedverse/data`` and are read once per
process. Every call returns a private copy of the cached frame, so edits by a
caller never reach the generators.
"""
from functools import lru_cache, wraps
from importlib.resources import files

import numpy as np
import pandas as pd

from seedverse.exceptions import ConfigurationError

N_STELLAR_CLASSES = 24
N_PLANET_CLASSES = 18
N_MASS_BRACKETS = 6
N_HZ_LIMITS = 8

# Habitable zone limits used for the in-zone test and planet temperature zones
HZ_INNER = 1
HZ_OUTER = 5

# Most common gases first, the composition draw relies on this order
GAS_ORDER = ("CO2", "H2", "N2", "O2", "He", "Ar", "CH4", "Ne", "Kr", "Xe")


def _read(name):
    return pd.read_csv(files("seedverse").joinpath("data").joinpath(name))


def _check_rows(df, name, n_rows):
    if len(df) != n_rows:
        raise ConfigurationError(
            f"Table {name} must have {n_rows} rows", context={"rows": len(df)}
        )


def _check_cdf(cdf, name):
    cdf = np.asarray(cdf, dtype=float)
    if np.any(np.diff(cdf) < 0) or not np.isclose(cdf[-1], 1.0):
        raise ConfigurationError(
            f"Table {name} has a malformed cumulative distribution",
            context={"cdf": cdf.tolist()},
        )


def _read_only(values):
    arr = np.array(values, dtype=float)
    arr.flags.writeable = False
    return arr


def _private_copy(loader):
    cached = lru_cache(maxsize=None)(loader)

    @wraps(loader)
    def table():
        return cached().copy()

    table.cache_clear = cached.cache_clear
    return table


@_private_copy
def stellar_classes():
    """
    Stellar classification table, one row per star class index

    Returns:
        df (pandas.DataFrame):
            Spectral and luminosity class, designation, mass [Msun],
            radius [Rsun] and temperature [K] ranges, apparent color, age
            factor and the cumulative occurrence probability of each class
    """
    df = _read("stellar_classes.csv")
    df["luminosity_class"] = df["luminosity_class"].fillna("")
    _check_rows(df, "stellar_classes", N_STELLAR_CLASSES)
    _check_cdf(df["cdf"], "stellar_classes")
    return df


@lru_cache(maxsize=None)
def stellar_cdf():
    return _read_only(stellar_classes()["cdf"])


@_private_copy
def planet_classes():
    """
    Periodic table of planets, 3 temperature zones x 6 mass brackets.

    Row index = zone offset (hot 0, warm 6, cold 12) + mass bracket. Masses
    are in Earth masses, radii in Earth radii and pressures in bar.
    """
    df = _read("planet_classes.csv")
    _check_rows(df, "planet_classes", N_PLANET_CLASSES)
    return df


@lru_cache(maxsize=None)
def mass_brackets():
    """
    Lower and upper Earth-mass bounds of the six mass brackets
    """
    df = planet_classes().iloc[:N_MASS_BRACKETS]
    return _read_only(df["mass_min"]), _read_only(df["mass_max"])


@_private_copy
def gases():
    """
    Atmosphere gases indexed by formula, ordered most common first
    """
    df = _read("gases.csv").set_index("gas")
    if tuple(df.index) != GAS_ORDER:
        raise ConfigurationError(
            "Gas table is not in abundance order", context={"gases": list(df.index)}
        )
    return df


@_private_copy
def system_multiplicity():
    """
    Cumulative probability of systems with 1 to 7 stars
    """
    df = _read("system_multiplicity.csv")
    _check_cdf(df["cdf"], "system_multiplicity")
    return df


@lru_cache(maxsize=None)
def multiplicity_cdf():
    return _read_only(system_multiplicity()["cdf"])


@_private_copy
def hz_coefficients():
    """
    Kopparapu et al. (2013) habitable zone flux coefficients. Row 0 is unused
    and kept so the limit number matches the row index.
    """
    df = _read("hz_coefficients.csv").set_index("limit")
    _check_rows(df, "hz_coefficients", N_HZ_LIMITS)
    return df
