import numpy as np
import pytest

from seedverse.generation.star import generate_star
from seedverse.tables import (
    GAS_ORDER,
    N_HZ_LIMITS,
    N_PLANET_CLASSES,
    N_STELLAR_CLASSES,
    gases,
    hz_coefficients,
    mass_brackets,
    multiplicity_cdf,
    planet_classes,
    stellar_cdf,
    stellar_classes,
    system_multiplicity,
)


def test_table_sizes() -> None:
    assert len(stellar_classes()) == N_STELLAR_CLASSES
    assert len(planet_classes()) == N_PLANET_CLASSES
    assert len(hz_coefficients()) == N_HZ_LIMITS
    assert len(multiplicity_cdf()) == 7


@pytest.mark.parametrize("cdf", [stellar_cdf(), multiplicity_cdf()])
def test_cdfs_are_monotone_and_complete(cdf) -> None:
    assert np.all(np.diff(cdf) >= 0)
    assert cdf[-1] == 1.0


def test_cdfs_are_read_only() -> None:
    with pytest.raises(ValueError):
        stellar_cdf()[0] = 0.5


def test_stellar_ranges_are_ordered() -> None:
    df = stellar_classes()
    for quantity in ("mass", "radius", "temperature"):
        assert (df[f"{quantity}_min"] <= df[f"{quantity}_max"]).all()


def test_luminosity_class_blank_for_peculiar_stars() -> None:
    df = stellar_classes()
    assert df.loc[df["spectral_class"] == "Y", "luminosity_class"].item() == ""
    assert df.loc[df["designation"] == "red dwarf", "luminosity_class"].tolist() == [
        "V",
        "V",
    ]


def test_mass_brackets_are_contiguous() -> None:
    lows, highs = mass_brackets()
    assert lows[0] == 0.0
    np.testing.assert_array_equal(lows[1:], highs[:-1])


def test_planet_table_layout() -> None:
    df = planet_classes()
    assert df["zone"].tolist() == ["Hot"] * 6 + ["Warm"] * 6 + ["Cold"] * 6
    assert df.loc[5, "family"] == "Jovian"
    # Gas giants always keep an atmosphere
    assert (df.loc[df["planet_class"] == "Gas Giant", "atmosphere_probability"] == 1.0).all()


def test_gases_in_abundance_order() -> None:
    df = gases()
    assert tuple(df.index) == GAS_ORDER
    assert (df["max_partial_pressure"] > 0).all()


def test_edited_tables_do_not_change_generation() -> None:
    before = generate_star(12345).dump_params(full=True)

    df = stellar_classes()
    df.loc[:, "mass_max"] = df["mass_min"]
    planets = planet_classes()
    planets.loc[:, "atmosphere_probability"] = 0.0
    gases().loc[:, "abundance"] = 0.0
    hz_coefficients().loc[:, "seff_sun"] = 99.0
    system_multiplicity().loc[:, "cdf"] = 1.0

    assert generate_star(12345).dump_params(full=True) == before
    assert stellar_classes().equals(stellar_classes())
    assert (stellar_classes()["mass_max"] > stellar_classes()["mass_min"]).all()
    assert planet_classes().loc[17, "atmosphere_probability"] == 1.0
    assert gases().loc["N2", "abundance"] == 0.780
    assert system_multiplicity()["cdf"].iloc[0] == 0.8
