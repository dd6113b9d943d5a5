import logging

import pytest

from seedverse.config import GalaxyConfig, GalaxyType
from seedverse.exceptions import ConfigurationError


def test_default_grid() -> None:
    config = GalaxyConfig()
    assert config.galaxy_type is GalaxyType.SPIRAL
    assert config.sector_ranges == ((-500, 500), (-5, 5), (-500, 500))
    assert config.n_sectors == 1000 * 10 * 1000


def test_grid_truncates_toward_zero() -> None:
    config = GalaxyConfig(galaxy_size_ly=(35, 10, 5), sector_size_ly=10)
    assert config.sector_ranges == ((-1, 1), (0, 0), (0, 0))
    assert config.n_sectors == 0


def test_from_params_and_back() -> None:
    config = GalaxyConfig.from_params(
        {"galaxy_type": "globular", "galaxy_size_ly": [40, 20, 40], "max_systems": 3}
    )
    assert config.galaxy_type is GalaxyType.GLOBULAR
    assert config.galaxy_size_ly == (40.0, 20.0, 40.0)
    assert GalaxyConfig.from_params(config.to_dict()) == config


def test_unknown_keys_rejected() -> None:
    with pytest.raises(ConfigurationError):
        GalaxyConfig.from_params({"max_moons": 3})


@pytest.mark.parametrize(
    "params",
    [
        {"sector_size_ly": 0},
        {"galaxy_size_ly": (10, 10)},
        {"galaxy_size_ly": (10, -10, 10)},
        {"max_systems": -1},
        {"max_planets": 2.5},
        {"max_stars": 0},
        {"max_stars": True},
        {"galaxy_type": "elliptical"},
    ],
)
def test_invalid_config(params) -> None:
    with pytest.raises(ConfigurationError):
        GalaxyConfig(**params)


def test_large_grid_warns(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="seedverse.config"):
        GalaxyConfig(galaxy_size_ly=(1e6, 1e3, 1e5))
    assert "slow" in caplog.text


def test_error_message_carries_context() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        GalaxyConfig(sector_size_ly=-2)
    assert "sector_size_ly=-2" in str(excinfo.value)


@pytest.mark.parametrize("sector_size", ["10", None, True, float("nan")])
def test_non_numeric_sector_size_rejected(sector_size) -> None:
    with pytest.raises(ConfigurationError):
        GalaxyConfig(sector_size_ly=sector_size)


def test_non_numeric_galaxy_size_rejected() -> None:
    with pytest.raises(ConfigurationError):
        GalaxyConfig(galaxy_size_ly=("wide", 100, 1e4))
    with pytest.raises(ConfigurationError):
        GalaxyConfig(galaxy_size_ly=10)
