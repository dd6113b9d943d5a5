"""Galaxy generation configuration."""
from __future__ import annotations

import enum
import logging
import numbers
from dataclasses import asdict, dataclass, field
from typing import Tuple

from seedverse.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Above this many sectors a full galaxy pass takes a very long time
LARGE_GRID_SECTORS = 100_000_000


class GalaxyType(enum.Enum):
    """Shape of the galaxy, informational only."""

    SPIRAL = "spiral"
    GLOBULAR = "globular"


@dataclass(frozen=True)
class GalaxyConfig:
    """Size and population limits of a generated galaxy."""

    galaxy_type: GalaxyType = GalaxyType.SPIRAL
    galaxy_size_ly: Tuple[float, float, float] = (1.0e4, 100.0, 1.0e4)
    sector_size_ly: float = 10.0
    max_systems: int = 10  # per sector
    max_stars: int = 7  # per system
    max_planets: int = 10  # per star
    strict_seeds: bool = False
    _grid: Tuple[Tuple[int, int], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.galaxy_type, str):
            try:
                object.__setattr__(self, "galaxy_type", GalaxyType(self.galaxy_type))
            except ValueError as err:
                raise ConfigurationError(
                    "Unknown galaxy type", context={"galaxy_type": self.galaxy_type}
                ) from err
        try:
            size = tuple(float(s) for s in self.galaxy_size_ly)
        except (TypeError, ValueError) as err:
            raise ConfigurationError(
                "Galaxy size needs three numeric extents",
                context={"galaxy_size_ly": self.galaxy_size_ly},
            ) from err
        if len(size) != 3 or any(not s > 0 for s in size):
            raise ConfigurationError(
                "Galaxy size needs three positive extents",
                context={"galaxy_size_ly": self.galaxy_size_ly},
            )
        object.__setattr__(self, "galaxy_size_ly", size)
        sector_size = self.sector_size_ly
        if isinstance(sector_size, (bool, str)) or not isinstance(
            sector_size, numbers.Real
        ):
            raise ConfigurationError(
                "Sector size must be a number",
                context={"sector_size_ly": sector_size},
            )
        if not sector_size > 0:
            raise ConfigurationError(
                "Sector size must be positive",
                context={"sector_size_ly": sector_size},
            )
        object.__setattr__(self, "sector_size_ly", float(sector_size))
        for name in ("max_systems", "max_stars", "max_planets"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigurationError(
                    f"{name} must be a non-negative integer", context={name: value}
                )
        if self.max_stars < 1:
            raise ConfigurationError(
                "A system needs room for at least one star",
                context={"max_stars": self.max_stars},
            )

        # Half-open [lo, hi) sector index range per axis, truncated toward zero
        grid = []
        for extent in size:
            half = int(extent / self.sector_size_ly / 2)
            grid.append((-half, half))
        object.__setattr__(self, "_grid", tuple(grid))
        if self.n_sectors > LARGE_GRID_SECTORS:
            logger.warning(
                "Galaxy grid has %d sectors, full generation will be slow",
                self.n_sectors,
            )

    @property
    def sector_ranges(self) -> Tuple[Tuple[int, int], ...]:
        """Sector index ranges along x, y and z."""
        return self._grid

    @property
    def n_sectors(self) -> int:
        n = 1
        for lo, hi in self._grid:
            n *= hi - lo
        return n

    @classmethod
    def from_params(cls, params: dict) -> "GalaxyConfig":
        """Build a configuration from a plain parameter dictionary."""
        known = {
            "galaxy_type",
            "galaxy_size_ly",
            "sector_size_ly",
            "max_systems",
            "max_stars",
            "max_planets",
            "strict_seeds",
        }
        unknown = set(params) - known
        if unknown:
            raise ConfigurationError(
                "Unknown configuration keys", context={"keys": sorted(unknown)}
            )
        return cls(**{k: v for k, v in params.items() if k in known})

    def to_dict(self) -> dict:
        data = asdict(self)
        data.pop("_grid")
        data["galaxy_type"] = self.galaxy_type.value
        data["galaxy_size_ly"] = list(self.galaxy_size_ly)
        return data
