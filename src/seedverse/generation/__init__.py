__all__ = [
    "GalaxyEngine",
    "create_galaxy",
    "generate_sector",
    "sector_grid",
    "generate_system",
    "generate_star",
    "generate_planet",
]

from .galaxy import GalaxyEngine, create_galaxy
from .planet import generate_planet
from .star import generate_star
from .system import generate_sector, generate_system, sector_grid
