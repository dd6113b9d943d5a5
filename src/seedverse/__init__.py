import logging

from seedverse.config import GalaxyConfig, GalaxyType
from seedverse.generation import GalaxyEngine, create_galaxy

__all__ = ["GalaxyConfig", "GalaxyEngine", "GalaxyType", "create_galaxy"]

logging.getLogger(__name__).addHandler(logging.NullHandler())
