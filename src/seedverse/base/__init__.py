__all__ = ["Atmosphere", "Galaxy", "Planet", "Sector", "Star", "System"]

from .atmosphere import Atmosphere
from .galaxy import Galaxy
from .planet import Planet
from .sector import Sector
from .star import Star
from .system import System
