import logging
import string

import astropy.units as u
from tqdm import tqdm

from seedverse.base.galaxy import Galaxy
from seedverse.config import GalaxyConfig
from seedverse.exceptions import ConfigurationError, DegenerateSeedCollision
from seedverse.generation.planet import generate_planet
from seedverse.generation.star import generate_star
from seedverse.generation.system import generate_sector, generate_system, sector_grid
from seedverse.util.seeds import (
    check_seed,
    derive_rng,
    new_seed,
    planet_seeds,
    star_seeds,
    system_seeds,
)

logger = logging.getLogger(__name__)

# Gap between the running lower boundary and the first orbit inside the frost limit
INNER_ORBIT_GAP = 0.1 * u.AU


def create_galaxy(galaxy_params):
    """
    Create a galaxy engine from a plain parameter dictionary

    Args:
        galaxy_params (dict):
            GalaxyConfig fields plus an optional "seed", a missing seed is
            drawn from system entropy
    Returns:
        galaxy (GalaxyEngine):
            Engine with nothing generated yet
    """
    params = dict(galaxy_params)
    seed = params.pop("seed", None)
    config = GalaxyConfig.from_params(params)
    return GalaxyEngine(config, seed=seed)


class GalaxyEngine(Galaxy):
    """
    Lazily generates the galaxy level by level.

    Sectors, systems, stars and planets are only created when asked for and
    every call can be repeated: a seed always yields the same entity, so a
    repeated call overwrites an entity with identical values.
    """

    def __init__(self, config=None, seed=None):
        """
        Args:
            config (GalaxyConfig):
                Galaxy configuration, defaults to GalaxyConfig()
            seed (int):
                Galaxy seed, drawn from system entropy when None
        """
        if config is None:
            config = GalaxyConfig()
        if not isinstance(config, GalaxyConfig):
            raise ConfigurationError(
                "config must be a GalaxyConfig", context={"type": type(config)}
            )
        super().__init__(new_seed() if seed is None else check_seed(seed), config)
        self._system_sector = {}
        logger.info("Galaxy engine ready with seed 0x%016x", self.seed)

    def new_seed(self):
        """
        Switch to a fresh random seed, returns the new seed
        """
        return self.set_seed(new_seed())

    def set_seed(self, seed):
        """
        Switch to another galaxy seed. Everything generated from the previous
        seed is dropped.
        """
        self.seed = check_seed(seed)
        self.sectors = {}
        self.systems = {}
        self._system_sector = {}
        logger.info("Galaxy seed set to 0x%016x", self.seed)
        return self.seed

    def generate_sector(self, x, y, z):
        """
        Generate the sector at grid coordinates (x, y, z) and store it
        """
        sector = generate_sector(self.seed, x, y, z)
        existing = self.sectors.get(sector.seed)
        if existing is not None and existing.position != sector.position:
            if self.config.strict_seeds:
                raise DegenerateSeedCollision(
                    "Two sectors share a seed",
                    context={
                        "seed": sector.seed,
                        "positions": (existing.position, sector.position),
                    },
                )
            logger.warning(
                "Sector 0x%016x at %s replaces the sector at %s",
                sector.seed,
                sector.position,
                existing.position,
            )
        if existing is not None:
            sector.system_seeds = existing.system_seeds
        self.sectors[sector.seed] = sector
        return sector

    def generate_sectors(self):
        """
        Generate one sector per cell of the galaxy grid
        """
        logger.info("Generating %d sectors", self.config.n_sectors)
        for x, y, z in tqdm(
            sector_grid(self.config),
            total=self.config.n_sectors,
            desc="Sectors",
            leave=False,
            delay=0.5,
        ):
            self.generate_sector(x, y, z)
        return self.sectors

    def generate_systems(self, sector_seed):
        """
        Derive the system seeds of a generated sector

        Args:
            sector_seed (int):
                Seed of a sector in ``self.sectors``
        Returns:
            seeds (list):
                System seeds of the sector
        """
        sector = self.sectors[sector_seed]
        seeds = system_seeds(sector_seed, self.config.max_systems)
        for seed in seeds:
            owner = self._system_sector.get(seed)
            if owner is not None and owner != sector_seed and self.config.strict_seeds:
                raise DegenerateSeedCollision(
                    "System seed derived by two sectors",
                    context={"seed": seed, "sectors": (owner, sector_seed)},
                )
        for seed in seeds:
            self._system_sector[seed] = sector_seed
        sector.system_seeds = seeds
        logger.debug("Sector 0x%016x: %d system seeds", sector_seed, len(seeds))
        return seeds

    def generate_system(self, system_seed):
        """
        Generate the system of a seed, without its stars
        """
        system = generate_system(
            system_seed, self.config, sector_seed=self._system_sector.get(system_seed)
        )
        self.systems[system.seed] = system
        return system

    def generate_stars(self, system_seed):
        """
        Generate one star per multiplicity unit of a generated system
        """
        system = self.systems[system_seed]
        stars = {}
        for i, seed in enumerate(star_seeds(system_seed, system.multiplicity)):
            stars[seed] = generate_star(
                seed,
                max_planets=self.config.max_planets,
                system_seed=system_seed,
                name=f"{system.name} {string.ascii_uppercase[i]}",
            )
        system.stars = stars
        return stars

    def generate_planets(self, system_seed, star_seed):
        """
        Generate the planets of a star from the inside out

        Every orbit is placed beyond the region the previous planet accreted
        from: inside the frost limit anywhere up to the limit, outside of it
        1.5-2.5 times farther out than the previous orbit.
        """
        star = self.systems[system_seed].stars[star_seed]
        # Local generator for the orbit placement, seeded like the star
        rng = derive_rng(star_seed)

        planets = {}
        lower_boundary = 0 * u.AU
        distance = 0 * u.AU
        for i, seed in enumerate(planet_seeds(star_seed, star.planet_count)):
            if lower_boundary < star.frost_limit:
                distance = (
                    lower_boundary
                    + INNER_ORBIT_GAP
                    + rng.random() * (star.frost_limit - lower_boundary)
                )
            else:
                distance = distance * (1.5 + rng.random())
                if distance <= lower_boundary:
                    distance = distance + lower_boundary
            planet, lower_boundary = generate_planet(
                seed,
                star,
                distance,
                lower_boundary,
                name=f"{star.name} {string.ascii_lowercase[i + 1]}",
            )
            planets[seed] = planet
        star.planets = planets
        return planets

    def generate_galaxy(self):
        """
        Generate every sector, system, star and planet of the galaxy.

        Only sensible for small grids, the default grid has a million sectors.
        """
        self.generate_sectors()
        for sector_seed in tqdm(
            list(self.sectors), desc="Systems", leave=False, delay=0.5
        ):
            for system_seed in self.generate_systems(sector_seed):
                self.generate_system(system_seed)
                for star_seed in self.generate_stars(system_seed):
                    self.generate_planets(system_seed, star_seed)
        logger.info("Galaxy 0x%016x generated: %s", self.seed, self.summary())
        return self

    def summary(self):
        """
        Counts of everything generated so far
        """
        planets = self.planets()
        return {
            "sectors": len(self.sectors),
            "systems": len(self.systems),
            "stars": len(self.stars()),
            "planets": len(planets),
            "planets_in_hz": sum(planet.is_in_hz for planet in planets),
            "habitable_planets": sum(planet.habitability() > 0 for planet in planets),
        }

    @classmethod
    def from_dict(cls, doc):
        """
        Rebuild an engine from a ``to_dict`` document

        The seed and configuration are restored and every sector, system,
        star and planet listed in the document is generated again.
        """
        galaxy_doc = doc["galaxy"]
        engine = cls(
            GalaxyConfig.from_params(galaxy_doc["config"]), seed=galaxy_doc["seed"]
        )
        for sector_doc in doc.get("sectors", []):
            sector = engine.generate_sector(*sector_doc["position"])
            if sector_doc.get("systems"):
                engine.generate_systems(sector.seed)
        for system_doc in doc.get("systems", []):
            system = engine.generate_system(system_doc["seed"])
            if not system_doc.get("stars"):
                continue
            engine.generate_stars(system.seed)
            for star_doc in system_doc["stars"]:
                if "planets" in star_doc:
                    engine.generate_planets(system.seed, star_doc["seed"])
        return engine
