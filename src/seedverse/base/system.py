import astropy.units as u
import pandas as pd

MULTIPLICITY_NAMES = (
    "undefined",
    "unary",
    "binary",
    "trinary",
    "quaternary",
    "quintenary",
    "sextenary",
    "septenary",
)


class System:
    """
    Class for a single star system. Its stars are keyed by seed and refer
    back to the system through their ``system_seed``.
    """

    def __init__(self, seed, position, multiplicity, sector_seed=None, name=""):
        self.seed = seed
        self.sector_seed = sector_seed
        # Position within the parent sector cube, (0, 0, 0) is the cube's
        # lower-left corner
        self.position = position.to(u.lyr)
        self.multiplicity = multiplicity
        self.name = name
        self.stars = {}

    def __repr__(self):
        return (
            f"{self.name}\tmultiplicity:{self.multiplicity_name}\t"
            f"position:{self.position}\n\n"
            f"Stars:\n{self.get_s_df()}"
        )

    @property
    def multiplicity_name(self):
        return MULTIPLICITY_NAMES[self.multiplicity]

    def planets(self):
        """
        All planets of all stars in the system
        """
        return [
            planet for star in self.stars.values() for planet in star.planets.values()
        ]

    def get_s_df(self):
        return pd.DataFrame(
            [
                {**star.dump_params(full=True), "planets": len(star.planets)}
                for star in self.stars.values()
            ]
        )

    def dump_params(self, full=False):
        return {
            "sector": self.sector_seed,
            "seed": self.seed,
            "name": self.name,
            "position": self.position.to_value(u.lyr).tolist(),
            "multiplicity": self.multiplicity,
            "stars": [star.dump_params(full=full) for star in self.stars.values()],
        }
