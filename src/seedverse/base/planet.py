import astropy.constants as const
import astropy.units as u
import numpy as np
import pandas as pd

from seedverse.tables import N_MASS_BRACKETS, planet_classes

# Physiological limits of human-like life
MIN_TEMPERATURE = 223 * u.K
MAX_TEMPERATURE = 323 * u.K
IDEAL_TEMPERATURE = 293 * u.K
TEMPERATURE_FALLOFF = 70 * u.K
MIN_GRAVITY = 0.2
MAX_GRAVITY = 3.0
IDEAL_GRAVITY = 1.0
GRAVITY_FALLOFF = 2.0


class Planet:
    """
    Class for a planet
    """

    def __init__(self, planet_dict) -> None:
        self.atmosphere = None
        self.name = ""
        for att, value in planet_dict.items():
            setattr(self, att, value)

    def __repr__(self):
        """
        Make dataframe with planet attributes
        """
        params = self.dump_params(full=True)
        params.pop("atmosphere")
        p_df = pd.DataFrame(params, index=[0])
        return f"{type(self).__name__} object\n{p_df}"

    @property
    def periodic_class(self):
        return planet_classes().iloc[self.type_index]

    @property
    def periodic_type(self):
        """
        Name in the periodic table of planets, e.g. "Warm Terran"
        """
        row = self.periodic_class
        return f"{row['zone']} {row['family']}"

    @property
    def family(self):
        return self.periodic_class["family"]

    @property
    def planet_class(self):
        return self.periodic_class["planet_class"]

    @property
    def temperature_zone(self):
        return self.periodic_class["zone"]

    @property
    def mass_bracket(self):
        return self.type_index % N_MASS_BRACKETS

    @property
    def is_gas_giant(self):
        return self.planet_class == "Gas Giant"

    @property
    def has_atmosphere(self):
        return self.atmosphere is not None

    def describe_composition(self, separator=" ", long=True):
        """
        Gases of the atmosphere as text, empty without an atmosphere
        """
        if self.atmosphere is None:
            return ""
        return self.atmosphere.describe(separator=separator, long=long)

    def gravity(self):
        """
        Surface gravity relative to Earth
        """
        if self.mass <= 0 * u.kg or self.radius <= 0 * u.km:
            return 0.0
        g = const.G * self.mass / self.radius**2
        return (g / const.g0).decompose().value

    def temperature_factor(self):
        if not MIN_TEMPERATURE <= self.temperature <= MAX_TEMPERATURE:
            return 0.0
        offset = np.abs(IDEAL_TEMPERATURE - self.temperature)
        return float(1.0 - (offset / TEMPERATURE_FALLOFF).decompose().value)

    def gravity_factor(self):
        g = self.gravity()
        if not MIN_GRAVITY <= g <= MAX_GRAVITY:
            return 0.0
        return 1.0 - abs(IDEAL_GRAVITY - g) / GRAVITY_FALLOFF

    def atmosphere_factor(self):
        """
        Breathability of the atmosphere, 1 when the planet has none since
        there is nothing to rule it out
        """
        if self.atmosphere is None:
            return 1.0
        return self.atmosphere.habitability()

    def habitability(self):
        """
        Probability that the planet is habitable without technological aid.

        Zero outside the habitable zone, otherwise the product of the
        temperature, gravity and atmosphere factors, always in [0, 1].
        """
        if not self.is_in_hz:
            return 0.0
        return (
            self.temperature_factor() * self.gravity_factor() * self.atmosphere_factor()
        )

    def dump_params(self, full=False):
        params = {
            "seed": self.seed,
            "type": self.type_index,
            "mass": self.mass.to_value(u.kg),
            "temperature": self.temperature.to_value(u.K),
        }
        if full:
            params.update(
                {
                    "name": self.name,
                    "star": self.star_seed,
                    "distance": self.distance.to_value(u.AU),
                    "is_in_hz": self.is_in_hz,
                    "mu": self.mu.to_value(u.km**3 / u.s**2),
                    "equator_temperature": self.equator_temperature.to_value(u.K),
                    "pole_temperature": self.pole_temperature.to_value(u.K),
                    "radius": self.radius.to_value(u.km),
                    "day": self.day.to_value(u.s),
                    "year": self.year.to_value(u.s),
                    "atmosphere": (
                        self.atmosphere.dump_params() if self.has_atmosphere else None
                    ),
                }
            )
        return params
