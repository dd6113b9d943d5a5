import astropy.units as u
import pandas as pd

from seedverse.tables import gases

# Minimum oxygen partial pressure oxygen breathers need
MIN_O2_PARTIAL_PRESSURE = 0.16 * u.bar


class Atmosphere:
    """
    Gas envelope of a planet.

    A planet without an atmosphere has ``planet.atmosphere is None``, so every
    constructed Atmosphere is expected to have a positive radius.

    Args:
        radius (astropy Quantity):
            Outer radius of the atmosphere
        pressure (astropy Quantity):
            Surface pressure
        composition (dict):
            Volume fraction of each gas, fractions sum to 1
    """

    def __init__(self, radius, pressure, composition):
        self.radius = radius.to(u.km)
        self.pressure = pressure.to(u.bar)
        self.composition = dict(composition)

    def __repr__(self):
        return (
            f"{type(self).__name__} object\n"
            f"radius: {self.radius:.1f}\tpressure: {self.pressure:.4g}\n"
            f"{self.describe()}"
        )

    def exists(self):
        return self.radius > 0 * u.km

    def total_fraction(self):
        return sum(self.composition.values())

    def partial_pressures(self):
        """
        Partial pressure of each gas in bar
        """
        return pd.Series(
            {gas: frac * self.pressure.to_value(u.bar) for gas, frac in self.composition.items()},
            dtype=float,
        )

    def is_breathable(self):
        """
        Whether oxygen breathers could survive without technological aid.

        Oxygen must be present with a partial pressure of at least 0.16 bar
        and no gas may exceed its maximum tolerable partial pressure.
        """
        if "O2" not in self.composition:
            return False
        pp = self.partial_pressures()
        if pp["O2"] < MIN_O2_PARTIAL_PRESSURE.to_value(u.bar):
            return False
        limits = gases().loc[pp.index, "max_partial_pressure"]
        return not (pp > limits).any()

    def habitability(self):
        return 1.0 if self.is_breathable() else 0.0

    def describe(self, separator=" ", long=True):
        """
        Concatenate the gases of the atmosphere, e.g. "H2:0.9553 N2:0.0447"
        or "H2 N2" with long=False
        """
        if long:
            parts = [f"{gas}:{frac:.4f}" for gas, frac in self.composition.items()]
        else:
            parts = list(self.composition)
        return separator.join(parts)

    def dump_params(self):
        return {
            "radius": self.radius.to_value(u.km),
            "pressure": self.pressure.to_value(u.bar),
            "composition": dict(self.composition),
        }
