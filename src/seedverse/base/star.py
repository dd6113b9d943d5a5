import astropy.units as u
import pandas as pd

from seedverse.tables import HZ_INNER, HZ_OUTER, hz_coefficients, stellar_classes


class Star:
    """
    The star of a system
    """

    def __init__(self, star_dict):
        self.planets = {}
        self.name = ""
        # Fraction of luminosity variation, no variable stars are generated yet
        self.output_variation = 0.0
        for att, value in star_dict.items():
            setattr(self, att, value)

    def __repr__(self):
        return (
            f"{type(self).__name__} object\n{self.name}\t"
            f"Type:{self.stellar_type} ({self.designation})\n\n"
            f"Planets:\n{self.get_p_df()}"
        )

    @property
    def hz_inner(self):
        return self.hz_distances[HZ_INNER]

    @property
    def hz_outer(self):
        return self.hz_distances[HZ_OUTER]

    @property
    def apparent_color(self):
        """
        Hand picked display color of the star class as RGB floats in [0, 1]
        """
        row = stellar_classes().iloc[self.type_index]
        return (row["color_r"], row["color_g"], row["color_b"])

    def hz_table(self):
        """
        Habitable zone limits with their descriptions
        """
        df = hz_coefficients()[["description"]].copy()
        df["distance"] = self.hz_distances.to_value(u.AU)
        return df

    def has_planets_in_hz(self):
        return any(planet.is_in_hz for planet in self.planets.values())

    def habitable_planets_probability(self):
        """
        Probability that the star hosts habitable planets.

        Product of an age factor of the star class (planet formation,
        atmosphere creation and impact risk) and the steadiness of its output.
        """
        age_factor = stellar_classes().at[self.type_index, "age_factor"]
        return float(age_factor * (1.0 - self.output_variation))

    def getpattr(self, attr):
        # Return all planet's attribute values in orbital order
        return [getattr(planet, attr) for planet in self.planets.values()]

    def get_p_df(self):
        p_df = pd.DataFrame(
            [planet.dump_params(full=True) for planet in self.planets.values()]
        )
        if not p_df.empty:
            p_df["periodic_type"] = self.getpattr("periodic_type")
            p_df["habitability"] = [
                planet.habitability() for planet in self.planets.values()
            ]
            p_df = p_df.drop(columns="atmosphere")
        return p_df

    def dump_params(self, full=False):
        params = {
            "seed": self.seed,
            "type": self.type_index,
            "mass": self.mass.to_value(u.M_sun),
            "temperature": self.temperature.to_value(u.K),
        }
        if full:
            params.update(
                {
                    "name": self.name,
                    "system": self.system_seed,
                    "stellar_type": self.stellar_type,
                    "designation": self.designation,
                    "radius": self.radius.to_value(u.R_sun),
                    "luminosity": self.luminosity.to_value(u.L_sun),
                    "color": list(self.color),
                    "hz_distances": self.hz_distances.to_value(u.AU).tolist(),
                    "frost_limit": self.frost_limit.to_value(u.AU),
                    "axial_rotation": self.axial_rotation.to_value(u.s),
                    "planet_count": self.planet_count,
                }
            )
        if self.planets:
            params["planets"] = [
                planet.dump_params(full=full) for planet in self.planets.values()
            ]
        return params
