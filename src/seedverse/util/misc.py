import astropy.constants as const
import astropy.units as u
import numpy as np
from scipy.stats import norm

from seedverse.exceptions import ClassificationOutOfRange
from seedverse.tables import hz_coefficients

"""
Physical and statistical models shared by the star and planet generators.
They are simple models aimed at plausible game content rather than
astrophysical accuracy.
"""

# Equilibrium temperature that marks the frost limit
FROST_TEMPERATURE = 150 * u.K

# Reference temperature of the Kopparapu flux polynomials
HZ_REFERENCE_TEMPERATURE = 5780.0


def normal_distribution(x, mu, sigma):
    """
    Normal probability density at x
    """
    return norm.pdf(x, loc=mu, scale=sigma)


def inverse_exp_distribution(x, skew):
    """
    Inverse exponential density exp(-x^skew) at x
    """
    return np.exp(-np.power(x, skew))


def cdf_index(draw, cdf):
    """
    Select a discrete category from a cumulative distribution
    Args:
        draw (float):
            Uniform random number in [0, 1)
        cdf (np.array):
            Non-decreasing cumulative upper bounds of each category
    Returns:
        idx (int):
            First index whose upper bound is >= draw, ties go to the lower
            index
    """
    idx = int(np.searchsorted(cdf, draw, side="left"))
    if idx >= len(cdf) or not np.isfinite(draw):
        raise ClassificationOutOfRange(
            "Random draw is outside the cumulative distribution",
            context={"draw": draw, "upper_bound": cdf[-1]},
        )
    return idx


def uniform_between(rng, low, high):
    """
    Interpolate between low and high with a single draw from rng
    """
    return low + rng.random() * (high - low)


def luminosity_from_mass(mass):
    """
    Main sequence mass-luminosity relation
    Args:
        mass (astropy Quantity):
            Stellar mass
    Returns:
        luminosity (astropy Quantity):
            Bolometric luminosity in solar luminosities
    """
    m = mass.to_value(u.M_sun)
    if m < 0.43:
        lum = 0.23 * m**2.3
    elif m < 2.0:
        lum = m**4.0
    elif m < 20.0:
        lum = 1.5 * m**3.5
    else:
        lum = 3200.0 * m
    return lum * u.L_sun


def temperature_subclass(temperature, t_min, t_max):
    """
    Temperature subclass digit of a star, 0 for the hottest tenth of its
    class range and 9 for the coolest
    """
    t = temperature.to_value(u.K)
    step = (t_max - t_min) / 10
    if step <= 0:
        return 0
    return int(np.clip(np.floor((t_max - t) / step), 0, 9))


def habitable_zone(temperature, luminosity):
    """
    Habitable zone distances following Kopparapu et al. (2013)

    Valid for effective temperatures between 2600 K and 7200 K. Any limit
    whose stellar flux comes out non-positive is set to zero distance.
    Args:
        temperature (astropy Quantity):
            Effective temperature of the star
        luminosity (astropy Quantity):
            Bolometric luminosity of the star
    Returns:
        distances (astropy Quantity array):
            8 distances in AU, index 1 is the inner (Recent Venus) and index 5
            the outer (Early Mars) limit, index 0 is unused
    """
    coeffs = hz_coefficients()
    t_star = temperature.to_value(u.K) - HZ_REFERENCE_TEMPERATURE
    seff = (
        coeffs["seff_sun"].to_numpy()
        + coeffs["a"].to_numpy() * t_star
        + coeffs["b"].to_numpy() * t_star**2
        + coeffs["c"].to_numpy() * t_star**3
        + coeffs["d"].to_numpy() * t_star**4
    )
    lum = luminosity.to_value(u.L_sun)
    distances = np.zeros(len(seff))
    positive = seff > 0
    distances[positive] = np.sqrt(lum / seff[positive])
    distances[0] = 0.0
    return distances * u.AU


def frost_limit(luminosity):
    """
    Distance from the star where the equilibrium temperature falls to 150 K
    """
    dist = np.sqrt(
        0.25 * luminosity / (4 * np.pi * const.sigma_sb * FROST_TEMPERATURE**4)
    )
    return dist.to(u.AU)


def equilibrium_temperature(luminosity, distance, albedo=0.0, emissivity=1.0):
    """
    Black body equilibrium temperature of a planet
    Args:
        luminosity (astropy Quantity):
            Luminosity of the host star
        distance (astropy Quantity):
            Distance from the star
        albedo (float):
            Fraction of reflected radiation
        emissivity (float):
            1 for a perfect black body
    Returns:
        temperature (astropy Quantity):
            Median surface temperature in K
    """
    flux = (
        0.25
        * luminosity
        * (1 - albedo)
        / (4 * np.pi * const.sigma_sb * emissivity * distance**2)
    )
    return (flux**0.25).to(u.K)


def mass_density(star_mass, frost, distance):
    """
    Protoplanetary mass density at a distance from the star.

    Rocky material inside the frost limit follows a normal distribution
    centred at half the frost limit, gas outside of it decays as an inverse
    exponential.
    Args:
        star_mass (astropy Quantity):
            Mass of the host star
        frost (astropy Quantity):
            Frost limit of the host star
        distance (astropy Quantity):
            Distance from the star
    Returns:
        density (astropy Quantity):
            Mass density in kg / AU
    """
    m = star_mass.to_value(u.M_sun)
    fl = frost.to_value(u.AU)
    d = distance.to_value(u.AU)
    if d < fl:
        density = 4.2e24 * m * normal_distribution(d, fl / 2, fl / 16)
    else:
        density = 8.0e26 * m * inverse_exp_distribution(d, 0.5)
    return density * u.kg / u.AU


def blackbody_color(temperature):
    """
    Approximate RGB color of a black body, after Tanner Helland (2012)
    Args:
        temperature (astropy Quantity):
            Black body temperature
    Returns:
        rgb (tuple):
            Red, green and blue channels as ints in [0, 255]
    """
    t = temperature.to_value(u.K) / 100.0

    if t <= 66.0:
        red = 255.0
        green = 99.4708025861 * np.log(t) - 161.1195681661
    else:
        red = 329.698727446 * (t - 60.0) ** -0.1332047592
        green = 288.1221695283 * (t - 60.0) ** -0.0755148492

    if t >= 66.0:
        blue = 255.0
    elif t <= 19.0:
        blue = 0.0
    else:
        blue = 138.5177312231 * np.log(t - 10.0) - 305.0447927307

    return tuple(int(np.clip(c, 0, 255)) for c in (red, green, blue))
