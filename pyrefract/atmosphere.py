"""
Module containing atmosphere model classes.

Contains planetary constants for simple radial atmosphere models and a
tabulated standard atmosphere whose air properties (temperature, pressure
and index of refraction) are linearly interpolated in height.

"""

from collections import namedtuple
import logging
import numpy as np
import scipy.interpolate

logger = logging.getLogger(__name__)


class Planet:
    """
    Class describing the boundaries of a planet's atmosphere.

    Parameters
    ----------
    index_ground : float
        Index of refraction of the air at ground level.
    index_space : float
        Index of refraction at the top of the atmosphere.
    radius_ground : float
        Radius (m) of the ground from the center of the planet.
    radius_space : float
        Radius (m) of the top of the atmosphere from the center of the planet.

    Attributes
    ----------
    index_ground, index_space : float
        Indices of refraction at the bottom and top of the atmosphere.
    radius_ground, radius_space : float
        Radii (m) of the bottom and top of the atmosphere.
    thickness

    """
    def __init__(self, index_ground, index_space, radius_ground, radius_space):
        self.index_ground = index_ground
        self.index_space = index_space
        self.radius_ground = radius_ground
        self.radius_space = radius_space

    def __repr__(self):
        return ("{}(index_ground={!r}, index_space={!r}, radius_ground={!r}, "
                "radius_space={!r})".format(self.__class__.__name__,
                                            self.index_ground,
                                            self.index_space,
                                            self.radius_ground,
                                            self.radius_space))

    @property
    def thickness(self):
        """Thickness (m) of the atmosphere."""
        return self.radius_space - self.radius_ground


# Actual ground index of refraction for Earth is 1.000273 at STP
earth = Planet(index_ground=1.000273, index_space=1.000,
               radius_ground=6370e3, radius_space=6470e3)


class AtmosphereParameters(namedtuple('AtmosphereParameters',
                                      ['height', 'temperature',
                                       'pressure', 'index'])):
    """
    Air properties at a single height.

    Parameters
    ----------
    height : float
        Height (m) above sea level.
    temperature : float
        Temperature (K).
    pressure : float
        Pressure (mbar).
    index : float
        Index of refraction (unitless).

    """
    __slots__ = ()

    @property
    def is_valid(self):
        """Whether all values are finite numbers."""
        return all(value is not None and np.isfinite(value)
                   for value in self)

    def info_brief(self):
        """Single-line description of the air properties."""
        return (" H[m],T[K],P[mBar],IoR[-]:  {:10.3f} {:7.2f} {:7.1f} {:.9f}"
                .format(*self))


# US Standard Atmosphere (COESA 1976)
#         [m]      [K]     [mBar]   [unitless]
_COESA1976 = (
    ( -1000.0, 294.66, 1139.30, 1+304.80e-6),
    (     0.0, 288.16, 1013.25, 1+277.19e-6),
    (  1000.0, 281.66,  898.76, 1+251.55e-6),
    (  2000.0, 275.16,  795.01, 1+227.76e-6),
    (  3000.0, 268.67,  701.21, 1+205.74e-6),
    (  4000.0, 262.18,  616.60, 1+185.40e-6),
    (  5000.0, 255.69,  540.48, 1+166.63e-6),
    (  6000.0, 249.20,  472.17, 1+149.36e-6),
    (  7000.0, 242.71,  411.05, 1+133.51e-6),
    (  8000.0, 236.23,  356.51, 1+118.97e-6),
    (  9000.0, 229.74,  308.00, 1+105.68e-6),
    ( 10000.0, 223.26,  265.00, 1+ 93.57e-6),
    ( 11000.0, 216.78,  227.00, 1+ 82.55e-6),
    ( 12000.0, 216.66,  193.99, 1+ 70.58e-6),
    ( 13000.0, 216.66,  165.79, 1+ 60.32e-6),
    ( 14000.0, 216.66,  141.70, 1+ 51.56e-6),
    ( 15000.0, 216.66,  121.12, 1+ 44.07e-6),
    ( 16000.0, 216.66,  103.53, 1+ 37.67e-6),
    ( 17000.0, 216.66,   88.50, 1+ 32.20e-6),
    ( 18000.0, 216.66,   75.65, 1+ 27.53e-6),
    ( 19000.0, 216.66,   64.67, 1+ 23.53e-6),
    ( 20000.0, 216.66,   55.29, 1+ 20.12e-6),
    ( 21000.0, 216.66,   47.27, 1+ 17.20e-6),
    ( 22000.0, 216.66,   40.42, 1+ 14.71e-6),
    ( 23000.0, 216.66,   34.56, 1+ 12.58e-6),
    ( 24000.0, 216.66,   29.55, 1+ 10.75e-6),
    ( 25000.0, 216.66,   25.27, 1+  9.20e-6),
    ( 26000.0, 219.34,   21.63, 1+  7.77e-6),
)


class Atmosphere:
    """
    Class describing tabulated atmospheric air properties.

    Air properties between tabulated heights are linearly interpolated.
    The table covers the half-open range of heights from its lowest entry
    (included) to its highest entry (excluded).

    Parameters
    ----------
    parameters : iterable of AtmosphereParameters
        Air properties at a set of distinct heights, in any order.

    Attributes
    ----------
    parameters : tuple of AtmosphereParameters
        Air properties sorted by increasing height.
    heights : ndarray
        Tabulated heights (m).
    valid_range : tuple
        Lowest and highest tabulated heights (m).
    is_valid

    """
    def __init__(self, parameters=()):
        self.parameters = tuple(sorted(
            (AtmosphereParameters(*parms) for parms in parameters),
            key=lambda parms: parms.height
        ))
        self.heights = np.array([parms.height for parms in self.parameters])
        if self.is_valid:
            self.valid_range = (self.heights[0], self.heights[-1])
            values = np.array([parms[1:] for parms in self.parameters])
            self._interpolator = scipy.interpolate.interp1d(
                self.heights, values, axis=0, assume_sorted=True
            )
        else:
            self.valid_range = (np.nan, np.nan)
            self._interpolator = None

    @classmethod
    def coesa1976(cls):
        """
        Create the US Standard Atmosphere (COESA 1976).

        Returns
        -------
        Atmosphere
            Atmosphere tabulated every 1 km from -1 km to 26 km above sea
            level.

        """
        return cls(AtmosphereParameters(*row) for row in _COESA1976)

    def __len__(self):
        return len(self.parameters)

    @property
    def is_valid(self):
        """Whether the table holds enough entries for interpolation."""
        return len(self.parameters)>1

    def contains(self, height):
        """Whether `height` lies within the tabulated range."""
        return (self.is_valid and
                self.valid_range[0]<=height<self.valid_range[1])

    def parameters_for_height(self, height):
        """
        Interpolate all air properties at a given height.

        Parameters
        ----------
        height : float
            Height (m) above sea level.

        Returns
        -------
        AtmosphereParameters or None
            Interpolated air properties, or ``None`` if `height` is outside
            of the tabulated range.

        """
        if not self.contains(height):
            return None
        temperature, pressure, index = self._interpolator(height)
        return AtmosphereParameters(height, float(temperature),
                                    float(pressure), float(index))

    def index_of_refraction(self, height):
        """
        Interpolate the index of refraction at a given height.

        Parameters
        ----------
        height : float
            Height (m) above sea level.

        Returns
        -------
        float or None
            Index of refraction, or ``None`` if `height` is outside of the
            tabulated range.

        """
        parms = self.parameters_for_height(height)
        if parms is None:
            return None
        return parms.index

    def info_string(self, title=None):
        """Multi-line description of the tabulated air properties."""
        lines = []
        if title:
            lines.append(title)
        lines.append("Size: "+str(len(self)))
        lines.extend(parms.info_brief() for parms in self.parameters)
        return "\n".join(lines)
