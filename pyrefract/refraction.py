"""
Module containing the approximate polar refraction model.

Computes the angular displacement of a ray traveling between a sensor and
the ground through a radially layered atmosphere, working in the plane
containing the ray and the center of the planet.

"""

import logging
import numpy as np
import scipy.integrate
from pyrefract.atmosphere import Atmosphere

logger = logging.getLogger(__name__)


class PolarRefraction:
    """
    Class for the refraction of a ray through a radial atmosphere.

    The ray leaves the sensor, which sits on the vertical axis through the
    center of the planet, at `look_angle` from the vertical. Along the ray
    the quantity ``k = r n(r) sin(z)`` (with `z` the angle between the ray
    and the local vertical) is invariant, so the polar angle `theta` of
    points on the ray satisfies
    ``d(theta)/dr = k / (r sqrt((r n(r))**2 - k**2))``.

    Parameters
    ----------
    look_angle : float
        Angle (radians) between the ray and the vertical at the sensor.
    radius_sensor : float
        Distance (m) of the sensor from the center of the planet.
    radius_earth : float
        Distance (m) of the ground nadir point from the center of the planet.
        Heights in the atmosphere are measured from this radius.
    atmosphere : Atmosphere or None, optional
        Tabulated air properties. If ``None``, uses the US Standard Atmosphere
        (COESA 1976).
    step : float, optional
        Maximum radial step (m) of the numerical integration.

    Attributes
    ----------
    look_angle : float
        Angle (radians) between the ray and the vertical at the sensor.
    radius_sensor : float
        Distance (m) of the sensor from the center of the planet.
    radius_earth : float
        Distance (m) of the ground from the center of the planet.
    atmosphere : Atmosphere
        Tabulated air properties.
    step : float
        Maximum radial step (m) of the numerical integration.
    invariant : float
        Refractive invariant ``k`` of the ray.
    is_valid

    Raises
    ------
    ValueError
        If the atmosphere has no index of refraction at the sensor.

    """
    def __init__(self, look_angle, radius_sensor, radius_earth,
                 atmosphere=None, step=50.):
        if atmosphere is None:
            atmosphere = Atmosphere.coesa1976()
        self.look_angle = look_angle
        self.radius_sensor = radius_sensor
        self.radius_earth = radius_earth
        self.atmosphere = atmosphere
        self.step = step
        index_sensor = self.index_at_radius(radius_sensor)
        if index_sensor is None:
            raise ValueError("No index of refraction at sensor height "+
                             str(radius_sensor-radius_earth))
        self.invariant = radius_sensor * index_sensor * np.sin(look_angle)

    @property
    def is_valid(self):
        """Whether the ground radius is a finite number."""
        return self.radius_earth is not None and np.isfinite(self.radius_earth)

    def index_at_radius(self, radius):
        """Index of refraction at the given distance from the center."""
        return self.atmosphere.index_of_refraction(radius - self.radius_earth)

    def _derivative(self, radius, theta):
        index = self.index_at_radius(radius)
        if index is None:
            raise ValueError("No index of refraction at height "+
                             str(radius-self.radius_earth))
        radicand = (radius*index)**2 - self.invariant**2
        if radicand<=0:
            raise ValueError("Ray does not reach radius "+str(radius))
        return [self.invariant / radius / np.sqrt(radicand)]

    def theta_angle_at(self, radius):
        """
        Polar angle of the point on the ray at the given radius.

        The angle is measured at the center of the planet, from the direction
        to the sensor to the direction to the point on the ray.

        Parameters
        ----------
        radius : float
            Distance (m) from the center of the planet.

        Returns
        -------
        float
            Polar angle (radians). Negative if `radius` is below the sensor.

        Raises
        ------
        ValueError
            If the ray does not reach `radius` or the atmosphere has no index
            of refraction along the way.

        """
        if radius==self.radius_sensor:
            return 0.
        solution = scipy.integrate.solve_ivp(
            self._derivative, (self.radius_sensor, radius), [0.],
            method="RK45", max_step=self.step, rtol=1e-10, atol=1e-14
        )
        if not solution.success:
            raise ValueError("Integration to radius "+str(radius)+
                             " failed: "+solution.message)
        return float(solution.y[0, -1])

    def displacement_at(self, radius):
        """
        Arc length subtended by the polar angle at the given radius.

        Parameters
        ----------
        radius : float
            Distance (m) from the center of the planet.

        Returns
        -------
        float
            Displacement (m) from the vertical through the sensor.

        """
        return radius * self.theta_angle_at(radius)

    def info_string(self, title=None):
        """Multi-line description of the refraction model."""
        lines = []
        if title:
            lines.append(title)
        lines.append("look_angle: {:20.15g}".format(self.look_angle))
        lines.append("radius_sensor: {:20.15g}".format(self.radius_sensor))
        lines.append("radius_earth: {:20.15g}".format(self.radius_earth))
        lines.append("invariant: {:20.15g}".format(self.invariant))
        return "\n".join(lines)
