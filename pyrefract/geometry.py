"""
Module containing geometric utilities for ray propagation.

Provides the small amount of three-dimensional geometric algebra needed by
the ray tracing (products of vectors, bivectors and spinors) as well as a
few simple shapes used to build index of refraction volumes.

Vectors are numpy arrays of shape (3,). A bivector ``B`` is represented by
its dual (axial) vector ``b`` such that ``B = I b`` where ``I = e1 e2 e3``
is the unit trivector. With this convention the wedge product ``a ^ b`` is
represented by ``np.cross(a, b)`` and the squared magnitude of a bivector
is the squared norm of its dual vector.

"""

import logging
import numpy as np
from pyrefract.internal_functions import normalize

logger = logging.getLogger(__name__)


def dot(a, b):
    """
    Scalar part of the geometric product of two vectors.

    Parameters
    ----------
    a, b : array_like
        Vectors to be multiplied.

    Returns
    -------
    float
        Inner product of `a` and `b`.

    """
    return float(np.dot(a, b))


def wedge(a, b):
    """
    Bivector part of the geometric product of two vectors.

    Parameters
    ----------
    a, b : array_like
        Vectors to be multiplied.

    Returns
    -------
    ndarray
        Dual vector of the bivector ``a ^ b``.

    Examples
    --------
    >>> wedge([1, 0, 0], [0, 1, 0])
    array([0., 0., 1.])

    """
    return np.cross(np.asarray(a, dtype=float), np.asarray(b, dtype=float))


def spinor_times_vector(scalar, bivector, vector):
    """
    Vector part of the product of a spinor with a vector.

    For a spinor ``S = s + B`` (with bivector ``B = I b``) and a vector
    ``v``, the product ``S v`` contains a vector part and a trivector part.
    The vector part is ``s v + v x b``, which is returned.

    Parameters
    ----------
    scalar : float
        Scalar (grade 0) part of the spinor.
    bivector : array_like
        Dual vector of the bivector (grade 2) part of the spinor.
    vector : array_like
        Vector multiplied on the right of the spinor.

    Returns
    -------
    ndarray
        Vector part of the product.

    """
    v = np.asarray(vector, dtype=float)
    return scalar * v + np.cross(v, np.asarray(bivector, dtype=float))


def reflect(vector, normal):
    """
    Reflect a vector through the plane dual to the given normal.

    Computes ``-(n v n^-1)``, which keeps the component of `vector` lying in
    the plane perpendicular to `normal` and reverses the component along
    `normal`.

    Parameters
    ----------
    vector : array_like
        Vector to be reflected.
    normal : array_like
        Non-zero vector perpendicular to the reflecting plane.

    Returns
    -------
    ndarray
        Reflected vector.

    Examples
    --------
    >>> reflect([1, 0, -1], [0, 0, 2])
    array([1., 0., 1.])

    """
    v = np.asarray(vector, dtype=float)
    n = np.asarray(normal, dtype=float)
    return v - 2 * np.dot(v, n) / np.dot(n, n) * n


def angle_from_into(from_vector, into_vector):
    """
    Directed angle of the rotation taking one direction into another.

    Calculates the bivector part of the logarithm of the spinor formed by
    the geometric product of the (unit) vectors. The result is returned as
    a dual vector whose direction is the rotation axis and whose magnitude
    is the angle (radians) between the directions.

    Parameters
    ----------
    from_vector : array_like or None
        Starting direction.
    into_vector : array_like or None
        Ending direction.

    Returns
    -------
    ndarray or None
        Dual vector of the angle bivector. ``None`` if either direction is
        ``None`` or a zero vector.

    Notes
    -----
    For anti-parallel directions the plane of rotation is undefined. In that
    case an arbitrary axis perpendicular to `from_vector` is used with an
    angle of pi.

    """
    if from_vector is None or into_vector is None:
        return None
    u = normalize(from_vector)
    v = normalize(into_vector)
    if not np.any(u) or not np.any(v):
        return None
    axis = np.cross(u, v)
    sin_angle = np.linalg.norm(axis)
    cos_angle = np.dot(u, v)
    if sin_angle==0:
        if cos_angle>0:
            return np.zeros(3)
        # Any perpendicular axis describes the half turn
        trial = np.array([1., 0, 0]) if abs(u[0])<0.9 else np.array([0, 1., 0])
        return np.pi * normalize(np.cross(u, trial))
    return np.arctan2(sin_angle, cos_angle) * axis / sin_angle


class Interval:
    """
    Class for a one-dimensional distance scale between two values.

    Defines the half-open interval [`beg_value`, `end_value`) and provides
    conversions between values and their fractional position along the
    interval. Values outside of the interval are extrapolated linearly.

    Parameters
    ----------
    beg_value : float
        Value at the (included) start of the interval.
    end_value : float
        Value at the (excluded) end of the interval.

    Attributes
    ----------
    min : float
        Value at the start of the interval.
    max : float
        Value at the end of the interval.
    span : float
        Signed distance from `min` to `max`.

    Raises
    ------
    ValueError
        If the interval has zero span.

    Examples
    --------
    >>> interval = Interval(2., 3.)
    >>> interval.frac_at_value(4.)
    2.0
    >>> interval.value_at_frac(.75)
    2.75

    """
    def __init__(self, beg_value, end_value):
        self.min = beg_value
        self.max = end_value
        self.span = end_value - beg_value
        if self.span==0:
            raise ValueError("Interval must have non-zero span")

    def __repr__(self):
        return "{}({!r}, {!r})".format(self.__class__.__name__,
                                       self.min, self.max)

    def contains(self, value):
        """Whether `value` lies within the half-open interval."""
        lo, hi = sorted((self.min, self.max))
        return lo<=value<hi

    def frac_at_value(self, value):
        """
        Fraction of the way into the interval of the given value.

        Parameters
        ----------
        value : float or array_like
            Value(s) to be converted.

        Returns
        -------
        float or ndarray
            Fractional position, 0 at `min` and 1 at `max`.

        """
        return (value - self.min) / self.span

    def value_at_frac(self, frac):
        """
        Value at the given fraction of the way into the interval.

        Parameters
        ----------
        frac : float or array_like
            Fractional position(s), 0 at `min` and 1 at `max`.

        Returns
        -------
        float or ndarray
            Corresponding value(s).

        """
        return frac * self.span + self.min


class Cylinder:
    """
    Class for a geometric cylinder of finite length.

    Parameters
    ----------
    axis_beg : array_like
        Point at the center of the beginning end cap.
    axis_dir : array_like
        Direction of the axis leaving `axis_beg`. Need not be unit length.
    length : float
        Distance between the end caps along the axis.
    radius : float
        Distance from the axis to the curved surface.

    Attributes
    ----------
    axis_beg : ndarray
        Point at the center of the beginning end cap.
    axis_dir : ndarray
        Unit direction of the axis.
    length : float
        Distance between the end caps.
    radius : float
        Radius of the curved surface.
    length_interval : Interval
        Interval from the beginning to the ending end cap.
    radial_interval : Interval
        Interval from the axis to the curved surface.

    Raises
    ------
    ValueError
        If `axis_dir` is the zero vector.

    """
    def __init__(self, axis_beg, axis_dir, length, radius):
        self.axis_beg = np.array(axis_beg, dtype=float)
        self.axis_dir = normalize(axis_dir)
        if not np.any(self.axis_dir):
            raise ValueError("Cylinder axis direction must be non-zero")
        self.length = length
        self.radius = radius
        self.length_interval = Interval(0, length)
        self.radial_interval = Interval(0, radius)

    def distance_from_axis(self, point):
        """Perpendicular distance from the axis to `point`."""
        rel = np.asarray(point, dtype=float) - self.axis_beg
        return float(np.linalg.norm(wedge(rel, self.axis_dir)))

    def fraction_from_axis(self, point):
        """Fraction of the radius from the axis to `point`."""
        return self.radial_interval.frac_at_value(
            self.distance_from_axis(point)
        )

    def distance_along_axis(self, point):
        """Signed distance along the axis from `axis_beg` to `point`."""
        rel = np.asarray(point, dtype=float) - self.axis_beg
        return dot(rel, self.axis_dir)

    def fraction_along_axis(self, point):
        """Fraction of the length along the axis to `point`."""
        return self.length_interval.frac_at_value(
            self.distance_along_axis(point)
        )
