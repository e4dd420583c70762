"""
Module containing index of refraction media.

Media are scalar index of refraction fields clipped by an active volume.
The ray tracing only consumes two capabilities of a medium: the (qualified)
index of refraction at a point, which is ``None`` outside of the medium's
active volume, and the approximate gradient of the index of refraction at a
point.

"""

import logging
import numpy as np
from pyrefract.internal_functions import (normalize, is_valid, LazyMutableClass,
                                          lazy_property)
from pyrefract.geometry import Cylinder
from pyrefract.atmosphere import earth, Atmosphere

logger = logging.getLogger(__name__)


class ActiveVolume:
    """
    Class describing the region of space in which a medium is defined.

    The base class contains all of space.

    Parameters
    ----------
    name : str, optional
        Name describing the volume.

    Attributes
    ----------
    name : str
        Name describing the volume.

    """
    def __init__(self, name="ActiveVolume"):
        self.name = name

    def __repr__(self):
        return "{}(name={!r})".format(self.__class__.__name__, self.name)

    def contains(self, point):
        """
        Determines if the given point is within the volume.

        Parameters
        ----------
        point : array_like
            Point to be tested.

        Returns
        -------
        bool
            Whether `point` is contained within the volume.

        """
        return True


all_space = ActiveVolume(name="all_space")


class ActiveBox(ActiveVolume):
    """
    Class describing an axis-aligned box of active space.

    Each coordinate of a contained point lies in the half-open interval
    [`min_corner`, `max_corner`).

    Parameters
    ----------
    min_corner : array_like
        Corner of the box with the lowest coordinate values.
    max_corner : array_like
        Corner of the box with the highest coordinate values.
    name : str, optional
        Name describing the volume.

    Attributes
    ----------
    min_corner, max_corner : ndarray
        Opposite corners of the box.

    Raises
    ------
    ValueError
        If any coordinate of `max_corner` is not above that of `min_corner`.

    """
    def __init__(self, min_corner, max_corner, name="ActiveBox"):
        super().__init__(name=name)
        self.min_corner = np.array(min_corner, dtype=float)
        self.max_corner = np.array(max_corner, dtype=float)
        if np.any(self.max_corner<=self.min_corner):
            raise ValueError("Box corners "+str(self.min_corner)+" and "+
                             str(self.max_corner)+" do not span a volume")

    def contains(self, point):
        point = np.asarray(point)
        return bool(np.all(self.min_corner<=point) and
                    np.all(point<self.max_corner))


class SphericalShell(ActiveVolume):
    """
    Class describing the active space between two concentric spheres.

    Contains points whose distance `r` from `center` satisfies
    ``radius_inner <= r < radius_outer``.

    Parameters
    ----------
    center : array_like
        Common center of the spheres.
    radius_inner : float
        Radius of the inner sphere.
    radius_outer : float
        Radius of the outer sphere.
    name : str, optional
        Name describing the volume.

    """
    def __init__(self, center, radius_inner, radius_outer,
                 name="SphericalShell"):
        super().__init__(name=name)
        self.center = np.array(center, dtype=float)
        self.radius_inner = radius_inner
        self.radius_outer = radius_outer

    def contains(self, point):
        r = np.linalg.norm(np.asarray(point) - self.center)
        return bool(self.radius_inner<=r<self.radius_outer)


class IndexVolume:
    """
    Base class for an index of refraction field in space.

    Subclasses must implement the `index` method, which gives the raw index
    of refraction of the model at a point. The qualified value used for
    ray tracing is given by `index_at`, which additionally accounts for the
    active volume of the medium.

    Parameters
    ----------
    active_volume : ActiveVolume, optional
        Region of space in which the medium is defined.

    Attributes
    ----------
    active_volume : ActiveVolume
        Region of space in which the medium is defined.

    See Also
    --------
    ActiveVolume : Class describing the region of space in which a medium
                   is defined.

    """
    def __init__(self, active_volume=all_space):
        self.active_volume = active_volume

    def index(self, point):
        """
        Raw index of refraction of the model at the given point.

        Parameters
        ----------
        point : array_like
            Point at which to evaluate the index of refraction.

        Returns
        -------
        float or None
            Index of refraction at `point`.

        Raises
        ------
        NotImplementedError
            If the method is not implemented by the subclass.

        """
        raise NotImplementedError("index method must be implemented by "
                                  +"inheriting class")

    def index_at(self, point):
        """
        Index of refraction at the given point within the active volume.

        Parameters
        ----------
        point : array_like
            Point at which to evaluate the index of refraction.

        Returns
        -------
        float or None
            Index of refraction at `point`, or ``None`` if `point` is outside
            of the active volume or the model has no value there.

        """
        if not self.active_volume.contains(point):
            return None
        nu = self.index(point)
        if not is_valid(nu):
            return None
        return nu

    def gradient(self, point, step_size):
        """
        Approximate gradient of the index of refraction at the given point.

        By default the gradient is calculated by central differences of the
        raw index of refraction, sampled half of `step_size` on either side
        of `point` along each coordinate axis. Any component whose samples
        have no value is zero.

        Parameters
        ----------
        point : array_like
            Point at which to evaluate the gradient.
        step_size : float
            Distance between the samples used in the central difference.

        Returns
        -------
        ndarray
            Gradient vector of the index of refraction at `point`.

        """
        point = np.asarray(point, dtype=float)
        half_step = 0.5 * step_size
        grad = np.zeros(3)
        for i, axis in enumerate(np.identity(3)):
            nu_plus = self.index(point + half_step*axis)
            nu_minus = self.index(point - half_step*axis)
            if is_valid(nu_plus) and is_valid(nu_minus):
                grad[i] = (nu_plus - nu_minus) / step_size
        return grad


class UniformMedium(IndexVolume):
    """
    Class describing a medium with a constant index of refraction.

    Parameters
    ----------
    index : float
        Index of refraction of the medium.
    active_volume : ActiveVolume, optional
        Region of space in which the medium is defined.

    Attributes
    ----------
    nu : float
        Index of refraction of the medium.

    """
    def __init__(self, index, active_volume=all_space):
        super().__init__(active_volume=active_volume)
        self.nu = index

    def index(self, point):
        return self.nu

    def gradient(self, point, step_size):
        return np.zeros(3)


class Slab(IndexVolume):
    """
    Class describing a thick plate of material between two parallel planes.

    The position of a point through the slab is measured by its projection
    `d` onto the unit `normal`. Points with ``d < beg_dot`` are before the
    slab, points with ``beg_dot <= d < end_dot`` are inside the slab, and
    all other points are after the slab.

    Parameters
    ----------
    normal : array_like
        Direction perpendicular to the faces of the slab.
    beg_dot : float
        Projected distance along `normal` of the first face.
    end_dot : float
        Projected distance along `normal` of the second face.
    index_before : float, optional
        Index of refraction before the slab.
    index_inside : float, optional
        Index of refraction inside the slab.
    index_after : float, optional
        Index of refraction after the slab.
    active_volume : ActiveVolume, optional
        Region of space in which the medium is defined.

    """
    def __init__(self, normal, beg_dot, end_dot, index_before=1.0,
                 index_inside=1.5, index_after=1.0, active_volume=all_space):
        super().__init__(active_volume=active_volume)
        self.normal = normalize(normal)
        if not np.any(self.normal):
            raise ValueError("Slab normal must be non-zero")
        self.beg_dot = beg_dot
        self.end_dot = end_dot
        self.index_before = index_before
        self.index_inside = index_inside
        self.index_after = index_after

    def index(self, point):
        d = np.dot(point, self.normal)
        if d<self.beg_dot:
            return self.index_before
        elif d<self.end_dot:
            return self.index_inside
        else:
            return self.index_after


class Sphere(IndexVolume):
    """
    Class describing a sphere whose index of refraction varies radially.

    Inside the sphere the index of refraction changes linearly from
    `index_center` at the center to `index_edge` at the surface. Outside of
    the sphere the index of refraction is `index_edge`.

    Parameters
    ----------
    center : array_like
        Center of the sphere.
    radius : float
        Radius of the sphere.
    index_center : float, optional
        Index of refraction at the center of the sphere.
    index_edge : float, optional
        Index of refraction at the surface and outside of the sphere.
    active_volume : ActiveVolume, optional
        Region of space in which the medium is defined.

    """
    def __init__(self, center, radius, index_center=1.5, index_edge=1.0,
                 active_volume=all_space):
        super().__init__(active_volume=active_volume)
        self.center = np.array(center, dtype=float)
        self.radius = radius
        self.index_center = index_center
        self.index_edge = index_edge

    def index(self, point):
        frac = np.linalg.norm(np.asarray(point) - self.center) / self.radius
        if frac<1:
            return frac*(self.index_edge - self.index_center) + self.index_center
        else:
            return self.index_edge

    def gradient(self, point, step_size):
        """
        Analytic gradient of the index of refraction at the given point.

        Parameters
        ----------
        point : array_like
            Point at which to evaluate the gradient.
        step_size : float
            Unused, accepted for compatibility with `IndexVolume.gradient`.

        Returns
        -------
        ndarray
            Gradient vector of the index of refraction at `point`. Zero
            outside of the sphere.

        """
        delta = np.asarray(point, dtype=float) - self.center
        if np.linalg.norm(delta)>=self.radius:
            return np.zeros(3)
        slope = (self.index_edge - self.index_center) / self.radius
        return slope * normalize(delta)


class ConvexLens(IndexVolume):
    """
    Class describing a double-convex lens surrounded by a uniform medium.

    The lens is the intersection of two (open) spheres.

    Parameters
    ----------
    center1, center2 : array_like
        Centers of the two spheres.
    radius1, radius2 : float
        Radii of the two spheres.
    index_lens : float, optional
        Index of refraction inside the lens.
    index_outside : float, optional
        Index of refraction outside of the lens.
    active_volume : ActiveVolume, optional
        Region of space in which the medium is defined.

    """
    def __init__(self, center1, radius1, center2, radius2, index_lens=1.5,
                 index_outside=1.0, active_volume=all_space):
        super().__init__(active_volume=active_volume)
        self.center1 = np.array(center1, dtype=float)
        self.radius1 = radius1
        self.center2 = np.array(center2, dtype=float)
        self.radius2 = radius2
        self.index_lens = index_lens
        self.index_outside = index_outside

    def contains(self, point):
        """Whether `point` is within the lens."""
        point = np.asarray(point)
        return (np.sum((point-self.center1)**2)<self.radius1**2 and
                np.sum((point-self.center2)**2)<self.radius2**2)

    def index(self, point):
        if self.contains(point):
            return self.index_lens
        else:
            return self.index_outside


class HotRoad(IndexVolume):
    """
    Class describing heated air above a road surface.

    The heated air is modeled as a cylindrical tube aligned with the road,
    in which the index of refraction changes linearly with distance from the
    axis of the tube. Outside of the tube the index of refraction is that of
    ambient air.

    Parameters
    ----------
    cylinder : Cylinder
        Tube of heated air.
    index_axis : float or None, optional
        Index of refraction along the axis of the tube. If ``None``, uses
        half of `index_edge`.
    index_edge : float or None, optional
        Index of refraction at the surface and outside of the tube. If
        ``None``, uses the ground-level index of refraction of the Earth.
    active_volume : ActiveVolume, optional
        Region of space in which the medium is defined.

    """
    def __init__(self, cylinder, index_axis=None, index_edge=None,
                 active_volume=all_space):
        super().__init__(active_volume=active_volume)
        if not isinstance(cylinder, Cylinder):
            raise ValueError("HotRoad requires a Cylinder, got "
                             +str(type(cylinder)))
        self.cylinder = cylinder
        if index_edge is None:
            index_edge = earth.index_ground
        if index_axis is None:
            index_axis = 0.5 * index_edge
        self.index_axis = index_axis
        self.index_edge = index_edge

    def index(self, point):
        len_frac = self.cylinder.fraction_along_axis(point)
        if 0<=len_frac<1:
            rad_frac = self.cylinder.fraction_from_axis(point)
            if rad_frac<1:
                return (rad_frac*(self.index_edge - self.index_axis)
                        + self.index_axis)
        return self.index_edge


class ExponentialAtmosphere(IndexVolume, LazyMutableClass):
    """
    Class describing an atmosphere with exponentially decaying index.

    Index of refraction goes as n(r)=alpha*exp(-beta*r) where r is the
    distance from the center of the planet. The parameters alpha and beta
    are chosen so that the model matches the planet's index of refraction at
    the ground and at the top of the atmosphere. The parameters are lazily
    evaluated, and are recalculated if the `planet` attribute is changed.

    Parameters
    ----------
    planet : Planet, optional
        Planet whose atmosphere is modeled.
    active_volume : ActiveVolume or None, optional
        Region of space in which the medium is defined. If ``None``, uses
        the spherical shell between the ground and the top of the
        atmosphere.

    Attributes
    ----------
    planet : Planet
        Planet whose atmosphere is modeled.
    alpha : float
        Multiplicative factor of the index of refraction.
    beta : float
        Exponential factor of the index of refraction (1/m).

    """
    def __init__(self, planet=earth, active_volume=None):
        if active_volume is None:
            active_volume = SphericalShell((0, 0, 0), planet.radius_ground,
                                           planet.radius_space,
                                           name="atmosphere")
        IndexVolume.__init__(self, active_volume=active_volume)
        self.planet = planet
        LazyMutableClass.__init__(self, static_attributes=["planet"])

    @lazy_property
    def beta(self):
        """Exponential factor of the index of refraction (1/m)."""
        v1, v2 = self.planet.index_ground, self.planet.index_space
        return np.log(v1/v2) / self.planet.thickness

    @lazy_property
    def alpha(self):
        """Multiplicative factor of the index of refraction."""
        r1, r2 = self.planet.radius_ground, self.planet.radius_space
        v1, v2 = self.planet.index_ground, self.planet.index_space
        return (v1+v2) / (np.exp(-self.beta*r1) + np.exp(-self.beta*r2))

    def index(self, point):
        return self.alpha * np.exp(-self.beta * np.linalg.norm(point))

    def gradient(self, point, step_size):
        """
        Approximate gradient of the index of refraction at the given point.

        Central differences use a half-step proportional to the distance
        from the center of the planet rather than `step_size`.

        """
        point = np.asarray(point, dtype=float)
        half_step = np.linalg.norm(point) * np.sqrt(np.finfo(float).eps)
        if half_step==0:
            return np.zeros(3)
        grad = np.zeros(3)
        for i, axis in enumerate(np.identity(3)):
            grad[i] = (self.index(point + half_step*axis)
                       - self.index(point - half_step*axis))
        return grad / (2*half_step)

    def sample_indices(self, num_samples):
        """
        Sample the index of refraction through the atmosphere.

        Parameters
        ----------
        num_samples : int
            Number of evenly spaced radii at which to sample, from the ground
            to the top of the atmosphere.

        Returns
        -------
        radii : ndarray
            Radii (m) of the samples.
        indices : ndarray
            Index of refraction at each radius.

        """
        radii = np.linspace(self.planet.radius_ground,
                            self.planet.radius_space, num_samples)
        indices = self.alpha * np.exp(-self.beta * radii)
        return radii, indices


class StandardAtmosphere(IndexVolume):
    """
    Class describing a radial atmosphere from tabulated air properties.

    Parameters
    ----------
    atmosphere : Atmosphere or None, optional
        Tabulated air properties as a function of height. If ``None``, uses
        the US Standard Atmosphere (COESA 1976).
    planet : Planet, optional
        Planet whose ground radius defines zero height.
    active_volume : ActiveVolume, optional
        Region of space in which the medium is defined.

    """
    def __init__(self, atmosphere=None, planet=earth,
                 active_volume=all_space):
        super().__init__(active_volume=active_volume)
        if atmosphere is None:
            atmosphere = Atmosphere.coesa1976()
        self.atmosphere = atmosphere
        self.planet = planet

    def height(self, point):
        """Height (m) of the point above the planet's ground."""
        return np.linalg.norm(point) - self.planet.radius_ground

    def index(self, point):
        return self.atmosphere.index_of_refraction(self.height(point))
