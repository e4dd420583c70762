"""
PyRefract ray refraction simulation package.

"""

from .__about__ import __version__, __long_description__
__doc__ = __long_description__

from .geometry import Interval, Cylinder
from .atmosphere import Planet, earth, Atmosphere, AtmosphereParameters
from .media import (ActiveVolume, ActiveBox, SphericalShell, all_space,
                    IndexVolume, UniformMedium, Slab, Sphere, ConvexLens,
                    HotRoad, ExponentialAtmosphere, StandardAtmosphere)
from .ray_tracing import (DirChange, reverse_change, Start, Node,
                          next_tangent_direction, Propagator, Path, PathView)
from .refraction import PolarRefraction
from .io import File
