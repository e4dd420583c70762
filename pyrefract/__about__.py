"""
Module containing metadata about the package.

"""

__modulename__ = "pyrefract"

__fullname__ = "PyRefract"

__version__ = "0.3.0"

__long_description__ = r"""
A Python package for tracing light rays through media of varying index of refraction.

PyRefract (\ **Py**\ thon package for **Refract**\ ion) numerically
integrates the curved path of a light ray through a three-dimensional
medium whose index of refraction varies continuously or discontinuously in
space. A vector form of Snell's law is applied at every local gradient of
the index field, including total internal reflection. The package is used
to model atmospheric refraction (sensor to ground sightlines through a
layered atmosphere) and optical elements such as lenses, slabs and
cylinders of varying index.
"""

__description__ = __long_description__.splitlines()[1]

__author__ = "PyRefract Developers"

__author_email__ = ""

__copyright__ = "2023, PyRefract Developers"

__license__ = "MIT"
