"""
Helper functions and classes for use in PyRefract modules.

This module is intended as a container for functions, typically used in more
than one PyRefract module, which are not physics-motivated and are instead
used mainly to clean up code. Functions and classes in this module may also be
computer-science-motivated structures that python doesn't include naturally.

"""

import logging
import numpy as np

logger = logging.getLogger(__name__)


def normalize(vector):
    """
    Normalize the given vector.

    Parameters
    ----------
    vector : array_like

    Returns
    -------
    ndarray
        Normalized (float) form of `vector`. The zero vector is returned
        unchanged since it has no direction.

    Examples
    --------
    >>> normalize([0,0,3])
    array([0., 0., 1.])

    >>> v = np.array([1,0,1])
    >>> normalize(v)
    array([0.70710678, 0.        , 0.70710678])

    """
    v = np.array(vector, dtype=float)
    mag = np.linalg.norm(v)
    if mag==0:
        return v
    else:
        return v / mag


def is_valid(value):
    """
    Determine whether a value holds usable numeric data.

    Index of refraction values and vectors use ``None`` to signal that no
    value exists (e.g. outside of a medium's active volume). Non-finite
    floating-point values are treated the same way.

    Parameters
    ----------
    value : None, float or array_like
        Value to be tested.

    Returns
    -------
    bool
        ``False`` if `value` is ``None`` or contains any non-finite
        element, ``True`` otherwise.

    Examples
    --------
    >>> is_valid(1.5)
    True
    >>> is_valid(None)
    False
    >>> is_valid([1, np.nan, 0])
    False

    """
    if value is None:
        return False
    return bool(np.all(np.isfinite(value)))


def get_from_enum(value, enum):
    """
    Find the enum value given some representation of it.

    Transforms the given `value` into the corresponding value from the `enum`
    by checking the type of `value` given.

    Parameters
    ----------
    value
        Representation of the desired `enum` value. If already a member of
        `enum`, no change. If ``str``, assumed to be a name in the `enum`.
        Otherwise, assumed to be a value type of the `enum`.
    enum : Enum
        Python ``Enum`` to compare names values with.

    Returns
    -------
    Enum value
        Value in the `enum` represented by the given `value`.

    Examples
    --------
    >>> from pyrefract.ray_tracing import DirChange
    >>> get_from_enum(DirChange.reflected, DirChange)
    <DirChange.reflected: 4>
    >>> get_from_enum("converged", DirChange)
    <DirChange.converged: 2>
    >>> get_from_enum(3, DirChange)
    <DirChange.diverged: 3>

    """
    if isinstance(value, enum):
        return value
    elif isinstance(value, str):
        return enum[value]
    else:
        return enum(value)


def lazy_property(fn):
    """
    Decorator that makes a property lazily evaluated.

    Acts like the standard python ``property`` decorator, but the first time
    the decorated property is accessed an attribute with the property's name
    prefixed by '_lazy_' will be created and the value of the property will be
    stored. Upon further access of the property, the stored value will be
    returned instead of recalculating it.

    Parameters
    ----------
    fn : function
        Function returning class property which is to be decorated.

    Returns
    -------
    function
        Lazy-evaluation property function.

    See Also
    --------
    LazyMutableClass : Class for lazy properties dependent on attributes.

    Examples
    --------
    >>> class Layer:
    ...     def __init__(self, bottom, top):
    ...         self.bottom = bottom
    ...         self.top = top
    ...     @lazy_property
    ...     def thickness(self):
    ...         return self.top - self.bottom
    >>> layer = Layer(4.5, 5.5)
    >>> "_lazy_thickness" in layer.__dict__
    False
    >>> layer.thickness
    1.0
    >>> "_lazy_thickness" in layer.__dict__
    True

    """
    attr_name = '_lazy_' + fn.__name__

    @property
    def _lazy_property(self):
        if not hasattr(self, attr_name):
            setattr(self, attr_name, fn(self))
        return getattr(self, attr_name)

    return _lazy_property


class LazyMutableClass:
    """
    Class with lazy properties which may depend on other class attributes.

    This class is intended as a base class for any class which desires lazy
    properties which depend on other attributes and thus may need to be
    recalculated when the class attributes change. Any lazy properties in this
    class will be lazily evaluated as usual until one of the given static
    attributes changes, at which point all lazy properties will be cleared and
    will be recalculated on their next call. By default the static attributes
    of the class will be set to all attributes present at the time of the
    ``LazyMutableClass.__init__`` call.

    Parameters
    ----------
    static_attributes : None or sequence of str, optional
        Set of attribute names on which the lazy properties depend. If ``None``
        then it will contain all members of ``__dict__`` at the time of the
        call.

    See Also
    --------
    lazy_property : Decorator for lazily-evaluated properties.

    Examples
    --------
    >>> class Layer(LazyMutableClass):
    ...     def __init__(self, bottom, top):
    ...         self.bottom = bottom
    ...         self.top = top
    ...         super().__init__()
    ...     @lazy_property
    ...     def thickness(self):
    ...         return self.top - self.bottom
    >>> layer = Layer(4.5, 5.5)
    >>> layer.thickness
    1.0
    >>> layer.top = 6.5
    >>> "_lazy_thickness" in layer.__dict__
    False
    >>> layer.thickness
    2.0

    """
    def __init__(self, static_attributes=None):
        # If static_attributes not specified, set to any currently-set attrs
        # Allows for easy setting of static attributes in subclasses
        # by simply delaying the super().__init__ call
        if static_attributes is None:
            self._static_attrs = [attr for attr in self.__dict__
                                  if not attr.startswith("_")]
        else:
            self._static_attrs = static_attributes

    def __setattr__(self, name, value):
        # If static attributes have not yet been set, just use default setattr.
        # This avoids problems with setting _static_attrs in the first place.
        if "_static_attrs" in self.__dict__ and name in self._static_attrs:
            self._clear_cache()
        super().__setattr__(name, value)

    def _clear_cache(self):
        """Clears the cache of lazily-evaluated parameters."""
        lazy_attributes = [attr for attr in self.__dict__
                           if attr.startswith("_lazy_")]
        for lazy_attr in lazy_attributes:
            delattr(self, lazy_attr)
