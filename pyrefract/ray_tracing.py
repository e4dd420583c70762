"""
Module containing classes for ray tracing through refractive media.

The propagator advances a ray in fixed-size spatial steps through an index
of refraction volume, applying a vector form of Snell's law to the local
gradient of the index of refraction at every step. Each step produces a
node which is handed to a path object, and the path decides which nodes to
keep and when tracing should end.

"""

from collections import namedtuple
from enum import Enum
import logging
import math
import sys
import numpy as np
from pyrefract.internal_functions import normalize, is_valid, get_from_enum
from pyrefract.geometry import (dot, wedge, spinor_times_vector, reflect,
                                angle_from_into)

logger = logging.getLogger(__name__)


class DirChange(Enum):
    """
    Enum containing the possible changes in ray direction at a node.

    Attributes
    ----------
    unset
        No change has been determined.
    unaltered
        The ray continues in the same direction.
    converged
        The ray refracted while entering a higher index of refraction.
    diverged
        The ray refracted while entering a lower index of refraction.
    reflected
        The ray was totally internally reflected.
    stopped
        The ray left the region where the medium is defined.
    started
        The ray entered the region where the medium is defined.

    """
    unset = 0
    unaltered = 1
    converged = 2
    diverged = 3
    reflected = 4
    stopped = 5
    started = 6

    def reversed(self):
        """Change experienced by a ray traveling in the opposite direction."""
        return reverse_change(self)


_reverse_changes = {
    DirChange.unset: DirChange.unset,
    DirChange.unaltered: DirChange.unaltered,
    DirChange.converged: DirChange.diverged,
    DirChange.diverged: DirChange.converged,
    DirChange.reflected: DirChange.reflected,
    DirChange.stopped: DirChange.started,
    DirChange.started: DirChange.stopped,
}

def reverse_change(change):
    """
    Direction change for a ray traversing a node in the opposite direction.

    Converged and diverged changes swap, as do stopped and started changes.
    All other changes are unaffected.

    Parameters
    ----------
    change : DirChange or str or int
        Representation of the direction change of a forward ray.

    Returns
    -------
    DirChange
        Direction change of the reversed ray.

    Examples
    --------
    >>> reverse_change(DirChange.converged)
    <DirChange.diverged: 3>
    >>> reverse_change("stopped")
    <DirChange.started: 6>

    """
    return _reverse_changes[get_from_enum(change, DirChange)]


def _read_only_vector(vector):
    array = np.array(vector, dtype=float)
    array.flags.writeable = False
    return array


def _same_index(a, b):
    if a is None or b is None:
        return a is None and b is None
    return a==b


def _fixed(value, precision):
    if value is None:
        return "None"
    if np.ndim(value)==0:
        return "{:.{p}f}".format(value, p=precision)
    return " ".join("{:{w}.{p}f}".format(x, w=precision+4, p=precision)
                    for x in value)


class Start:
    """
    Class for the initial condition of a ray.

    Parameters
    ----------
    tangent : array_like
        Unit vector direction of the ray at its start.
    location : array_like
        Point at which the ray starts.

    Attributes
    ----------
    tangent : ndarray
        Unit vector direction of the ray at its start (read-only).
    location : ndarray
        Point at which the ray starts (read-only).

    See Also
    --------
    Start.from_direction : Create a start from a non-unit direction.

    """
    __slots__ = ('_tangent', '_location')

    def __init__(self, tangent, location):
        object.__setattr__(self, '_tangent', _read_only_vector(tangent))
        object.__setattr__(self, '_location', _read_only_vector(location))

    def __setattr__(self, name, value):
        raise AttributeError(self.__class__.__name__+" is immutable")

    @classmethod
    def from_direction(cls, direction, location):
        """
        Create a start from any non-zero direction vector.

        Parameters
        ----------
        direction : array_like
            Direction of the ray, need not be unit length.
        location : array_like
            Point at which the ray starts.

        Returns
        -------
        Start
            Start with a unit tangent along `direction`.

        Raises
        ------
        ValueError
            If `direction` is the zero vector.

        """
        tangent = normalize(direction)
        if not np.any(tangent):
            raise ValueError("Ray direction must be non-zero")
        return cls(tangent, location)

    @property
    def tangent(self):
        return self._tangent

    @property
    def location(self):
        return self._location

    def __repr__(self):
        return "{}(tangent={!r}, location={!r})".format(
            self.__class__.__name__, self.tangent.tolist(),
            self.location.tolist()
        )

    def __eq__(self, other):
        if not isinstance(other, Start):
            return NotImplemented
        return (np.array_equal(self.tangent, other.tangent) and
                np.array_equal(self.location, other.location))

    def info_string(self):
        """Single-line description of the start."""
        return ("tangent: "+_fixed(self.tangent, 6)+
                "  location: "+_fixed(self.location, 6))


class Node:
    """
    Class for a single sample of a traced ray path.

    Parameters
    ----------
    incoming_tangent : array_like
        Unit direction of the ray arriving at the node.
    incoming_index : float or None
        Index of refraction the ray arrives through.
    location : array_like
        Location of the node.
    outgoing_index : float or None
        Index of refraction the ray leaves through.
    outgoing_tangent : array_like
        Unit direction of the ray leaving the node.
    change : DirChange
        Change in direction of the ray at the node.

    Attributes
    ----------
    incoming_tangent, outgoing_tangent : ndarray
        Unit directions of the ray at the node (read-only).
    incoming_index, outgoing_index : float or None
        Indices of refraction on either side of the node.
    location : ndarray
        Location of the node (read-only).
    change : DirChange
        Change in direction of the ray at the node.

    """
    __slots__ = ('_incoming_tangent', '_incoming_index', '_location',
                 '_outgoing_index', '_outgoing_tangent', '_change')

    def __init__(self, incoming_tangent, incoming_index, location,
                 outgoing_index, outgoing_tangent, change=DirChange.unset):
        setter = object.__setattr__
        setter(self, '_incoming_tangent', _read_only_vector(incoming_tangent))
        setter(self, '_incoming_index', incoming_index)
        setter(self, '_location', _read_only_vector(location))
        setter(self, '_outgoing_index', outgoing_index)
        setter(self, '_outgoing_tangent', _read_only_vector(outgoing_tangent))
        setter(self, '_change', get_from_enum(change, DirChange))

    def __setattr__(self, name, value):
        raise AttributeError(self.__class__.__name__+" is immutable")

    @property
    def incoming_tangent(self):
        return self._incoming_tangent

    @property
    def incoming_index(self):
        return self._incoming_index

    @property
    def location(self):
        return self._location

    @property
    def outgoing_index(self):
        return self._outgoing_index

    @property
    def outgoing_tangent(self):
        return self._outgoing_tangent

    @property
    def change(self):
        return self._change

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return (np.array_equal(self.incoming_tangent, other.incoming_tangent)
                and _same_index(self.incoming_index, other.incoming_index)
                and np.array_equal(self.location, other.location)
                and _same_index(self.outgoing_index, other.outgoing_index)
                and np.array_equal(self.outgoing_tangent,
                                   other.outgoing_tangent)
                and self.change==other.change)

    def __repr__(self):
        return ("{}(incoming_tangent={!r}, incoming_index={!r}, "
                "location={!r}, outgoing_index={!r}, outgoing_tangent={!r}, "
                "change={!s})".format(self.__class__.__name__,
                                      self.incoming_tangent.tolist(),
                                      self.incoming_index,
                                      self.location.tolist(),
                                      self.outgoing_index,
                                      self.outgoing_tangent.tolist(),
                                      self.change))

    def reversed(self):
        """
        Equivalent node for the ray traveling in the opposite direction.

        Incoming and outgoing quantities are swapped, tangents are negated,
        and the direction change is reversed.

        Returns
        -------
        Node
            Node of the reversed ray.

        """
        return Node(-self.outgoing_tangent, self.outgoing_index,
                    self.location, self.incoming_index,
                    -self.incoming_tangent, reverse_change(self.change))

    def info_brief(self):
        """Single-line description of the node."""
        return (" tan "+_fixed(self.incoming_tangent, 6)+
                " nu "+_fixed(self.incoming_index, 9)+
                " loc "+_fixed(self.location, 6)+
                " nu "+_fixed(self.outgoing_index, 9)+
                " tan "+_fixed(self.outgoing_tangent, 6)+
                "  "+self.change.name)


def next_tangent_direction(tangent_in, index_in, gradient, index_out,
                           gradient_tolerance=np.finfo(float).tiny):
    """
    Direction of a ray after crossing a local index of refraction gradient.

    Applies a vector form of Snell's law across the (infinitesimal)
    interface whose normal is along `gradient`. The refraction plane is
    described by the bivector ``B = (n_in/n_out) (t ^ g)``. If the magnitude
    of `B` exceeds that of `gradient` the ray is totally internally reflected.

    Parameters
    ----------
    tangent_in : array_like
        Unit direction of the incoming ray.
    index_in : float or None
        Index of refraction before the interface.
    gradient : array_like
        Gradient of the index of refraction at the interface. May be the zero
        vector, in which case the ray is unaltered.
    index_out : float or None
        Index of refraction after the interface.
    gradient_tolerance : float, optional
        Squared gradient magnitude at or below which the gradient is treated
        as zero.

    Returns
    -------
    tangent_out : ndarray
        Unit direction of the outgoing ray.
    change : DirChange
        Kind of direction change at the interface. ``DirChange.stopped`` if
        either index of refraction has no value.

    """
    tangent_in = np.asarray(tangent_in, dtype=float)
    if not is_valid(index_in) or not is_valid(index_out):
        return tangent_in, DirChange.stopped

    gradient = np.asarray(gradient, dtype=float)
    g_sq = dot(gradient, gradient)
    if not g_sq>gradient_tolerance:
        return tangent_in, DirChange.unaltered

    bivector = (index_in/index_out) * wedge(tangent_in, gradient)
    radicand = g_sq - dot(bivector, bivector)
    if radicand<0:
        return reflect(tangent_in, gradient), DirChange.reflected

    root = np.sqrt(radicand)
    gradient_inv = gradient / g_sq
    t_dot_g = dot(tangent_in, gradient)
    if t_dot_g<0:
        return (spinor_times_vector(-root, bivector, gradient_inv),
                DirChange.diverged)
    elif t_dot_g>0:
        return (spinor_times_vector(root, bivector, gradient_inv),
                DirChange.converged)
    else:
        return tangent_in, DirChange.unaltered


Step = namedtuple('Step', ['index', 'tangent', 'change'])


class Propagator:
    """
    Class for propagating rays through an index of refraction volume.

    Rays are advanced in steps of fixed length. At each step the outgoing
    index of refraction and tangent are resolved together by a short
    fixed-point iteration: the index of refraction is sampled half a step
    ahead along the current estimate of the outgoing tangent, which is then
    updated by the refraction law until it stops changing. A totally
    internally reflected step keeps the reflected tangent, with the outgoing
    index sampled half a step along the gradient back into the medium the
    ray arrived through.

    Parameters
    ----------
    medium : IndexVolume
        Index of refraction volume through which rays propagate. Must
        provide ``index_at(point)`` and ``gradient(point, step_size)``.
    step_distance : float
        Length (m) of each propagation step.

    Attributes
    ----------
    medium : IndexVolume
        Index of refraction volume through which rays propagate.
    step_distance : float
        Length (m) of each propagation step.
    max_iterations : int
        Maximum number of refinements of the outgoing tangent per step.
    convergence_tolerance : float
        Squared change in outgoing tangent below which a step is resolved.
    gradient_tolerance : float
        Gradient magnitude at or below which a step is unaltered.
    is_valid

    See Also
    --------
    Path : Class for recording the nodes of a traced ray.

    """
    max_iterations = 10
    convergence_tolerance = np.finfo(float).eps
    gradient_tolerance = np.finfo(float).tiny

    def __init__(self, medium, step_distance):
        self.medium = medium
        self.step_distance = step_distance

    @property
    def is_valid(self):
        """Whether the step distance is a positive number."""
        return is_valid(self.step_distance) and self.step_distance>0

    def next_step(self, tangent, index_prev, location):
        """
        Resolve the change in the ray over the next step.

        Parameters
        ----------
        tangent : array_like
            Unit direction of the ray arriving at `location`.
        index_prev : float or None
            Index of refraction the ray arrives through.
        location : array_like
            Current location of the ray.

        Returns
        -------
        Step
            Named tuple of the outgoing index of refraction (``index``),
            outgoing unit direction (``tangent``) and kind of direction
            change (``change``). The change is ``DirChange.stopped`` if the
            ray cannot continue.

        """
        tangent = np.asarray(tangent, dtype=float)
        location = np.asarray(location, dtype=float)
        half_step = 0.5 * self.step_distance

        gradient = np.asarray(self.medium.gradient(location,
                                                   self.step_distance),
                              dtype=float)
        g_mag = np.linalg.norm(gradient)
        if not g_mag>self.gradient_tolerance:
            index_out = self.medium.index_at(location + half_step*tangent)
            tangent_next = tangent
            change = DirChange.unaltered

        else:
            index_out = None
            tangent_next = tangent
            change = DirChange.unset
            dif_sq = np.inf
            for _ in range(self.max_iterations):
                if not dif_sq>self.convergence_tolerance:
                    break
                point_ahead = location + half_step*tangent_next
                index_out = self.medium.index_at(point_ahead)
                tangent_result, result_change = next_tangent_direction(
                    tangent, index_prev, gradient, index_out,
                    gradient_tolerance=0
                )
                if result_change==DirChange.stopped:
                    change = result_change
                    break
                dif_sq = dot(tangent_result-tangent_next,
                             tangent_result-tangent_next)
                tangent_next = tangent_result
                change = result_change
                if result_change==DirChange.reflected:
                    # Exit point lies back on the incoming side
                    index_out = self.medium.index_at(
                        location + half_step*normalize(gradient)
                    )
                    break
            else:
                if dif_sq>self.convergence_tolerance:
                    logger.debug("Tangent at %s not converged after %i "
                                 +"iterations (squared change %g)",
                                 location, self.max_iterations, dif_sq)

        if not is_valid(index_out):
            change = DirChange.stopped

        return Step(index_out, tangent_next, change)

    def trace_path(self, path):
        """
        Trace a ray, handing each resulting node to the given path.

        Tracing begins from ``path.start`` and continues until the path
        reports that it has no remaining capacity or until the ray leaves the
        region where the medium has a value. If the propagator is not valid,
        nothing is traced.

        Parameters
        ----------
        path : Path
            Recorder of the traced nodes. Must provide ``start``, ``size()``,
            ``capacity()`` and ``emplace_back(node)``.

        """
        if not self.is_valid:
            logger.warning("Cannot trace with invalid step distance %s",
                           self.step_distance)
            return
        save_step = getattr(path, "save_step", None)
        if save_step is not None and not (is_valid(save_step) and
                                          save_step>0):
            logger.warning("Tracing path with invalid save step %s; every "
                           +"node will be kept", save_step)

        tangent = np.array(path.start.tangent, dtype=float)
        location = np.array(path.start.location, dtype=float)
        index_prev = self.medium.index_at(location
                                          - 0.5*self.step_distance*tangent)

        n_candidates = 0
        change = DirChange.unset
        while path.size()<path.capacity():
            step = self.next_step(tangent, index_prev, location)
            change = step.change
            if change==DirChange.stopped:
                break
            location_next = location + self.step_distance*step.tangent
            path.emplace_back(Node(tangent, index_prev, location,
                                   step.index, step.tangent, change))
            n_candidates += 1
            tangent = step.tangent
            location = location_next
            index_prev = step.index

        logger.debug("Traced %i candidate nodes, kept %i (last change: %s)",
                     n_candidates, path.size(), change.name)

    def node_path(self, start, nominal_length, pad_factor=9/8):
        """
        Trace every node of a ray over approximately the given length.

        Parameters
        ----------
        start : Start
            Initial condition of the ray.
        nominal_length : float
            Approximate path length (m) to trace.
        pad_factor : float, optional
            Factor by which to extend the number of steps beyond
            `nominal_length` to allow for path curvature.

        Returns
        -------
        list of Node
            All nodes of the traced ray, one per step.

        """
        path = Path(start, self.step_distance)
        if self.is_valid:
            path.reserve(int(pad_factor * nominal_length
                             / self.step_distance))
        self.trace_path(path)
        return path.nodes


class Path:
    """
    Class for recording the nodes of a traced ray.

    Nodes are kept roughly every `save_step` units of distance. When a
    `target` point is given, tracing stops once the ray starts moving away
    from the target, with the final (receding) node always kept. Capacity
    may be reserved to limit how many nodes are kept. Without any reserved
    capacity the path is unbounded and only the medium ends the trace.

    Parameters
    ----------
    start : Start
        Initial condition of the ray.
    save_step : float
        Chord distance (m) from the last kept node beyond which a node is
        kept.
    approx_end : array_like or None, optional
        Approximate final location of the ray, used to reserve capacity.
    target : array_like or None, optional
        Point the ray approaches. Tracing stops after the ray's closest
        approach to this point. If `approx_end` is ``None``, capacity is also
        reserved based on the distance to `target`.

    Attributes
    ----------
    start : Start
        Initial condition of the ray.
    save_step : float
        Chord distance (m) from the last kept node beyond which a node is
        kept.
    target : ndarray or None
        Point the ray approaches.
    nodes : list of Node
        Kept nodes of the ray.
    arc_distances : list of float
        Distance traveled along the ray between each kept node and the one
        before it (zero for the first node).
    pad_factor : float
        Factor by which to extend reserved capacity beyond the straight-line
        estimate.

    See Also
    --------
    Propagator : Class for propagating rays through an index of refraction
                 volume.

    """
    pad_factor = 9/8

    def __init__(self, start, save_step, approx_end=None, target=None):
        self.start = start
        self.save_step = save_step
        self.target = None if target is None else np.array(target,
                                                           dtype=float)
        self.nodes = []
        self.arc_distances = []
        self._capacity = None
        self._prev_near_dist = None
        self._curr_near_dist = None
        self._arc_since_save = 0
        self._last_location = None

        if self.target is not None:
            self._curr_near_dist = float(np.linalg.norm(self.target
                                                        - start.location))

        end = approx_end if approx_end is not None else self.target
        if end is not None and is_valid(save_step) and save_step>0:
            self.reserve(self.size_between(start.location, end, save_step,
                                           self.pad_factor))

    @staticmethod
    def size_between(beg, end, delta, pad_factor=9/8):
        """
        Estimate the number of nodes needed to span between two points.

        Parameters
        ----------
        beg, end : array_like
            Points at either end of the span.
        delta : float
            Distance between nodes.
        pad_factor : float, optional
            Factor by which to extend the straight-line distance to allow for
            path curvature.

        Returns
        -------
        int
            Estimated number of nodes.

        Raises
        ------
        ValueError
            If `delta` is not positive.

        """
        if not delta>0:
            raise ValueError("Node spacing must be positive, got "+str(delta))
        distance = np.linalg.norm(np.asarray(end, dtype=float)
                                  - np.asarray(beg, dtype=float))
        return int(math.ceil(pad_factor * distance / delta))

    def __len__(self):
        return len(self.nodes)

    def __iter__(self):
        yield from self.nodes

    def size(self):
        """Number of nodes kept."""
        return len(self.nodes)

    def reserve(self, num_nodes):
        """
        Set the number of nodes the path can keep.

        The first reservation bounds the capacity of the path. Later
        reservations only increase it.

        Parameters
        ----------
        num_nodes : int
            Number of nodes to reserve space for.

        """
        num_nodes = max(int(num_nodes), len(self.nodes))
        if self._capacity is None:
            self._capacity = num_nodes
        else:
            self._capacity = max(self._capacity, num_nodes)

    def reserve_for_distance(self, distance):
        """
        Reserve enough capacity to keep nodes over the given arc length.

        Parameters
        ----------
        distance : float
            Arc length (m) of the ray to be kept.

        """
        if self.save_step<distance:
            self.reserve(int(distance/self.save_step) + 1)

    def keep_going(self):
        """
        Whether the ray has not yet started moving away from the target.

        Returns
        -------
        bool
            ``False`` once the distance to the target has increased since the
            previous node, ``True`` otherwise (always ``True`` without a
            target).

        """
        if (self._prev_near_dist is not None and
                self._curr_near_dist is not None):
            return not self._prev_near_dist<self._curr_near_dist
        return True

    def capacity(self):
        """
        Number of nodes the path can keep.

        Returns
        -------
        int
            Zero if tracing should stop, the reserved capacity otherwise.
            ``sys.maxsize`` if no capacity has been reserved.

        """
        if not self.keep_going():
            return 0
        if self._capacity is None:
            return sys.maxsize
        return self._capacity

    def consider_node(self, node):
        """
        Process a node, keeping it if appropriate.

        A node is kept if it is the first node, if it is at least `save_step`
        away from the last kept node, or if the ray has just started moving
        away from the target.

        Parameters
        ----------
        node : Node
            Candidate node of the ray.

        """
        location = node.location
        if self._last_location is not None:
            self._arc_since_save += float(np.linalg.norm(
                location - self._last_location
            ))
        self._last_location = location

        if self.target is not None:
            self._prev_near_dist = self._curr_near_dist
            self._curr_near_dist = float(np.linalg.norm(self.target
                                                        - location))

        is_first = len(self.nodes)==0
        dist_from_save = 0
        if not is_first:
            dist_from_save = float(np.linalg.norm(location
                                                  - self.nodes[-1].location))
        past_save_step = not dist_from_save<self.save_step
        about_to_stop = not self.keep_going()

        if is_first or past_save_step or about_to_stop:
            self.nodes.append(node)
            self.arc_distances.append(self._arc_since_save)
            self._arc_since_save = 0

    def emplace_back(self, node):
        """Process a node, keeping it if appropriate."""
        self.consider_node(node)

    def info_string(self, title=None):
        """Multi-line description of the path."""
        lines = []
        if title:
            lines.append(title)
        lines.append("start: "+self.start.info_string())
        lines.append("save_step: "+str(self.save_step))
        if self.target is not None:
            lines.append("target: "+_fixed(self.target, 6))
            lines.append("  prev_near_dist: "+_fixed(self._prev_near_dist, 6))
            lines.append("  curr_near_dist: "+_fixed(self._curr_near_dist, 6))
        capacity = self.capacity()
        lines.append("size: "+str(self.size())+"  of(capacity)  "+
                     ("unbounded" if capacity==sys.maxsize else str(capacity)))
        return "\n".join(lines)


class PathView:
    """
    Class for summarizing the shape of a recorded ray path.

    The view does not copy the path, so it reflects any later changes to the
    path's nodes.

    Parameters
    ----------
    path : Path
        Recorded ray path.

    Attributes
    ----------
    path : Path
        Recorded ray path.
    beg_node, end_node
    beg_direction, end_direction, net_direction
    beg_deviation, end_deviation, total_deviation
    path_distance
    beg_deflection, end_deflection

    """
    def __init__(self, path):
        self.path = path

    @property
    def beg_node(self):
        """First node of the path, or ``None`` if there are no nodes."""
        if len(self.path.nodes)==0:
            return None
        return self.path.nodes[0]

    @property
    def end_node(self):
        """Last node of the path, or ``None`` if there are no nodes."""
        if len(self.path.nodes)==0:
            return None
        return self.path.nodes[-1]

    @property
    def beg_direction(self):
        """Incoming direction of the ray at the first node."""
        if self.beg_node is None:
            return None
        return self.beg_node.incoming_tangent

    @property
    def end_direction(self):
        """Outgoing direction of the ray at the last node."""
        if self.end_node is None:
            return None
        return self.end_node.outgoing_tangent

    @property
    def net_direction(self):
        """Direction from the first node to the last node."""
        if len(self.path.nodes)<2:
            return None
        return normalize(self.end_node.location - self.beg_node.location)

    @property
    def beg_deviation(self):
        """Angle (dual vector) from the net direction to the beginning."""
        return angle_from_into(self.net_direction, self.beg_direction)

    @property
    def end_deviation(self):
        """Angle (dual vector) from the net direction to the end."""
        return angle_from_into(self.net_direction, self.end_direction)

    @property
    def total_deviation(self):
        """Angle (dual vector) from the beginning to the end direction."""
        return angle_from_into(self.beg_direction, self.end_direction)

    @property
    def path_distance(self):
        """Distance traveled along the ray between the first and last node."""
        return float(np.sum(self.path.arc_distances))

    @property
    def beg_deflection(self):
        """Distance subtended by the beginning deviation over the path."""
        deviation = self.beg_deviation
        if deviation is None:
            return None
        return float(np.linalg.norm(deviation)) * self.path_distance

    @property
    def end_deflection(self):
        """Distance subtended by the end deviation over the path."""
        deviation = self.end_deviation
        if deviation is None:
            return None
        return float(np.linalg.norm(deviation)) * self.path_distance

    def info_curvature(self):
        """Multi-line summary of the curvature of the path."""
        return "\n".join([
            "  beg_direction: "+_fixed(self.beg_direction, 6),
            "  end_direction: "+_fixed(self.end_direction, 6),
            "  beg_deviation: "+_fixed(self.beg_deviation, 9),
            "  end_deviation: "+_fixed(self.end_deviation, 9),
            "total_deviation: "+_fixed(self.total_deviation, 9),
            "  path_distance: "+_fixed(self.path_distance, 6),
            " beg_deflection: "+_fixed(self.beg_deflection, 3),
            " end_deflection: "+_fixed(self.end_deflection, 3),
        ])

    def info_shape(self):
        """Multi-line summary of the end nodes and curvature of the path."""
        beg_node, end_node = self.beg_node, self.end_node
        return "\n".join([
            "beg_node: "+("None" if beg_node is None
                          else beg_node.info_brief()),
            "end_node: "+("None" if end_node is None
                          else end_node.info_brief()),
            self.info_curvature(),
        ])
