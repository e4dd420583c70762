"""A script for tracing a ray through an exponential atmosphere"""

import numpy as np

import pyrefract

# Let the exponential model extend everywhere so that rays near the ground
# can look back below it when starting
atmosphere = pyrefract.ExponentialAtmosphere(pyrefract.earth,
                                             active_volume=pyrefract.all_space)
radii, indices = atmosphere.sample_indices(11)
for radius, index in zip(radii, indices):
    print("height {:8.0f} m  index {:.9f}".format(
        radius-pyrefract.earth.radius_ground, index
    ))
print()

# Launch a ray at 45 degrees from the ground and trace it across the
# thickness of the atmosphere with progressively smaller step sizes
start = pyrefract.Start.from_direction(
    [1, 0, 1], [0, 0, pyrefract.earth.radius_ground]
)
nominal_length = pyrefract.earth.thickness
for step in [1e5, 1e4, 1e3, 1e2, 1e1]:
    prop = pyrefract.Propagator(atmosphere, step_distance=step)
    nodes = prop.node_path(start, nominal_length)
    end_node = nodes[-1]
    bending = np.arccos(np.clip(np.dot(start.tangent,
                                       end_node.outgoing_tangent), -1, 1))
    print("step: {:9.1f}  nodes: {:7d}  bending (rad): {:.6e}".format(
        step, len(nodes), bending
    ))
    print(end_node.info_brief())
