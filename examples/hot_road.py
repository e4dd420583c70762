"""A script for tracing a ray over a hot road surface (a mirage)"""

import numpy as np
import matplotlib.pyplot as plt

import pyrefract

# The heated air above the road is modeled as a tube along the x-axis, with
# the index of refraction dropping toward the axis of the tube
hot_radius = 10 # m
road_length = 1000 # m
tube = pyrefract.Cylinder(axis_beg=[0, 0, 0], axis_dir=[1, 0, 0],
                          length=road_length, radius=hot_radius)

# Limit the medium to a box around the tube so that rays leaving the road
# eventually stop
box = pyrefract.ActiveBox(min_corner=[-1, -2*hot_radius, -2*hot_radius],
                          max_corner=[road_length+1, 2*hot_radius,
                                      2*hot_radius])
road = pyrefract.HotRoad(tube, active_volume=box)

# Start a ray off to the side of the road center, angled slightly toward
# the center
start = pyrefract.Start.from_direction([1, 0.01, 0], [0, -0.5*hot_radius, 0])

prop = pyrefract.Propagator(road, step_distance=0.05)
path = pyrefract.Path(start, save_step=1)
prop.trace_path(path)

view = pyrefract.PathView(path)
print(path.info_string("Hot road path"))
print(view.info_curvature())

# Plot the sideways distance of the ray from the center of the road
locations = np.array([node.location for node in path])
plt.plot(locations[:, 0], locations[:, 1])
plt.axhline(0, color='k', ls=':')
plt.xlabel("Distance along road (m)")
plt.ylabel("Distance from road center (m)")
plt.title("Ray path over a hot road")
plt.tight_layout()
plt.show()
