"""A script for tracing a ray through a thick convex lens"""

import numpy as np

import pyrefract

# The lens is the intersection of two spheres, held within a box
lens = pyrefract.ConvexLens(center1=[-10, 0, 0], radius1=11,
                            center2=[20, 0, 1], radius2=21,
                            index_lens=1.5, index_outside=1.0,
                            active_volume=pyrefract.ActiveBox([-5, -10, -10],
                                                              [5, 10, 10]))

start = pyrefract.Start.from_direction([1, 0.2, 0.3], [-5, 0, 0])
prop = pyrefract.Propagator(lens, step_distance=1/1024)
path = pyrefract.Path(start, save_step=1/16, approx_end=[10, 0, 0])
prop.trace_path(path)

print(path.info_string("Convex lens path"))
print(pyrefract.PathView(path).info_shape())

# Show where the ray changed direction at the lens surfaces
for node in path:
    if node.change in (pyrefract.DirChange.converged,
                       pyrefract.DirChange.diverged,
                       pyrefract.DirChange.reflected):
        print(node.info_brief())
