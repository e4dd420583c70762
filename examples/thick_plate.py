"""A script for tracing a bundle of rays through a thick glass plate"""

import argparse
import logging
import numpy as np

import pyrefract

parser = argparse.ArgumentParser(description=__doc__)
parser.add_argument('output', nargs='?', default="thick_plate.h5",
                    help="hdf5 file in which to store the traced paths")
parser.add_argument('--step', type=float, default=1/1024,
                    help="propagation step size (default 1/1024)")
args = parser.parse_args()

logging.basicConfig(level=logging.INFO)


# The plate fills the space between x=4 and x=6 with an index of refraction
# of 1.5, surrounded by air approximated with an index of 1.0
plate = pyrefract.Slab(normal=[1, 0, 0], beg_dot=4, end_dot=6,
                       index_before=1.0, index_inside=1.5, index_after=1.0)
prop = pyrefract.Propagator(plate, step_distance=args.step)

# Every ray leaves the station and is traced until it has passed as close as
# it will get to the target point
station = np.array([0., 0, 0])
target = np.array([10., 10, 10])
save_step = 1/128

# Fan out the bundle of rays over a grid of directions
starts = [pyrefract.Start.from_direction([0.5, y, z], station)
          for y in [0, 0.25, 0.5, 0.75, 1]
          for z in [0, 0.25, 0.5, 0.75, 1]]

with pyrefract.File(args.output, 'w') as f:
    for start in starts:
        path = pyrefract.Path(start, save_step, target=target)
        prop.trace_path(path)
        name = f.add_path(path)
        view = pyrefract.PathView(path)
        # Rays leave the plate parallel to their starting direction, but
        # displaced sideways
        print(name, "nodes:", len(path),
              " total deviation (rad):",
              np.linalg.norm(view.total_deviation),
              " end node:", view.end_node.info_brief())
