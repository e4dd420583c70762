"""A script for calculating the ground displacement of refracted rays"""

import argparse
import numpy as np

import pyrefract

parser = argparse.ArgumentParser(description=__doc__)
parser.add_argument('--height', type=float, default=10e3,
                    help="height of the sensor above the ground in m "+
                         "(default 10 km)")
args = parser.parse_args()


radius_earth = pyrefract.earth.radius_ground
radius_sensor = radius_earth + args.height

# Compare the refracted ray through the standard atmosphere with a straight
# line from the sensor to the ground
for look_degrees in [0, 10, 20, 30, 40, 50, 60]:
    look = np.radians(look_degrees)
    refraction = pyrefract.PolarRefraction(look, radius_sensor, radius_earth)
    displacement = refraction.displacement_at(radius_earth)
    impact = radius_sensor * np.sin(look)
    straight = radius_earth * (np.arccos(impact/radius_earth)
                               - np.arccos(impact/radius_sensor))
    print("look: {:4.0f} deg  displacement: {:10.3f} m  "
          "(straight line {:10.3f} m)".format(look_degrees, displacement,
                                               straight))
