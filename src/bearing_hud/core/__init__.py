from .utils import (to_radians, to_degrees, clamped_acos, clamped_asin,
                    wrap_deg, wrap_rad, Vec3, dot, cross, normalize, angle_between)
from .bearing import BearingPair, bearing_of, bearing_of_direction
from .orientation import Orientation, rotation_matrix, forward_vector
from .spherical import SphericalAngles, solve
from .hud import HudConfig, HudPoint, project
from .engine import Frame, evaluate
