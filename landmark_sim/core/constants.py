"""
Mathematical constants and array layout conventions.

Pose layout:
    - Columns 0:3: position (x, y, z) [m]
    - Columns 3:6: orientation (r_x, r_y, r_z) [rad]
"""

import numpy as np

# ---------------------------------------------------------------------------
# Mathematical constants
# ---------------------------------------------------------------------------
TWO_PI = 2.0 * np.pi
DEG2RAD = np.pi / 180.0
RAD2DEG = 180.0 / np.pi

# ---------------------------------------------------------------------------
# Pose layout
# ---------------------------------------------------------------------------
POSE_DIM = 6                            # (x, y, z, r_x, r_y, r_z)
POSITION_DIM = 3
ORIENTATION_DIM = 3
POSITION_SLICE = slice(0, 3)
ORIENTATION_SLICE = slice(3, 6)

# Measurement dimensions per sensor
DISPLACEMENT_DIM = 3                    # local (x, y, z)
DISTANCE_DIM = 1                        # range
BEARING_DIM = 2                         # (azimuth, elevation)

# ---------------------------------------------------------------------------
# Numerical tolerances
# ---------------------------------------------------------------------------
SMALL_ANGLE_RAD = 1e-10                 # Below this, rotations are identity
GIMBAL_LOCK_TOL = 1e-9                  # |cos(r_y)| below this is gimbal lock
