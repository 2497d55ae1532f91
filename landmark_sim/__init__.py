"""
Landmark Sensor Simulation
==========================
Simulated measurements of a known landmark map taken from an observer pose,
with per-landmark visibility trials and additive Gaussian noise.

Architecture:
    - Rotation conversions for Z-Y-X Euler angles and rotation vectors
    - Rigid-body pose composition, inversion and world-to-local transforms
    - Relative pose, displacement, distance and bearing sensors
    - Injected random generators for reproducible simulation
"""

from .core.config import ObserverConfig
from .core.types import (
    DimensionMismatch, NoiseStd, Observation, Pose, RotationConvention
)
from .core.frames import (
    compose_pose, invert_pose, relative_pose, world_to_local, local_to_world
)
from .attitude.rotation import rad2rot, rot2rad
from .sensors.observers import (
    PoseObserver, DisplacementObserver, DistanceObserver, BearingObserver,
    observe_pose, observe_displacement, observe_distance, observe_bearing
)

__version__ = "0.1.0"
