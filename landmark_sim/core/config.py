"""
Sensor configuration.

Central configuration object for the landmark sensors: visibility,
measurement noise, orientation convention and random seed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .types import NoiseStd, RotationConvention


@dataclass
class ObserverConfig:
    """Landmark sensor configuration.

    Attributes:
        visible_rate: Probability that each landmark is observed. Values
            outside [0, 1] are not clamped; they make every landmark
            visible (>= 1) or none (<= 0).
        noise_std: Measurement noise standard deviations. A scalar or a
            (translation, rotation) pair is accepted and normalized.
        convention: Orientation convention of poses and measurements.
        seed: Seed for the observer's own random generator. None draws
            fresh OS entropy.
    """
    visible_rate: float = 1.0
    noise_std: NoiseStd = field(default_factory=NoiseStd)
    convention: RotationConvention = RotationConvention.EULER_ZYX
    seed: Optional[int] = None

    def __post_init__(self):
        self.noise_std = NoiseStd.from_value(self.noise_std)
        self.visible_rate = float(self.visible_rate)

    @property
    def is_deterministic(self) -> bool:
        """True when every landmark is observed without noise."""
        return self.visible_rate >= 1.0 and self.noise_std.is_zero

    def describe(self) -> str:
        """Human-readable description of the sensor configuration."""
        parts = [f"visible rate {self.visible_rate:g}"]
        if self.noise_std.is_zero:
            parts.append("noise-free")
        else:
            parts.append(f"noise σt={self.noise_std.translation:g} m, "
                         f"σr={self.noise_std.rotation:g} rad")
        parts.append(f"orientation {self.convention.name}")
        if self.seed is not None:
            parts.append(f"seed {self.seed}")
        return " + ".join(parts)
