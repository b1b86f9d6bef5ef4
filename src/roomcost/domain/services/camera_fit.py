"""Camera framing state machine.

The controller keeps the camera at a sensible distance as the room scale
changes. It only intervenes when the camera is grossly too close or too far
for the current room; ordinary orbiting inside the tolerance band is left
alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..value_objects import CameraState, Vector3

logger = logging.getLogger(__name__)

__all__ = ["CameraFitController", "CameraSettings"]

REFERENCE_FPS = 60.0


@dataclass(frozen=True)
class CameraSettings:
    """Tuning constants for camera framing.

    Attributes:
        fit_multiplier: Fit distance as a multiple of the largest dimension.
        near_ratio: Retarget when closer than this fraction of fit distance.
        far_ratio: Retarget when farther than this multiple of fit distance.
        min_elevation_ratio: Lowest target height as a fraction of fit
            distance, keeping the camera above the floor.
        lerp_factor: Fraction of the remaining distance covered per tick.
        snap_threshold: Distance to the target at which retargeting ends.
        initial_position: Camera position at session start.
        default_direction: Viewing direction used when the camera sits at
            the origin and has no direction of its own.
    """

    fit_multiplier: float = 1.5
    near_ratio: float = 0.4
    far_ratio: float = 2.5
    min_elevation_ratio: float = 0.3
    lerp_factor: float = 0.05
    snap_threshold: float = 0.1
    initial_position: Vector3 = Vector3(10.0, 10.0, 10.0)
    default_direction: Vector3 = Vector3(1.0, 1.0, 1.0)

    def __post_init__(self) -> None:
        if self.fit_multiplier <= 0:
            raise ValueError("fit_multiplier must be positive")
        if not 0 <= self.near_ratio < 1 < self.far_ratio:
            raise ValueError("near_ratio must be in [0, 1) and far_ratio above 1")
        if self.min_elevation_ratio < 0:
            raise ValueError("min_elevation_ratio cannot be negative")
        if not 0 < self.lerp_factor <= 1:
            raise ValueError("lerp_factor must be in (0, 1]")
        if self.snap_threshold <= 0:
            raise ValueError("snap_threshold must be positive")
        if self.default_direction.length == 0:
            raise ValueError("default_direction cannot be the zero vector")


class CameraFitController:
    """Decides when to move the camera and eases it toward the fit position.

    ``evaluate`` runs when the room changes. ``tick`` runs once per animation
    frame and only moves the camera while a target is pending.
    """

    def __init__(self, settings: CameraSettings | None = None) -> None:
        self.settings = settings or CameraSettings()
        self.state = CameraState.STABLE
        self.target: Vector3 | None = None

    @property
    def is_retargeting(self) -> bool:
        return self.state is CameraState.RETARGETING

    def fit_distance(self, max_dim: float) -> float:
        return max_dim * self.settings.fit_multiplier

    def evaluate(self, max_dim: float, camera_position: Vector3) -> CameraState:
        """Start retargeting if the camera is outside the tolerance band.

        A new decision replaces any target still pending from an earlier one.
        """
        s = self.settings
        fit = self.fit_distance(max_dim)
        if fit <= 0:
            # Nothing to frame in a degenerate room.
            self._settle()
            return self.state

        current = camera_position.length
        if current < s.near_ratio * fit or current > s.far_ratio * fit:
            direction = camera_position.normalized(fallback=s.default_direction)
            target = direction.scaled(fit)
            target = target.with_y(max(target.y, s.min_elevation_ratio * fit))
            logger.debug(
                f"Camera at {current:.2f} outside [{s.near_ratio * fit:.2f}, "
                f"{s.far_ratio * fit:.2f}], retargeting to {target}"
            )
            self.target = target
            self.state = CameraState.RETARGETING
        else:
            self._settle()
        return self.state

    def tick(self, camera_position: Vector3, dt: float | None = None) -> Vector3:
        """Advance the camera one animation step toward the pending target.

        Args:
            camera_position: Current camera position.
            dt: Frame time in seconds. Without it each call is one fixed
                step; with it the step is scaled so motion speed does not
                depend on frame rate (equal to one fixed step at 60 fps).

        Returns:
            The new camera position, unchanged when stable.
        """
        if self.target is None:
            self.state = CameraState.STABLE
            return camera_position

        alpha = self.settings.lerp_factor
        if dt is not None:
            alpha = 1.0 - (1.0 - alpha) ** (max(dt, 0.0) * REFERENCE_FPS)

        position = camera_position.lerp(self.target, alpha)
        if position.distance_to(self.target) < self.settings.snap_threshold:
            logger.debug("Camera reached fit target")
            self._settle()
        return position

    def _settle(self) -> None:
        self.target = None
        self.state = CameraState.STABLE
