"""
Camera state and damped orbit controller for EarthScene
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ..config import Config

Vec3 = Tuple[float, float, float]

# Keeps the polar angle off the exact poles
_POLAR_EPS = 1e-6
# Deltas smaller than this are treated as settled
_SETTLE_EPS = 1e-10


@dataclass
class CameraState:
    """
    Perspective camera state shared by the controller and the render surface.

    Attributes:
        position: Camera position in scene units
        target: Point the camera orbits and looks at
        up: View-up vector
        fov: Vertical field of view in degrees
        near, far: Clipping planes
        aspect: Viewport width / height
    """

    position: Vec3 = Config.CAMERA_DEFAULT_POSITION
    target: Vec3 = Config.CAMERA_DEFAULT_TARGET
    up: Vec3 = Config.CAMERA_DEFAULT_VIEW_UP
    fov: float = Config.CAMERA_FOV
    near: float = Config.CAMERA_NEAR
    far: float = Config.CAMERA_FAR
    aspect: float = 1.0

    @property
    def axis_distance(self) -> float:
        """Distance along the Z axis, the input of the asteroid visibility rule."""
        return float(self.position[2])

    @property
    def distance_from_origin(self) -> float:
        x, y, z = self.position
        return math.sqrt(x * x + y * y + z * z)

    def set_aspect(self, width: int, height: int) -> None:
        """Update aspect ratio from viewport size; zero-height viewports are ignored."""
        if height <= 0:
            return
        self.aspect = width / height


class OrbitController:
    """
    Damped orbit controls around ``camera.target``.

    Pointer input accumulates rotation and zoom requests; ``update()`` applies
    a damped fraction of them once per frame. Panning is not supported.
    """

    def __init__(self, camera: CameraState,
                 damping_factor: float = Config.CONTROLS_DAMPING_FACTOR,
                 rotate_speed: float = Config.CONTROLS_ROTATE_SPEED,
                 zoom_speed: float = Config.CONTROLS_ZOOM_SPEED,
                 min_distance: float = Config.CONTROLS_MIN_DISTANCE,
                 max_distance: float = Config.CONTROLS_MAX_DISTANCE,
                 min_polar_angle: float = Config.CONTROLS_MIN_POLAR_ANGLE,
                 max_polar_angle: float = Config.CONTROLS_MAX_POLAR_ANGLE):
        if not 0.0 < damping_factor <= 1.0:
            raise ValueError(f"Damping factor must be in (0, 1], got {damping_factor}")

        self.camera = camera
        self.damping_factor = damping_factor
        self.rotate_speed = rotate_speed
        self.zoom_speed = zoom_speed
        self.min_distance = min_distance
        self.max_distance = max_distance
        self.min_polar_angle = min_polar_angle
        self.max_polar_angle = max_polar_angle
        self.enabled = True

        # Pending input
        self._delta_theta = 0.0
        self._delta_phi = 0.0
        self._scale = 1.0

    # ============================================
    # Input
    # ============================================

    def rotate_left(self, angle: float) -> None:
        self._delta_theta -= angle

    def rotate_up(self, angle: float) -> None:
        self._delta_phi -= angle

    def dolly_in(self, scale: Optional[float] = None) -> None:
        """Move the camera towards the target."""
        self._scale *= scale if scale is not None else self.zoom_scale

    def dolly_out(self, scale: Optional[float] = None) -> None:
        """Move the camera away from the target."""
        self._scale /= scale if scale is not None else self.zoom_scale

    @property
    def zoom_scale(self) -> float:
        return 0.95 ** self.zoom_speed

    def handle_drag(self, dx: float, dy: float, viewport_height: float) -> None:
        """
        Convert a pointer drag to orbit rotation.

        Args:
            dx: Horizontal movement in pixels (right is positive)
            dy: Vertical movement in pixels (down is positive)
            viewport_height: Height of the viewport in pixels
        """
        if not self.enabled or viewport_height <= 0:
            return
        self.rotate_left(2 * math.pi * dx / viewport_height * self.rotate_speed)
        self.rotate_up(2 * math.pi * dy / viewport_height * self.rotate_speed)

    def handle_wheel(self, steps: float) -> None:
        """Positive steps zoom in, negative steps zoom out."""
        if not self.enabled or steps == 0:
            return
        for _ in range(int(abs(steps)) or 1):
            if steps > 0:
                self.dolly_in()
            else:
                self.dolly_out()

    # ============================================
    # Per-frame update
    # ============================================

    def update(self) -> bool:
        """
        Apply pending input to the camera.

        Returns:
            True if the camera moved
        """
        if self._is_settled():
            self._delta_theta = 0.0
            self._delta_phi = 0.0
            self._scale = 1.0
            return False

        target = np.asarray(self.camera.target, dtype=float)
        offset = np.asarray(self.camera.position, dtype=float) - target

        radius = float(np.linalg.norm(offset))
        if radius == 0.0:
            theta = 0.0
            phi = 0.0
        else:
            theta = math.atan2(offset[0], offset[2])
            phi = math.acos(np.clip(offset[1] / radius, -1.0, 1.0))

        theta += self._delta_theta * self.damping_factor
        phi += self._delta_phi * self.damping_factor

        phi = min(max(phi, self.min_polar_angle), self.max_polar_angle)
        phi = min(max(phi, _POLAR_EPS), math.pi - _POLAR_EPS)

        radius = min(max(radius * self._scale, self.min_distance), self.max_distance)

        sin_phi = math.sin(phi)
        new_offset = np.array([
            radius * sin_phi * math.sin(theta),
            radius * math.cos(phi),
            radius * sin_phi * math.cos(theta),
        ])
        new_position = target + new_offset
        moved = float(np.linalg.norm(new_position - np.asarray(self.camera.position)))
        self.camera.position = tuple(float(v) for v in new_position)

        self._delta_theta *= 1.0 - self.damping_factor
        self._delta_phi *= 1.0 - self.damping_factor
        self._scale = 1.0

        return moved > _SETTLE_EPS

    def reset(self) -> None:
        """Drop pending input and restore the default camera placement."""
        self._delta_theta = 0.0
        self._delta_phi = 0.0
        self._scale = 1.0
        self.camera.position = Config.CAMERA_DEFAULT_POSITION
        self.camera.target = Config.CAMERA_DEFAULT_TARGET
        self.camera.up = Config.CAMERA_DEFAULT_VIEW_UP

    def _is_settled(self) -> bool:
        return (abs(self._delta_theta) < _SETTLE_EPS
                and abs(self._delta_phi) < _SETTLE_EPS
                and self._scale == 1.0)
