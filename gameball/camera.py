"""A third-person camera that eases toward its target state."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from typing import Callable, Optional

import numpy as np

CameraSink = Callable[[np.ndarray, np.ndarray], None]

_NEAR = 0.1
_FAR = 100.0


@dataclass
class _CameraState:
    center: np.ndarray = field(default_factory=lambda: np.zeros(3))
    pitch: float = 0.0
    yaw: float = 0.0
    distance: float = 10.0
    fov_y: float = 30.0


def _wrap_degrees(angle: float) -> float:
    return (angle + 180.0) % 360.0 - 180.0


def _perspective(fov_y: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Right-handed projection with depth mapped to [0, 1]."""
    tan_half = math.tan(fov_y / 2.0)
    projection = np.zeros((4, 4))
    projection[0, 0] = 1.0 / (aspect * tan_half)
    projection[1, 1] = 1.0 / tan_half
    projection[2, 2] = far / (near - far)
    projection[3, 2] = -1.0
    projection[2, 3] = -(far * near) / (far - near)
    return projection


class CameraControllerThirdPerson:
    """Orbits a center point, blending from a stored state to a target state.

    ``camera`` is called with the view and projection matrices on every update.
    """

    def __init__(self, camera: Optional[CameraSink] = None, aspect: float = 1.0) -> None:
        self.camera = camera
        self.aspect = aspect
        self.interpolation_factor = 0.0
        self._src = _CameraState()
        self._dst = _CameraState()
        self.view_matrix = np.eye(4)
        self.projection_matrix = np.eye(4)

    def set_center(self, center) -> None:
        self._dst.center = np.array(center, dtype=float)

    def set_pitch_yaw(self, pitch: float, yaw: float) -> None:
        self._dst.pitch = pitch
        self._dst.yaw = yaw

    def set_distance(self, distance: float) -> None:
        self._dst.distance = distance

    def set_fov_y(self, fov_y: float) -> None:
        self._dst.fov_y = fov_y

    def _blend(self, source: float, target: float) -> float:
        return source + (target - source) * self.interpolation_factor

    def get_pitch_yaw(self) -> tuple[float, float]:
        """Current pitch and yaw in degrees, turning the short way round."""
        diff_pitch = _wrap_degrees(self._dst.pitch - self._src.pitch)
        diff_yaw = _wrap_degrees(self._dst.yaw - self._src.yaw)
        return (
            self._src.pitch + diff_pitch * self.interpolation_factor,
            self._src.yaw + diff_yaw * self.interpolation_factor,
        )

    def get_center(self) -> np.ndarray:
        return self._src.center + (self._dst.center - self._src.center) * (
            self.interpolation_factor
        )

    def get_distance(self) -> float:
        return self._blend(self._src.distance, self._dst.distance)

    def get_fov_y(self) -> float:
        return self._blend(self._src.fov_y, self._dst.fov_y)

    def store_current_state(self) -> None:
        """Make the current blended state the new starting point."""
        pitch, yaw = self.get_pitch_yaw()
        self._src = _CameraState(
            center=self.get_center(),
            pitch=pitch,
            yaw=yaw,
            distance=self.get_distance(),
            fov_y=self.get_fov_y(),
        )

    @property
    def target_state(self) -> _CameraState:
        return dataclasses.replace(self._dst, center=self._dst.center.copy())

    def update(self, delta_time: float) -> None:
        """Advance the blend and recompute the view and projection matrices."""
        self.interpolation_factor = min(
            max(self.interpolation_factor + delta_time * 2.0, 0.0), 1.0
        )
        pitch, yaw = self.get_pitch_yaw()
        center = self.get_center()
        distance = self.get_distance()
        fov_y = self.get_fov_y()

        pitch_rad = math.radians(pitch)
        yaw_rad = math.radians(yaw)
        back = np.array(
            [
                math.cos(pitch_rad) * -math.sin(yaw_rad),
                math.sin(pitch_rad),
                math.cos(pitch_rad) * math.cos(yaw_rad),
            ]
        )
        right = np.array([math.cos(yaw_rad), 0.0, math.sin(yaw_rad)])
        up = np.cross(back, right)
        eye = center + back * distance

        rotation = np.array([right, up, back])
        view = np.eye(4)
        view[:3, :3] = rotation
        view[:3, 3] = -(rotation @ eye)

        self.view_matrix = view
        self.projection_matrix = _perspective(
            math.radians(fov_y), self.aspect, _NEAR, _FAR
        )
        if self.camera is not None:
            self.camera(self.view_matrix, self.projection_matrix)

    def cursor_move(self, x: float, y: float) -> None:
        """Turn the target view by a cursor offset; pitch stays within 89 degrees."""
        self._dst.yaw += x * 0.1
        self._dst.pitch = min(max(self._dst.pitch + y * 0.1, -89.0), 89.0)