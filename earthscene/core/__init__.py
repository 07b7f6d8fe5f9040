# core/__init__.py
"""
Core scene state and per-frame logic for EarthScene
"""

from .scene_state import CelestialBody, DebrisPiece, AppearanceSelection, scatter_debris
from .camera import CameraState, OrbitController
from .context import SceneContext, SceneNotReadyError
from .frame_loop import FrameLoop, is_asteroid_visible
from .appearance import AppearanceController

__all__ = [
    'CelestialBody',
    'DebrisPiece',
    'AppearanceSelection',
    'scatter_debris',
    'CameraState',
    'OrbitController',
    'SceneContext',
    'SceneNotReadyError',
    'FrameLoop',
    'is_asteroid_visible',
    'AppearanceController',
]
