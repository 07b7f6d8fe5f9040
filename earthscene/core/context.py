"""
Scene context: the single owner of every handle the frame loop and the
settings handlers operate on.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from .camera import CameraState
from .scene_state import AppearanceSelection, CelestialBody


class SceneNotReadyError(RuntimeError):
    """Raised when the frame loop is started against an incomplete scene."""


@dataclass
class SceneContext:
    """
    Handles shared by the frame loop and the appearance handlers.

    Attributes:
        earth, clouds, stars, asteroid: Mutable bodies
        camera: Live camera state
        controls: Controller exposing ``update()``
        surface: Presentation surface exposing ``render(scene, camera)``
        scene: Scene graph passed through to the surface
        textures: Variant key -> texture handle
        selection: Current settings panel selection
    """

    earth: CelestialBody = None
    clouds: CelestialBody = None
    stars: CelestialBody = None
    asteroid: CelestialBody = None
    camera: CameraState = None
    controls: Any = None
    surface: Any = None
    scene: Any = None
    textures: Dict[str, Any] = field(default_factory=dict)
    selection: AppearanceSelection = field(default_factory=AppearanceSelection)

    REQUIRED = ("earth", "clouds", "stars", "asteroid", "camera", "controls", "surface")

    def missing(self) -> List[str]:
        """Names of required handles that are not set."""
        return [name for name in self.REQUIRED if getattr(self, name) is None]

    def require_ready(self) -> None:
        missing = self.missing()
        if missing:
            raise SceneNotReadyError(f"Scene is not initialized, missing: {', '.join(missing)}")
