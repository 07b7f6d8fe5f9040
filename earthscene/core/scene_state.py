"""
Scene State Structures for EarthScene
Defines the mutable bodies, debris pieces and the appearance selection record
"""

import math
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

import numpy as np

from ..config import Config


@dataclass
class CelestialBody:
    """
    Handle to one mutable object in the scene (Earth, clouds, stars, asteroid).

    Attributes:
        name: Display name used in logs
        actor: VTK prop receiving orientation and visibility (optional)
        material_actor: VTK actor receiving texture and representation,
            defaults to ``actor``
        rotation_y: Orientation about the vertical axis in radians,
            accumulated frame over frame without wraparound
        visible: Whether the body is drawn
        appearance: Key of the active texture variant
        wireframe: Whether the material is drawn as wireframe
        material_revision: Bumped every time the material is marked dirty
    """

    name: str
    actor: Any = None
    material_actor: Any = None
    rotation_y: float = 0.0
    visible: bool = True
    appearance: Optional[str] = None
    wireframe: bool = False
    material_revision: int = field(default=0, init=False)

    def __post_init__(self):
        """Push initial state to the actors."""
        if self.material_actor is None:
            self.material_actor = self.actor
        if self.actor is not None:
            self.actor.SetVisibility(self.visible)
            self._sync_orientation()

    def rotate_y(self, delta: float) -> None:
        """Advance orientation about the vertical axis by ``delta`` radians."""
        self.rotation_y += delta
        self._sync_orientation()

    def set_visible(self, visible: bool) -> None:
        self.visible = bool(visible)
        if self.actor is not None:
            self.actor.SetVisibility(self.visible)

    def bind_texture(self, variant: str, texture: Any) -> None:
        """
        Bind a texture resource to this body's material.

        Args:
            variant: Variant key the texture belongs to
            texture: Texture handle (vtkTexture in the running app)
        """
        self.appearance = variant
        if self.material_actor is not None:
            self.material_actor.SetTexture(texture)
        self.mark_material_dirty()

    def set_wireframe(self, enabled: bool) -> None:
        self.wireframe = bool(enabled)
        if self.material_actor is not None:
            prop = self.material_actor.GetProperty()
            if self.wireframe:
                prop.SetRepresentationToWireframe()
            else:
                prop.SetRepresentationToSurface()
        self.mark_material_dirty()

    def mark_material_dirty(self) -> None:
        """Flag the material so the renderer rebuilds its cached state."""
        self.material_revision += 1
        if self.material_actor is not None:
            self.material_actor.GetProperty().Modified()
            self.material_actor.Modified()

    def _sync_orientation(self) -> None:
        if self.actor is not None:
            self.actor.SetOrientation(0.0, math.degrees(self.rotation_y), 0.0)


@dataclass(frozen=True)
class DebrisPiece:
    """
    A debris cube fixed relative to the asteroid's local origin.

    Attributes:
        position: (x, y, z) offset from the asteroid centre
    """

    position: Tuple[float, float, float]


def scatter_debris(count: int = Config.DEBRIS_COUNT,
                   spread: float = Config.DEBRIS_SPREAD,
                   rng: Optional[np.random.Generator] = None) -> List[DebrisPiece]:
    """
    Sample debris positions uniformly inside a cube centred on the origin.

    Args:
        count: Number of pieces
        spread: Edge length of the cube
        rng: Random generator (a fresh one is created when omitted)

    Returns:
        List of debris pieces
    """
    if count < 0:
        raise ValueError(f"Debris count must be non-negative, got {count}")
    if rng is None:
        rng = np.random.default_rng(Config.DEBRIS_SEED)

    offsets = (rng.random((count, 3)) - 0.5) * spread
    return [DebrisPiece(position=tuple(float(v) for v in row)) for row in offsets]


@dataclass
class AppearanceSelection:
    """
    Current settings panel selection, shared by the panel and the handlers.

    Attributes:
        earth_variant: Active Earth texture key
        asteroid_variant: Active asteroid texture key
        wireframe: Whether Earth is drawn as wireframe
    """

    earth_variant: str = Config.EARTH_TEXTURE_VARIANTS[0]
    asteroid_variant: str = Config.ASTEROID_TEXTURE_VARIANTS[0]
    wireframe: bool = False
