# scene/scene_graph.py
"""
Scene graph for EarthScene
Builds lights and every renderer, and exposes handles to the mutable bodies
"""

import logging
from typing import Any, Dict, List, Optional

import numpy as np
import vtk

from ..config import Config
from ..core.scene_state import CelestialBody, DebrisPiece, scatter_debris
from .asteroid_renderer import AsteroidRenderer
from .earth_renderer import EarthRenderer
from .starfield_renderer import StarfieldRenderer
from .texture_library import TextureLibrary

logger = logging.getLogger(__name__)


class SceneGraph:
    """Owns the scene's renderers and the body handles built from them"""

    def __init__(self, renderer: vtk.vtkRenderer, textures: TextureLibrary,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize the scene graph.

        Args:
            renderer: VTK renderer to build the scene in
            textures: Texture library providing every texture handle
            rng: Random generator for debris placement
        """
        self.renderer = renderer
        self.textures = textures
        self.rng = rng

        self.earth_renderer = EarthRenderer(renderer)
        self.starfield_renderer = StarfieldRenderer(renderer)
        self.asteroid_renderer = AsteroidRenderer(renderer)

        self.light: Optional[vtk.vtkLight] = None

        self.earth: Optional[CelestialBody] = None
        self.clouds: Optional[CelestialBody] = None
        self.stars: Optional[CelestialBody] = None
        self.asteroid: Optional[CelestialBody] = None
        self.debris: List[DebrisPiece] = []

    def build(self) -> None:
        """Create every scene object with the startup appearance."""
        logger.info("Building scene graph...")

        self._setup_lights()

        earth_variant = Config.EARTH_TEXTURE_VARIANTS[0]
        asteroid_variant = Config.ASTEROID_TEXTURE_VARIANTS[0]

        stars_actor = self.starfield_renderer.create_starfield_background(
            self.textures.texture("galaxy"))
        self.stars = CelestialBody("Starfield", actor=stars_actor, appearance="galaxy")

        earth_actor = self.earth_renderer.create_earth(
            self.textures.texture(earth_variant),
            self.textures.texture("earthbump")
        )
        self.earth = CelestialBody("Earth", actor=earth_actor, appearance=earth_variant)

        clouds_actor = self.earth_renderer.create_clouds(self.textures.texture("earthcloud"))
        self.clouds = CelestialBody("Clouds", actor=clouds_actor, appearance="earthcloud")

        self.debris = scatter_debris(rng=self.rng)
        assembly = self.asteroid_renderer.create_asteroid(
            self.textures.texture(asteroid_variant),
            self.debris,
            self.textures.texture("rock")
        )
        self.asteroid = CelestialBody(
            "Asteroid",
            actor=assembly,
            material_actor=self.asteroid_renderer.body_actor,
            visible=False,
            appearance=asteroid_variant
        )

        logger.info("Scene graph built")

    def variant_textures(self) -> Dict[str, Any]:
        """Texture handles for every selectable appearance variant."""
        variants = Config.EARTH_TEXTURE_VARIANTS + Config.ASTEROID_TEXTURE_VARIANTS
        return {key: self.textures.texture(key) for key in variants}

    def cleanup(self) -> None:
        """Remove everything from the renderer."""
        self.earth_renderer.cleanup()
        self.starfield_renderer.cleanup()
        self.asteroid_renderer.cleanup()
        if self.light:
            self.renderer.RemoveLight(self.light)
            self.light = None

    def get_info(self) -> Dict[str, Any]:
        """
        Get information about the current scene.

        Returns:
            Dictionary with scene information
        """
        info = {
            'built': self.earth is not None,
            'debris_count': len(self.debris),
            'asteroid_visible': self.asteroid.visible if self.asteroid else False,
            'textures': self.textures.get_info(),
        }
        info.update(self.earth_renderer.get_info())
        return info

    def _setup_lights(self) -> None:
        """Ambient fill plus one white light from the upper right."""
        self.renderer.AutomaticLightCreationOff()
        self.renderer.RemoveAllLights()
        self.renderer.SetAmbient(*Config.LIGHT_COLOR)

        self.light = vtk.vtkLight()
        self.light.SetLightTypeToSceneLight()
        self.light.SetColor(*Config.LIGHT_COLOR)
        self.light.SetIntensity(Config.POINT_LIGHT_INTENSITY)
        self.light.SetPosition(*Config.POINT_LIGHT_POSITION)
        self.light.SetFocalPoint(0.0, 0.0, 0.0)
        self.renderer.AddLight(self.light)
