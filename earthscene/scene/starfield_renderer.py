"""
Starfield background renderer for EarthScene
Creates the textured backdrop sphere, viewed from the inside
"""

import logging

import vtk

from ..config import Config
from .geometry import create_uv_sphere

logger = logging.getLogger(__name__)


class StarfieldRenderer:
    """Handles the starfield background sphere"""

    def __init__(self, renderer):
        """Initialize the starfield renderer

        Args:
            renderer: VTK renderer to add starfield to
        """
        self.renderer = renderer
        self.starfield_actor = None

    def create_starfield_background(self, texture):
        """Create the starfield sphere enclosing the scene"""
        logger.info("Creating starfield background...")

        if self.starfield_actor:
            self.renderer.RemoveActor(self.starfield_actor)

        sphere_data = create_uv_sphere(
            Config.STARFIELD_RADIUS,
            Config.STARFIELD_SPHERE_SEGMENTS,
            Config.STARFIELD_SPHERE_SEGMENTS
        )

        starfield_mapper = vtk.vtkPolyDataMapper()
        starfield_mapper.SetInputData(sphere_data)

        self.starfield_actor = vtk.vtkActor()
        self.starfield_actor.SetMapper(starfield_mapper)
        self.starfield_actor.SetTexture(texture)

        # Self-illuminated, unaffected by scene lights
        starfield_property = self.starfield_actor.GetProperty()
        starfield_property.SetRepresentationToSurface()
        starfield_property.SetAmbient(1.0)
        starfield_property.SetDiffuse(0.0)
        starfield_property.SetSpecular(0.0)

        # Render on the inside of the sphere
        starfield_property.BackfaceCullingOff()
        starfield_property.FrontfaceCullingOn()

        self.renderer.AddActor(self.starfield_actor)

        logger.info("Starfield background created (radius: %.0f)", Config.STARFIELD_RADIUS)
        return self.starfield_actor

    def cleanup(self):
        """Remove starfield from renderer"""
        if self.starfield_actor:
            self.renderer.RemoveActor(self.starfield_actor)
            self.starfield_actor = None
