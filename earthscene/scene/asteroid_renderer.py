# scene/asteroid_renderer.py
"""
Asteroid renderer for EarthScene
Builds the asteroid body and the debris cloud that travels with it
"""

import logging
from typing import List, Optional

import vtk

from ..config import Config
from ..core.scene_state import DebrisPiece
from .geometry import create_cube, create_dodecahedron

logger = logging.getLogger(__name__)


class AsteroidRenderer:
    """Handles the asteroid assembly: body actor plus a debris group"""

    def __init__(self, renderer: vtk.vtkRenderer):
        """
        Initialize asteroid renderer.

        Args:
            renderer: VTK renderer to add the asteroid to
        """
        self.renderer = renderer

        self.assembly: Optional[vtk.vtkAssembly] = None
        self.body_actor: Optional[vtk.vtkActor] = None
        self.debris_group: Optional[vtk.vtkAssembly] = None
        self.debris_actors: List[vtk.vtkActor] = []

    def create_asteroid(self, texture: vtk.vtkTexture, debris: List[DebrisPiece],
                        debris_texture: vtk.vtkTexture) -> vtk.vtkAssembly:
        """
        Create the asteroid with its debris attached.

        Args:
            texture: Initial asteroid surface texture
            debris: Debris offsets relative to the asteroid centre
            debris_texture: Texture shared by all debris cubes

        Returns:
            Assembly holding the body and the debris group, hidden initially
        """
        logger.info("Creating asteroid with %d debris pieces...", len(debris))

        self.cleanup()

        body_mapper = vtk.vtkPolyDataMapper()
        body_mapper.SetInputData(create_dodecahedron(Config.ASTEROID_RADIUS))

        self.body_actor = vtk.vtkActor()
        self.body_actor.SetMapper(body_mapper)
        self.body_actor.SetTexture(texture)

        # Extra ambient stands in for the grey emissive glow
        body_property = self.body_actor.GetProperty()
        body_property.SetColor(*Config.ASTEROID_COLOR)
        body_property.SetInterpolationToFlat()
        body_property.SetAmbient(Config.AMBIENT_LIGHT_INTENSITY + Config.ASTEROID_EMISSIVE_BOOST)
        body_property.SetDiffuse(1.0)
        body_property.SetSpecular(Config.ASTEROID_SPECULAR)

        self.debris_group = self._create_debris_group(debris, debris_texture)

        self.assembly = vtk.vtkAssembly()
        self.assembly.AddPart(self.body_actor)
        self.assembly.AddPart(self.debris_group)
        self.assembly.SetPosition(*Config.ASTEROID_POSITION)
        self.assembly.SetVisibility(False)

        self.renderer.AddActor(self.assembly)
        return self.assembly

    def cleanup(self) -> None:
        """Remove the asteroid from the renderer."""
        if self.assembly:
            self.renderer.RemoveActor(self.assembly)
        self.assembly = None
        self.body_actor = None
        self.debris_group = None
        self.debris_actors = []

    def _create_debris_group(self, debris: List[DebrisPiece],
                             texture: vtk.vtkTexture) -> vtk.vtkAssembly:
        """All cubes share one mapper and one property."""
        cube_mapper = vtk.vtkPolyDataMapper()
        cube_mapper.SetInputData(create_cube(Config.DEBRIS_SIZE))

        debris_property = vtk.vtkProperty()
        debris_property.SetColor(*Config.DEBRIS_COLOR)
        debris_property.SetAmbient(Config.AMBIENT_LIGHT_INTENSITY)
        debris_property.SetDiffuse(1.0)

        group = vtk.vtkAssembly()
        for piece in debris:
            actor = vtk.vtkActor()
            actor.SetMapper(cube_mapper)
            actor.SetProperty(debris_property)
            actor.SetTexture(texture)
            actor.SetPosition(*piece.position)
            group.AddPart(actor)
            self.debris_actors.append(actor)

        return group
