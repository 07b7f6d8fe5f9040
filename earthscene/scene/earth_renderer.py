# scene/earth_renderer.py
"""
Earth Visualization Component for EarthScene
Handles the textured Earth sphere and the translucent cloud layer around it
"""

import logging
from typing import Any, Dict, Optional

import vtk

from ..config import Config
from .geometry import add_tangents, create_uv_sphere

logger = logging.getLogger(__name__)


class EarthRenderer:
    """Handles the Earth sphere and its cloud layer"""

    def __init__(self, renderer: vtk.vtkRenderer):
        """
        Initialize Earth renderer.

        Args:
            renderer: VTK renderer to add Earth components to
        """
        self.renderer = renderer

        self.earth_actor: Optional[vtk.vtkActor] = None
        self.clouds_actor: Optional[vtk.vtkActor] = None

    def create_earth(self, texture: vtk.vtkTexture,
                     normal_texture: Optional[vtk.vtkTexture] = None) -> vtk.vtkActor:
        """
        Create the Earth sphere.

        Args:
            texture: Initial surface texture
            normal_texture: Tangent-space normal map giving the surface relief

        Returns:
            The Earth actor
        """
        logger.info("Creating Earth...")

        if self.earth_actor:
            self.renderer.RemoveActor(self.earth_actor)

        sphere_data = create_uv_sphere(
            Config.EARTH_RADIUS,
            Config.EARTH_SPHERE_SEGMENTS,
            Config.EARTH_SPHERE_SEGMENTS
        )
        if normal_texture is not None:
            sphere_data = add_tangents(sphere_data)

        earth_mapper = vtk.vtkPolyDataMapper()
        earth_mapper.SetInputData(sphere_data)

        self.earth_actor = vtk.vtkActor()
        self.earth_actor.SetMapper(earth_mapper)
        self.earth_actor.SetTexture(texture)

        # Phong material
        earth_property = self.earth_actor.GetProperty()
        earth_property.SetRepresentationToSurface()
        earth_property.SetInterpolationToPhong()
        earth_property.SetAmbient(Config.AMBIENT_LIGHT_INTENSITY)
        earth_property.SetDiffuse(1.0)
        earth_property.SetSpecular(Config.EARTH_SPECULAR)
        earth_property.SetSpecularPower(Config.EARTH_SHININESS)
        if normal_texture is not None:
            earth_property.SetNormalTexture(normal_texture)

        self.renderer.AddActor(self.earth_actor)
        return self.earth_actor

    def create_clouds(self, texture: vtk.vtkTexture) -> vtk.vtkActor:
        """
        Create the cloud layer just above the Earth's surface.

        Args:
            texture: RGBA cloud texture

        Returns:
            The clouds actor
        """
        logger.info("Creating cloud layer...")

        if self.clouds_actor:
            self.renderer.RemoveActor(self.clouds_actor)

        sphere_data = create_uv_sphere(
            Config.CLOUDS_RADIUS,
            Config.CLOUDS_SPHERE_SEGMENTS,
            Config.CLOUDS_SPHERE_SEGMENTS
        )

        clouds_mapper = vtk.vtkPolyDataMapper()
        clouds_mapper.SetInputData(sphere_data)

        self.clouds_actor = vtk.vtkActor()
        self.clouds_actor.SetMapper(clouds_mapper)
        self.clouds_actor.SetTexture(texture)
        # Alpha comes from the texture
        self.clouds_actor.ForceTranslucentOn()

        clouds_property = self.clouds_actor.GetProperty()
        clouds_property.SetInterpolationToPhong()
        clouds_property.SetOpacity(Config.CLOUDS_OPACITY)
        clouds_property.SetAmbient(Config.AMBIENT_LIGHT_INTENSITY)
        clouds_property.SetDiffuse(1.0)
        clouds_property.SetSpecular(0.0)

        self.renderer.AddActor(self.clouds_actor)
        return self.clouds_actor

    def cleanup(self) -> None:
        """Remove Earth and clouds from the renderer."""
        if self.earth_actor:
            self.renderer.RemoveActor(self.earth_actor)
            self.earth_actor = None

        if self.clouds_actor:
            self.renderer.RemoveActor(self.clouds_actor)
            self.clouds_actor = None

    def get_info(self) -> Dict[str, Any]:
        """
        Get information about current Earth state.

        Returns:
            Dictionary with Earth renderer information
        """
        return {
            'earth_exists': self.earth_actor is not None,
            'clouds_exist': self.clouds_actor is not None,
            'normal_mapped': (self.earth_actor is not None
                              and self.earth_actor.GetProperty().GetTexture("normalTex") is not None),
            'wireframe': (self.earth_actor is not None
                          and self.earth_actor.GetProperty().GetRepresentation() == vtk.VTK_WIREFRAME),
        }
