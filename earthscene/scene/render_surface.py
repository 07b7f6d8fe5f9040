# scene/render_surface.py
"""
Presentation surface for EarthScene
Pushes camera state into VTK and renders the window
"""

import logging
from typing import Any, Optional, Tuple

import vtk

from ..config import Config
from ..core.camera import CameraState

logger = logging.getLogger(__name__)


class RenderSurface:
    """Renders a scene through one VTK renderer and render window"""

    def __init__(self, render_window: vtk.vtkRenderWindow, renderer: vtk.vtkRenderer):
        """
        Initialize the surface.

        Args:
            render_window: Window to draw into
            renderer: Renderer holding the scene
        """
        self.render_window = render_window
        self.renderer = renderer
        self.renderer.SetBackground(*Config.RENDERER_BACKGROUND_COLOR)

        self.vtk_camera = self.renderer.GetActiveCamera()
        # Aspect comes from the camera state, not the viewport
        self.vtk_camera.UseExplicitAspectRatioOn()

        self.size: Optional[Tuple[int, int]] = None

    def resize(self, width: int, height: int, camera: CameraState,
               pixel_ratio: float = 1.0) -> None:
        """
        Match camera aspect and output size to a new viewport.

        Args:
            width, height: Viewport size in logical pixels
            camera: Camera state to update
            pixel_ratio: Device pixels per logical pixel
        """
        if width <= 0 or height <= 0:
            return

        camera.set_aspect(width, height)
        self.vtk_camera.SetExplicitAspectRatio(camera.aspect)

        self.size = (int(width * pixel_ratio), int(height * pixel_ratio))
        self.render_window.SetSize(*self.size)
        logger.debug("Viewport resized to %dx%d (aspect %.3f)", width, height, camera.aspect)

    def apply_camera(self, camera: CameraState) -> None:
        """Copy camera state onto the VTK camera."""
        self.vtk_camera.SetPosition(*camera.position)
        self.vtk_camera.SetFocalPoint(*camera.target)
        self.vtk_camera.SetViewUp(*camera.up)
        self.vtk_camera.SetViewAngle(camera.fov)
        self.vtk_camera.SetClippingRange(camera.near, camera.far)
        self.vtk_camera.SetExplicitAspectRatio(camera.aspect)

    def render(self, scene: Any, camera: CameraState) -> None:
        """
        Draw one frame.

        Args:
            scene: Scene graph (its actors already live in the renderer)
            camera: Camera to draw from
        """
        self.apply_camera(camera)
        self.render_window.Render()

    def finalize(self) -> None:
        """Release the window's graphics resources."""
        self.render_window.Finalize()
