# scene/__init__.py
"""
Scene components for EarthScene
"""

from .earth_renderer import EarthRenderer
from .starfield_renderer import StarfieldRenderer
from .asteroid_renderer import AsteroidRenderer
from .texture_library import TextureLibrary
from .scene_graph import SceneGraph
from .render_surface import RenderSurface

__all__ = [
    'EarthRenderer',
    'StarfieldRenderer',
    'AsteroidRenderer',
    'TextureLibrary',
    'SceneGraph',
    'RenderSurface',
]
