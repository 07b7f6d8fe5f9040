"""
EarthScene - interactive textured Earth with clouds, starfield and a distant asteroid
"""

from .config import Config

__version__ = Config.APP_VERSION

__all__ = [
    'Config',
]
