"""
UI Components for EarthScene
"""

from .main_window import EarthSceneWindow
from .controls import SettingsPanel

__all__ = [
    'EarthSceneWindow',
    'SettingsPanel',
]
