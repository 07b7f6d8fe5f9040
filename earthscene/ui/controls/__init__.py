"""
Control panels for EarthScene UI
"""

from .settings_panel import SettingsPanel

__all__ = [
    'SettingsPanel',
]
