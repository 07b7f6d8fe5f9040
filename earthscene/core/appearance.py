"""
Appearance change handlers for EarthScene
Map settings panel selections onto the bodies' materials
"""

import logging

from ..config import Config
from .context import SceneContext

logger = logging.getLogger(__name__)


class AppearanceController:
    """Applies texture and wireframe selections to the scene context"""

    def __init__(self, context: SceneContext):
        self.context = context

    def select_earth_texture(self, value: str) -> bool:
        """
        Bind one of the Earth texture variants.

        Args:
            value: Variant key from Config.EARTH_TEXTURE_VARIANTS

        Returns:
            True if the selection was applied, False if it was ignored
        """
        if not self._bind(self.context.earth, value, Config.EARTH_TEXTURE_VARIANTS):
            return False
        self.context.selection.earth_variant = value
        return True

    def select_asteroid_texture(self, value: str) -> bool:
        """
        Bind one of the asteroid texture variants.

        Args:
            value: Variant key from Config.ASTEROID_TEXTURE_VARIANTS

        Returns:
            True if the selection was applied, False if it was ignored
        """
        if not self._bind(self.context.asteroid, value, Config.ASTEROID_TEXTURE_VARIANTS):
            return False
        self.context.selection.asteroid_variant = value
        return True

    def set_wireframe(self, enabled: bool) -> None:
        """Toggle wireframe drawing of the Earth."""
        self.context.earth.set_wireframe(enabled)
        self.context.selection.wireframe = bool(enabled)
        logger.info("Earth wireframe %s", "on" if enabled else "off")

    def apply_selection(self) -> None:
        """Push the whole current selection onto the bodies."""
        selection = self.context.selection
        self.select_earth_texture(selection.earth_variant)
        self.select_asteroid_texture(selection.asteroid_variant)
        self.set_wireframe(selection.wireframe)

    def _bind(self, body, value, variants) -> bool:
        if value not in variants:
            logger.warning("Ignoring unknown %s texture selection: %r", body.name, value)
            return False

        texture = self.context.textures.get(value)
        if texture is None:
            logger.warning("No texture loaded for %r, keeping %r", value, body.appearance)
            return False

        body.bind_texture(value, texture)
        logger.info("%s texture set to %s", body.name, value)
        return True
