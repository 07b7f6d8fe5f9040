"""
Frame update loop for EarthScene

Once per refresh: rotate Earth, starfield and clouds, update the orbit
controls, re-evaluate asteroid visibility against the camera, then render.
"""

import logging

from PyQt6.QtCore import QTimer

from ..config import Config
from .context import SceneContext

logger = logging.getLogger(__name__)


def is_asteroid_visible(distance: float,
                        threshold: float = Config.ASTEROID_VISIBILITY_DISTANCE) -> bool:
    """Asteroid is shown only when strictly further out than the threshold."""
    return distance > threshold


class FrameLoop:
    """Self-rescheduling per-frame update with an explicit stop."""

    def __init__(self, context: SceneContext,
                 interval_ms: int = Config.FRAME_INTERVAL_MS,
                 timer=None):
        """
        Initialize the frame loop.

        Args:
            context: Fully built scene context
            interval_ms: Delay between refreshes
            timer: Single-shot timer to schedule refreshes on
                (a QTimer is created when omitted)

        Raises:
            SceneNotReadyError: If the context is missing a required handle
        """
        context.require_ready()

        self.context = context
        self.interval_ms = interval_ms
        self.frame_count = 0
        self._running = False

        self._timer = timer if timer is not None else QTimer()
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._on_refresh)

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._timer is None:
            raise RuntimeError("Frame loop has been disposed")
        if self._running:
            return
        self._running = True
        self._timer.start(self.interval_ms)
        logger.info("Frame loop started (%d ms interval)", self.interval_ms)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self._timer.stop()
        logger.info("Frame loop stopped after %d frames", self.frame_count)

    def dispose(self) -> None:
        """Stop and release the timer; the loop cannot be restarted afterwards."""
        self.stop()
        if self._timer is not None:
            self._timer.timeout.disconnect(self._on_refresh)
            self._timer = None

    def advance(self) -> None:
        """Run one frame of updates followed by a render."""
        ctx = self.context

        ctx.earth.rotate_y(Config.EARTH_ROTATION_PER_FRAME)
        ctx.stars.rotate_y(Config.STARFIELD_ROTATION_PER_FRAME)
        ctx.clouds.rotate_y(Config.CLOUDS_ROTATION_PER_FRAME)

        # Controls may move the camera; visibility must see the new position
        ctx.controls.update()
        ctx.asteroid.set_visible(is_asteroid_visible(ctx.camera.axis_distance))

        ctx.surface.render(ctx.scene, ctx.camera)
        self.frame_count += 1

    def _on_refresh(self) -> None:
        if not self._running:
            return
        self._timer.start(self.interval_ms)
        self.advance()
