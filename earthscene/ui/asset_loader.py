# earthscene/ui/asset_loader.py
"""
Deferred texture loading on the Qt event loop
"""

import logging

from PyQt6.QtCore import QObject, QTimer, pyqtSignal

logger = logging.getLogger(__name__)


class AssetLoader(QObject):
    """
    Loads pending textures one per event loop turn.

    Rendering starts before any texture is read; each texture replaces its
    placeholder as soon as it is loaded.
    """

    # Signals
    texture_loaded = pyqtSignal(str, str)
    finished = pyqtSignal()

    def __init__(self, library, parent=None):
        """Initialize the loader

        Args:
            library: TextureLibrary to fill in
            parent: Parent QObject
        """
        super().__init__(parent)
        self.library = library

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(0)
        self._timer.timeout.connect(self._load_next)

    def start(self):
        """Schedule loading of every pending texture"""
        if self.library.pending():
            self._timer.start()
        else:
            self.finished.emit()

    def cancel(self):
        """Drop any loads not yet started"""
        self._timer.stop()

    def _load_next(self):
        pending = self.library.pending()
        if not pending:
            return

        key = pending[0]
        try:
            source = self.library.load(key)
        except Exception:
            logger.exception("Failed to load texture %s", key)
            source = self.library.source(key)
            # Stop retrying this key; the placeholder stays
            self.library.mark_failed(key)

        self.texture_loaded.emit(key, source)

        if self.library.pending():
            self._timer.start()
        else:
            logger.info("All textures loaded: %s", self.library.get_info())
            self.finished.emit()
