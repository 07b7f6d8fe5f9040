# earthscene/ui/controls/settings_panel.py
"""
Settings panel for EarthScene
"""

from PyQt6.QtWidgets import (
    QGroupBox, QFormLayout, QComboBox, QCheckBox
)
from PyQt6.QtCore import pyqtSignal


class SettingsPanel(QGroupBox):
    """Panel for texture and wireframe selection"""

    # Signals
    earth_texture_changed = pyqtSignal(str)
    asteroid_texture_changed = pyqtSignal(str)
    wireframe_toggled = pyqtSignal(bool)

    def __init__(self, config, selection, parent=None):
        """Initialize the settings panel

        Args:
            config: Application configuration
            selection: AppearanceSelection updated before each signal
            parent: Parent widget
        """
        super().__init__("Settings", parent)
        self.config = config
        self.selection = selection
        self._setup_ui()

    def _setup_ui(self):
        """Setup the panel UI"""
        layout = QFormLayout(self)

        self.earth_combo = self._create_variant_combo(
            self.config.EARTH_TEXTURE_VARIANTS, self.selection.earth_variant)
        self.earth_combo.currentIndexChanged.connect(self._on_earth_texture_changed)
        layout.addRow("Select Earth Texture:", self.earth_combo)

        self.asteroid_combo = self._create_variant_combo(
            self.config.ASTEROID_TEXTURE_VARIANTS, self.selection.asteroid_variant)
        self.asteroid_combo.currentIndexChanged.connect(self._on_asteroid_texture_changed)
        layout.addRow("Select Asteroid Texture:", self.asteroid_combo)

        self.wireframe_checkbox = QCheckBox("Earth Wireframe")
        self.wireframe_checkbox.setChecked(self.selection.wireframe)
        self.wireframe_checkbox.toggled.connect(self._on_wireframe_toggled)
        layout.addRow(self.wireframe_checkbox)

        self.setStyleSheet("""
            QGroupBox {
                font-weight: bold;
            }
            QCheckBox {
                spacing: 5px;
            }
        """)

    def _create_variant_combo(self, variants, current):
        """Combo box showing labels and carrying variant keys as item data"""
        combo = QComboBox()
        for key in variants:
            combo.addItem(self.config.VARIANT_LABELS.get(key, key), key)
        index = combo.findData(current)
        if index >= 0:
            combo.setCurrentIndex(index)
        return combo

    def _on_earth_texture_changed(self, index):
        """Handle Earth texture selection"""
        value = self.earth_combo.itemData(index)
        self.selection.earth_variant = value
        self.earth_texture_changed.emit(value)

    def _on_asteroid_texture_changed(self, index):
        """Handle asteroid texture selection"""
        value = self.asteroid_combo.itemData(index)
        self.selection.asteroid_variant = value
        self.asteroid_texture_changed.emit(value)

    def _on_wireframe_toggled(self, checked):
        """Handle wireframe checkbox toggle"""
        self.selection.wireframe = checked
        self.wireframe_toggled.emit(checked)
