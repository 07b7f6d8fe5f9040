"""
Main window for EarthScene application
"""

import logging

import vtk
from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QSplitter, QLabel, QPushButton
)
from PyQt6.QtCore import Qt

# Import configuration and core modules
from ..config import Config
from ..core import (
    AppearanceController, AppearanceSelection, CameraState,
    FrameLoop, OrbitController, SceneContext
)
from ..scene import RenderSurface, SceneGraph, TextureLibrary

# Import UI components
from .asset_loader import AssetLoader
from .controls import SettingsPanel
from .orbit_controls import OrbitInteractorBinding
from .viewport import SceneViewport

logger = logging.getLogger(__name__)


class EarthSceneWindow(QMainWindow):
    """Main EarthScene application window"""

    def __init__(self, texture_dir=None):
        """
        Initialize the window and start rendering.

        Args:
            texture_dir: Directory to load textures from (package default if None)
        """
        super().__init__()

        self.config = Config()
        self.selection = AppearanceSelection()
        self._disposed = False

        # Setup UI
        self._setup_ui()

        # Setup VTK
        self._setup_vtk()

        # Build scene, controls and frame loop
        self._build_scene(texture_dir)

        # Connect signals
        self._connect_signals()

        # Textures fill in while the first frames are already drawn
        self.asset_loader.start()
        self.frame_loop.start()

    def _setup_ui(self):
        """Setup the user interface"""
        self.setWindowTitle(f"{self.config.APP_NAME} - v{self.config.APP_VERSION}")
        self.setGeometry(
            self.config.MAIN_WINDOW_START_X,
            self.config.MAIN_WINDOW_START_Y,
            self.config.MAIN_WINDOW_WIDTH,
            self.config.MAIN_WINDOW_HEIGHT
        )

        # Central widget
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        # Main layout
        main_layout = QHBoxLayout(central_widget)

        # Create splitter
        splitter = QSplitter(Qt.Orientation.Horizontal)
        main_layout.addWidget(splitter)

        # Left: VTK viewport
        self.viewport = SceneViewport(splitter)
        splitter.addWidget(self.viewport)

        # Right: Control panel
        control_panel = self._create_control_panel()
        control_panel.setMaximumWidth(self.config.SETTINGS_PANEL_MAX_WIDTH)
        control_panel.setMinimumWidth(self.config.SETTINGS_PANEL_MIN_WIDTH)
        splitter.addWidget(control_panel)

        splitter.setStretchFactor(0, 1)
        splitter.setStretchFactor(1, 0)

    def _create_control_panel(self):
        """Create the side control panel"""
        panel = QWidget()
        layout = QVBoxLayout(panel)

        # Settings panel
        self.settings_panel = SettingsPanel(self.config, self.selection)
        layout.addWidget(self.settings_panel)

        self.reset_view_button = QPushButton("Reset View")
        layout.addWidget(self.reset_view_button)

        # Status label
        self.status_label = QLabel("Loading textures...")
        self.status_label.setWordWrap(True)
        self.status_label.setStyleSheet("""
            QLabel {
                background-color: #f0f0f0;
                padding: 10px;
                border: 1px solid #ccc;
                border-radius: 3px;
            }
        """)
        layout.addWidget(self.status_label)

        layout.addStretch()

        return panel

    def _setup_vtk(self):
        """Setup VTK rendering pipeline"""
        self.renderer = vtk.vtkRenderer()
        render_window = self.viewport.GetRenderWindow()
        render_window.AddRenderer(self.renderer)

        self.surface = RenderSurface(render_window, self.renderer)

        # Initialize interactor
        self.viewport.Initialize()

    def _build_scene(self, texture_dir):
        """Build the scene graph and wire it into a scene context"""
        self.textures = TextureLibrary(texture_dir)

        self.scene = SceneGraph(self.renderer, self.textures)
        self.scene.build()

        self.camera = CameraState()
        self.controls = OrbitController(self.camera)
        self.orbit_binding = OrbitInteractorBinding(
            self.viewport.GetRenderWindow().GetInteractor(), self.controls)
        self.orbit_binding.attach()

        self.context = SceneContext(
            earth=self.scene.earth,
            clouds=self.scene.clouds,
            stars=self.scene.stars,
            asteroid=self.scene.asteroid,
            camera=self.camera,
            controls=self.controls,
            surface=self.surface,
            scene=self.scene,
            textures=self.scene.variant_textures(),
            selection=self.selection,
        )
        self.appearance = AppearanceController(self.context)
        # Bodies start out matching the panel
        self.appearance.apply_selection()

        self.frame_loop = FrameLoop(self.context)
        self.asset_loader = AssetLoader(self.textures, self)

        self._on_viewport_resized(
            self.viewport.width(), self.viewport.height(), self.viewport.devicePixelRatioF())

    def _connect_signals(self):
        """Connect UI signals to methods"""
        # Settings panel, one handler per control
        self.settings_panel.earth_texture_changed.connect(self.appearance.select_earth_texture)
        self.settings_panel.asteroid_texture_changed.connect(self.appearance.select_asteroid_texture)
        self.settings_panel.wireframe_toggled.connect(self.appearance.set_wireframe)

        self.reset_view_button.clicked.connect(self.controls.reset)

        # Viewport
        self.viewport.resized.connect(self._on_viewport_resized)

        # Asset loading
        self.asset_loader.texture_loaded.connect(self._on_texture_loaded)
        self.asset_loader.finished.connect(self._on_textures_finished)

    def _on_viewport_resized(self, width, height, pixel_ratio):
        """Keep camera aspect and output size in step with the viewport"""
        self.surface.resize(width, height, self.camera, pixel_ratio)

    def _on_texture_loaded(self, key, source):
        """Report texture loading progress"""
        info = self.textures.get_info()
        done = info['total'] - info['placeholder']
        self.status_label.setText(
            f"Loading textures... {done}/{info['total']}\n"
            f"Latest: {key} ({source})"
        )

    def _on_textures_finished(self):
        """Report texture loading summary"""
        info = self.textures.get_info()
        lines = [f"✓ {info['total']} textures ready"]
        if info['procedural']:
            lines.append(f"{info['procedural']} generated (file not found)")
        if info['failed']:
            lines.append(f"{info['failed']} failed to load")
        lines.append(f"Zoom out past {self.config.ASTEROID_VISIBILITY_DISTANCE:g} "
                     f"units to see the asteroid")
        self.status_label.setText("\n".join(lines))

    def dispose(self):
        """Stop the frame loop and release every resource; safe to call twice"""
        if self._disposed:
            return
        self._disposed = True

        logger.info("Shutting down scene...")
        self.frame_loop.dispose()
        self.asset_loader.cancel()
        self.orbit_binding.detach()
        self.scene.cleanup()
        self.surface.finalize()

    def closeEvent(self, event):
        """Tear down rendering before the window goes away"""
        self.dispose()
        super().closeEvent(event)
