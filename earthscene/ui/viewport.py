# earthscene/ui/viewport.py
"""
VTK render widget that reports its size changes
"""

from PyQt6.QtCore import pyqtSignal

# VTK-Qt integration
try:
    from vtkmodules.qt.QVTKRenderWindowInteractor import QVTKRenderWindowInteractor
except ImportError:
    from vtk.qt.QVTKRenderWindowInteractor import QVTKRenderWindowInteractor


class SceneViewport(QVTKRenderWindowInteractor):
    """Render widget emitting ``resized(width, height, pixel_ratio)``"""

    resized = pyqtSignal(int, int, float)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        size = event.size()
        self.resized.emit(size.width(), size.height(), float(self.devicePixelRatioF()))
