# earthscene/ui/orbit_controls.py
"""
Pointer bindings from the VTK interactor to the orbit controller
"""

import logging

import vtk

from ..core.camera import OrbitController

logger = logging.getLogger(__name__)


class OrbitInteractorBinding:
    """
    Routes drag and wheel events to an OrbitController.

    Left-drag orbits, middle-drag and the wheel zoom. The right button is
    left unbound, so there is no panning. The camera only moves when the
    frame loop calls ``controller.update()``.
    """

    def __init__(self, interactor, controller: OrbitController):
        self.interactor = interactor
        self.controller = controller

        self._mode = None
        self._last_position = (0, 0)
        self._observer_tags = []

    def attach(self):
        """Replace the default interaction style and start listening"""
        if self._observer_tags:
            return

        # The user style does nothing by itself, so VTK never moves the camera
        self.interactor.SetInteractorStyle(vtk.vtkInteractorStyleUser())

        events = [
            ("LeftButtonPressEvent", self._on_left_press),
            ("LeftButtonReleaseEvent", self._on_release),
            ("MiddleButtonPressEvent", self._on_middle_press),
            ("MiddleButtonReleaseEvent", self._on_release),
            ("MouseMoveEvent", self._on_mouse_move),
            ("MouseWheelForwardEvent", self._on_wheel_forward),
            ("MouseWheelBackwardEvent", self._on_wheel_backward),
        ]
        for event, callback in events:
            self._observer_tags.append(self.interactor.AddObserver(event, callback))
        logger.info("Orbit controls attached")

    def detach(self):
        """Stop listening to the interactor"""
        for tag in self._observer_tags:
            self.interactor.RemoveObserver(tag)
        self._observer_tags = []
        self._mode = None

    def _on_left_press(self, caller, event):
        self._begin("rotate")

    def _on_middle_press(self, caller, event):
        self._begin("dolly")

    def _on_release(self, caller, event):
        self._mode = None

    def _begin(self, mode):
        self._mode = mode
        self._last_position = self.interactor.GetEventPosition()

    def _on_mouse_move(self, caller, event):
        if self._mode is None:
            return

        x, y = self.interactor.GetEventPosition()
        last_x, last_y = self._last_position
        self._last_position = (x, y)

        # VTK counts y from the bottom; drags are measured downwards
        dx = x - last_x
        dy = last_y - y

        if self._mode == "rotate":
            height = self.interactor.GetSize()[1]
            self.controller.handle_drag(dx, dy, height)
        elif dy > 0:
            self.controller.dolly_out()
        elif dy < 0:
            self.controller.dolly_in()

    def _on_wheel_forward(self, caller, event):
        self.controller.handle_wheel(1)

    def _on_wheel_backward(self, caller, event):
        self.controller.handle_wheel(-1)
