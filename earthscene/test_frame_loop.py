"""
Tests for the per-frame update loop and the asteroid visibility rule
"""

import pytest

from earthscene.config import Config
from earthscene.core import (
    CameraState, CelestialBody, FrameLoop, SceneContext, SceneNotReadyError,
    is_asteroid_visible
)


class FakeSignal:
    def __init__(self):
        self.slots = []

    def connect(self, slot):
        self.slots.append(slot)

    def disconnect(self, slot):
        self.slots.remove(slot)

    def emit(self):
        for slot in list(self.slots):
            slot()


class FakeTimer:
    """Stands in for a single-shot QTimer; ``fire()`` delivers one timeout."""

    def __init__(self, log=None):
        self.timeout = FakeSignal()
        self.single_shot = False
        self.active = False
        self.starts = 0
        self.log = log if log is not None else []

    def setSingleShot(self, value):
        self.single_shot = value

    def start(self, interval=None):
        self.active = True
        self.starts += 1
        self.log.append("schedule")

    def stop(self):
        self.active = False

    def fire(self):
        self.active = False
        self.timeout.emit()


class StillControls:
    def __init__(self, log=None):
        self.updates = 0
        self.log = log if log is not None else []

    def update(self):
        self.updates += 1
        self.log.append("controls")
        return False


class RecordingSurface:
    def __init__(self, log=None):
        self.renders = []
        self.log = log if log is not None else []

    def render(self, scene, camera):
        self.renders.append((scene, camera.position))
        self.log.append("render")


def make_context(camera_z=4.0, controls=None, surface=None):
    return SceneContext(
        earth=CelestialBody("Earth"),
        clouds=CelestialBody("Clouds"),
        stars=CelestialBody("Starfield"),
        asteroid=CelestialBody("Asteroid", visible=False),
        camera=CameraState(position=(0.0, 0.0, camera_z)),
        controls=controls if controls is not None else StillControls(),
        surface=surface if surface is not None else RecordingSurface(),
        scene="scene",
    )


def make_loop(context, log=None):
    return FrameLoop(context, timer=FakeTimer(log))


# ============================================
# Rotation
# ============================================

@pytest.mark.parametrize("frames", [0, 1, 7, 250])
def test_earth_rotation_accumulates(frames):
    context = make_context()
    loop = make_loop(context)

    for _ in range(frames):
        loop.advance()

    assert context.earth.rotation_y == pytest.approx(-0.0009 * frames)
    assert loop.frame_count == frames


def test_rotation_rates_keep_fixed_ratio():
    context = make_context()
    loop = make_loop(context)

    loop.advance()

    earth = context.earth.rotation_y
    clouds = context.clouds.rotation_y
    stars = context.stars.rotation_y

    assert earth < 0 < stars < clouds
    assert clouds == pytest.approx(5 * stars)
    assert abs(earth) == pytest.approx(1.8 * clouds)


def test_rotation_is_not_wrapped():
    context = make_context()
    context.earth.rotation_y = -6.283
    loop = make_loop(context)

    for _ in range(10):
        loop.advance()

    assert context.earth.rotation_y == pytest.approx(-6.283 - 0.009)


# ============================================
# Asteroid visibility
# ============================================

@pytest.mark.parametrize("distance,expected", [
    (15.0, False),
    (15.0001, True),
    (14.9999, False),
    (4.0, False),
    (80.0, True),
])
def test_visibility_threshold_is_exclusive(distance, expected):
    assert is_asteroid_visible(distance) is expected


def test_visibility_threshold_default_matches_config():
    assert is_asteroid_visible(Config.ASTEROID_VISIBILITY_DISTANCE) is False


def test_visibility_has_no_memory():
    context = make_context()
    loop = make_loop(context)
    seen = []

    for z in [20.0, 10.0, 20.0]:
        context.camera.position = (0.0, 0.0, z)
        loop.advance()
        seen.append(context.asteroid.visible)

    assert seen == [True, False, True]


def test_visibility_uses_z_axis_distance():
    context = make_context()
    context.camera.position = (30.0, 0.0, 2.0)
    loop = make_loop(context)

    loop.advance()

    assert context.camera.distance_from_origin > 15.0
    assert context.asteroid.visible is False


def test_zoom_out_reveals_asteroid():
    context = make_context(camera_z=4.0)
    loop = make_loop(context)

    loop.advance()
    assert context.asteroid.visible is False

    before = context.earth.rotation_y
    context.camera.position = (0.0, 0.0, 20.0)
    loop.advance()

    assert context.asteroid.visible is True
    assert context.earth.rotation_y - before == pytest.approx(-0.0009)


# ============================================
# Ordering and scheduling
# ============================================

def test_visibility_sees_camera_moved_by_controls():
    class JumpingControls:
        def __init__(self, camera):
            self.camera = camera

        def update(self):
            self.camera.position = (0.0, 0.0, 25.0)
            return True

    context = make_context(camera_z=4.0)
    context.controls = JumpingControls(context.camera)
    surface = context.surface
    loop = make_loop(context)

    loop.advance()

    assert context.asteroid.visible is True
    # Render happens last, with the updated camera
    assert surface.renders == [("scene", (0.0, 0.0, 25.0))]


def test_refresh_reschedules_before_advancing():
    log = []
    context = make_context(controls=StillControls(log), surface=RecordingSurface(log))
    timer = FakeTimer(log)
    loop = FrameLoop(context, timer=timer)

    loop.start()
    timer.fire()
    timer.fire()

    assert timer.single_shot is True
    assert log == ["schedule",
                   "schedule", "controls", "render",
                   "schedule", "controls", "render"]
    assert loop.frame_count == 2


def test_stop_halts_frames():
    context = make_context()
    timer = FakeTimer()
    loop = FrameLoop(context, timer=timer)

    loop.start()
    timer.fire()
    loop.stop()
    timer.fire()

    assert loop.frame_count == 1
    assert not loop.is_running
    assert timer.active is False


def test_start_twice_schedules_once():
    timer = FakeTimer()
    loop = FrameLoop(make_context(), timer=timer)

    loop.start()
    loop.start()

    assert timer.starts == 1


def test_dispose_releases_timer():
    timer = FakeTimer()
    loop = FrameLoop(make_context(), timer=timer)

    loop.start()
    loop.dispose()
    loop.dispose()

    assert timer.timeout.slots == []
    assert not loop.is_running
    with pytest.raises(RuntimeError):
        loop.start()


def test_incomplete_context_is_rejected():
    context = make_context()
    context.asteroid = None
    context.surface = None

    with pytest.raises(SceneNotReadyError) as excinfo:
        FrameLoop(context, timer=FakeTimer())

    assert "asteroid" in str(excinfo.value)
    assert "surface" in str(excinfo.value)
    assert context.missing() == ["asteroid", "surface"]
