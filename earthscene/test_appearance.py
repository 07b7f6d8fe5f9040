"""
Tests for the settings panel handlers
"""

import pytest

from earthscene.core import (
    AppearanceController, AppearanceSelection, CameraState, CelestialBody, SceneContext
)


class FakeProperty:
    def __init__(self):
        self.representation = "surface"
        self.modified = 0

    def SetRepresentationToWireframe(self):
        self.representation = "wireframe"

    def SetRepresentationToSurface(self):
        self.representation = "surface"

    def Modified(self):
        self.modified += 1


class FakeActor:
    def __init__(self):
        self.texture = None
        self.visible = None
        self.orientation = None
        self.modified = 0
        self.prop = FakeProperty()

    def SetTexture(self, texture):
        self.texture = texture

    def SetVisibility(self, visible):
        self.visible = visible

    def SetOrientation(self, x, y, z):
        self.orientation = (x, y, z)

    def GetProperty(self):
        return self.prop

    def Modified(self):
        self.modified += 1


TEXTURES = {
    "earthmap": "earthmap-handle",
    "specularmap": "specularmap-handle",
    "citylightsmap": "citylightsmap-handle",
    "asteroid": "asteroid-handle",
    "rock": "rock-handle",
}


@pytest.fixture
def context():
    earth = CelestialBody("Earth", actor=FakeActor())
    asteroid_body = FakeActor()
    asteroid = CelestialBody("Asteroid", actor=FakeActor(),
                             material_actor=asteroid_body, visible=False)
    return SceneContext(
        earth=earth,
        clouds=CelestialBody("Clouds"),
        stars=CelestialBody("Starfield"),
        asteroid=asteroid,
        camera=CameraState(),
        controls=object(),
        surface=object(),
        textures=dict(TEXTURES),
        selection=AppearanceSelection(),
    )


@pytest.fixture
def controller(context):
    return AppearanceController(context)


def test_select_earth_texture_binds_handle(controller, context):
    assert controller.select_earth_texture("specularmap") is True

    assert context.earth.actor.texture == "specularmap-handle"
    assert context.earth.appearance == "specularmap"
    assert context.selection.earth_variant == "specularmap"


def test_selecting_same_texture_twice_is_idempotent(controller, context):
    controller.select_earth_texture("citylightsmap")
    once = context.earth.actor.texture

    controller.select_earth_texture("citylightsmap")

    assert context.earth.actor.texture is once
    assert context.earth.appearance == "citylightsmap"


def test_unknown_earth_texture_is_ignored(controller, context):
    controller.select_earth_texture("earthmap")
    revision = context.earth.material_revision

    assert controller.select_earth_texture("moonmap") is False
    assert controller.select_earth_texture("") is False

    assert context.earth.actor.texture == "earthmap-handle"
    assert context.earth.appearance == "earthmap"
    assert context.earth.material_revision == revision
    assert context.selection.earth_variant == "earthmap"


def test_asteroid_variant_is_not_an_earth_variant(controller, context):
    assert controller.select_earth_texture("rock") is False
    assert context.earth.actor.texture is None


def test_select_asteroid_texture_targets_body_not_group(controller, context):
    assert controller.select_asteroid_texture("rock") is True

    assert context.asteroid.material_actor.texture == "rock-handle"
    assert context.asteroid.actor.texture is None
    assert context.selection.asteroid_variant == "rock"


def test_missing_texture_handle_keeps_previous(controller, context):
    controller.select_asteroid_texture("asteroid")
    del context.textures["rock"]

    assert controller.select_asteroid_texture("rock") is False
    assert context.asteroid.material_actor.texture == "asteroid-handle"
    assert context.selection.asteroid_variant == "asteroid"


def test_wireframe_toggle(controller, context):
    prop = context.earth.actor.prop

    controller.set_wireframe(True)
    assert prop.representation == "wireframe"
    assert context.earth.wireframe is True
    assert context.selection.wireframe is True

    controller.set_wireframe(False)
    assert prop.representation == "surface"
    assert context.selection.wireframe is False


def test_material_changes_mark_material_dirty(controller, context):
    actor = context.earth.actor

    controller.select_earth_texture("earthmap")
    controller.set_wireframe(True)

    assert context.earth.material_revision == 2
    assert actor.prop.modified == 2
    assert actor.modified == 2


def test_apply_selection_pushes_everything(controller, context):
    context.selection = AppearanceSelection(
        earth_variant="specularmap", asteroid_variant="rock", wireframe=True)

    controller.apply_selection()

    assert context.earth.actor.texture == "specularmap-handle"
    assert context.asteroid.material_actor.texture == "rock-handle"
    assert context.earth.actor.prop.representation == "wireframe"


def test_bodies_without_actors_still_track_state():
    body = CelestialBody("Earth")
    body.bind_texture("earthmap", "handle")
    body.set_wireframe(True)

    assert body.appearance == "earthmap"
    assert body.wireframe is True
    assert body.material_revision == 2
