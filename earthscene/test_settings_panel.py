"""
Tests for the settings panel and its wiring to the appearance handlers
"""

import pytest
import vtk

from earthscene.config import Config
from earthscene.core import (
    AppearanceController, AppearanceSelection, CameraState, CelestialBody, SceneContext
)
from earthscene.ui.controls import SettingsPanel


@pytest.fixture
def selection():
    return AppearanceSelection()


@pytest.fixture
def panel(qt_app, selection):
    return SettingsPanel(Config, selection)


@pytest.fixture
def context(selection):
    textures = {key: vtk.vtkTexture()
                for key in Config.EARTH_TEXTURE_VARIANTS + Config.ASTEROID_TEXTURE_VARIANTS}
    return SceneContext(
        earth=CelestialBody("Earth", actor=vtk.vtkActor()),
        clouds=CelestialBody("Clouds"),
        stars=CelestialBody("Starfield"),
        asteroid=CelestialBody("Asteroid", actor=vtk.vtkActor(), visible=False),
        camera=CameraState(),
        controls=object(),
        surface=object(),
        textures=textures,
        selection=selection,
    )


def test_combos_start_at_first_variant(panel):
    assert panel.earth_combo.currentData() == Config.EARTH_TEXTURE_VARIANTS[0]
    assert panel.asteroid_combo.currentData() == Config.ASTEROID_TEXTURE_VARIANTS[0]
    assert panel.earth_combo.count() == len(Config.EARTH_TEXTURE_VARIANTS)
    assert panel.wireframe_checkbox.isChecked() is False


def test_earth_combo_emits_variant_key_after_updating_selection(panel, selection):
    received = []
    panel.earth_texture_changed.connect(
        lambda value: received.append((value, selection.earth_variant)))

    panel.earth_combo.setCurrentIndex(2)

    # Item data, not the "City Lights" label
    assert received == [("citylightsmap", "citylightsmap")]


def test_asteroid_combo_emits_variant_key_after_updating_selection(panel, selection):
    received = []
    panel.asteroid_texture_changed.connect(
        lambda value: received.append((value, selection.asteroid_variant)))

    panel.asteroid_combo.setCurrentIndex(1)

    assert received == [("rock", "rock")]


def test_wireframe_checkbox_emits_after_updating_selection(panel, selection):
    received = []
    panel.wireframe_toggled.connect(
        lambda checked: received.append((checked, selection.wireframe)))

    panel.wireframe_checkbox.setChecked(True)
    panel.wireframe_checkbox.setChecked(False)

    assert received == [(True, True), (False, False)]


def test_panel_drives_appearance_controller(panel, context):
    appearance = AppearanceController(context)
    panel.earth_texture_changed.connect(appearance.select_earth_texture)
    panel.asteroid_texture_changed.connect(appearance.select_asteroid_texture)
    panel.wireframe_toggled.connect(appearance.set_wireframe)

    panel.earth_combo.setCurrentIndex(1)
    panel.asteroid_combo.setCurrentIndex(1)
    panel.wireframe_checkbox.setChecked(True)

    assert context.earth.actor.GetTexture() is context.textures["specularmap"]
    assert context.asteroid.actor.GetTexture() is context.textures["rock"]
    assert context.earth.actor.GetProperty().GetRepresentation() == vtk.VTK_WIREFRAME
    assert context.earth.appearance == "specularmap"
    assert context.asteroid.appearance == "rock"
