"""
Tests for deferred texture loading
"""

from earthscene.scene import TextureLibrary
from earthscene.ui.asset_loader import AssetLoader


def run_to_completion(loader, limit=50):
    """Drive the loader by hand instead of through the event loop."""
    for _ in range(limit):
        if not loader.library.pending():
            break
        loader._load_next()


def test_loader_fills_every_texture_in_order(qt_app, tmp_path):
    files = {"rock": "rock.jpg", "earthmap": "earthmap.jpg", "earthcloud": "earthCloud.png"}
    library = TextureLibrary(tmp_path, files=files)
    loader = AssetLoader(library)

    loaded = []
    finished = []
    loader.texture_loaded.connect(lambda key, source: loaded.append((key, source)))
    loader.finished.connect(lambda: finished.append(True))

    run_to_completion(loader)
    loader.cancel()

    assert loaded == [
        ("earthmap", "procedural"),
        ("earthcloud", "procedural"),
        ("rock", "procedural"),
    ]
    assert finished == [True]
    assert library.pending() == []


def test_loader_with_nothing_pending_finishes_immediately(qt_app, tmp_path):
    library = TextureLibrary(tmp_path, files={})
    loader = AssetLoader(library)
    finished = []
    loader.finished.connect(lambda: finished.append(True))

    loader.start()

    assert finished == [True]


def test_failing_load_does_not_stall(qt_app, tmp_path, monkeypatch):
    library = TextureLibrary(tmp_path, files={"rock": "rock.jpg", "asteroid": "asteroid.jpg"})

    def broken_load(key):
        raise RuntimeError("decoder crashed")

    monkeypatch.setattr(library, "load", broken_load)
    loader = AssetLoader(library)
    loaded = []
    loader.texture_loaded.connect(lambda key, source: loaded.append((key, source)))

    run_to_completion(loader)
    loader.cancel()

    assert [key for key, _ in loaded] == ["asteroid", "rock"]
    assert library.get_info()["failed"] == 2
