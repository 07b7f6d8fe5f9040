# scene/texture_library.py
"""
Texture library for EarthScene

Every texture handle exists from startup with a small placeholder image, so
materials can be bound before anything is read from disk. ``load`` later
swaps the real (or procedural) image into the same handle.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import numpy as np
import vtk
from vtk.util import numpy_support

from ..config import Config
from . import procedural_textures

logger = logging.getLogger(__name__)

DEFAULT_TEXTURE_DIR = Path(__file__).parent.parent / "textures"

# Where a texture's current image came from
SOURCE_PLACEHOLDER = "placeholder"
SOURCE_FILE = "file"
SOURCE_PROCEDURAL = "procedural"
SOURCE_FAILED = "failed"


def numpy_to_image(array: np.ndarray) -> vtk.vtkImageData:
    """
    Convert a (height, width, channels) uint8 array to VTK image data.

    Row 0 of the array becomes the bottom row of the image.
    """
    if array.ndim != 3:
        raise ValueError(f"Expected (height, width, channels) array, got shape {array.shape}")
    height, width, channels = array.shape

    flat = np.ascontiguousarray(array, dtype=np.uint8).reshape(-1, channels)
    scalars = numpy_support.numpy_to_vtk(flat, deep=True, array_type=vtk.VTK_UNSIGNED_CHAR)
    scalars.SetName("Colors")

    image = vtk.vtkImageData()
    image.SetDimensions(width, height, 1)
    image.GetPointData().SetScalars(scalars)
    return image


def image_to_numpy(image: vtk.vtkImageData) -> np.ndarray:
    """Inverse of ``numpy_to_image``: (height, width, channels) array."""
    width, height, _ = image.GetDimensions()
    scalars = numpy_support.vtk_to_numpy(image.GetPointData().GetScalars())
    return scalars.reshape(height, width, -1)


def solid_color_image(r: float, g: float, b: float) -> vtk.vtkImageData:
    """2x2 image of a single colour (components 0-1)."""
    color = np.array([int(r * 255), int(g * 255), int(b * 255)], dtype=np.uint8)
    return numpy_to_image(np.tile(color, (2, 2, 1)))


class TextureLibrary:
    """Owns one vtkTexture per texture key and fills them in on demand"""

    def __init__(self, texture_dir: Optional[Path] = None,
                 files: Optional[Dict[str, str]] = None):
        """
        Initialize the library.

        Args:
            texture_dir: Directory holding the texture files
            files: Texture key -> file name (defaults to Config.TEXTURE_FILES)
        """
        self.texture_dir = Path(texture_dir) if texture_dir is not None else DEFAULT_TEXTURE_DIR
        self.files = dict(files if files is not None else Config.TEXTURE_FILES)

        self._textures: Dict[str, vtk.vtkTexture] = {}
        self._sources: Dict[str, str] = {}

        for key in self.files:
            self._textures[key] = self._create_placeholder_texture(key)
            self._sources[key] = SOURCE_PLACEHOLDER

    @property
    def keys(self) -> List[str]:
        return list(self.files)

    def texture(self, key: str) -> vtk.vtkTexture:
        """Get the texture handle for ``key``."""
        if key not in self._textures:
            raise KeyError(f"Unknown texture: {key}")
        return self._textures[key]

    def source(self, key: str) -> str:
        return self._sources[key]

    def is_loaded(self, key: str) -> bool:
        return self._sources[key] != SOURCE_PLACEHOLDER

    def pending(self, order: Optional[Iterable[str]] = None) -> List[str]:
        """Keys still showing their placeholder, in load order."""
        order = list(order) if order is not None else Config.TEXTURE_LOAD_ORDER
        ordered = [key for key in order if key in self._textures]
        ordered += [key for key in self._textures if key not in ordered]
        return [key for key in ordered if not self.is_loaded(key)]

    def load(self, key: str) -> str:
        """
        Load the image for ``key`` into its existing texture handle.

        Falls back to a procedural image when the file is missing or
        cannot be read.

        Returns:
            Source of the image now in the texture
        """
        texture = self.texture(key)

        image = self._read_texture_file(self.texture_dir / self.files[key])
        source = SOURCE_FILE
        if image is None:
            array = procedural_textures.generate(key)
            if array is None:
                logger.warning("No fallback image for texture %s, keeping placeholder", key)
                self.mark_failed(key)
                return SOURCE_FAILED
            image = numpy_to_image(array)
            source = SOURCE_PROCEDURAL
            logger.debug("Using procedural image for texture %s", key)

        if key in Config.NORMAL_MAP_TEXTURES:
            normals = procedural_textures.height_to_normal_map(
                image_to_numpy(image), Config.NORMAL_MAP_TEXTURES[key])
            image = numpy_to_image(normals)

        texture.SetInputData(image)
        texture.Modified()
        self._sources[key] = source
        logger.info("Texture %s loaded (%s)", key, source)
        return source

    def mark_failed(self, key: str) -> None:
        """Stop treating ``key`` as pending; its placeholder image stays."""
        self.texture(key)
        self._sources[key] = SOURCE_FAILED

    def load_all(self) -> None:
        for key in self.pending():
            self.load(key)

    def get_info(self) -> Dict[str, int]:
        """
        Get counts of textures by source.

        Returns:
            Dictionary with texture library information
        """
        info = {SOURCE_PLACEHOLDER: 0, SOURCE_FILE: 0, SOURCE_PROCEDURAL: 0, SOURCE_FAILED: 0}
        for source in self._sources.values():
            info[source] += 1
        info['total'] = len(self._sources)
        return info

    # ============================================
    # Private Helper Methods
    # ============================================

    def _create_placeholder_texture(self, key: str) -> vtk.vtkTexture:
        # Normal maps start flat so the surface is lit as if unbumped
        color = Config.FLAT_NORMAL_COLOR if key in Config.NORMAL_MAP_TEXTURES else Config.PLACEHOLDER_COLOR
        texture = vtk.vtkTexture()
        texture.SetInputData(solid_color_image(*color))
        texture.InterpolateOn()
        texture.RepeatOff()
        texture.EdgeClampOn()
        return texture

    def _read_texture_file(self, path: Path) -> Optional[vtk.vtkImageData]:
        """
        Read a JPEG or PNG file.

        Returns:
            Detached image data, or None if the file is missing or unreadable
        """
        if not path.exists():
            logger.debug("Texture file not found: %s", path)
            return None

        suffix = path.suffix.lower()
        if suffix in ('.jpg', '.jpeg'):
            reader = vtk.vtkJPEGReader()
        elif suffix == '.png':
            reader = vtk.vtkPNGReader()
        else:
            logger.warning("Unsupported texture format: %s", path)
            return None

        if not reader.CanReadFile(str(path)):
            logger.warning("Cannot read texture file: %s", path)
            return None

        reader.SetFileName(str(path))
        reader.Update()

        output = reader.GetOutput()
        if output.GetNumberOfPoints() == 0:
            logger.warning("Texture file is empty: %s", path)
            return None

        image = vtk.vtkImageData()
        image.DeepCopy(output)
        return image
