# scene/procedural_textures.py
"""
Procedural fallback images for EarthScene
Used whenever a texture file is missing or unreadable.

All images are uint8 arrays shaped (height, width, channels) with row 0 at the
bottom of the image (v = 0), which is how VTK lays out image data.
"""

from typing import Callable, Dict, Optional, Sequence, Tuple

import numpy as np

from ..config import Config


def _lat_lon_grid(width: int, height: int) -> Tuple[np.ndarray, np.ndarray]:
    lon = (np.arange(width) + 0.5) / width * 360.0 - 180.0
    lat = (np.arange(height) + 0.5) / height * 180.0 - 90.0
    return np.meshgrid(lon, lat)


def land_mask(width: int, height: int) -> np.ndarray:
    """
    Very simplified continent shapes.

    Returns:
        Boolean array (height, width), True over land
    """
    lon, lat = _lat_lon_grid(width, height)
    boxes = [
        (-140, -60, 15, 70),    # North America
        (-80, -35, -55, 15),    # South America
        (-20, 50, -35, 35),     # Africa
        (-10, 40, 35, 70),      # Europe
        (40, 180, 10, 75),      # Asia
        (110, 155, -45, -10),   # Australia
    ]
    mask = np.zeros(lon.shape, dtype=bool)
    for lon_min, lon_max, lat_min, lat_max in boxes:
        mask |= (lon > lon_min) & (lon < lon_max) & (lat > lat_min) & (lat < lat_max)
    return mask


def value_noise(width: int, height: int, rng: np.random.Generator, octaves: int = 4) -> np.ndarray:
    """
    Smooth noise in [0, 1] built from upsampled random grids.

    Args:
        width, height: Output size
        rng: Random generator
        octaves: Number of layered frequencies

    Returns:
        Float array (height, width)
    """
    result = np.zeros((height, width))
    amplitude = 1.0
    total = 0.0
    for octave in range(octaves):
        cells = 4 * 2 ** octave
        grid = rng.random((cells + 1, cells + 1))
        ys = np.linspace(0, cells, height)
        xs = np.linspace(0, cells, width)
        y0 = np.minimum(ys.astype(int), cells - 1)
        x0 = np.minimum(xs.astype(int), cells - 1)
        ty = (ys - y0)[:, None]
        tx = (xs - x0)[None, :]
        top = grid[y0][:, x0] * (1 - tx) + grid[y0][:, x0 + 1] * tx
        bottom = grid[y0 + 1][:, x0] * (1 - tx) + grid[y0 + 1][:, x0 + 1] * tx
        result += amplitude * (top * (1 - ty) + bottom * ty)
        total += amplitude
        amplitude *= 0.5
    return result / total


def earth_map(width: int = Config.EARTH_TEXTURE_WIDTH,
              height: int = Config.EARTH_TEXTURE_HEIGHT) -> np.ndarray:
    """Green/brown land over a blue ocean."""
    mask = land_mask(width, height)
    x = np.arange(width)[None, :]
    y = np.arange(height)[:, None]

    land_variation = ((x + y) % 50) / 50.0
    ocean_variation = ((x * 3 + y * 2) % 40) / 40.0

    image = np.empty((height, width, 3), dtype=np.uint8)
    image[..., 0] = np.where(mask, 80 + land_variation * 60, 20 + ocean_variation * 30)
    image[..., 1] = np.where(mask, 100 + land_variation * 80, 60 + ocean_variation * 60)
    image[..., 2] = np.where(mask, 40 + land_variation * 40, 120 + ocean_variation * 80)
    return image


def specular_map(width: int = Config.EARTH_TEXTURE_WIDTH,
                 height: int = Config.EARTH_TEXTURE_HEIGHT) -> np.ndarray:
    """Bright oceans, dark land."""
    mask = land_mask(width, height)
    value = np.where(mask, 10, 230).astype(np.uint8)
    return np.repeat(value[..., None], 3, axis=2)


def city_lights_map(width: int = Config.EARTH_TEXTURE_WIDTH,
                    height: int = Config.EARTH_TEXTURE_HEIGHT,
                    seed: int = Config.PROCEDURAL_SEED) -> np.ndarray:
    """Scattered warm lights over land on a black background."""
    rng = np.random.default_rng(seed)
    mask = land_mask(width, height)
    lit = mask & (rng.random((height, width)) < Config.CITY_LIGHT_DENSITY)
    brightness = rng.random((height, width)) * 0.5 + 0.5

    image = np.zeros((height, width, 3), dtype=np.uint8)
    image[..., 0] = np.where(lit, 255 * brightness, 0)
    image[..., 1] = np.where(lit, 220 * brightness, 0)
    image[..., 2] = np.where(lit, 140 * brightness, 0)
    return image


def bump_map(width: int = Config.EARTH_TEXTURE_WIDTH,
             height: int = Config.EARTH_TEXTURE_HEIGHT,
             seed: int = Config.PROCEDURAL_SEED) -> np.ndarray:
    """Grey height map: rough raised continents over flat oceans."""
    rng = np.random.default_rng(seed + 2)
    noise = value_noise(width, height, rng, octaves=5)
    heights = np.where(land_mask(width, height), 0.35 + 0.65 * noise, 0.1 * noise)
    value = (heights * 255).astype(np.uint8)
    return np.repeat(value[..., None], 3, axis=2)


def height_to_normal_map(heights: np.ndarray, scale: float = Config.EARTH_BUMP_SCALE) -> np.ndarray:
    """
    Convert a height map to a tangent-space normal map.

    Args:
        heights: (height, width) or (height, width, channels) array in 0-255,
            only the first channel is used
        scale: Bump strength applied to the height gradient

    Returns:
        uint8 RGB array with each normal encoded as (n + 1) / 2
    """
    if heights.ndim == 3:
        heights = heights[..., 0]
    if min(heights.shape) < 2:
        raise ValueError(f"Height map too small for gradients: {heights.shape}")

    d_row, d_col = np.gradient(heights.astype(float))
    normals = np.stack([-d_col * scale, -d_row * scale, np.ones(heights.shape)], axis=-1)
    normals /= np.linalg.norm(normals, axis=-1, keepdims=True)
    return np.round((normals + 1.0) * 0.5 * 255).astype(np.uint8)


def cloud_map(width: int = Config.EARTH_TEXTURE_WIDTH,
              height: int = Config.EARTH_TEXTURE_HEIGHT,
              seed: int = Config.PROCEDURAL_SEED) -> np.ndarray:
    """White clouds with alpha, transparent elsewhere."""
    rng = np.random.default_rng(seed + 1)
    noise = value_noise(width, height, rng, octaves=5)
    cover = Config.CLOUD_COVER
    alpha = np.clip((noise - (1.0 - cover)) / cover, 0.0, 1.0)

    image = np.full((height, width, 4), 255, dtype=np.uint8)
    image[..., 3] = (alpha * 255).astype(np.uint8)
    return image


def starfield_map(width: int = Config.STARFIELD_TEXTURE_WIDTH,
                  height: int = Config.STARFIELD_TEXTURE_HEIGHT,
                  num_stars: int = Config.STARFIELD_NUM_STARS,
                  seed: int = Config.PROCEDURAL_SEED) -> np.ndarray:
    """Equirectangular star map: mostly blue-white stars, some yellow and red."""
    rng = np.random.default_rng(seed)
    image = np.empty((height, width, 3), dtype=float)
    image[...] = Config.STARFIELD_BACKGROUND_COLOR

    xs = rng.integers(0, width, num_stars)
    ys = rng.integers(0, height, num_stars)
    # Weighted toward dimmer stars
    magnitude = rng.random(num_stars) ** Config.STAR_MAGNITUDE_POWER

    color_type = rng.random(num_stars)
    base = np.empty((num_stars, 3))
    blue_white = color_type < Config.STAR_BLUE_WHITE_PROBABILITY
    yellow = ~blue_white & (color_type < Config.STAR_BLUE_WHITE_PROBABILITY
                            + Config.STAR_YELLOW_PROBABILITY)
    base[:] = Config.STAR_RED_COLOR
    base[blue_white] = Config.STAR_BLUE_WHITE_COLOR
    base[yellow] = Config.STAR_YELLOW_COLOR

    star_colors = np.clip(base * magnitude[:, None], 0, 255)
    image[ys, xs] = star_colors

    # Bright stars get a small glow
    for x, y, color, mag in zip(xs, ys, star_colors, magnitude):
        if mag <= 0.95:
            continue
        y0, y1 = max(0, y - 1), min(height, y + 2)
        x0, x1 = max(0, x - 1), min(width, x + 2)
        image[y0:y1, x0:x1] = np.minimum(255, image[y0:y1, x0:x1] + color * 0.3 * mag)

    return image.astype(np.uint8)


def rocky_surface(size: int = Config.SURFACE_TEXTURE_SIZE,
                  base_color: Sequence[int] = (136, 136, 136),
                  seed: int = Config.PROCEDURAL_SEED) -> np.ndarray:
    """Mottled grey rock."""
    rng = np.random.default_rng(seed)
    noise = value_noise(size, size, rng, octaves=5)
    grain = rng.random((size, size)) * 0.15
    shade = 0.55 + noise * 0.6 + grain

    image = np.asarray(base_color, dtype=float)[None, None, :] * shade[..., None]
    return np.clip(image, 0, 255).astype(np.uint8)


# Texture key -> fallback generator
GENERATORS: Dict[str, Callable[[], np.ndarray]] = {
    "earthmap": earth_map,
    "specularmap": specular_map,
    "citylightsmap": city_lights_map,
    "earthbump": bump_map,
    "earthcloud": cloud_map,
    "galaxy": starfield_map,
    "asteroid": lambda: rocky_surface(base_color=(150, 140, 130), seed=Config.PROCEDURAL_SEED),
    "rock": lambda: rocky_surface(base_color=(120, 105, 90), seed=Config.PROCEDURAL_SEED + 7),
}


def generate(key: str) -> Optional[np.ndarray]:
    """Generate the fallback image for ``key``, or None if there is none."""
    generator = GENERATORS.get(key)
    return generator() if generator is not None else None
