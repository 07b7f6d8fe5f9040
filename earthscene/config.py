"""
Configuration file for EarthScene
Contains all constants, default values, and configuration parameters
"""

import math


class Config:
    """Central configuration for the application"""

    # ============================================
    # APPLICATION METADATA
    # ============================================
    APP_NAME = "EarthScene"
    APP_VERSION = "0.1.0"
    ORGANIZATION = "EarthScene Development Team"

    # ============================================
    # FRAME LOOP PARAMETERS
    # ============================================
    FRAME_INTERVAL_MS = 16  # ~60 Hz refresh

    # Per-frame rotation about the vertical (Y) axis, radians
    EARTH_ROTATION_PER_FRAME = -0.0009    # Retrograde relative to clouds/stars
    CLOUDS_ROTATION_PER_FRAME = 0.0005
    STARFIELD_ROTATION_PER_FRAME = 0.0001

    # Asteroid is shown when the camera is further out than this
    ASTEROID_VISIBILITY_DISTANCE = 15.0

    # ============================================
    # EARTH PARAMETERS
    # ============================================
    EARTH_RADIUS = 0.6
    EARTH_SPHERE_SEGMENTS = 32
    EARTH_SHININESS = 30.0
    EARTH_SPECULAR = 0.2
    EARTH_BUMP_SCALE = 0.3    # Height map strength when converted to normals

    CLOUDS_RADIUS = 0.63
    CLOUDS_SPHERE_SEGMENTS = 32
    CLOUDS_OPACITY = 1.0

    # ============================================
    # STARFIELD PARAMETERS
    # ============================================
    STARFIELD_RADIUS = 80.0
    STARFIELD_SPHERE_SEGMENTS = 64

    # ============================================
    # ASTEROID PARAMETERS
    # ============================================
    ASTEROID_RADIUS = 4.0
    ASTEROID_POSITION = (30.0, 0.0, 0.0)
    ASTEROID_COLOR = (0.533, 0.533, 0.533)    # 0x888888
    ASTEROID_EMISSIVE_BOOST = 0.25            # Extra ambient in place of emissive
    ASTEROID_SPECULAR = 0.3

    DEBRIS_COUNT = 50
    DEBRIS_SIZE = 0.5
    DEBRIS_SPREAD = 6.0    # Edge of the cube debris is scattered in
    DEBRIS_COLOR = (0.467, 0.467, 0.467)      # 0x777777
    DEBRIS_SEED = None     # None -> different scatter each run

    # ============================================
    # LIGHTING
    # ============================================
    AMBIENT_LIGHT_INTENSITY = 0.5
    POINT_LIGHT_INTENSITY = 0.9
    POINT_LIGHT_POSITION = (5.0, 3.0, 5.0)
    LIGHT_COLOR = (1.0, 1.0, 1.0)

    # ============================================
    # CAMERA & CONTROLS
    # ============================================
    CAMERA_FOV = 45.0
    CAMERA_NEAR = 0.1
    CAMERA_FAR = 1000.0
    CAMERA_DEFAULT_POSITION = (0.0, 0.0, 4.0)
    CAMERA_DEFAULT_TARGET = (0.0, 0.0, 0.0)
    CAMERA_DEFAULT_VIEW_UP = (0.0, 1.0, 0.0)

    CONTROLS_DAMPING_FACTOR = 0.25
    CONTROLS_ROTATE_SPEED = 1.0
    CONTROLS_ZOOM_SPEED = 1.0
    CONTROLS_MIN_DISTANCE = 0.0
    CONTROLS_MAX_DISTANCE = math.inf
    CONTROLS_MIN_POLAR_ANGLE = 0.0
    CONTROLS_MAX_POLAR_ANGLE = math.pi    # Full range, no pole lock

    # ============================================
    # RENDERER
    # ============================================
    RENDERER_BACKGROUND_COLOR = (0.0, 0.0, 0.0)

    # ============================================
    # UI LAYOUT PARAMETERS
    # ============================================
    MAIN_WINDOW_WIDTH = 1280
    MAIN_WINDOW_HEIGHT = 800
    MAIN_WINDOW_START_X = 100
    MAIN_WINDOW_START_Y = 100

    SETTINGS_PANEL_MIN_WIDTH = 220
    SETTINGS_PANEL_MAX_WIDTH = 320

    # ============================================
    # APPEARANCE VARIANTS
    # ============================================
    # First entry of each list is the startup selection
    EARTH_TEXTURE_VARIANTS = ["earthmap", "specularmap", "citylightsmap"]
    ASTEROID_TEXTURE_VARIANTS = ["asteroid", "rock"]

    VARIANT_LABELS = {
        "earthmap": "Earth Map",
        "specularmap": "Specular Map",
        "citylightsmap": "City Lights",
        "asteroid": "Asteroid",
        "rock": "Rock",
    }

    # ============================================
    # FILE I/O
    # ============================================
    TEXTURE_FILES = {
        "earthmap": "earthmap.jpg",
        "specularmap": "specularmap.jpg",
        "citylightsmap": "citylightsmap.jpg",
        "earthbump": "earthbump.jpg",
        "earthcloud": "earthCloud.png",
        "galaxy": "galaxy.png",
        "asteroid": "asteroid.jpg",
        "rock": "rockTexture.jpg",
    }

    # Order textures are loaded in after startup
    TEXTURE_LOAD_ORDER = [
        "earthmap", "earthcloud", "galaxy", "earthbump",
        "specularmap", "citylightsmap", "asteroid", "rock",
    ]

    # Height maps converted to tangent-space normal maps on load: key -> bump scale
    NORMAL_MAP_TEXTURES = {
        "earthbump": EARTH_BUMP_SCALE,
    }

    # ============================================
    # PROCEDURAL TEXTURE PARAMETERS
    # ============================================
    PROCEDURAL_SEED = 42   # Reproducible fallbacks

    EARTH_TEXTURE_WIDTH = 1024
    EARTH_TEXTURE_HEIGHT = 512
    SURFACE_TEXTURE_SIZE = 256    # Square asteroid/rock textures

    STARFIELD_TEXTURE_WIDTH = 2048
    STARFIELD_TEXTURE_HEIGHT = 1024
    STARFIELD_NUM_STARS = 8000
    STARFIELD_BACKGROUND_COLOR = (5, 5, 15)
    STAR_MAGNITUDE_POWER = 3
    STAR_BLUE_WHITE_PROBABILITY = 0.7
    STAR_YELLOW_PROBABILITY = 0.2
    STAR_BLUE_WHITE_COLOR = [200, 210, 255]
    STAR_YELLOW_COLOR = [255, 245, 200]
    STAR_RED_COLOR = [255, 200, 150]

    CITY_LIGHT_DENSITY = 0.02
    CLOUD_COVER = 0.45

    PLACEHOLDER_COLOR = (0.2, 0.2, 0.2)
    FLAT_NORMAL_COLOR = (0.5, 0.5, 1.0)    # Unperturbed normal (0, 0, 1)

    # ============================================
    # DEBUG PARAMETERS
    # ============================================
    DEBUG_LOG_LEVEL = "INFO"
