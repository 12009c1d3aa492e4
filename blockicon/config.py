"""
blockicon/config.py
Configuration constants for icon generation

Every constant below feeds the pixel output directly. Changing any of them
changes every icon ever generated for a given seed.
"""

import json
import os
from dataclasses import dataclass
from typing import Optional

# =============================================================================
# Version
# =============================================================================

FORMAT_VERSION = "1.0"

# =============================================================================
# Icon defaults
# =============================================================================

@dataclass
class IconDefaults:
    """Fallback values for options the caller leaves out."""
    size: int = 8    # data cells per side
    scale: int = 4   # pixels per data cell


DEFAULTS = IconDefaults()

# =============================================================================
# Color model
# =============================================================================

@dataclass
class ColorModel:
    """Constants for picking an HSL color from the RNG stream."""
    hue_range: int = 360
    saturation_base: float = 40.0
    saturation_span: float = 60.0
    lightness_span: float = 25.0
    lightness_draws: int = 4  # summed draws give a bell curve around the mean


COLOR_MODEL = ColorModel()

# H + S + lightness draws
COLOR_DRAWS = 2 + COLOR_MODEL.lightness_draws

# =============================================================================
# Bitmap
# =============================================================================

# floor(draw * CELL_FACTOR) over draws in [0, 2) gives cell values 0-4
CELL_FACTOR = 2.3

CELL_BACKGROUND = 0
CELL_FOREGROUND = 1

# =============================================================================
# Seeds
# =============================================================================

# Synthesized seeds are random integers below this bound, written in hex
SEED_ENTROPY_BOUND = 10 ** 16

# =============================================================================
# Render settings
# =============================================================================

@dataclass
class RenderConfig:
    """Raster output settings."""
    format: str = "PNG"
    mode: str = "RGB"


RENDER_CONFIG = RenderConfig()

# =============================================================================
# Loading
# =============================================================================

def load_defaults(path: Optional[str] = None) -> IconDefaults:
    """
    Load icon defaults from a JSON file.

    Missing keys keep their built-in value. A missing or unreadable file
    falls back to DEFAULTS with a warning.

    Example file:
        {"size": 12, "scale": 6}
    """
    from .logger import logger

    if path is None or not os.path.exists(path):
        return IconDefaults(size=DEFAULTS.size, scale=DEFAULTS.scale)

    try:
        with open(path, 'r') as f:
            data = json.load(f)
    except (json.JSONDecodeError, IOError) as e:
        logger.warning("Failed to load icon defaults", component="CONFIG", details=str(e))
        return IconDefaults(size=DEFAULTS.size, scale=DEFAULTS.scale)

    if not isinstance(data, dict):
        logger.warning("Icon defaults must be a JSON object", component="CONFIG", details=path)
        return IconDefaults(size=DEFAULTS.size, scale=DEFAULTS.scale)

    return IconDefaults(
        size=data.get("size", DEFAULTS.size),
        scale=data.get("scale", DEFAULTS.scale),
    )
