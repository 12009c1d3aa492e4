"""
blockicon - Deterministic pixel-art identicons

Derives a small mirrored pixel-art avatar from any text seed. Same seed,
same icon.

Usage:
    from blockicon import build_icon, render_image

    icon = build_icon(seed="alice")
    render_image(icon).save("alice.png")

    python -m blockicon generate --seed alice --output alice.png
"""

__version__ = "0.1.0"

from .rng import SeededRNG
from .colors import pick_color, to_rgb
from .bitmap import build_bitmap
from .models import Icon, IconOptions
from .seeds import SeedSourceError, random_seed
from .assemble import IconBuilder, build_icon
from .render import Surface, PillowSurface, render_icon, render_image, rasterize
from .export import save_png, to_data_url, to_png_bytes
from .config import DEFAULTS, IconDefaults, load_defaults

__all__ = [
    # Version
    "__version__",
    # Generation
    "SeededRNG",
    "pick_color",
    "build_bitmap",
    "IconBuilder",
    "build_icon",
    # Models
    "Icon",
    "IconOptions",
    # Seeds
    "SeedSourceError",
    "random_seed",
    # Rendering
    "Surface",
    "PillowSurface",
    "render_icon",
    "render_image",
    "rasterize",
    "to_rgb",
    # Export
    "save_png",
    "to_data_url",
    "to_png_bytes",
    # Config
    "DEFAULTS",
    "IconDefaults",
    "load_defaults",
]
