"""
blockicon/assemble.py
Icon assembly: option resolution and the generation pipeline

Order of RNG consumption is fixed and is part of the output format:
    1. seed the RNG
    2. color, bg_color, spot_color (6 draws each, skipped when supplied)
    3. bitmap rows, top to bottom
"""

from typing import Optional, Tuple

from .bitmap import build_bitmap
from .colors import pick_color
from .config import DEFAULTS, IconDefaults
from .logger import logger
from .models import BuildReport, Icon, IconOptions
from .rng import SeededRNG
from .seeds import resolve_seed


def _positive_int(name: str, value, default: int) -> int:
    if value is None:
        value = default
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def resolve_dimensions(
    options: IconOptions,
    defaults: Optional[IconDefaults] = None,
) -> Tuple[int, int]:
    """
    Resolve (size, scale) from options, falling back to defaults.

    Raises:
        ValueError: If either value is not a positive integer
    """
    defaults = defaults or DEFAULTS
    size = _positive_int("size", options.size, defaults.size)
    scale = _positive_int("scale", options.scale, defaults.scale)
    return size, scale


class IconBuilder:
    """
    Builds one icon from one set of options.

    Owns its RNG for the whole build; do not share a builder across threads.
    """

    def __init__(self, options: Optional[IconOptions] = None,
                 defaults: Optional[IconDefaults] = None):
        self.options = options or IconOptions()
        self.defaults = defaults or DEFAULTS
        self.rng = SeededRNG()
        self.report: Optional[BuildReport] = None

    def _resolve_color(self, supplied: Optional[str]) -> str:
        if supplied:
            return supplied
        return pick_color(self.rng)

    def build(self) -> Icon:
        """Run the pipeline and return the finished Icon."""
        size, scale = resolve_dimensions(self.options, self.defaults)
        seed, generated = resolve_seed(self.options.seed)

        self.rng.seed(seed)
        self.report = BuildReport(seed=seed)

        color = self._resolve_color(self.options.color)
        bg_color = self._resolve_color(self.options.bg_color)
        spot_color = self._resolve_color(self.options.spot_color)
        self.report.color_draws = self.rng.draws

        grid = build_bitmap(self.rng, size)
        self.report.bitmap_draws = self.rng.draws - self.report.color_draws

        logger.debug(
            f"Built {size}x{size} icon",
            component="ICON",
            details=f"seed={seed!r} draws={self.report.total_draws}",
        )

        return Icon(
            grid=grid,
            color=color,
            bg_color=bg_color,
            spot_color=spot_color,
            scale=scale,
            seed=seed,
            seed_generated=generated,
        )


def build_icon(options: Optional[IconOptions] = None,
               defaults: Optional[IconDefaults] = None,
               **kwargs) -> Icon:
    """
    Build an icon.

    Options may be passed as an IconOptions or as keyword arguments:

        build_icon(seed="0xfb6916095ca1df60bb79ce92ce3ea74c37c5d359")
        build_icon(IconOptions(seed="alice", size=12, scale=3))

    Raises:
        ValueError: On invalid size or scale
        SeedSourceError: If no seed is given and no entropy is available
    """
    if options is not None and kwargs:
        raise TypeError("Pass either an IconOptions or keyword options, not both")
    if options is None:
        options = IconOptions(**kwargs)
    return IconBuilder(options, defaults).build()
