"""
blockicon/models.py
Core data models
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .bitmap import data_width, mirror_width
from .config import FORMAT_VERSION


# =============================================================================
# IconOptions
# =============================================================================

@dataclass
class IconOptions:
    """
    Caller-facing options for one icon.

    Any field left as None is resolved at build time: size and scale from
    the defaults, seed from the entropy pool, colors from the RNG stream.
    An empty color string counts as unspecified.
    """
    seed: Optional[str] = None
    size: Optional[int] = None
    scale: Optional[int] = None
    color: Optional[str] = None
    bg_color: Optional[str] = None
    spot_color: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "seed": self.seed,
            "size": self.size,
            "scale": self.scale,
            "color": self.color,
            "bg_color": self.bg_color,
            "spot_color": self.spot_color,
        }

    @classmethod
    def from_dict(cls, d: dict) -> "IconOptions":
        return cls(
            seed=d.get("seed"),
            size=d.get("size"),
            scale=d.get("scale"),
            color=d.get("color"),
            bg_color=d.get("bg_color"),
            spot_color=d.get("spot_color"),
        )


# =============================================================================
# Icon
# =============================================================================

@dataclass(eq=False)
class Icon:
    """
    Everything a renderer needs: the grid, three colors and the scale.

    The seed is kept for provenance. seed_generated is True when the seed was
    synthesized, in which case the icon cannot be rebuilt from options alone
    unless the seed is passed back in.
    """
    grid: np.ndarray
    color: str
    bg_color: str
    spot_color: str
    scale: int
    seed: str = ""
    seed_generated: bool = False
    version: str = FORMAT_VERSION

    @property
    def size(self) -> int:
        """Cells per side."""
        return int(self.grid.shape[0])

    @property
    def pixel_size(self) -> int:
        """Pixels per side of the rendered surface."""
        return self.size * self.scale

    @property
    def data_width(self) -> int:
        return data_width(self.size)

    @property
    def mirror_width(self) -> int:
        return mirror_width(self.size)

    def same_image(self, other: "Icon") -> bool:
        """True if both icons render to identical pixels."""
        return (
            np.array_equal(self.grid, other.grid)
            and self.color == other.color
            and self.bg_color == other.bg_color
            and self.spot_color == other.spot_color
            and self.scale == other.scale
        )

    def to_dict(self) -> dict:
        return {
            "version": self.version,
            "seed": self.seed,
            "seed_generated": self.seed_generated,
            "size": self.size,
            "scale": self.scale,
            "color": self.color,
            "bg_color": self.bg_color,
            "spot_color": self.spot_color,
            "grid": self.grid.tolist(),
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Icon":
        grid = np.array(d["grid"], dtype=np.uint8)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError(f"grid must be square, got shape {grid.shape}")
        return cls(
            grid=grid,
            color=d["color"],
            bg_color=d["bg_color"],
            spot_color=d["spot_color"],
            scale=d["scale"],
            seed=d.get("seed", ""),
            seed_generated=d.get("seed_generated", False),
            version=d.get("version", FORMAT_VERSION),
        )


@dataclass
class BuildReport:
    """Draw accounting for one build, used by the CLI in verbose mode."""
    seed: str
    color_draws: int = 0
    bitmap_draws: int = 0

    @property
    def total_draws(self) -> int:
        return self.color_draws + self.bitmap_draws
