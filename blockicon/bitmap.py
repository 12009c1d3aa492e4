"""
blockicon/bitmap.py
Mirrored cell grid construction
"""

import math
from typing import List

import numpy as np

from .config import CELL_FACTOR
from .rng import SeededRNG


def data_width(size: int) -> int:
    """Number of drawn cells per row."""
    return (size + 1) // 2


def mirror_width(size: int) -> int:
    """Number of reflected cells appended to each row."""
    return size - data_width(size)


def build_row(rng: SeededRNG, size: int) -> List[int]:
    """
    Draw one row and append its reflected prefix.

    Only the first mirror_width cells are reflected, so for odd sizes the
    middle cell is not repeated.
    """
    row = [math.floor(rng.generate() * CELL_FACTOR) for _ in range(data_width(size))]
    return row + row[:mirror_width(size)][::-1]


def build_bitmap(rng: SeededRNG, size: int) -> np.ndarray:
    """
    Build a size x size grid of cell values.

    Values are 0 (background), 1 (foreground) or anything larger (spot).
    Rows are drawn top to bottom from the shared RNG, data_width draws each.

    Raises:
        ValueError: If size is not a positive integer
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"size must be a positive integer, got {size!r}")

    rows = [build_row(rng, size) for _ in range(size)]
    return np.array(rows, dtype=np.uint8)


def is_mirrored(grid: np.ndarray) -> bool:
    """True if every row ends with the reverse of its first mirror_width cells."""
    grid = np.asarray(grid)
    if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
        return False
    width = mirror_width(grid.shape[1])
    if width == 0:
        return True
    return bool(np.array_equal(grid[:, -width:], grid[:, :width][:, ::-1]))
