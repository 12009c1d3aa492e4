"""
blockicon/export.py
Writing rendered icons to files and data URLs
"""

import base64
import io
import json
from pathlib import Path
from typing import Union

from .config import RENDER_CONFIG
from .logger import logger
from .models import Icon
from .render import render_image


def to_png_bytes(icon: Icon) -> bytes:
    """Encode icon as PNG."""
    buf = io.BytesIO()
    render_image(icon).save(buf, format=RENDER_CONFIG.format)
    return buf.getvalue()


def to_data_url(icon: Icon) -> str:
    """Encode icon as a data: URL, ready for an <img src>."""
    encoded = base64.b64encode(to_png_bytes(icon)).decode("ascii")
    return f"data:image/{RENDER_CONFIG.format.lower()};base64,{encoded}"


def save_png(icon: Icon, path: Union[str, Path]) -> Path:
    """
    Render icon and write it to path. Parent directories are created.

    Returns:
        The written path
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    render_image(icon).save(path, format=RENDER_CONFIG.format)
    logger.info(f"Wrote {icon.pixel_size}x{icon.pixel_size} icon", component="EXPORT", details=str(path))
    return path


def save_json(icon: Icon, path: Union[str, Path]) -> Path:
    """Write the icon description (grid, colors, seed) as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f:
        json.dump(icon.to_dict(), f, indent=2)
    return path
