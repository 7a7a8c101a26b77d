"""
chmpdf/util/images
"""

from __future__ import annotations

from os import PathLike
from typing import Union

import matplotlib.pyplot as plt
import numpy as np

from ..core.errors import ResourceError

ImageSource = Union[np.ndarray, str, "PathLike[str]"]


def as_image(source: ImageSource) -> np.ndarray:
    """
    Normalizes an image source into an array accepted by the canvas backends.

    Args:
        source (ImageSource): Pixel array (H x W, H x W x 3 or H x W x 4) or a path to
            an image file readable by Matplotlib.

    Returns:
        np.ndarray: Pixel array.

    Raises:
        ResourceError: If the source cannot be decoded or has an unsupported shape.
    """
    if isinstance(source, np.ndarray):
        pixels = source
    else:
        try:
            pixels = plt.imread(source)
        except (OSError, ValueError, SyntaxError) as exc:
            raise ResourceError(f"Cannot decode image {source!r}: {exc}") from exc
    # Validation
    if pixels.ndim not in (2, 3) or pixels.size == 0:
        raise ResourceError(f"Unsupported image shape {pixels.shape}")
    if pixels.ndim == 3 and pixels.shape[2] not in (3, 4):
        raise ResourceError(f"Unsupported channel count {pixels.shape[2]}")
    return pixels
