"""Ground-plane terrain built from an elevation image."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

ELEVATION_PATH = "./data/textures/elevation.png"
TERRAIN_DIM = 128
_NATIVE_MODES = {"L", "LA", "RGB", "RGBA"}


def load_elevation(path: str | Path = ELEVATION_PATH) -> np.ndarray:
    """Read elevation bytes from an image, bottom row first.

    The image keeps its own channel count; the first width * height bytes
    of its interleaved data are returned.
    """
    with Image.open(path) as image:
        if image.mode not in _NATIVE_MODES:
            has_alpha = "A" in image.getbands() or "transparency" in image.info
            image = image.convert("RGBA" if has_alpha else "RGB")
        flipped = image.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
        width, height = flipped.size
        data = np.frombuffer(flipped.tobytes(), dtype=np.uint8)
    return data[: width * height].copy()


def ground_plane_vertices(elevation, dim: int = TERRAIN_DIM) -> np.ndarray:
    """Vertices of a dim x dim ground grid as rows of (x, height, z, u, v).

    The vertex at x = i, z = j sits in row j * dim + i and takes its height
    from elevation[i * dim + j].
    """
    if dim <= 0:
        raise ValueError("dimension must be positive")
    heights = np.asarray(elevation, dtype=np.float32).ravel()
    if heights.size < dim * dim:
        raise ValueError(f"need {dim * dim} elevation values, got {heights.size}")
    vert_y, vert_x = np.divmod(np.arange(dim * dim), dim)
    x = vert_x.astype(np.float32)
    z = vert_y.astype(np.float32)
    return np.column_stack([
        x,
        heights[vert_x * dim + vert_y],
        z,
        x / dim,
        z / dim,
    ]).astype(np.float32)


def ground_plane_indices(dim: int = TERRAIN_DIM) -> np.ndarray:
    """Triangle indices for a dim x dim grid: two triangles per cell, flattened."""
    if dim <= 0:
        raise ValueError("dimension must be positive")
    vi = np.arange(dim * dim - dim, dtype=np.uint32)
    vi = vi[(vi + 1) % dim != 0]
    return np.column_stack([
        vi + 1, vi + dim + 1, vi,
        vi, vi + dim + 1, vi + dim,
    ]).astype(np.uint32).ravel()