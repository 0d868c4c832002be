"""Engine logger set-up and helpers for printing vectors and matrices."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

LOGGER_NAME = "LEI"
TRACE = 5

_HANDLER_MARK = "_lei_handler"

logging.addLevelName(TRACE, "TRACE")


def get_logger() -> logging.Logger:
    """Return the engine logger."""
    return logging.getLogger(LOGGER_NAME)


def init_logging() -> logging.Logger:
    """Configure the engine logger to print every message, down to trace level.

    Calling it more than once leaves a single console handler in place.
    """
    logger = get_logger()
    logger.setLevel(TRACE)
    if not any(getattr(handler, _HANDLER_MARK, False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("[%(asctime)s] %(name)s: %(message)s", datefmt="%H:%M:%S")
        )
        setattr(handler, _HANDLER_MARK, True)
        logger.addHandler(handler)
    return logger


def _fmt(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def format_mat4(mat) -> str:
    """Render a 4x4 matrix as four lines of the form ``ROW i: a, b, c, d``."""
    array = np.asarray(mat)
    if array.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {array.shape}")
    return "\n".join(
        f"ROW {i}: " + ", ".join(_fmt(value) for value in row)
        for i, row in enumerate(array)
    )


def format_vec3(name: str, vec: Sequence[float]) -> str:
    """Render a named 3-vector as ``name: (x, y, z)``."""
    array = np.asarray(vec)
    if array.shape != (3,):
        raise ValueError(f"expected a 3-vector, got shape {array.shape}")
    return f"{name}: (" + ", ".join(_fmt(value) for value in array) + ")"