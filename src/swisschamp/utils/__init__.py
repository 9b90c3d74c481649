"""Shared helpers: logging setup, id generation and rounding."""

# Swiss Champ
# Copyright (C) 2025  Swiss Champ developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import math
import os
import uuid
from typing import Any, Callable

LOG_LEVEL_ENV = "SWISSCHAMP_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
ROOT_LOGGER_NAME = "swisschamp"


def _configure_root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
        root.setLevel(getattr(logging, level_name, logging.WARNING))
    return root


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger that propagates to the package root logger.

    The root handler is installed once; its level comes from the
    ``SWISSCHAMP_LOG_LEVEL`` environment variable (default ``WARNING``).
    """
    _configure_root_logger()
    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Change the level of the package root logger."""
    _configure_root_logger().setLevel(level)


def generate_id(prefix: str) -> str:
    """Generate a unique id such as ``season-3f2a9c0d1b4e``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def coerce_number(
    raw: Any, cast: Callable[[Any], Any], default: Any, label: str
) -> Any:
    """Convert a stored value with ``cast``, falling back to ``default``."""
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except (TypeError, ValueError, OverflowError):
        setup_logger(__name__).warning("Unusable %s %r, using %r", label, raw, default)
        return default
