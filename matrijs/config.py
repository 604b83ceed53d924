"""Defaults shared by the renderer, the CLI, and the tests."""

from __future__ import annotations

import logging
from dataclasses import dataclass

DEFAULT_PRECISION = 4
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """How a matrix is turned into text.

    Parameters
    ----------
    precision:
        Digits after the decimal point. Must be non-negative.
    title:
        Optional caption used by table rendering.
    """

    precision: int = DEFAULT_PRECISION
    title: str | None = None

    def __post_init__(self) -> None:
        if self.precision < 0:
            raise ValueError("precision must be >= 0")

    def describe(self) -> str:
        """Return a human readable description.

        >>> RenderOptions().describe()
        'precision=4'
        >>> RenderOptions(2, "A").describe()
        'precision=2 title=A'
        """

        if self.title is None:
            return f"precision={self.precision}"
        return f"precision={self.precision} title={self.title}"


def parse_log_level(value: str | None) -> int:
    """Map a level name such as ``"debug"`` to its :mod:`logging` constant.

    Blank values fall back to :data:`DEFAULT_LOG_LEVEL`.
    """

    if value is None or value.strip() == "":
        value = DEFAULT_LOG_LEVEL
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {value!r}")
    return level
