"""Scroller component."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Scroller:
    """Static message plus the x position of its first character."""

    message: str
    offset: float
