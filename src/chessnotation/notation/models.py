"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class NotationOptions:
    """Tunable details of SAN output and input."""

    promotion_separator: str = "="
    accept_zero_castling: bool = True


DEFAULT_OPTIONS = NotationOptions()
