"""In-memory surname index."""

from __future__ import annotations

from .surname_index import IndexSnapshot, SurnameIndex

__all__ = ["IndexSnapshot", "SurnameIndex"]
