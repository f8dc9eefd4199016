"""Payment matching services."""

from __future__ import annotations

from .matching_service import MatchingService

__all__ = ["MatchingService"]
