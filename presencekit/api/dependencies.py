"""Shared FastAPI dependencies."""

import logging
from functools import lru_cache

from fastapi import HTTPException, status

from presencekit.config import get_customizer_path
from presencekit.templates import Customizer, load_customizer

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _cached_customizer() -> Customizer:
    return load_customizer(get_customizer_path())


def get_customizer() -> Customizer:
    """Get the customizer catalog configured by CUSTOMIZER_PATH.

    Loaded once and cached. Tests replace this dependency via
    app.dependency_overrides.
    """
    try:
        return _cached_customizer()
    except (OSError, ValueError) as e:
        logger.error("[CUSTOMIZER] Failed to load catalog: %s", e)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Customizer catalog unavailable",
        ) from e


def clear_customizer_cache() -> None:
    """Drop the cached catalog (forces reload on next request)."""
    _cached_customizer.cache_clear()
