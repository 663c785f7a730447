"""Presentation asset checks."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .constants import REQUIRED_ASSETS
from .errors import MissingDependencyError

logger = logging.getLogger(__name__)


def find_missing_assets(
    assets_dir: Path, required: Sequence[str] = REQUIRED_ASSETS
) -> list[str]:
    """Return every required asset name absent from assets_dir, in declared order."""
    return [name for name in required if not (assets_dir / name).is_file()]


def check_assets(assets_dir: Path, required: Sequence[str] = REQUIRED_ASSETS) -> None:
    """Check all required assets, then raise if any were missing."""
    missing = find_missing_assets(assets_dir, required)
    for name in missing:
        logger.warning("Missing presentation asset: %s", name)
    if missing:
        raise MissingDependencyError(missing)
    logger.debug("All %d presentation assets found in %s", len(required), assets_dir)
