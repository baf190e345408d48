"""Dome config save/load for JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from geodome.model import DomeConfig

logger = logging.getLogger(__name__)


def save_config(path: str | Path, config: DomeConfig) -> None:
    """Save a build recipe to a JSON file.

    Only non-default fields are written.  The file is human-readable
    with two-space indentation.

    Args:
        path: Destination file path.
        config: The recipe to save.
    """
    Path(path).write_text(json.dumps(config.to_dict(), indent=2) + "\n")
    logger.info("Saved dome config to %s", path)


def load_config(path: str | Path) -> DomeConfig:
    """Load a build recipe from a JSON file.

    Args:
        path: Source file path.

    Returns:
        The parsed :class:`DomeConfig`.

    Raises:
        ValueError: If the file is not a JSON object or contains
            unknown keys or invalid values.
    """
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(
            f"dome config must be a JSON object, got {type(data).__name__}"
        )
    logger.debug("Loaded dome config from %s: %s", path, data)
    return DomeConfig.from_dict(data)
