"""JSON metadata source.

Reads help records that were exported elsewhere (or written by hand) from a
JSON document shaped like ModuleHelp:

    {"module": {"name": "Sample", ...}, "commands": [{"name": "Get-Thing", ...}]}
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from .errors import ModuleNotFoundHelpError, UnexpectedMetadataShapeError
from .models import ModuleHelp

logger = logging.getLogger(__name__)


def load_metadata_file(path: Path, module_name: str) -> ModuleHelp:
    """Load and validate module help from a JSON file.

    The descriptor name must match module_name (case-insensitive), so a file
    describing a different module is reported as not found.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ModuleNotFoundHelpError(module_name, f"metadata file {path} does not exist") from exc
    except OSError as exc:
        raise ModuleNotFoundHelpError(module_name, f"metadata file {path} is unreadable: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise UnexpectedMetadataShapeError(f"Metadata file {path} is not valid JSON: {exc}") from exc

    try:
        module_help = ModuleHelp.model_validate(data)
    except ValidationError as exc:
        raise UnexpectedMetadataShapeError(
            f"Metadata file {path} does not describe a module: {exc}"
        ) from exc

    described = module_help.module.name or ""
    if described.casefold() != module_name.casefold():
        raise ModuleNotFoundHelpError(
            module_name, f"metadata file {path} describes '{described}'"
        )

    logger.debug("Loaded %d commands for %s from %s", len(module_help.commands), module_name, path)
    return module_help
