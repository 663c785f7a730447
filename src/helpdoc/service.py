"""Help-document generation workflow."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .assets import check_assets
from .loader import load_module_help
from .metadata_file import load_metadata_file
from .models import ModuleHelp
from .renderer import render_document
from .writer import write_document

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationResult:
    module_name: str
    output_path: Path
    command_count: int


def generate_help_document(
    module_name: str,
    output_path: Path,
    *,
    assets_dir: Path | None = None,
    metadata_path: Path | None = None,
) -> GenerationResult:
    """Check assets, load metadata, render, and write the document.

    Each step raises a HelpdocError on failure; the output file is only
    opened after the whole document has been rendered.
    """
    if assets_dir is None:
        assets_dir = Path.cwd()
    logger.debug("Checking presentation assets in %s", assets_dir)
    check_assets(assets_dir)

    module_help = load_help(module_name, metadata_path)
    document = render_document(module_help)
    write_document(document, output_path)

    return GenerationResult(
        module_name=module_name,
        output_path=output_path,
        command_count=len(module_help.commands),
    )


def load_help(module_name: str, metadata_path: Path | None = None) -> ModuleHelp:
    """Load module help from a JSON file when given, else by importing the module."""
    if metadata_path is not None:
        logger.debug("Reading metadata for %s from %s", module_name, metadata_path)
        return load_metadata_file(metadata_path, module_name)
    logger.debug("Importing module %s", module_name)
    return load_module_help(module_name)
