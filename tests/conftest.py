"""Pytest configuration and fixtures for helpdoc tests."""

import logging
from pathlib import Path

import pytest

from helpdoc.constants import REQUIRED_ASSETS
from helpdoc.models import (
    CommandHelp,
    Example,
    ModuleDescriptor,
    ModuleHelp,
    ParameterInfo,
    SyntaxParameter,
    SyntaxVariant,
)


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Drop handlers the CLI attached, so they never outlive a captured stream."""
    yield
    app_logger = logging.getLogger("helpdoc")
    for handler in app_logger.handlers[:]:
        app_logger.removeHandler(handler)
    app_logger.setLevel(logging.NOTSET)


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    """Directory holding every required presentation asset."""
    directory = tmp_path / "assets"
    directory.mkdir()
    for name in REQUIRED_ASSETS:
        (directory / name).write_text("/* asset */\n", encoding="utf-8")
    return directory


@pytest.fixture
def sample_help() -> ModuleHelp:
    """Module 'Sample' with one fully populated command 'Get-Thing'."""
    command = CommandHelp(
        name="Get-Thing",
        synopsis="Gets a thing.",
        description_lines=["Looks the thing up.", "Returns a copy."],
        parameters=[
            ParameterInfo(
                name="Name",
                required=True,
                position=0,
                value_type_name="String",
                description="Name of the thing.",
            ),
            ParameterInfo(
                name="Force",
                required=False,
                position="named",
                default_value="False",
                description="Skip the cache.",
            ),
        ],
        syntax_variants=[
            SyntaxVariant(
                command_name="Get-Thing",
                ordered_parameters=[
                    SyntaxParameter(name="Name", required=True, value_type_name="String"),
                    SyntaxParameter(name="Force", required=False),
                ],
            )
        ],
        input_type_name="String",
        output_type_name="Thing",
        examples=[
            Example(code="Get-Thing -Name a", remark_lines=["Gets thing a."]),
            Example(code="Get-Thing -Name b -Force", remark_lines=["Reloads b.", "Slow."]),
        ],
        related_link_uris=["https://example.com/things"],
        notes=["Thread-safe."],
    )
    return ModuleHelp(
        module=ModuleDescriptor(name="Sample", version="1.0", author="Sample Author"),
        commands=[command],
    )
