"""Domain models for helpdoc.

Every record is a read-only snapshot built once by a metadata source and
consumed by a single rendering pass. Field names accept both snake_case and
camelCase spellings when validated from JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class _HelpRecord(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ModuleDescriptor(_HelpRecord):
    name: str | None = None
    description: str | None = None
    base_path: str | None = None
    version: str | None = None
    author: str | None = None
    company_name: str | None = None
    copyright: str | None = None


class ParameterInfo(_HelpRecord):
    name: str
    required: bool = False
    position: int | str | None = None
    default_value: str | None = None
    accepts_pipeline_input: bool = False
    accepts_wildcards: bool = False
    value_type_name: str | None = None
    description: str | None = None


class SyntaxParameter(_HelpRecord):
    name: str
    required: bool = False
    value_type_name: str | None = None
    allowed_value_set: list[str] | None = None


class SyntaxVariant(_HelpRecord):
    command_name: str
    # Order is significant and rendered exactly as supplied.
    ordered_parameters: list[SyntaxParameter] = []


class Example(_HelpRecord):
    code: str | None = None
    remark_lines: list[str] = []


class CommandHelp(_HelpRecord):
    name: str
    synopsis: str | None = None
    description_lines: list[str] = []
    parameters: list[ParameterInfo] = []
    syntax_variants: list[SyntaxVariant] = []
    input_type_name: str | None = None
    output_type_name: str | None = None
    examples: list[Example] = []
    related_link_uris: list[str] = []
    notes: list[str] = []


class ModuleHelp(_HelpRecord):
    module: ModuleDescriptor
    commands: list[CommandHelp] = []

    @model_validator(mode="after")
    def _command_names_are_unique(self) -> ModuleHelp:
        seen: set[str] = set()
        for command in self.commands:
            if command.name in seen:
                raise ValueError(f"Duplicate command name: {command.name}")
            seen.add(command.name)
        return self
