"""Python module metadata source.

Imports a module by name and normalizes its exported callables into
CommandHelp records. Nothing downstream of this module touches live Python
objects; the renderer only sees the typed models.
"""

from __future__ import annotations

import enum
import importlib
import inspect
import logging
import types
import typing
from collections.abc import Callable
from importlib import metadata
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .constants import KEYWORD_ONLY_POSITION
from .docstrings import ParsedDocstring, parse_docstring
from .errors import ModuleNotFoundHelpError, UnexpectedMetadataShapeError
from .models import (
    CommandHelp,
    ModuleDescriptor,
    ModuleHelp,
    ParameterInfo,
    SyntaxParameter,
    SyntaxVariant,
)

logger = logging.getLogger(__name__)

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)
_VARIADIC_KINDS = (
    inspect.Parameter.VAR_POSITIONAL,
    inspect.Parameter.VAR_KEYWORD,
)


def load_module_help(module_name: str) -> ModuleHelp:
    """Import module_name and collect help for every exported command.

    Raises:
        ModuleNotFoundHelpError: The module cannot be imported.
        UnexpectedMetadataShapeError: The module's export list or metadata
            does not fit the help model.
    """
    if module_name.startswith("."):
        raise ModuleNotFoundHelpError(module_name, "relative module names cannot be imported")
    try:
        module = importlib.import_module(module_name)
    except (ImportError, ValueError, TypeError) as exc:
        raise ModuleNotFoundHelpError(module_name, str(exc)) from exc
    except Exception as exc:  # noqa: BLE001
        # The module exists but failed while executing its top level.
        logger.debug("Import of %s raised", module_name, exc_info=True)
        raise ModuleNotFoundHelpError(
            module_name, f"import failed with {type(exc).__name__}: {exc}"
        ) from exc

    if not isinstance(module, types.ModuleType):
        raise UnexpectedMetadataShapeError(
            f"'{module_name}' resolved to {type(module).__name__}, not a module."
        )

    logger.debug("Imported module %s from %s", module.__name__, getattr(module, "__file__", None))

    commands = [
        describe_command(name, obj) for name, obj in exported_commands(module)
    ]
    try:
        return ModuleHelp(module=describe_module(module), commands=commands)
    except ValidationError as exc:
        raise UnexpectedMetadataShapeError(
            f"Metadata for '{module_name}' is invalid: {exc}"
        ) from exc


def describe_module(module: types.ModuleType) -> ModuleDescriptor:
    """Build the module descriptor from module-level dunder attributes."""
    module_file = getattr(module, "__file__", None)
    base_path = str(Path(module_file).resolve().parent) if module_file else None
    version = _text(getattr(module, "__version__", None))
    if version is None:
        version = _distribution_version(module.__name__)

    return ModuleDescriptor(
        name=module.__name__,
        description=_first_paragraph(inspect.getdoc(module)),
        base_path=base_path,
        version=version,
        author=_text(getattr(module, "__author__", None)),
        company_name=_text(getattr(module, "__maintainer__", None)),
        copyright=_text(getattr(module, "__copyright__", None)),
    )


def exported_commands(module: types.ModuleType) -> list[tuple[str, Callable[..., Any]]]:
    """Return (name, callable) pairs the module exports, in export order.

    With __all__, its order is kept and non-callables are skipped.
    Without it, public functions and classes defined in the module itself
    are taken, sorted by name.
    """
    exported = getattr(module, "__all__", None)
    if exported is None:
        names = sorted(
            name
            for name, obj in vars(module).items()
            if not name.startswith("_")
            and (inspect.isfunction(obj) or inspect.isclass(obj))
            and getattr(obj, "__module__", None) == module.__name__
        )
    else:
        if isinstance(exported, str) or not all(isinstance(n, str) for n in exported):
            raise UnexpectedMetadataShapeError(
                f"{module.__name__}.__all__ must be a sequence of names."
            )
        names = list(dict.fromkeys(exported))

    commands: list[tuple[str, Callable[..., Any]]] = []
    for name in names:
        try:
            obj = getattr(module, name)
        except AttributeError as exc:
            raise UnexpectedMetadataShapeError(
                f"{module.__name__}.__all__ lists '{name}', which does not exist."
            ) from exc
        if not callable(obj):
            logger.debug("Skipping non-callable export %s", name)
            continue
        commands.append((name, obj))
    return commands


def describe_command(name: str, obj: Callable[..., Any]) -> CommandHelp:
    """Normalize one exported callable into a CommandHelp record."""
    doc = parse_docstring(inspect.getdoc(obj))
    signature = _signature(obj)
    hints = _resolved_hints(obj.__init__ if inspect.isclass(obj) else obj)

    parameters: list[ParameterInfo] = []
    input_type_name: str | None = None
    if signature is not None:
        parameters = _parameter_infos(signature, hints, doc)
        input_type_name = _input_type_name(signature, hints)

    command = CommandHelp(
        name=name,
        synopsis=doc.synopsis,
        description_lines=doc.description_lines,
        parameters=parameters,
        syntax_variants=_syntax_variants(name, obj, signature, hints),
        input_type_name=input_type_name,
        output_type_name=_output_type_name(obj, signature, hints),
        examples=doc.examples,
        related_link_uris=doc.links,
        notes=doc.notes,
    )
    logger.debug(
        "Loaded command %s (%d parameters, %d syntax variants, %d examples)",
        name,
        len(command.parameters),
        len(command.syntax_variants),
        len(command.examples),
    )
    return command


def _parameter_infos(
    signature: inspect.Signature,
    hints: dict[str, Any],
    doc: ParsedDocstring,
) -> list[ParameterInfo]:
    infos: list[ParameterInfo] = []
    position = 0
    for parameter in signature.parameters.values():
        value_type_name, _allowed = _type_info(hints.get(parameter.name, parameter.annotation))
        if parameter.kind in _POSITIONAL_KINDS:
            param_position: int | str = position
            position += 1
        else:
            param_position = KEYWORD_ONLY_POSITION
        default_value = None
        if parameter.default is not inspect.Parameter.empty:
            default_value = repr(parameter.default)

        infos.append(
            ParameterInfo(
                name=parameter.name,
                required=_is_required(parameter),
                position=param_position,
                default_value=default_value,
                accepts_pipeline_input=parameter.kind == inspect.Parameter.VAR_POSITIONAL,
                accepts_wildcards=parameter.kind == inspect.Parameter.VAR_KEYWORD,
                value_type_name=value_type_name,
                description=doc.arg_descriptions.get(parameter.name),
            )
        )
    return infos


def _syntax_variants(
    name: str,
    obj: Callable[..., Any],
    signature: inspect.Signature | None,
    hints: dict[str, Any],
) -> list[SyntaxVariant]:
    overloads = typing.get_overloads(obj) if inspect.isfunction(obj) else []
    if overloads:
        variants: list[SyntaxVariant] = []
        for overload in overloads:
            overload_signature = _signature(overload)
            if overload_signature is None:
                continue
            variants.append(
                _syntax_variant(name, overload_signature, _resolved_hints(overload))
            )
        return variants

    if signature is None:
        return [SyntaxVariant(command_name=name)]
    return [_syntax_variant(name, signature, hints)]


def _syntax_variant(
    name: str, signature: inspect.Signature, hints: dict[str, Any]
) -> SyntaxVariant:
    parameters: list[SyntaxParameter] = []
    for parameter in signature.parameters.values():
        value_type_name, allowed = _type_info(hints.get(parameter.name, parameter.annotation))
        parameters.append(
            SyntaxParameter(
                name=parameter.name,
                required=_is_required(parameter),
                value_type_name=value_type_name,
                allowed_value_set=allowed,
            )
        )
    return SyntaxVariant(command_name=name, ordered_parameters=parameters)


def _input_type_name(signature: inspect.Signature, hints: dict[str, Any]) -> str | None:
    for parameter in signature.parameters.values():
        if parameter.kind in _POSITIONAL_KINDS:
            annotation = hints.get(parameter.name, parameter.annotation)
            return _type_name(_unwrap_optional(annotation))
    return None


def _output_type_name(
    obj: Callable[..., Any],
    signature: inspect.Signature | None,
    hints: dict[str, Any],
) -> str | None:
    if inspect.isclass(obj):
        return obj.__name__
    if signature is None:
        return None
    return _type_name(hints.get("return", signature.return_annotation))


def _is_required(parameter: inspect.Parameter) -> bool:
    return parameter.default is inspect.Parameter.empty and parameter.kind not in _VARIADIC_KINDS


def _type_info(annotation: Any) -> tuple[str | None, list[str] | None]:
    """Return (value type name, allowed values) for one annotation.

    bool is a switch and takes no value. Literal and Enum annotations carry
    an allowed-value set instead of a type placeholder.
    """
    annotation = _unwrap_optional(annotation)
    if annotation is inspect.Parameter.empty or annotation is bool or annotation == "bool":
        return None, None
    if typing.get_origin(annotation) is typing.Literal:
        return None, [str(value) for value in typing.get_args(annotation)]
    if inspect.isclass(annotation) and issubclass(annotation, enum.Enum):
        return None, [str(member.value) for member in annotation]
    return _type_name(annotation), None


def _unwrap_optional(annotation: Any) -> Any:
    if typing.get_origin(annotation) in (typing.Union, types.UnionType):
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def _type_name(annotation: Any) -> str | None:
    if annotation is inspect.Parameter.empty or annotation is inspect.Signature.empty:
        return None
    if annotation is None or annotation is type(None):
        return None
    if isinstance(annotation, str):
        return annotation or None
    if inspect.isclass(annotation) and typing.get_origin(annotation) is None:
        return annotation.__name__
    return str(annotation).replace("typing.", "")


def _signature(obj: Callable[..., Any]) -> inspect.Signature | None:
    try:
        return inspect.signature(obj)
    except (TypeError, ValueError):
        # Some builtins and extension callables expose no signature.
        return None


def _resolved_hints(obj: Any) -> dict[str, Any]:
    try:
        return typing.get_type_hints(obj)
    except Exception:  # noqa: BLE001
        # Unresolvable forward references fall back to the raw annotations.
        return {}


def _distribution_version(module_name: str) -> str | None:
    top_level = module_name.partition(".")[0]
    for dist_name in metadata.packages_distributions().get(top_level, []):
        try:
            return metadata.version(dist_name)
        except metadata.PackageNotFoundError:
            continue
    return None


def _first_paragraph(doc: str | None) -> str | None:
    if not doc:
        return None
    paragraph = doc.strip().split("\n\n", 1)[0]
    return " ".join(paragraph.split()) or None


def _text(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value)
    return str(value)
