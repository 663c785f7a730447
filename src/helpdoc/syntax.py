"""Invocation syntax formatting.

Rebuilds the human-readable syntax line of one command variant:

    Get-Thing -Name <String> [-Force] [-Mode {Fast | Slow}]

Output is plain text; callers escape it before embedding it in HTML.
"""

from __future__ import annotations

from .constants import ALLOWED_VALUES_SEPARATOR
from .models import SyntaxParameter, SyntaxVariant


def format_syntax(variant: SyntaxVariant) -> str:
    """Return the canonical invocation string for one syntax variant."""
    parts = [variant.command_name]
    for parameter in variant.ordered_parameters:
        parts.append(format_parameter_fragment(parameter))
    return " ".join(parts)


def format_parameter_fragment(parameter: SyntaxParameter) -> str:
    """Return the fragment for a single parameter, without leading space."""
    placeholder = format_value_placeholder(parameter.value_type_name)
    if parameter.required:
        return f"-{parameter.name}{placeholder}"
    if placeholder:
        return f"[-{parameter.name}{placeholder}]"
    if parameter.allowed_value_set:
        values = ALLOWED_VALUES_SEPARATOR.join(parameter.allowed_value_set)
        return f"[-{parameter.name} {{{values}}}]"
    return f"[-{parameter.name}]"


def format_value_placeholder(type_name: str | None) -> str:
    """Return ' <type_name>' or an empty string when no type is declared."""
    if not type_name:
        return ""
    return f" <{type_name}>"
