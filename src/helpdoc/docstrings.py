"""Google-style docstring parsing.

Splits a docstring into the pieces a command-help record needs:

- first line: synopsis
- free text before the first section header: description lines
- Args / Arguments / Parameters: per-parameter descriptions
- Examples / Example: doctest blocks, output and prose become remarks
- See Also / Links: related-link URIs, one per line
- Note / Notes: note lines

Other sections (Returns, Raises, ...) are recognized so they end the previous
section, and are otherwise ignored.
"""

from __future__ import annotations

import doctest
import inspect
import re
import textwrap
from dataclasses import dataclass, field

from .models import Example

_SECTION_ALIASES = {
    "args": "args",
    "arguments": "args",
    "parameters": "args",
    "params": "args",
    "keyword args": "args",
    "keyword arguments": "args",
    "example": "examples",
    "examples": "examples",
    "see also": "links",
    "links": "links",
    "note": "notes",
    "notes": "notes",
    "returns": "ignored",
    "return": "ignored",
    "yields": "ignored",
    "raises": "ignored",
    "attributes": "ignored",
    "todo": "ignored",
    "warning": "ignored",
    "warnings": "ignored",
}
_SECTION_HEADER_RE = re.compile(r"^([A-Za-z][A-Za-z ]*):\s*$")
_ARG_ENTRY_RE = re.compile(r"^(\*{0,2}\w+)\s*(?:\(([^)]*)\))?\s*:\s*(.*)$")
_LIST_BULLET_RE = re.compile(r"^[-*]\s+")

_PROMPT = ">>> "
_CONTINUATION = "... "


@dataclass
class ParsedDocstring:
    synopsis: str | None = None
    description_lines: list[str] = field(default_factory=list)
    arg_descriptions: dict[str, str] = field(default_factory=dict)
    examples: list[Example] = field(default_factory=list)
    links: list[str] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)


def parse_docstring(doc: str | None) -> ParsedDocstring:
    """Parse a raw docstring. Missing or blank input yields an empty result."""
    parsed = ParsedDocstring()
    if not doc or not doc.strip():
        return parsed

    lines = inspect.cleandoc(doc).splitlines()
    parsed.synopsis = lines[0].strip() or None

    preamble: list[str] = []
    sections: list[tuple[str, list[str]]] = []
    current: list[str] = preamble
    for line in lines[1:]:
        section = _section_name(line)
        if section is not None:
            current = []
            sections.append((section, current))
            continue
        current.append(line)

    parsed.description_lines = _trim_blank_edges([line.rstrip() for line in preamble])

    for section, body_lines in sections:
        body = textwrap.dedent("\n".join(body_lines)).strip("\n")
        if section == "args":
            parsed.arg_descriptions.update(_parse_args(body))
        elif section == "examples":
            parsed.examples.extend(_parse_examples(body))
        elif section == "links":
            parsed.links.extend(_parse_list(body))
        elif section == "notes":
            parsed.notes.extend(
                _trim_blank_edges([line.rstrip() for line in body.splitlines()])
            )

    return parsed


def _section_name(line: str) -> str | None:
    # Section headers sit at column zero of the cleaned docstring.
    if line[:1].isspace():
        return None
    match = _SECTION_HEADER_RE.match(line.rstrip())
    if match is None:
        return None
    return _SECTION_ALIASES.get(match.group(1).strip().lower())


def _parse_args(body: str) -> dict[str, str]:
    descriptions: dict[str, str] = {}
    name: str | None = None
    for line in body.splitlines():
        if not line.strip():
            continue
        match = _ARG_ENTRY_RE.match(line) if not line[:1].isspace() else None
        if match is not None:
            name = match.group(1).lstrip("*")
            descriptions[name] = match.group(3).strip()
        elif name is not None:
            joined = f"{descriptions[name]} {line.strip()}"
            descriptions[name] = joined.strip()
    return descriptions


def _parse_examples(body: str) -> list[Example]:
    examples: list[Example] = []
    pending_prose: list[str] = []
    codes: list[str] = []
    remarks: list[list[str]] = []

    try:
        pieces = doctest.DocTestParser().parse(body)
    except ValueError:
        # Malformed prompts: keep the block verbatim as a single example.
        return [Example(code=body)] if body.strip() else []

    for piece in pieces:
        if isinstance(piece, doctest.Example):
            codes.append(_with_prompts(piece.source))
            remarks.append(pending_prose + _nonblank_lines(piece.want))
            pending_prose = []
            continue
        prose = _nonblank_lines(piece)
        if remarks:
            remarks[-1].extend(prose)
        else:
            pending_prose.extend(prose)

    for code, remark_lines in zip(codes, remarks):
        examples.append(Example(code=code, remark_lines=remark_lines))
    return examples


def _with_prompts(source: str) -> str:
    source_lines = source.rstrip("\n").splitlines()
    prompted = [_PROMPT + source_lines[0]] if source_lines else []
    prompted += [_CONTINUATION + line for line in source_lines[1:]]
    return "\n".join(prompted)


def _parse_list(body: str) -> list[str]:
    items: list[str] = []
    for line in body.splitlines():
        item = _LIST_BULLET_RE.sub("", line.strip())
        if item:
            items.append(item)
    return items


def _nonblank_lines(text: str) -> list[str]:
    return [line.strip() for line in text.splitlines() if line.strip()]


def _trim_blank_edges(lines: list[str]) -> list[str]:
    start = 0
    end = len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]
