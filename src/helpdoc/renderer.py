"""HTML help-document renderer.

Produces one static page per module: a side menu (About plus one entry per
command with fixed sub-links) followed by the About section and one content
panel per command. All metadata text is escaped; anchors are derived from
command names and restricted to [A-Za-z0-9_-].
"""

from __future__ import annotations

import html
import re
from collections.abc import Iterable, Sequence

from .constants import (
    ABOUT_ANCHOR,
    COMMAND_SECTIONS,
    CONTENT_ANCHOR,
    LINE_BREAK,
    MENU_ANCHOR,
    RESERVED_ANCHORS,
    SCRIPT_ASSETS,
    STYLESHEET_ASSETS,
    TITLE_SUFFIX,
)
from .models import CommandHelp, Example, ModuleDescriptor, ModuleHelp, ParameterInfo
from .syntax import format_syntax, format_value_placeholder

_ANCHOR_UNSAFE_RE = re.compile(r"[^A-Za-z0-9_-]+")
_ANCHOR_COLLAPSE_RE = re.compile(r"-+")
_ANCHOR_FALLBACK = "command"


def render_document(module_help: ModuleHelp) -> str:
    """Render the complete HTML document for one module.

    The menu pass fully precedes the content pass; both walk the commands in
    supplied order and share one anchor per command.
    """
    module_name = _esc(module_help.module.name)
    commands = module_help.commands
    anchors = assign_anchors(command.name for command in commands)

    lines: list[str] = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '  <meta charset="UTF-8">',
        '  <meta name="viewport" content="width=device-width, initial-scale=1">',
        f"  <title>{module_name}{html.escape(TITLE_SUFFIX)}</title>",
    ]
    lines += [f'  <link rel="stylesheet" href="{name}">' for name in STYLESHEET_ASSETS]
    lines += [
        "</head>",
        "<body>",
        '  <div class="container-fluid">',
        '    <div class="row">',
    ]

    lines += _render_menu(module_name, commands, anchors)

    lines.append(f'      <main id="{CONTENT_ANCHOR}" class="col-md-9">')
    lines += _render_about(module_help.module)
    for command, anchor in zip(commands, anchors):
        lines += _render_command(command, anchor)
    lines.append("      </main>")

    lines += [
        "    </div>",
        "  </div>",
    ]
    lines += [f'  <script src="{name}"></script>' for name in SCRIPT_ASSETS]
    lines += ["</body>", "</html>", ""]
    return "\n".join(lines)


def anchor_id(name: str) -> str:
    """Return a link-safe identifier for a command name."""
    anchor = _ANCHOR_UNSAFE_RE.sub("-", name)
    anchor = _ANCHOR_COLLAPSE_RE.sub("-", anchor).strip("-")
    return anchor or _ANCHOR_FALLBACK


def assign_anchors(names: Iterable[str]) -> list[str]:
    """Return one unique anchor per name, in order.

    Names that sanitize to an identifier already in use (the page shell ids
    About, menu and content, earlier anchors, and the per-section anchors of
    earlier commands) get a -2, -3, ... suffix.
    """
    used = set(RESERVED_ANCHORS)
    anchors: list[str] = []
    for name in names:
        base = anchor_id(name)
        candidate = base
        suffix = 2
        while candidate in used or any(
            section_anchor(candidate, section) in used for section in COMMAND_SECTIONS
        ):
            candidate = f"{base}-{suffix}"
            suffix += 1
        used.add(candidate)
        used.update(section_anchor(candidate, section) for section in COMMAND_SECTIONS)
        anchors.append(candidate)
    return anchors


def section_anchor(anchor: str, section: str) -> str:
    return f"{anchor}-{section}"


def _render_menu(
    module_name: str, commands: Sequence[CommandHelp], anchors: Sequence[str]
) -> list[str]:
    lines = [
        f'      <nav id="{MENU_ANCHOR}" class="col-md-3">',
        f"        <h1>{module_name}</h1>",
        '        <ul class="nav">',
        f'          <li><a href="#{ABOUT_ANCHOR}">About</a></li>',
        "        </ul>",
        '        <ul class="nav commands">',
    ]
    for command, anchor in zip(commands, anchors):
        lines += [
            '          <li class="command">',
            f'            <a href="#{anchor}">{_esc(command.name)}</a>',
            '            <ul class="nav sections">',
        ]
        lines += [
            f'              <li><a href="#{section_anchor(anchor, section)}">{section}</a></li>'
            for section in COMMAND_SECTIONS
        ]
        lines += ["            </ul>", "          </li>"]
    lines += ["        </ul>", "      </nav>"]
    return lines


def _render_about(module: ModuleDescriptor) -> list[str]:
    fields = (
        ("Name", module.name),
        ("Description", module.description),
        ("Base path", module.base_path),
        ("Version", module.version),
        ("Author", module.author),
        ("Company", module.company_name),
        ("Copyright", module.copyright),
    )
    lines = [
        f'        <section id="{ABOUT_ANCHOR}" class="about">',
        f"          <h2>About {_esc(module.name)}</h2>",
        '          <dl class="module-info">',
    ]
    for label, value in fields:
        lines.append(f"            <dt>{label}</dt><dd>{_esc(value)}</dd>")
    lines += ["          </dl>", "        </section>"]
    return lines


def _render_command(command: CommandHelp, anchor: str) -> list[str]:
    lines = [
        f'        <section id="{anchor}" class="command">',
        f"          <h2>{_esc(command.name)}</h2>",
    ]
    lines += _heading(anchor, "Synopsis")
    lines.append(f"          <p>{_esc(command.synopsis)}</p>")

    lines += _heading(anchor, "Syntax")
    for variant in command.syntax_variants:
        lines.append(f'          <pre class="syntax">{_esc(format_syntax(variant))}</pre>')

    lines += _heading(anchor, "Description")
    lines.append(f"          <p>{_join_lines(command.description_lines)}</p>")

    lines += _heading(anchor, "Parameters")
    lines += _render_parameters(command.parameters)

    lines += _heading(anchor, "Inputs")
    lines.append(f"          <p>{_esc(command.input_type_name)}</p>")

    lines += _heading(anchor, "Outputs")
    lines.append(f"          <p>{_esc(command.output_type_name)}</p>")

    lines += _heading(anchor, "Examples")
    lines += _render_examples(command.examples)

    lines += _heading(anchor, "RelatedLinks")
    links = LINE_BREAK.join(
        f'<a href="{_esc(uri)}">{_esc(uri)}</a>' for uri in command.related_link_uris
    )
    lines.append(f"          <p>{links}</p>")

    lines += _heading(anchor, "Notes")
    lines.append(f"          <p>{_join_lines(command.notes)}</p>")

    lines.append("        </section>")
    return lines


def _heading(anchor: str, section: str) -> list[str]:
    return [f'          <h3 id="{section_anchor(anchor, section)}">{section}</h3>']


def _render_parameters(parameters: Sequence[ParameterInfo]) -> list[str]:
    lines = ['          <dl class="parameters">']
    for parameter in parameters:
        placeholder = format_value_placeholder(parameter.value_type_name)
        attributes = (
            ("Required?", _flag(parameter.required)),
            ("Position?", parameter.position),
            ("Default value", parameter.default_value),
            ("Accept pipeline input?", _flag(parameter.accepts_pipeline_input)),
            ("Accept wildcard characters?", _flag(parameter.accepts_wildcards)),
        )
        lines += [
            f"            <dt>-{_esc(parameter.name)}{_esc(placeholder)}</dt>",
            "            <dd>",
            f"              <p>{_esc(parameter.description)}</p>",
            '              <table class="table parameter-attributes">',
        ]
        lines += [
            f"                <tr><th>{label}</th><td>{_esc(value)}</td></tr>"
            for label, value in attributes
        ]
        lines += ["              </table>", "            </dd>"]
    lines.append("          </dl>")
    return lines


def _render_examples(examples: Sequence[Example]) -> list[str]:
    lines = ['          <div class="examples">']
    for number, example in enumerate(examples, start=1):
        lines += [
            '            <div class="example">',
            f"              <h4>Example {number}</h4>",
            f"              <pre><code>{_esc(example.code)}</code></pre>",
            f"              <p>{_join_lines(example.remark_lines)}</p>",
            "            </div>",
        ]
    lines.append("          </div>")
    return lines


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _join_lines(lines: Sequence[str]) -> str:
    return LINE_BREAK.join(_esc(line) for line in lines)


def _esc(value: object) -> str:
    """Escape a metadata value; None renders as an empty string."""
    if value is None:
        return ""
    return html.escape(str(value), quote=True)
