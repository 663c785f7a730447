"""Tests for Google-style docstring parsing."""

from helpdoc.docstrings import parse_docstring
from helpdoc.models import Example


def test_missing_docstring_yields_empty_result() -> None:
    parsed = parse_docstring(None)
    assert parsed.synopsis is None
    assert parsed.description_lines == []
    assert parsed.arg_descriptions == {}
    assert parsed.examples == []
    assert parsed.links == []
    assert parsed.notes == []


def test_blank_docstring_yields_empty_result() -> None:
    assert parse_docstring("   \n  ").synopsis is None


def test_synopsis_and_description() -> None:
    parsed = parse_docstring(
        """Fetch a record.

        Looks the record up by key.
        Falls back to the cache.

        Returns:
            The record.
        """
    )
    assert parsed.synopsis == "Fetch a record."
    assert parsed.description_lines == ["Looks the record up by key.", "Falls back to the cache."]


def test_args_section_with_types_and_continuations() -> None:
    parsed = parse_docstring(
        """Do it.

        Args:
            path (str): Where to look.
            recursive: Descend into
                subdirectories.
            *patterns: Glob patterns.
            **options: Extra options.
        """
    )
    assert parsed.arg_descriptions == {
        "path": "Where to look.",
        "recursive": "Descend into subdirectories.",
        "patterns": "Glob patterns.",
        "options": "Extra options.",
    }


def test_examples_section_collects_code_output_and_prose() -> None:
    parsed = parse_docstring(
        """Add numbers.

        Examples:
            Adding two numbers:

            >>> add(1, 2)
            3

            The result is an int.

            >>> total = add(
            ...     1, 2)
        """
    )
    assert parsed.examples == [
        Example(
            code=">>> add(1, 2)",
            remark_lines=["Adding two numbers:", "3", "The result is an int."],
        ),
        Example(code=">>> total = add(\n...     1, 2)", remark_lines=[]),
    ]


def test_malformed_example_is_kept_verbatim() -> None:
    parsed = parse_docstring(
        """Broken.

        Example:
            >>>missing_space()
        """
    )
    assert parsed.examples == [Example(code=">>>missing_space()")]


def test_see_also_and_notes() -> None:
    parsed = parse_docstring(
        """Link things.

        See Also:
            - https://example.com/a
            https://example.com/b

        Notes:
            First note.
            Second note.
        """
    )
    assert parsed.links == ["https://example.com/a", "https://example.com/b"]
    assert parsed.notes == ["First note.", "Second note."]


def test_unknown_header_like_line_stays_in_description() -> None:
    parsed = parse_docstring(
        """Summary.

        Usage:
        call it twice.
        """
    )
    assert parsed.description_lines == ["Usage:", "call it twice."]


def test_indented_header_is_not_a_section() -> None:
    parsed = parse_docstring(
        """Summary.

        Args:
            name: The name.
            Notes: not a header here.
        """
    )
    assert parsed.notes == []
    assert parsed.arg_descriptions["Notes"] == "not a header here."
