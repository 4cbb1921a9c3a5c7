"""Indentation driven parser for a small, permissive subset of YAML.

Each line is attached to the tree built so far. The open nesting levels are
not kept on a separate stack: they are the right spine of the tree, reached
by following ``last_child()`` from the document root, and every node
remembers the leading whitespace that introduced it.

The parser stays lenient on purpose. Repeated ``---`` markers are skipped
while nothing has been parsed yet, a marker after content becomes an
ordinary key, and duplicate keys are kept side by side (lookups return the
first one).
"""

from __future__ import annotations

import io
import pathlib
import re
from typing import IO, Iterable, Optional, Tuple

from errors import YamlReadError, YamlSyntaxError
from logging_utils import get_logger
from yaml_tree import Composite, Document, TreeNode

logger = get_logger(__name__)

DOCUMENT_MARKER = "---"
LIST_MARKER = "- "
COMMENT_MARKER = "#"

# Double quoted run, single quoted run (backslash escapes allowed in both),
# or anything up to a comment.
STRING_EXTRACTOR = re.compile(
    r"""(?:"((?:[^"\\]|\\.)*)"|'((?:[^'\\]|\\.)*)'|([^#\n]+))"""
)


def parse_lines(lines: Iterable[str]) -> Document:
    """Build a :class:`Document` from an iterable of text lines."""

    document = Document.create()
    line_number = 0

    for line_number, raw_line in enumerate(lines, start=1):
        line = raw_line.rstrip("\r\n")

        if not line.strip():
            continue

        if line.startswith(DOCUMENT_MARKER) and not document.children:
            logger.debug("Skipping document marker on line %d", line_number)
            continue

        _process_line(document, line_number, line)

    logger.debug(
        "Parsed %d line(s) into %d top-level node(s)",
        line_number,
        document.child_count(),
    )
    return document


def parse_stream(stream: IO[str]) -> Document:
    """Parse a text stream such as an open file."""

    try:
        return parse_lines(stream)
    except (OSError, UnicodeDecodeError) as exc:
        raise YamlReadError(f"Failed to read YAML stream: {exc}") from exc


def parse_text(text: str) -> Document:
    return parse_stream(io.StringIO(text, newline=""))


def load(path: pathlib.Path | str, encoding: str = "utf-8") -> Document:
    """Open ``path`` and parse its content."""

    try:
        handle = open(path, "r", encoding=encoding, newline="")
    except OSError as exc:
        raise YamlReadError(f"Failed to open YAML file '{path}': {exc}") from exc

    with handle:
        return parse_stream(handle)


def _process_line(document: Document, line_number: int, line: str) -> None:
    stripped = line.lstrip()

    if stripped.startswith(COMMENT_MARKER):
        return

    indentation = line[: len(line) - len(stripped)]
    root = _attachment_point(document, indentation, line_number, line)

    key, value, has_separator = _split_key_value(stripped)

    if key.startswith(LIST_MARKER):
        index_key = str(root.child_count())
        key_after_marker = key[1:]

        if has_separator:
            # "- key: value" opens list element ``index_key`` and its first field.
            item = root.add_child(TreeNode(name=index_key, indentation=indentation))
            item.add_child(
                TreeNode(
                    name=key_after_marker.strip(),
                    value=extract_string_value(value),
                    indentation=indentation + " " + _leading_whitespace(key_after_marker),
                )
            )
        else:
            root.add_child(
                TreeNode(
                    name=index_key,
                    value=extract_string_value(key_after_marker),
                    indentation=indentation,
                )
            )
        return

    root.add_child(
        TreeNode(
            name=key.strip(),
            value=extract_string_value(value) if has_separator else None,
            indentation=indentation,
        )
    )


def _attachment_point(
    document: Document, indentation: str, line_number: int, line: str
) -> Composite:
    """Find the composite the line at ``indentation`` belongs to.

    Walks down the right spine until a child with exactly the same
    indentation is met (the line is its sibling) or a node without children
    is reached (the line opens a new level under it).
    """

    if not document.children or not indentation:
        return document

    current: Composite = document
    while current.children:
        child = current.last_child()
        if child.indentation == indentation:
            return current

        if not indentation.startswith(child.indentation):
            logger.debug("Indentation %r does not match any open level", indentation)
            raise YamlSyntaxError(line_number, line)

        current = child

    return current


def _split_key_value(stripped: str) -> Tuple[str, str, bool]:
    key, separator, value = stripped.partition(":")
    return key, value.strip(), bool(separator)


def _leading_whitespace(text: str) -> str:
    return text[: len(text) - len(text.lstrip())]


def extract_string_value(value: Optional[str]) -> Optional[str]:
    """Unquote ``value`` or strip its trailing comment.

    Quoted text keeps ``#`` characters. Unquoted text is cut at the first
    ``#``. Blank results give ``None``.
    """

    if value is None:
        return None

    trimmed = value.strip()
    if not trimmed:
        return None

    match = STRING_EXTRACTOR.match(trimmed)
    if match is not None:
        if match.group(1) is not None:
            return match.group(1)
        if match.group(2) is not None:
            return match.group(2)

    extracted = trimmed.split(COMMENT_MARKER, 1)[0].strip()
    return extracted or None
