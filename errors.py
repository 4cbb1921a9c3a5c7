"""Exceptions raised while reading and querying YAML documents."""

from __future__ import annotations


class SmallYamlError(Exception):
    """Base class for every error raised by the parser and the tree."""


class YamlSyntaxError(SmallYamlError):
    """Raised when a line's indentation does not resolve to an open level."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"Spaces do not match on line {line_number}: {line.strip()}")


class EmptyTreeError(SmallYamlError):
    """Raised when the last child of a composite without children is requested."""


class YamlReadError(SmallYamlError):
    """Raised when the underlying stream cannot be read."""
