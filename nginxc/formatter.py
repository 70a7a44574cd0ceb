"""Formatter turning clause trees into nginx configuration text."""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidEntryError
from .nodes import BaseClause, Directive

INDENT_CHARACTER = " "
# Number of INDENT_CHARACTER per depth level.
INDENT_MULTIPLIER = 2
# Blocks whose parent sits at or above this depth get a blank line before them.
SPACER_DEPTH = 1


def depth_to_whitespace(depth: int = 0, character: str = INDENT_CHARACTER, multiplier: int = INDENT_MULTIPLIER) -> str:
    return character * (depth * multiplier)


@dataclass(frozen=True)
class ConfigFormatter:
    indent_char: str = INDENT_CHARACTER
    indent_width: int = INDENT_MULTIPLIER
    spacer_depth: int = SPACER_DEPTH

    def format_clause(self, clause: BaseClause) -> str:
        lines: list[str] = []
        for entry in clause.entries:
            lines.extend(self.format_entry(entry, clause))
        return "\n".join(lines)

    def format_entry(self, entry: object, parent: BaseClause) -> list[str]:
        if isinstance(entry, Directive):
            return [f"{self._indent(parent.depth)}{entry.render()}"]
        if isinstance(entry, BaseClause):
            return self.format_block(entry, parent.depth)
        raise InvalidEntryError(entry, parent.name)

    def format_block(self, clause: BaseClause, level: int) -> list[str]:
        # header and footer sit at the parent's level, the body at the clause's own depth
        lines = [""] if level <= self.spacer_depth else []
        lines.append(f"{self._indent(level)}{clause.name} {{")
        lines.append(self.format_clause(clause))
        lines.append(f"{self._indent(level)}}}")
        return lines

    def format_document(self, clause: BaseClause) -> str:
        """Render ``clause`` as file contents: no leading blank lines, one trailing newline."""
        return self.format_clause(clause).lstrip("\n").rstrip() + "\n"

    def _indent(self, level: int) -> str:
        return depth_to_whitespace(level, self.indent_char, self.indent_width)


DEFAULT_FORMATTER = ConfigFormatter()


__all__ = [
    "ConfigFormatter",
    "DEFAULT_FORMATTER",
    "INDENT_CHARACTER",
    "INDENT_MULTIPLIER",
    "SPACER_DEPTH",
    "depth_to_whitespace",
]
