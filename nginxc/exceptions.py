"""Exceptions raised while building, rendering or writing configurations."""

from __future__ import annotations


class NginxConfigError(Exception):
    """Base exception for nginxc errors."""


class InvalidEntryError(NginxConfigError):
    """Raised when a clause holds an entry that is not a known node kind.

    Entries are only ever created through the builder methods, so this
    signals a broken tree rather than bad input.
    """

    def __init__(self, entry: object, clause_name: str):
        super().__init__(f"Fatal: unsupported entry {type(entry).__name__!r} in clause '{clause_name}'")
        self.entry = entry
        self.clause_name = clause_name


class WriteError(NginxConfigError):
    """Raised when a rendered document cannot be written."""
