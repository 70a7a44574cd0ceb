"""Fluent builder for nginx configuration files."""

from .nodes import BaseClause, Clause, Directive, DirectiveValue, Entry, Location
from .document import Document, new_document
from .formatter import ConfigFormatter, depth_to_whitespace
from .exceptions import InvalidEntryError, NginxConfigError, WriteError
from .writer import ConfigWriter
from .examples import build_example_config

__all__ = [
    "BaseClause",
    "Clause",
    "Directive",
    "DirectiveValue",
    "Entry",
    "Location",
    "Document",
    "new_document",
    "ConfigFormatter",
    "depth_to_whitespace",
    "InvalidEntryError",
    "NginxConfigError",
    "WriteError",
    "ConfigWriter",
    "build_example_config",
]
