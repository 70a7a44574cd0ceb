"""Persist rendered documents to disk."""

from __future__ import annotations

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

from .document import Document
from .exceptions import WriteError
from .formatter import ConfigFormatter
from .logger import Logger
from .utils import resolve_config


class WriterConfig(TypedDict):
    encoding: NotRequired[str]
    create_dirs: NotRequired[bool]
    enable_logger: NotRequired[bool]


class WriterConfigRequired(TypedDict):
    encoding: str
    create_dirs: bool
    enable_logger: bool


DEFAULT_CONFIG: WriterConfigRequired = {
    "encoding": "utf-8",
    "create_dirs": True,
    "enable_logger": True,
}


class ConfigWriter:
    def __init__(self, formatter: ConfigFormatter | None = None, config: Optional[WriterConfig] = None):
        self.formatter = formatter or ConfigFormatter()
        self.config = resolve_config(config or {}, DEFAULT_CONFIG)
        self.enable_logger = self.config["enable_logger"]
        self.logger = Logger(config={"name": "nginxc.writer", "is_enabled": self.enable_logger}).logger

    def generate(self, document: Document) -> str:
        return self.formatter.format_document(document)

    def write(self, document: Document, path: str | Path | None = None) -> Path:
        """Write ``document`` to ``path``, falling back to ``document.filename``."""
        target = path if path is not None else document.filename
        if not target:
            raise WriteError("No destination given and document has no filename")
        destination = Path(target)
        output = self.generate(document)
        if self.enable_logger:
            self.logger.debug(f"Rendered {len(output)} characters for {destination}")
        try:
            if self.config["create_dirs"]:
                destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(output, encoding=self.config["encoding"])
        except OSError as exc:
            raise WriteError(f"Failed to write {destination}") from exc
        if self.enable_logger:
            self.logger.info(f"Wrote {destination}")
        return destination


__all__ = ["ConfigWriter", "WriterConfig", "DEFAULT_CONFIG"]
