"""Root container for nginx configuration documents."""

from __future__ import annotations

from .nodes import Clause


class Document(Clause):
    """Depth-0 clause holding a whole configuration.

    ``filename`` is kept as metadata only; rendering never looks at it and
    nothing is written unless a caller passes the document to a writer.
    """

    filename: str | None = None

    def __init__(self, filename: str | None = None) -> None:
        super().__init__("root", 0, filename=filename)

    def to_text(self) -> str:
        return self.render()


def new_document(filename: str | None = None) -> Document:
    return Document(filename)


__all__ = ["Document", "new_document"]
