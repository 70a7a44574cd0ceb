"""Node definitions for nginx configuration trees."""

from __future__ import annotations

from typing import Any, Callable, Self

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr


DirectiveValue = str | int | float


class Directive(BaseModel):
    """A single ``name value;`` line."""

    model_config = ConfigDict(frozen=True, strict=True)

    name: str
    value: DirectiveValue

    def __init__(self, name: str, value: DirectiveValue) -> None:
        super().__init__(name=name, value=value)

    def render(self) -> str:
        return f"{self.name} {self.value};"

    def __str__(self) -> str:
        return self.render()


class BaseClause(BaseModel):
    """Named block of directives and nested blocks.

    Holds what ``Clause`` and ``Location`` share. Children are created through
    the builder methods, which hand the new child to ``configure`` before
    appending it, and return ``self`` so calls can be chained:

        >>> clause.add_directive("listen", 80).add_clause("if ($bad)", lambda c: c.add_directive("return", 403))
    """

    name: str = Field(frozen=True)
    depth: int = Field(default=0, ge=0, frozen=True)
    _entries: list[Entry] = PrivateAttr(default_factory=list)

    def __init__(self, name: str, depth: int = 0, **data: Any) -> None:
        super().__init__(name=name, depth=depth, **data)

    @property
    def entries(self) -> tuple[Entry, ...]:
        return tuple(self._entries)

    def add_clause(self, name: str, configure: Callable[[Clause], Any] | None = None) -> Self:
        clause = Clause(name, self.depth + 1)
        if configure is not None:
            configure(clause)
        self._entries.append(clause)
        return self

    def add_directive(self, name: str, value: DirectiveValue) -> Self:
        self._entries.append(Directive(name, value))
        return self

    def cl(self, name: str, configure: Callable[[Clause], Any] | None = None) -> Self:
        return self.add_clause(name, configure)

    def dir(self, name: str, value: DirectiveValue) -> Self:
        return self.add_directive(name, value)

    def render(self) -> str:
        """Render the body of this clause, without its own braces."""
        from nginxc.formatter import DEFAULT_FORMATTER

        return DEFAULT_FORMATTER.format_clause(self)

    def __str__(self) -> str:
        return self.render()


class Clause(BaseClause):
    """Unrestricted block, the only kind that can open ``location`` blocks."""

    def add_location(self, path: str, configure: Callable[[Location], Any] | None = None) -> Self:
        location = Location(path, self.depth + 1)
        if configure is not None:
            configure(location)
        self._entries.append(location)
        return self

    def loc(self, path: str, configure: Callable[[Location], Any] | None = None) -> Self:
        return self.add_location(path, configure)


class Location(BaseClause):
    """``location <path>`` block. Cannot contain further locations."""

    path: str = Field(frozen=True)

    def __init__(self, path: str, depth: int = 0) -> None:
        super().__init__(f"location {path}", depth, path=path)


Entry = Directive | Clause | Location


__all__ = ["BaseClause", "Clause", "Directive", "DirectiveValue", "Entry", "Location"]
