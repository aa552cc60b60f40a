"""Read-only document model consumed by the renderer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Union


def _as_tuple(value: Any) -> tuple:
    if value is None:
        return ()
    return tuple(value)


@dataclass(frozen=True)
class Run:
    """A span of text sharing one formatting state."""

    text: str | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False


@dataclass(frozen=True)
class Paragraph:
    """A paragraph with optional style id and outline level."""

    runs: tuple[Run, ...] = field(default_factory=tuple)
    style: str | None = None
    outline_level: int | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "runs", _as_tuple(self.runs))

    @property
    def text(self) -> str:
        """Concatenated text of all runs."""
        return "".join(run.text or "" for run in self.runs if isinstance(run, Run))


@dataclass(frozen=True)
class Cell:
    paragraphs: tuple[Paragraph, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "paragraphs", _as_tuple(self.paragraphs))


@dataclass(frozen=True)
class Row:
    cells: tuple[Cell, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "cells", _as_tuple(self.cells))


@dataclass(frozen=True)
class Table:
    rows: tuple[Row, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "rows", _as_tuple(self.rows))


BlockElement = Union[Paragraph, Table]


@dataclass(frozen=True)
class Document:
    """Ordered body blocks of a document."""

    blocks: tuple[BlockElement, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "blocks", _as_tuple(self.blocks))


class DocumentProvider(Protocol):
    """Anything that can turn a source into a Document."""

    def load(self, source: Any) -> Document: ...
