"""Render trees as Graphviz ``graph`` documents."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Optional, Protocol, Union

_PREAMBLE = "graph tree{\n"
_EPILOGUE = "}"


class _Drawable(Protocol):
    left: Optional["_Drawable"]
    right: Optional["_Drawable"]

    def label(self) -> str: ...


def _edges(node: _Drawable) -> Iterator[str]:
    """Edges of the subtree under ``node``: a node's own edges come before its children's."""
    children = [child for child in (node.left, node.right) if child is not None]
    for child in children:
        yield f"\t{node.label()}--{child.label()};\n"
    for child in children:
        yield from _edges(child)


def dot_text(root: _Drawable) -> str:
    """The Graphviz text for the tree under ``root``, one ``parent--child`` line per edge."""
    return _PREAMBLE + "".join(_edges(root)) + _EPILOGUE


def write_dotfile(root: _Drawable, output_path: Union[str, os.PathLike]) -> None:
    """Write the Graphviz text for the tree under ``root`` to ``output_path``.

    Raises OSError when the file cannot be created.
    """
    Path(output_path).write_bytes(dot_text(root).encode("utf-8"))