# src/keymaplang/keymap_ast.py
"""
Program representation produced by the parser.

Nodes are immutable and render back to canonical source with ``str()``::

    >>> str(MapStatement(MapBinding(Key("k", ModifierKind.CTRL), "up")))
    'map ctrl+k up'
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from .keymap_token import ModifierKind


# Base classes
class Node:
    pass


@dataclass(frozen=True)
class Key(Node):
    key: str
    modifier: Optional[ModifierKind] = None

    def __str__(self):
        if self.modifier is None:
            return self.key
        return f"{self.modifier.value}+{self.key}"


@dataclass(frozen=True)
class MapBinding(Node):
    """``map <key> <command>``"""
    key: Key
    command_name: str

    def __str__(self):
        return f"map {self.key} {self.command_name}"


# Statement variants. New statement kinds are added here and to ``Statement``.
@dataclass(frozen=True)
class MapStatement(Node):
    binding: MapBinding

    def __str__(self):
        return str(self.binding)


Statement = Union[MapStatement]


@dataclass(frozen=True)
class Program(Node):
    """Statements in source order, one per line."""
    statements: Tuple[Statement, ...] = ()

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self) -> Iterator[Statement]:
        return iter(self.statements)

    def __getitem__(self, index):
        return self.statements[index]

    def bindings(self) -> Iterator[MapBinding]:
        for statement in self.statements:
            if isinstance(statement, MapStatement):
                yield statement.binding

    def __str__(self):
        return "\n".join(str(statement) for statement in self.statements)
