# Copyright 2025 Softwell S.r.l. - SPDX-License-Identifier: Apache-2.0
"""MarkupBuilder - fluent builder for tag-bracketed text trees.

This module provides a minimal tree of markup nodes and a fluent builder
that appends children to a root node. The tree renders as indented,
tag-bracketed text, one tag or text per line.

Example:
    Building a list::

        from genro_patterns.builders import MarkupBuilder

        builder = MarkupBuilder.create('ul')
        builder.add_child('li', 'hello').add_child('li', 'world')
        print(builder)

    Output::

        <ul>
          <li>
            hello
          </li>
          <li>
            world
          </li>
        </ul>
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from genro_toolbox import smartsplit

INDENT_SIZE = 2


class MarkupNode:
    """A named node with optional text and an ordered list of children.

    Attributes:
        name: Tag name, printed as ``<name>`` and ``</name>``.
        text: Text content, printed on its own line when not blank.
        children: Child nodes in insertion order.
    """

    __slots__ = ('name', 'text', 'children')

    def __init__(self, name: str, text: str = '') -> None:
        """Initialize a MarkupNode.

        Args:
            name: The tag name.
            text: The text content. Defaults to no text.

        Raises:
            ValueError: If name or text is None.
        """
        if name is None:
            raise ValueError("MarkupNode name cannot be None")
        if text is None:
            raise ValueError("MarkupNode text cannot be None")
        self.name = name
        self.text = text
        self.children: list[MarkupNode] = []

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[MarkupNode]:
        return iter(self.children)

    def __repr__(self) -> str:
        return f"MarkupNode(name={self.name!r}, text={self.text!r}, children={len(self)})"

    def __str__(self) -> str:
        return self.render()

    def get_node(self, path: str) -> MarkupNode | None:
        """Return the descendant at a dot-separated path.

        Each segment selects a direct child of the current node, either by
        name (first child with that name) or by position with ``#n``.

        Args:
            path: Path like 'body.div.#1'. Empty path returns this node.

        Returns:
            The matching node, or None if a segment does not match.
        """
        curr: MarkupNode | None = self
        for segment in (x for x in smartsplit(path, '.') if x):
            if curr is None:
                return None
            curr = curr._child_at(segment)
        return curr

    def _child_at(self, segment: str) -> MarkupNode | None:
        if m := re.match(r'^#(\d+)$', segment):
            idx = int(m.group(1))
            return self.children[idx] if idx < len(self.children) else None
        return next((child for child in self.children if child.name == segment), None)

    def render(self, indent: int = 0) -> str:
        """Render this node and its descendants as indented markup.

        Args:
            indent: Nesting depth of this node. Each level adds
                INDENT_SIZE spaces.

        Returns:
            Lines joined by newlines, without a trailing newline.
        """
        spaces = ' ' * (INDENT_SIZE * indent)
        lines = [f"{spaces}<{self.name}>"]
        if self.text and self.text.strip():
            lines.append(f"{' ' * (INDENT_SIZE * (indent + 1))}{self.text}")
        for child in self.children:
            lines.append(child.render(indent + 1))
        lines.append(f"{spaces}</{self.name}>")
        return "\n".join(lines)


class MarkupBuilder:
    """Fluent builder owning a root MarkupNode.

    ``add_child`` returns the builder itself, so calls can be chained.

    Usage:
        >>> builder = MarkupBuilder.create('ul')
        >>> builder.add_child('li', 'hello').add_child('li', 'world')
        >>> len(builder.root)
        2
    """

    def __init__(self, root_name: str) -> None:
        """Initialize the builder with an empty root named root_name."""
        self._root_name = root_name
        self._root = MarkupNode(root_name)

    @classmethod
    def create(cls, root_name: str) -> MarkupBuilder:
        """Return a new builder with an empty root named root_name."""
        return cls(root_name)

    @property
    def root(self) -> MarkupNode:
        """The root node built so far."""
        return self._root

    def add_child(self, name: str, text: str) -> MarkupBuilder:
        """Append a leaf node to the root.

        Args:
            name: Tag name of the child.
            text: Text content of the child.

        Returns:
            This builder, for chaining.
        """
        self._root.children.append(MarkupNode(name, text))
        return self

    def render(self) -> str:
        """Render the whole tree starting at the root."""
        return self._root.render()

    def reset(self) -> None:
        """Discard all children, keeping the original root name."""
        self._root = MarkupNode(self._root_name)

    def __str__(self) -> str:
        return self.render()
