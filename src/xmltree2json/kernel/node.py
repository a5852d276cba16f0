"""Labeled tree produced from parsed XML and consumed by the encoder."""

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class Node:
    """A node of the document tree.

    A node with no entries in ``children`` is a leaf and encodes as its
    ``data``. A node with children is a container; non-empty ``data`` on a
    container is mixed content and gets its own synthetic key.

    ``children`` maps a label (element name, or prefixed attribute name) to
    the nodes sharing that label, in document order. A list of length 1 is a
    single occurrence, longer lists are repeated occurrences.
    """
    data: str = ""
    children: Dict[str, List["Node"]] = field(default_factory=dict)

    def add_child(self, label: str, child: "Node") -> "Node":
        """Append ``child`` under ``label`` and return self for chaining."""
        self.children.setdefault(label, []).append(child)
        return self

    def has_children(self) -> bool:
        return bool(self.children)
