"""Tree-to-JSON encoder.

Walks a Node tree and writes one JSON value to a text stream.

Encoding rules:
- Leaf nodes become JSON strings
- Container nodes become objects; keys are emitted in sorted order so the
  output is deterministic regardless of how the tree was built
- A label occurring once maps to its value directly, a label occurring more
  than once maps to an array (so the shape of a label depends on the
  document: consumers must accept both)
- Container text (mixed content) goes under content_prefix + "content",
  ahead of the sorted children
- Every value is terminated by a newline, and a newline always precedes the
  closing brace of an object, in compact mode too
"""

from typing import List, Optional, TextIO, Tuple, Union

from .node import Node
from .sanitize import sanitize_string
from ..options import EncoderOptions


class EncodeError(Exception):
    """Raised when the output stream rejects a write."""
    pass


class Encoder:
    """Writes JSON encodings of Node trees to a text stream.

    The first write failure poisons the encoder: it is raised by the encode
    call that hit it and again by every later call. Build a new Encoder to
    retry. Instances are not safe to share between threads.
    """

    def __init__(self, stream: TextIO, options: Optional[EncoderOptions] = None):
        if options is None:
            options = EncoderOptions()
        self._stream = stream
        self.error: Optional[EncodeError] = None
        self.content_prefix = options.content_prefix
        self.attribute_prefix = options.attribute_prefix
        self.indent = options.indent
        self.indent_text = options.indent_text if options.indent else ""

    def set_attribute_prefix(self, prefix: str) -> "Encoder":
        self.attribute_prefix = prefix
        return self

    def set_content_prefix(self, prefix: str) -> "Encoder":
        self.content_prefix = prefix
        return self

    def set_indent(self, text: str) -> "Encoder":
        """Enable pretty-printing with `text` as the per-level indent unit."""
        self.indent = True
        self.indent_text = text
        return self

    def encode_with_custom_prefixes(
        self,
        root: Optional[Node],
        content_prefix: str,
        attribute_prefix: str,
    ) -> None:
        """Encode `root` with both prefixes overridden for this call only."""
        saved = (self.content_prefix, self.attribute_prefix)
        self.content_prefix = content_prefix
        self.attribute_prefix = attribute_prefix
        try:
            self.encode(root)
        finally:
            self.content_prefix, self.attribute_prefix = saved

    def encode(self, root: Optional[Node]) -> None:
        """
        Write the JSON encoding of `root` followed by a newline.

        A None root writes nothing.

        Raises:
            EncodeError: If the stream rejected a write, now or in an earlier call
        """
        if self.error is not None:
            raise self.error
        if root is None:
            return

        self._format(root)
        self._write("\n")

        if self.error is not None:
            raise self.error

    def _format(self, root: Node) -> None:
        # Work stack of pending output: literal chunks and (node, depth) pairs.
        # Depth is bounded by memory, not by the interpreter's recursion limit.
        pending: List[Union[str, Tuple[Node, int]]] = [(root, 0)]
        while pending and self.error is None:
            item = pending.pop()
            if isinstance(item, str):
                self._write(item)
                continue

            node, depth = item
            if not node.has_children():
                self._write(sanitize_string(node.data))
                continue

            # Pushed in reverse so the pops come out in document order.
            pending.extend(reversed(self._container_parts(node, depth)))

    def _container_parts(self, node: Node, depth: int) -> List[Union[str, Tuple[Node, int]]]:
        """Lay out one object: its literal chunks with child nodes in between."""
        separator = ",\n" if self.indent else ", "
        inner = self._indent_text(depth + 1)

        parts: List[Union[str, Tuple[Node, int]]] = ["{"]
        if self.indent:
            parts.append("\n")

        if node.data:
            parts.extend([
                inner,
                sanitize_string(self.content_prefix + "content"),
                ": ",
                sanitize_string(node.data),
                separator,
            ])

        labels = list(node.children)
        if len(labels) > 1:
            labels.sort()

        for position, label in enumerate(labels):
            if position:
                parts.append(separator)
            parts.extend([inner, sanitize_string(label), ": "])

            children = node.children[label]
            if len(children) == 1:
                parts.append((children[0], depth + 1))
            else:
                parts.append("[")
                for index, child in enumerate(children):
                    if index:
                        parts.append(", ")
                    parts.append((child, depth + 2))
                parts.append("]")

        parts.extend(["\n", self._indent_text(depth), "}"])
        return parts

    def _indent_text(self, depth: int) -> str:
        if self.indent:
            return self.indent_text * depth
        return ""

    def _write(self, *chunks: str) -> None:
        # Nothing more reaches the stream once a write has failed.
        if self.error is not None:
            return
        for chunk in chunks:
            if not chunk:
                continue
            try:
                self._stream.write(chunk)
            except (OSError, ValueError, TypeError) as e:
                error = EncodeError(f"Failed to write JSON output: {e}")
                error.__cause__ = e
                self.error = error
                return
