"""XML -> Node tree reader (internal).

Conventions:
- The returned root is a synthetic container holding the document element
- Labels are local names; namespace URIs are dropped
- Attributes become leaf children labeled attribute_prefix + name
- Element text is its own text plus the tails of its children; each run is
  stripped and the non-empty runs are joined with a single space, so
  "Hello <b>world</b> again" gives "Hello again"
- Child elements keep document order
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO, List, Optional, Tuple, Union

from xmltree2json.kernel.node import Node

logger = logging.getLogger(__name__)

XMLSource = Union[bytes, str, Path, BinaryIO]


class XMLReadError(ValueError):
    """Raised when the XML input cannot be parsed."""
    pass


def _local_name(tag: str) -> str:
    """Strip the '{namespace}' part ElementTree puts in front of qualified names."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def _join_text(parts: List[Optional[str]]) -> str:
    """Strip each text run and join the non-empty ones with a single space."""
    return " ".join(stripped for stripped in (part.strip() for part in parts if part) if stripped)


def _build_node(element: ET.Element, attribute_prefix: str) -> Node:
    top = Node()
    # Explicit stack so document depth is not limited by the recursion limit.
    pending: List[Tuple[ET.Element, Node]] = [(element, top)]
    while pending:
        current, node = pending.pop()
        for name, value in current.attrib.items():
            node.add_child(attribute_prefix + _local_name(name), Node(data=value))

        text_parts = [current.text]
        for child in current:
            child_node = Node()
            node.add_child(_local_name(child.tag), child_node)
            pending.append((child, child_node))
            text_parts.append(child.tail)
        node.data = _join_text(text_parts)
    return top


def read_xml(source: XMLSource, attribute_prefix: str = "-") -> Node:
    """
    Parse an XML document into a Node tree.

    Args:
        source: XML bytes, XML text, a path to an XML file, or a binary file object
        attribute_prefix: Prefix added to attribute labels

    Returns:
        Synthetic root Node whose only child is the document element

    Raises:
        XMLReadError: If the document is malformed
        FileNotFoundError: If source is a path that does not exist
    """
    try:
        if isinstance(source, (bytes, str)):
            element = ET.fromstring(source)
        else:
            element = ET.parse(source).getroot()
    except ET.ParseError as e:
        raise XMLReadError(f"Malformed XML: {e}") from e

    label = _local_name(element.tag)
    logger.debug("Parsed XML document with root element %r", label)

    root = Node()
    root.add_child(label, _build_node(element, attribute_prefix))
    return root
