"""Public API for xmltree2json.

High-level functions wiring the XML reader to the encoder. Client code
should use these instead of importing from _internal.
"""

import io
import logging
from typing import Optional, TextIO

from xmltree2json.kernel.node import Node
from xmltree2json.kernel.encoder import Encoder
from xmltree2json.options import EncoderOptions, load_options
from xmltree2json._internal.xml_reader import XMLSource, XMLReadError, read_xml

logger = logging.getLogger(__name__)

__all__ = [
    "encode",
    "encode_to_string",
    "convert",
    "load_options",
    "read_xml",
    "XMLReadError",
]


def encode(root: Optional[Node], stream: TextIO, options: Optional[EncoderOptions] = None) -> None:
    """Encode `root` to `stream` with a fresh Encoder.

    Raises:
        EncodeError: If the stream rejects a write
    """
    Encoder(stream, options).encode(root)


def encode_to_string(root: Optional[Node], options: Optional[EncoderOptions] = None) -> str:
    """Return the JSON encoding of `root` (trailing newline included)."""
    buffer = io.StringIO()
    encode(root, buffer, options)
    return buffer.getvalue()


def convert(
    source: XMLSource,
    stream: Optional[TextIO] = None,
    options: Optional[EncoderOptions] = None,
) -> Optional[str]:
    """
    Convert an XML document to JSON.

    Args:
        source: XML bytes, XML text, a path, or a binary file object
        stream: Text stream to write to; when None the JSON is returned
        options: Encoder options (defaults to EncoderOptions())

    Returns:
        The JSON text if no stream was given, else None

    Raises:
        XMLReadError: If the XML is malformed
        EncodeError: If the stream rejects a write
    """
    if options is None:
        options = EncoderOptions()

    root = read_xml(source, attribute_prefix=options.attribute_prefix)
    logger.debug(
        "Encoding tree (content_prefix=%r, attribute_prefix=%r, indent=%s)",
        options.content_prefix,
        options.attribute_prefix,
        options.indent,
    )

    if stream is None:
        return encode_to_string(root, options)
    encode(root, stream, options)
    return None
