"""xmltree2json: deterministic XML-to-JSON encoding."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("xmltree2json")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from xmltree2json.kernel.node import Node
from xmltree2json.kernel.encoder import Encoder, EncodeError
from xmltree2json.kernel.sanitize import sanitize_string
from xmltree2json.options import EncoderOptions
from xmltree2json.api import convert, encode, encode_to_string, load_options, read_xml, XMLReadError

__all__ = [
    "__version__",
    "Node",
    "Encoder",
    "EncodeError",
    "EncoderOptions",
    "sanitize_string",
    "convert",
    "encode",
    "encode_to_string",
    "load_options",
    "read_xml",
    "XMLReadError",
]
