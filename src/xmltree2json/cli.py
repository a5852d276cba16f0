"""xmltree2json CLI: convert an XML document to JSON."""

import argparse
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path

logger = logging.getLogger(__name__)


def _build_options(args, parser):
    """Load --config (if any) and apply explicit flags on top of it."""
    from .options import EncoderOptions, load_options

    options = load_options(args.config.resolve()) if args.config else EncoderOptions()

    overrides = {}
    if args.content_prefix is not None:
        overrides["content_prefix"] = args.content_prefix
    if args.attribute_prefix is not None:
        overrides["attribute_prefix"] = args.attribute_prefix
    if args.indent is not None:
        if args.indent < 0:
            parser.error("--indent must be zero or greater")
        overrides["indent"] = True
        overrides["indent_text"] = " " * args.indent
    elif args.tab:
        overrides["indent"] = True
        overrides["indent_text"] = "\t"

    if not overrides:
        return options
    return EncoderOptions(**{**options.model_dump(), **overrides})


def main():
    """Main CLI entry point for xmltree2json."""
    try:
        package_version = get_version("xmltree2json")
    except PackageNotFoundError:
        package_version = "dev"

    parser = argparse.ArgumentParser(
        prog="xmltree2json",
        description="Convert XML documents to deterministic, HTML-safe JSON"
    )
    parser.add_argument("--version", action="version", version=f"xmltree2json {package_version}")
    parser.add_argument(
        "input",
        type=Path,
        nargs="?",
        default=None,
        help="Path to XML input (defaults to stdin)"
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Path to JSON output (defaults to stdout)"
    )
    indent_group = parser.add_mutually_exclusive_group()
    indent_group.add_argument(
        "--indent",
        type=int,
        default=None,
        metavar="N",
        help="Pretty-print with N spaces per nesting level"
    )
    indent_group.add_argument(
        "--tab",
        action="store_true",
        help="Pretty-print with one tab per nesting level"
    )
    parser.add_argument(
        "--content-prefix",
        default=None,
        help="Prefix of the key holding mixed text content (key is PREFIX + 'content')"
    )
    parser.add_argument(
        "--attribute-prefix",
        default=None,
        help="Prefix added to attribute keys (default '-')"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a JSON options file; explicit flags override it"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log debug diagnostics to stderr."
    )

    args = parser.parse_args()

    from ._internal.logging_setup import setup_cli_logging
    setup_cli_logging(trace=args.trace, quiet=args.quiet)

    from .api import convert
    from .kernel.encoder import EncodeError

    try:
        options = _build_options(args, parser)
        source = args.input.resolve() if args.input else sys.stdin.buffer
        logger.debug("Reading XML from %s", args.input or "<stdin>")

        if args.output:
            output_path = Path(args.output).resolve()
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8", newline="\n") as f:
                convert(source, f, options)
            if not args.quiet:
                print("[OK] Conversion complete")
                print(f"  Output: {output_path}")
        else:
            # JSON output is UTF-8 whatever the locale says.
            if hasattr(sys.stdout, "reconfigure"):
                sys.stdout.reconfigure(encoding="utf-8")
            convert(source, sys.stdout, options)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except (ValueError, EncodeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
