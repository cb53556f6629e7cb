"""Command line interface.

    minimark render FILE        Print the HTML fragment for FILE (``-`` for stdin)
    minimark serve [options]    Serve ``.md`` files from a directory over HTTP
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from minimark import Markdown, __version__
from minimark.config import ParseConfig, ServerConfig
from minimark.documents import load_document
from minimark.server import serve
from minimark.utils.logger import get_logger

logger = get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_FILE_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minimark",
        description="Render a small Markdown dialect to HTML fragments.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--legacy-eof",
        action="store_true",
        help="Stop scanning one character before end of input (drops a final one-character line)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Print the HTML fragment for a file")
    render_cmd.add_argument("file", help="Markdown file to render ('-' reads stdin)")

    serve_cmd = sub.add_parser("serve", help="Serve .md files over HTTP")
    serve_cmd.add_argument("--host", default="127.0.0.1", help="Host to bind (default: 127.0.0.1)")
    serve_cmd.add_argument("--port", type=int, default=3001, help="Port to bind (default: 3001)")
    serve_cmd.add_argument("--root", default=".", help="Document root (default: .)")
    return parser


def _render(args: argparse.Namespace, config: ParseConfig) -> int:
    try:
        if args.file == "-":
            source = sys.stdin.buffer.read().decode("utf-8", errors="replace")
        else:
            source = load_document(Path(args.file))
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    sys.stdout.write(Markdown(config=config)(source))
    sys.stdout.write("\n")
    return EXIT_SUCCESS


def _serve(args: argparse.Namespace, config: ParseConfig) -> int:
    root = Path(args.root)
    if not root.is_dir():
        print(f"Error: document root is not a directory: {root}", file=sys.stderr)
        return EXIT_FILE_ERROR

    serve(ServerConfig(host=args.host, port=args.port, root=str(root), parse=config))
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = ParseConfig(legacy_eof=args.legacy_eof)
    logger.debug("Running %s with %s", args.command, config)

    if args.command == "render":
        return _render(args, config)
    return _serve(args, config)
