"""Minimal HTTP server for rendered Markdown.

Every ``GET /<path>.md`` is resolved against the document root and answered
with the rendered HTML fragment. Anything else is a 404 with an empty body.

The listener is built explicitly with create_server() and handed to the
caller; nothing binds a socket at import time.

Thread Safety:
ThreadingHTTPServer handles each connection on its own thread. Handlers
share only the immutable Markdown processor.
"""

from __future__ import annotations

from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any

from minimark import Markdown
from minimark.config import ServerConfig
from minimark.documents import render_document
from minimark.errors import DocumentError
from minimark.utils.logger import get_logger

logger = get_logger(__name__)

CONTENT_TYPE = "text/html; charset=utf-8"


class MarkdownHTTPServer(ThreadingHTTPServer):
    """ThreadingHTTPServer carrying a document root and a Markdown processor."""

    daemon_threads = True

    def __init__(
        self,
        server_address: tuple[str, int],
        document_root: str | Path,
        markdown: Markdown,
    ) -> None:
        self.document_root = Path(document_root)
        self.markdown = markdown
        super().__init__(server_address, MarkdownRequestHandler)


class MarkdownRequestHandler(BaseHTTPRequestHandler):
    """Serve rendered ``.md`` files from the server's document root."""

    server: MarkdownHTTPServer

    def do_GET(self) -> None:
        self._serve(include_body=True)

    def do_HEAD(self) -> None:
        self._serve(include_body=False)

    def _serve(self, *, include_body: bool) -> None:
        try:
            page = render_document(self.server.document_root, self.path, self.server.markdown)
        except DocumentError as e:
            logger.info("404 %s", e)
            self.send_response(HTTPStatus.NOT_FOUND)
            self.send_header("Content-Length", "0")
            self.end_headers()
            return

        body = page.body
        self.send_response(HTTPStatus.OK)
        self.send_header("Content-Length", str(len(body)))
        self.send_header("Content-Type", CONTENT_TYPE)
        self.end_headers()
        if include_body:
            self.wfile.write(body)

    def log_message(self, format: str, *args: Any) -> None:
        logger.info("%s - %s", self.address_string(), format % args)


def create_server(config: ServerConfig, markdown: Markdown | None = None) -> MarkdownHTTPServer:
    """Bind a server for config. The caller owns serving and closing it.

    Args:
        config: Host, port, document root and parse settings
        markdown: Processor to render with (built from config.parse if None)

    Returns:
        A bound, not yet serving, MarkdownHTTPServer.
    """
    md = markdown or Markdown(config=config.parse)
    server = MarkdownHTTPServer((config.host, config.port), config.root, md)
    host, port = server.server_address[:2]
    logger.info("Listening on http://%s:%d/ (root: %s)", host, port, server.document_root)
    return server


def serve(config: ServerConfig) -> None:
    """Serve until interrupted, then close the listener."""
    with create_server(config) as server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            logger.info("Shutting down")
