"""Request path to rendered document.

Resolves a URL path against a document root, rejects anything that is not
an existing ``.md`` file inside that root, reads it, and renders it.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import unquote

from minimark import Markdown
from minimark.errors import DocumentNotFoundError, UnsupportedDocumentError
from minimark.utils.logger import get_logger

logger = get_logger(__name__)

MARKDOWN_SUFFIX = ".md"


@dataclass(frozen=True, slots=True)
class RenderedPage:
    """A rendered HTML fragment ready for transport.

    Attributes:
        html: The rendered fragment
        source_path: File the fragment was rendered from
    """

    html: str
    source_path: Path

    @property
    def body(self) -> bytes:
        """UTF-8 encoded fragment."""
        return self.html.encode("utf-8")

    @property
    def content_length(self) -> int:
        """Length of body in bytes."""
        return len(self.body)


def resolve_document(root: str | Path, request_path: str) -> Path:
    """Map a request path to a Markdown file under root.

    Args:
        root: Document root directory
        request_path: Path from the request line (``/docs/a.md?x=1``)

    Returns:
        Resolved absolute path of an existing file inside root.

    Raises:
        UnsupportedDocumentError: Path does not end with ``.md``
        DocumentNotFoundError: File is missing or resolves outside root
    """
    path = request_path.split("?", 1)[0].split("#", 1)[0]
    relative = unquote(path).lstrip("/")

    if not relative.endswith(MARKDOWN_SUFFIX):
        raise UnsupportedDocumentError(request_path, "not a Markdown document")

    root_path = Path(root).resolve()
    try:
        candidate = (root_path / relative).resolve()
        found = candidate.is_relative_to(root_path) and candidate.is_file()
    except (OSError, ValueError) as e:
        # Embedded NUL bytes and overlong names never name a document
        raise DocumentNotFoundError(request_path, "no such document") from e
    if not found:
        raise DocumentNotFoundError(request_path, "no such document")
    return candidate


def load_document(path: Path) -> str:
    """Read a document as UTF-8, replacing undecodable bytes."""
    return path.read_bytes().decode("utf-8", errors="replace")


def render_document(
    root: str | Path, request_path: str, markdown: Markdown | None = None
) -> RenderedPage:
    """Resolve, load and render the document named by request_path."""
    md = markdown or Markdown()
    path = resolve_document(root, request_path)
    source = load_document(path)
    page = RenderedPage(html=md(source), source_path=path)
    logger.debug("Rendered %s (%d bytes)", path, page.content_length)
    return page
