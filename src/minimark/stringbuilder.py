"""StringBuilder for O(n) HTML accumulation.

Appends fragments to a list and joins once at the end, instead of
repeatedly concatenating the growing output string.

Thread Safety:
StringBuilder instances are local to each render() call.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.element("h1", "Hello").append("tail")
            >>> sb.build()
            '<h1>Hello</h1>tail'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a raw string (empty strings are skipped)."""
        if s:
            self._parts.append(s)
        return self

    def element(self, tag: str, content: str) -> StringBuilder:
        """Append ``<tag>content</tag>``.

        Content is inserted verbatim, without escaping.
        """
        self._parts.append(f"<{tag}>{content}</{tag}>")
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
