"""Places a rewritten stylesheet can be attached to.

An injection target only has to accept stylesheet text; each call adds one
style element after any existing ones. This keeps the injector independent of
where the document lives (memory, an HTML string, a file on disk).
"""

from __future__ import annotations

import logging
import re
from html.parser import HTMLParser
from pathlib import Path
from typing import Protocol

from ..config import ENCODING

logger = logging.getLogger(__name__)

# Text that would end a <style> raw-text element early
_STYLE_CLOSE_RE = re.compile(r"</style", re.IGNORECASE)


class MissingHeadError(LookupError):
    """The document has no <head> element to append styles to."""


class StyleTarget(Protocol):
    def append_style(self, css_text: str) -> None: ...


class RecordingTarget:
    """Keeps appended stylesheets in memory, in append order."""

    def __init__(self) -> None:
        self.styles: list[str] = []

    def append_style(self, css_text: str) -> None:
        self.styles.append(css_text)


class HtmlDocument:
    """An HTML document held as text.

    Appended styles are serialized as ``<style>...</style>`` immediately before
    the head end tag, which makes each one the last child of the head.
    """

    def __init__(self, html: str) -> None:
        self.html = html

    def __str__(self) -> str:
        return self.html

    def append_style(self, css_text: str) -> None:
        if _STYLE_CLOSE_RE.search(css_text):
            raise ValueError("stylesheet text contains '</style' and cannot be serialized")

        index = _head_insert_index(self.html)
        element = f"<style>{css_text}</style>"
        self.html = self.html[:index] + element + self.html[index:]
        logger.debug("Inserted style element (%d chars) at offset %d", len(css_text), index)

    def head_styles(self) -> list[str]:
        """Return the text of every <style> inside the head, in document order."""
        parser = _HeadScanner(self.html)
        parser.feed(self.html)
        parser.close()
        return ["".join(chunks) for chunks in parser.styles]


class HtmlFileTarget:
    """Injects into an HTML file, writing the result after every append.

    The source file is read once; with ``out_path`` set the original file is
    left untouched.
    """

    def __init__(self, path: Path, out_path: Path | None = None) -> None:
        self.path = Path(path)
        self.out_path = Path(out_path) if out_path is not None else self.path
        self._document: HtmlDocument | None = None

    @property
    def document(self) -> HtmlDocument:
        if self._document is None:
            self._document = HtmlDocument(self.path.read_text(encoding=ENCODING))
        return self._document

    def append_style(self, css_text: str) -> None:
        document = self.document
        document.append_style(css_text)
        self.out_path.parent.mkdir(parents=True, exist_ok=True)
        self.out_path.write_text(document.html, encoding=ENCODING)
        logger.debug("Wrote %s", self.out_path)


def _head_insert_index(html: str) -> int:
    """Find the character offset where a new last child of <head> goes.

    Raises:
        MissingHeadError: If the document has no <head> start tag
    """
    parser = _HeadScanner(html)
    parser.feed(html)
    parser.close()

    if parser.head_start is None:
        raise MissingHeadError("document has no <head> element")
    if parser.head_close is not None:
        return parser.head_close
    return len(html)


# Elements allowed as children of <head>; any other start tag closes it
_HEAD_CONTENT_TAGS = {
    "base",
    "link",
    "meta",
    "noscript",
    "script",
    "style",
    "template",
    "title",
}


class _HeadScanner(HTMLParser):
    """Record where the first head starts and ends, and collect its styles.

    The head ends at ``</head>``, or implicitly at the first start tag that
    cannot live in a head (``<body>``, ``<p>``, ...) or at ``</html>``.
    """

    def __init__(self, html: str) -> None:
        super().__init__(convert_charrefs=True)
        self._line_starts = [0] + [m.end() for m in re.finditer("\n", html)]
        self.head_start: int | None = None
        self.head_close: int | None = None
        self.styles: list[list[str]] = []
        self._in_style = False
        self._template_depth = 0

    def _offset(self) -> int:
        lineno, col = self.getpos()
        return self._line_starts[lineno - 1] + col

    def _in_head(self) -> bool:
        return self.head_start is not None and self.head_close is None

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        tag_l = tag.lower()
        if tag_l == "head" and self.head_start is None:
            self.head_start = self._offset()
            return
        if not self._in_head():
            return
        if tag_l == "template":
            self._template_depth += 1
        elif self._template_depth:
            return
        elif tag_l == "style":
            self._in_style = True
            self.styles.append([])
        elif tag_l not in _HEAD_CONTENT_TAGS:
            self.head_close = self._offset()

    def handle_endtag(self, tag: str) -> None:
        tag_l = tag.lower()
        if tag_l == "style":
            self._in_style = False
        if not self._in_head():
            return
        if tag_l == "template":
            self._template_depth = max(self._template_depth - 1, 0)
        elif tag_l in {"head", "html"} and not self._template_depth:
            self.head_close = self._offset()

    def handle_data(self, data: str) -> None:
        if self._in_style:
            self.styles[-1].append(data)
