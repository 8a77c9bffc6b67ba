"""Base-path rewriting for the font-face stylesheet."""

from __future__ import annotations

import re

from .template import PATH_TOKEN

_FONT_FACE_RE = re.compile(r"@font-face\s*\{", re.IGNORECASE)
_URL_RE = re.compile(r"url\(\s*([^)]*?)\s*\)")


def rewrite_base_path(css: str, base_path: str, token: str = PATH_TOKEN) -> str:
    """Replace every occurrence of ``token`` in ``css`` with ``base_path``.

    The replacement is literal and happens in one left-to-right pass, so text
    introduced by ``base_path`` is never scanned again. ``base_path`` is not
    validated; an empty string turns the URLs into bare file names.
    """
    if not token:
        raise ValueError("path token must be non-empty")
    return css.replace(token, base_path)


def count_font_faces(css: str) -> int:
    """Count ``@font-face`` blocks in a stylesheet."""
    return len(_FONT_FACE_RE.findall(css))


def font_urls(css: str) -> list[str]:
    """Return every ``url(...)`` target in document order (duplicates kept)."""
    return [m.group(1).strip("'\"") for m in _URL_RE.finditer(css)]
