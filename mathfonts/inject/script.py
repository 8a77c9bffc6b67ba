"""Render the stand-alone browser snippet that performs the injection.

Some hosts (dictionary viewers, e-book readers) only run plain scripts and
expose the resource location through a global variable. The snippet built
here reads that variable at page load, rewrites the stylesheet and appends it
to ``document.head``.
"""

from __future__ import annotations

import json
import re

from ..config import HREF_VAR
from ..css.template import FONT_FACE_CSS, PATH_TOKEN

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$]*$")


def render_injection_script(
    css: str = FONT_FACE_CSS,
    href_var: str = HREF_VAR,
    token: str = PATH_TOKEN,
) -> str:
    """Build the JavaScript snippet.

    Args:
        css: Stylesheet template containing ``token``
        href_var: Global variable holding the base path at runtime
        token: Path prefix to rewrite

    Returns:
        Script source, newline-terminated

    Raises:
        ValueError: If ``href_var`` is not a plain JavaScript identifier
    """
    if not _IDENTIFIER_RE.match(href_var):
        raise ValueError(f"not a JavaScript identifier: {href_var!r}")

    # split/join replaces every occurrence without expanding $-patterns the
    # way String.prototype.replace does with a string replacement.
    lines = [
        f"var fonts = {json.dumps(css)}",
        f"fonts = fonts.split({json.dumps(token)}).join({href_var});",
        "var ns = document.createElement('style');",
        "ns.appendChild(document.createTextNode(fonts));",
        "document.head.appendChild(ns);",
    ]
    return "\n".join(lines) + "\n"
