"""Attach the KaTeX font-face stylesheet to a document."""

from __future__ import annotations

import logging

from ..css.rewrite import rewrite_base_path
from ..css.template import FONT_FACE_CSS, PATH_TOKEN
from .targets import StyleTarget

logger = logging.getLogger(__name__)


class StyleInjector:
    """Rewrite a stylesheet template for a base path and hand it to a target.

    Each call to :meth:`inject` adds one style element. Earlier injections are
    never inspected or removed, so repeated calls accumulate duplicates.
    """

    def __init__(self, template: str = FONT_FACE_CSS, token: str = PATH_TOKEN) -> None:
        if not token:
            raise ValueError("path token must be non-empty")
        self.template = template
        self.token = token

    def render(self, base_path: str) -> str:
        return rewrite_base_path(self.template, base_path, self.token)

    def inject(self, base_path: str, target: StyleTarget) -> None:
        css = self.render(base_path)
        logger.debug("Injecting font-face stylesheet with base path %r", base_path)
        target.append_style(css)


_default = StyleInjector()


def inject(base_path: str, target: StyleTarget) -> None:
    """Append the KaTeX font-face stylesheet, rewritten for ``base_path``, to ``target``."""
    _default.inject(base_path, target)
