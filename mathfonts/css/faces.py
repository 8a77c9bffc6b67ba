"""Typed view of the ``@font-face`` rules in the embedded stylesheet.

The stylesheet ships as literal minified text. This module reads that text
into immutable models and writes models back out in the same minified form,
so rendering the parsed template reproduces it exactly.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict

from .template import FONT_FACE_CSS

_RULE_RE = re.compile(r"@font-face\s*\{((?:url\([^)]*\)|[^}])*)\}", re.IGNORECASE)

# url(...) may contain ';' (data URIs), so a declaration value is a run of
# url(...) groups or non-';' characters.
_DECLARATION_RE = re.compile(r"\s*([\w-]+)\s*:\s*((?:url\([^)]*\)|[^;])*)")

_SOURCE_RE = re.compile(r"url\(([^)]*)\)(?:\s*format\(['\"]([^'\"]*)['\"]\))?")


class FontSource(BaseModel):
    """One ``url(...) format(...)`` entry of a ``src`` descriptor."""

    model_config = ConfigDict(frozen=True)

    url: str
    format: str | None = None

    def render(self) -> str:
        if self.format is None:
            return f"url({self.url})"
        return f"url({self.url}) format('{self.format}')"


class FontFaceRule(BaseModel):
    """A single ``@font-face`` block."""

    model_config = ConfigDict(frozen=True)

    family: str
    legacy_src: str | None = None  # bare src:url(...) for old IE
    sources: tuple[FontSource, ...]
    weight: str = "normal"
    style: str = "normal"

    @property
    def formats(self) -> tuple[str, ...]:
        return tuple(s.format for s in self.sources if s.format)


def parse_font_faces(css: str) -> list[FontFaceRule]:
    """Parse every ``@font-face`` block of a stylesheet.

    Args:
        css: Stylesheet text

    Returns:
        Rules in document order

    Raises:
        ValueError: If a block has no family or no ``src`` descriptor
    """
    rules = []
    for match in _RULE_RE.finditer(css):
        rules.append(_parse_rule(match.group(1)))
    return rules


def _parse_rule(body: str) -> FontFaceRule:
    family = None
    srcs: list[str] = []
    weight = "normal"
    style = "normal"

    for decl in _DECLARATION_RE.finditer(body):
        name = decl.group(1).lower()
        value = decl.group(2).strip()
        if name == "font-family":
            family = value
        elif name == "src":
            srcs.append(value)
        elif name == "font-weight":
            weight = value
        elif name == "font-style":
            style = value

    if not family:
        raise ValueError(f"@font-face block without font-family: {body[:60]!r}")
    if not srcs:
        raise ValueError(f"@font-face block for {family} has no src")

    # Only the last src declaration is used by current browsers; an earlier
    # one is the single-URL fallback.
    legacy = None
    if len(srcs) > 1:
        first = _SOURCE_RE.search(srcs[0])
        legacy = first.group(1) if first else None

    sources = tuple(
        FontSource(url=m.group(1), format=m.group(2))
        for m in _SOURCE_RE.finditer(srcs[-1])
    )
    return FontFaceRule(
        family=family,
        legacy_src=legacy,
        sources=sources,
        weight=weight,
        style=style,
    )


def render_font_face(rule: FontFaceRule) -> str:
    """Render a rule as minified CSS."""
    parts = [f"font-family:{rule.family}"]
    if rule.legacy_src is not None:
        parts.append(f"src:url({rule.legacy_src})")
    parts.append("src:" + ",".join(s.render() for s in rule.sources))
    parts.append(f"font-weight:{rule.weight}")
    parts.append(f"font-style:{rule.style}")
    return "@font-face{" + ";".join(parts) + "}"


def render_font_faces(rules: list[FontFaceRule] | tuple[FontFaceRule, ...]) -> str:
    return "".join(render_font_face(r) for r in rules)


FONT_FACES: tuple[FontFaceRule, ...] = tuple(parse_font_faces(FONT_FACE_CSS))
