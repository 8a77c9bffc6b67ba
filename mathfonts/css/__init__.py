"""Font-face stylesheet template, model and rewriting."""

from .faces import FONT_FACES, FontFaceRule, FontSource, parse_font_faces, render_font_faces
from .rewrite import count_font_faces, font_urls, rewrite_base_path
from .template import FONT_FACE_CSS, PATH_TOKEN

__all__ = [
    "FONT_FACE_CSS",
    "PATH_TOKEN",
    "FONT_FACES",
    "FontFaceRule",
    "FontSource",
    "parse_font_faces",
    "render_font_faces",
    "rewrite_base_path",
    "count_font_faces",
    "font_urls",
]
