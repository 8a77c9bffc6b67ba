"""Style injection into documents."""

from .injector import StyleInjector, inject
from .script import render_injection_script
from .targets import (
    HtmlDocument,
    HtmlFileTarget,
    MissingHeadError,
    RecordingTarget,
    StyleTarget,
)

__all__ = [
    "inject",
    "StyleInjector",
    "StyleTarget",
    "RecordingTarget",
    "HtmlDocument",
    "HtmlFileTarget",
    "MissingHeadError",
    "render_injection_script",
]
