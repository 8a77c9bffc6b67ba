"""CLI entry point for mathfonts.

Like the rest of the package this sticks to argparse so the tool runs
wherever the library does.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .config import DEFAULT_BASE_PATH, ENCODING, HREF_VAR


def app(argv: list[str] | None = None) -> None:
    """Console script entrypoint."""
    raise SystemExit(main(argv))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="mathfonts",
        description="Rewrite and inject the KaTeX @font-face stylesheet.",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"mathfonts {__version__}",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_css = sub.add_parser("css", help="Print the stylesheet rewritten for a base path")
    p_css.add_argument("--base-path", "-b", default=DEFAULT_BASE_PATH, help="URL prefix of the font files")
    p_css.add_argument("--out", "-o", type=Path, help="Write to a file instead of stdout")

    p_inject = sub.add_parser("inject", help="Append the stylesheet to an HTML file's <head>")
    p_inject.add_argument("--html", required=True, type=Path, help="HTML file to inject into")
    p_inject.add_argument("--base-path", "-b", default=DEFAULT_BASE_PATH, help="URL prefix of the font files")
    p_inject.add_argument("--out", "-o", type=Path, help="Output file (defaults to editing in place)")

    sub.add_parser("faces", help="List the font faces in the stylesheet")

    p_script = sub.add_parser("script", help="Emit the browser snippet that injects the stylesheet")
    p_script.add_argument("--href-var", default=HREF_VAR, help="Global holding the base path at runtime")
    p_script.add_argument("--out", "-o", type=Path, help="Write to a file instead of stdout")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.cmd == "css":
        return _cmd_css(args)
    if args.cmd == "inject":
        return _cmd_inject(args)
    if args.cmd == "faces":
        return _cmd_faces(args)
    if args.cmd == "script":
        return _cmd_script(args)

    parser.print_help()
    return 2


def _emit(text: str, out: Path | None) -> None:
    if out is None:
        sys.stdout.write(text)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding=ENCODING)


def _cmd_css(args: Any) -> int:
    from .inject.injector import StyleInjector

    css = StyleInjector().render(args.base_path)
    try:
        _emit(css if args.out else css + "\n", args.out)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


def _cmd_inject(args: Any) -> int:
    from .inject.injector import inject
    from .inject.targets import HtmlFileTarget, MissingHeadError

    target = HtmlFileTarget(args.html, args.out)
    try:
        inject(args.base_path, target)
    except (OSError, MissingHeadError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("✓ Stylesheet injected")
    print(f"  Output: {target.out_path}")
    print(f"  Base path: {args.base_path!r}")
    return 0


def _cmd_faces(args: Any) -> int:
    from .css.faces import FONT_FACES

    for rule in FONT_FACES:
        print(f"  {rule.family:20} {rule.weight:6} {rule.style:8} {', '.join(rule.formats)}")
    print(f"\n{len(FONT_FACES)} font faces")
    return 0


def _cmd_script(args: Any) -> int:
    from .inject.script import render_injection_script

    try:
        script = render_injection_script(href_var=args.href_var)
        _emit(script, args.out)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    app()
