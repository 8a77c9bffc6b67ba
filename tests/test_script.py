"""Tests for the browser injection snippet."""

import json
import shutil
import subprocess
import unittest

from mathfonts.css.template import FONT_FACE_CSS
from mathfonts.inject.script import render_injection_script

# Minimal DOM for running the snippet outside a browser: the appended style's
# text is printed as JSON.
_DOM_STUB = """
var appended = [];
var document = {
  createElement: function (tag) {
    return {tag: tag, text: "", appendChild: function (t) { this.text += t; }};
  },
  createTextNode: function (t) { return t; },
  head: {appendChild: function (n) { appended.push(n.text); }},
};
"""


class TestRenderInjectionScript(unittest.TestCase):
    def test_snippet_shape(self) -> None:
        lines = render_injection_script().splitlines()
        self.assertEqual(len(lines), 5)
        self.assertTrue(lines[0].startswith('var fonts = "@font-face{font-family:KaTeX_AMS;'))
        self.assertEqual(lines[1], 'fonts = fonts.split("fonts/").join(contentHref);')
        self.assertEqual(lines[-1], "document.head.appendChild(ns);")

    def test_replacement_does_not_use_string_replace(self) -> None:
        script = render_injection_script()
        self.assertNotIn(".replace(", script)
        self.assertNotIn("RegExp", script)

    def test_css_literal_round_trips(self) -> None:
        first = render_injection_script().splitlines()[0]
        self.assertEqual(json.loads(first[len("var fonts = "):]), FONT_FACE_CSS)

    def test_custom_href_var(self) -> None:
        script = render_injection_script(href_var="baseHref")
        self.assertIn(".join(baseHref);", script)

    def test_custom_token(self) -> None:
        script = render_injection_script(css="url(a.b/x)", token="a.b/")
        self.assertIn('fonts.split("a.b/")', script)

    def test_rejects_non_identifier(self) -> None:
        for name in ["1abc", "window.base", "a-b", ""]:
            with self.subTest(name=name):
                with self.assertRaises(ValueError):
                    render_injection_script(href_var=name)


@unittest.skipUnless(shutil.which("node"), "node is not installed")
class TestSnippetUnderNode(unittest.TestCase):
    def _run(self, css: str, href: str) -> list[str]:
        source = (
            f"var contentHref = {json.dumps(href)};\n"
            + _DOM_STUB
            + render_injection_script(css=css)
            + "console.log(JSON.stringify(appended));\n"
        )
        result = subprocess.run(
            ["node", "-e", source],
            capture_output=True,
            text=True,
            check=True,
        )
        return json.loads(result.stdout)

    def test_dollar_patterns_are_literal(self) -> None:
        appended = self._run("url(fonts/a.woff) url(fonts/b.ttf)", "$&x/$1$$")
        self.assertEqual(appended, ["url($&x/$1$$a.woff) url($&x/$1$$b.ttf)"])

    def test_base_containing_token_is_not_rescanned(self) -> None:
        appended = self._run("url(fonts/a.woff)", "x/fonts/y/")
        self.assertEqual(appended, ["url(x/fonts/y/a.woff)"])

    def test_full_template(self) -> None:
        appended = self._run(FONT_FACE_CSS, "/assets/")
        self.assertEqual(len(appended), 1)
        self.assertEqual(appended[0], FONT_FACE_CSS.replace("fonts/", "/assets/"))


if __name__ == "__main__":
    unittest.main()
