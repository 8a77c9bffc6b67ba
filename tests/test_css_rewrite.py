"""Tests for base-path rewriting of the font-face stylesheet."""

import unittest

from mathfonts.css.rewrite import count_font_faces, font_urls, rewrite_base_path
from mathfonts.css.template import FONT_FACE_CSS, PATH_TOKEN


class TestTemplate(unittest.TestCase):
    def test_template_has_sixteen_rules(self) -> None:
        self.assertEqual(count_font_faces(FONT_FACE_CSS), 16)

    def test_every_url_uses_path_token(self) -> None:
        urls = font_urls(FONT_FACE_CSS)
        self.assertEqual(len(urls), 80)
        self.assertTrue(all(u.startswith(PATH_TOKEN) for u in urls))
        self.assertEqual(FONT_FACE_CSS.count(PATH_TOKEN), 80)

    def test_first_rule_urls(self) -> None:
        urls = font_urls(FONT_FACE_CSS)
        self.assertEqual(urls[0], "fonts/KaTeX_AMS-Regular.eot")
        self.assertEqual(urls[1], "fonts/KaTeX_AMS-Regular.eot#iefix")
        self.assertEqual(urls[4], "fonts/KaTeX_AMS-Regular.ttf")


class TestRewriteBasePath(unittest.TestCase):
    def test_absolute_base_path(self) -> None:
        css = rewrite_base_path(FONT_FACE_CSS, "/assets/")
        self.assertIn("url(/assets/KaTeX_Main-Bold.eot)", css)
        self.assertNotIn("fonts/", css)

    def test_empty_base_path_gives_bare_filenames(self) -> None:
        css = rewrite_base_path(FONT_FACE_CSS, "")
        self.assertIn("url(KaTeX_Main-Bold.eot)", css)
        self.assertIn("url(KaTeX_Typewriter-Regular.woff2) format('woff2')", css)

    def test_only_token_changes(self) -> None:
        pieces = FONT_FACE_CSS.split(PATH_TOKEN)
        for base in ["/assets/", "https://cdn.example/katex/", r"$1\g<0>.*(x)[/", "a b/"]:
            with self.subTest(base=base):
                css = rewrite_base_path(FONT_FACE_CSS, base)
                self.assertEqual(css.split(base), pieces)
        self.assertEqual(rewrite_base_path(FONT_FACE_CSS, ""), "".join(pieces))

    def test_regex_special_characters_are_literal(self) -> None:
        base = r"\1$&.*/"
        css = rewrite_base_path(FONT_FACE_CSS, base)
        self.assertIn(r"url(\1$&.*/KaTeX_AMS-Regular.eot)", css)
        self.assertEqual(css.count(base), 80)

    def test_rule_count_preserved(self) -> None:
        css = rewrite_base_path(FONT_FACE_CSS, "/x/")
        self.assertEqual(count_font_faces(css), count_font_faces(FONT_FACE_CSS))

    def test_single_pass_when_base_contains_token(self) -> None:
        base = "x/fonts/y/"
        css = rewrite_base_path(FONT_FACE_CSS, base)
        self.assertEqual(css.count(base), 80)
        self.assertEqual(css.count("fonts/"), 80)
        self.assertIn("url(x/fonts/y/KaTeX_Main-Bold.eot)", css)

    def test_adjacent_tokens(self) -> None:
        self.assertEqual(rewrite_base_path("a fonts/fonts/ b", "fonts/fonts/"), "a fonts/fonts/fonts/fonts/ b")

    def test_custom_token(self) -> None:
        self.assertEqual(rewrite_base_path("url(x/a.woff)", "/y/", token="x/"), "url(/y/a.woff)")

    def test_empty_token_rejected(self) -> None:
        with self.assertRaises(ValueError):
            rewrite_base_path(FONT_FACE_CSS, "/x/", token="")


if __name__ == "__main__":
    unittest.main()
