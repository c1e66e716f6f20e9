# -*- coding: utf-8 -*-
"""Pattern resolution: globs, directory scans and single files."""
from __future__ import annotations

import os
import unittest

from helpers import CSS_FILES, JS_FILES, fixture_tree

from postbuild.core.errors import AssetNotFoundError
from postbuild.discovery.pattern_resolver import PatternResolver


class _FakeGlob:
    def __init__(self, result):
        self.result = result
        self.seen = []

    def has_magic(self, pattern: str) -> bool:
        return "*" in pattern

    def expand(self, pattern: str, root_dir=None):
        self.seen.append((pattern, root_dir))
        return list(self.result)


class DirectoryTests(unittest.TestCase):
    def test_directory_yields_every_css_file(self) -> None:
        with fixture_tree():
            found = PatternResolver().resolve("assets", ".css")
        self.assertEqual(set(found), {f"assets/{n}" for n in CSS_FILES})
        self.assertEqual(len(found), len(CSS_FILES))

    def test_directory_filters_by_extension(self) -> None:
        with fixture_tree():
            found = PatternResolver().resolve("assets", ".js")
        self.assertEqual(set(found), {f"assets/{n}" for n in JS_FILES})

    def test_directory_scan_is_not_recursive(self) -> None:
        with fixture_tree():
            found = PatternResolver().resolve("vendor", ".css")
        self.assertEqual(found, ["vendor/top.css"])

    def test_trailing_slash_directory(self) -> None:
        with fixture_tree():
            found = PatternResolver().resolve("assets/", ".css")
        self.assertEqual(set(found), {f"assets/{n}" for n in CSS_FILES})


class FileTests(unittest.TestCase):
    def test_single_file_is_returned_unchanged(self) -> None:
        with fixture_tree():
            found = PatternResolver().resolve("assets/styles1.css", ".css")
        self.assertEqual(found, ["assets/styles1.css"])

    def test_single_file_ignores_extension(self) -> None:
        with fixture_tree():
            found = PatternResolver().resolve("assets/notes.txt", ".css")
        self.assertEqual(found, ["assets/notes.txt"])

    def test_missing_path_raises_with_pattern(self) -> None:
        with fixture_tree():
            with self.assertRaises(AssetNotFoundError) as cm:
                PatternResolver().resolve("nope/missing.css", ".css")
        self.assertEqual(cm.exception.pattern, "nope/missing.css")
        self.assertIsInstance(cm.exception, FileNotFoundError)
        self.assertIn("File or folder 'nope/missing.css' not found", str(cm.exception))

    def test_symlink_yields_empty_list(self) -> None:
        with fixture_tree() as root:
            os.symlink(root / "assets/styles1.css", root / "link.css")
            found = PatternResolver().resolve("link.css", ".css")
        self.assertEqual(found, [])


class GlobTests(unittest.TestCase):
    def test_recursive_glob_matches_directory_scan(self) -> None:
        with fixture_tree():
            resolver = PatternResolver()
            by_glob = resolver.resolve("assets/**/*.css", ".css")
            by_dir = resolver.resolve("assets", ".css")
        self.assertEqual(set(by_glob), set(by_dir))

    def test_recursive_glob_descends(self) -> None:
        with fixture_tree():
            found = PatternResolver().resolve("vendor/**/*.css", ".css")
        self.assertEqual(set(found), {"vendor/top.css", "vendor/deep/lib.css"})

    def test_quoted_glob_is_unwrapped(self) -> None:
        with fixture_tree():
            single = PatternResolver().resolve("'assets/*.js'", ".js")
            double = PatternResolver().resolve('"assets/*.js"', ".js")
        expected = {f"assets/{n}" for n in JS_FILES}
        self.assertEqual(set(single), expected)
        self.assertEqual(set(double), expected)

    def test_glob_without_matches_is_empty(self) -> None:
        with fixture_tree():
            found = PatternResolver().resolve("assets/*.scss", ".css")
        self.assertEqual(found, [])

    def test_glob_order_comes_from_expander(self) -> None:
        fake = _FakeGlob(["b.css", "a.css"])
        found = PatternResolver(glob_expander=fake).resolve("'**/*.css'", ".css")
        self.assertEqual(found, ["b.css", "a.css"])
        self.assertEqual(fake.seen, [("**/*.css", None)])


class BaseDirectoryTests(unittest.TestCase):
    """Relative patterns are looked up below ``base``, not the process cwd."""

    def test_file_directory_and_glob_below_base(self) -> None:
        with fixture_tree() as root:
            os.chdir(root.parent)
            resolver = PatternResolver(base=root)
            single = resolver.resolve("assets/styles1.css", ".css")
            scanned = resolver.resolve("assets", ".css")
            globbed = resolver.resolve("'vendor/**/*.css'", ".css")
        self.assertEqual(single, ["assets/styles1.css"])
        self.assertEqual(set(scanned), {f"assets/{n}" for n in CSS_FILES})
        self.assertEqual(set(globbed), {"vendor/top.css", "vendor/deep/lib.css"})

    def test_process_cwd_is_not_consulted(self) -> None:
        with fixture_tree() as root:
            os.chdir(root.parent)
            with self.assertRaises(AssetNotFoundError) as cm:
                PatternResolver(base=root).resolve("site/assets/styles1.css", ".css")
        self.assertEqual(cm.exception.pattern, "site/assets/styles1.css")

    def test_base_is_handed_to_the_expander(self) -> None:
        fake = _FakeGlob(["a.css"])
        PatternResolver(glob_expander=fake, base="/srv/site").resolve("*.css", ".css")
        self.assertEqual(fake.seen, [("*.css", "/srv/site")])


if __name__ == "__main__":
    unittest.main()
