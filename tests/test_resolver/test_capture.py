"""Tests for glob capture."""

import pytest
from patres.lib.resolver import glob_capture, glob_resolve


@pytest.mark.parametrize(
    "pattern, path, expected",
    [
        ("src/**/*.test.ts", "src/a/b/c.test.ts", ("a/b", "c")),
        ("src/**/*.test.ts", "src/c.test.ts", ("", "c")),
        ("*.py", "setup.py", ("setup",)),
        ("lib/?.js", "lib/x.js", ("x",)),
        ("img[0-9].png", "img7.png", ("7",)),
        ("img[!0-9].png", "imgA.png", ("A",)),
        ("*.{ts,tsx}", "view.tsx", ("view", "tsx")),
        ("a/**", "a/b/c", ("b/c",)),
        ("plain.txt", "plain.txt", ()),
    ],
)
def test_capture(pattern, path, expected):
    assert glob_capture(pattern, path) == expected


@pytest.mark.parametrize(
    "pattern, path",
    [
        ("*.py", "src/setup.py"),
        ("lib/?.js", "lib/xy.js"),
        ("img[0-9].png", "imgA.png"),
        ("plain.txt", "plain.txt.bak"),
    ],
)
def test_no_match(pattern, path):
    assert glob_capture(pattern, path) is None


def test_backslash_path_normalized():
    assert glob_capture("src/*/*.ts", "src\\mod\\index.ts") == ("mod", "index")


def test_unclosed_bracket_literal():
    assert glob_capture("a[b", "a[b") == ()


def test_capture_feeds_resolver():
    captures = glob_capture("src/**/*.ts", "src/app/util/index.ts")
    assert glob_resolve("out/glob:0/glob:1.js (glob:count)", captures) == "out/app/util/index.js (2)"
