"""
Glob capture.

Matches a path against a glob pattern and returns what each wildcard
consumed. The result is the ordered capture sequence that ``glob:<i>``
tokens index into.

Supported syntax:
- ``**``: any run of characters, ``/`` included (``**/`` may match nothing)
- ``*``: any run of characters except ``/``
- ``?``: a single character except ``/``
- ``[...]`` / ``[!...]``: a character class
- ``{a,b}``: one of the listed alternatives

Example:
    glob_capture("src/**/*.test.ts", "src/a/b/c.test.ts")  # ("a/b", "c")
"""

import re
from functools import lru_cache
from patres.models.dataModel import PatternContext


@lru_cache(maxsize=256)
def glob_compile(pattern: str) -> re.Pattern[str]:
    """Translate a glob into a regex with one capture group per wildcard."""
    parts: list[str] = []
    i: int = 0
    n: int = len(pattern)

    while i < n:
        char: str = pattern[i]
        if pattern.startswith("**", i):
            at_segment_start: bool = i == 0 or pattern[i - 1] == "/"
            if at_segment_start and pattern.startswith("**/", i):
                parts.append("(?:(.*)/)?")
                i += 3
            else:
                parts.append("(.*)")
                i += 2
        elif char == "*":
            parts.append("([^/]*)")
            i += 1
        elif char == "?":
            parts.append("([^/])")
            i += 1
        elif char == "[":
            negated: bool = pattern.startswith("[!", i)
            first: int = i + 2 if negated else i + 1
            # A ']' right after the opening bracket is part of the class
            end: int = pattern.find("]", first + 1)
            if end == -1:
                parts.append(re.escape(char))
                i += 1
                continue
            body: str = pattern[first:end].replace("\\", "\\\\")
            parts.append(f"([{'^' if negated else ''}{body}])")
            i = end + 1
        elif char == "{":
            end = pattern.find("}", i)
            if end == -1:
                parts.append(re.escape(char))
                i += 1
                continue
            options: list[str] = pattern[i + 1 : end].split(",")
            parts.append("(" + "|".join(re.escape(option) for option in options) + ")")
            i = end + 1
        else:
            parts.append(re.escape(char))
            i += 1

    return re.compile("".join(parts), re.DOTALL)


def glob_capture(pattern: str, path: str) -> PatternContext | None:
    """Match ``path`` against ``pattern``.

    Args:
        pattern: Glob pattern, ``/`` separated
        path: Path to match, ``\\`` separators are normalized to ``/``

    Returns:
        The captured strings, or None if the path does not match
    """
    match = glob_compile(pattern).fullmatch(path.replace("\\", "/"))
    if match is None:
        return None
    return tuple(group or "" for group in match.groups())
