"""
Glob substitutions.

Extends the default substitutions with tokens that read the strings captured
by a glob match:
- glob:<i>: the i-th capture, zero-based
- glob:count: the number of captures
"""

import re
from typing import Final, Iterable
from patres.lib.resolver.base import PatternResolver, Substitution, substitution
from patres.lib.resolver.defaults import DEFAULT_SUBSTITUTIONS, DEFAULT_TOKEN_SHAPES
from patres.lib.resolver.errors import GlobIndexError
from patres.models.dataModel import PatternContext, SubstitutionContext

GLOB_TOKEN_SHAPES: Final[tuple[str, ...]] = DEFAULT_TOKEN_SHAPES + (r"glob:[\w-]*",)


ASCII_INDEX: Final[re.Pattern[str]] = re.compile(r"-?[0-9]+")


# Digits are taken first so glob:12abc keeps "abc" as literal text;
# any other word after glob: (except count) is a malformed index.
@substitution(r"glob:(?!count)(-?[0-9]+|[\w-]*)", name="glob index")
def glob_index(ctx: SubstitutionContext[PatternContext], index_str: str) -> str:
    """Return the capture at ``index_str``.

    Raises:
        GlobIndexError: If the index is not an ASCII integer or outside the captures
    """
    token: str = f"glob:{index_str}"
    if not ASCII_INDEX.fullmatch(index_str):
        raise GlobIndexError(token, None, len(ctx.data))
    index: int = int(index_str, 10)
    if 0 <= index < len(ctx.data):
        return ctx.data[index]
    raise GlobIndexError(token, index, len(ctx.data))


@substitution(r"glob:count", name="glob count")
def glob_count(ctx: SubstitutionContext[PatternContext]) -> str:
    return str(len(ctx.data))


GLOB_SUBSTITUTIONS: Final[tuple[Substitution, ...]] = DEFAULT_SUBSTITUTIONS + (
    glob_index,
    glob_count,
)


def glob_resolver(
    captures: Iterable[str],
    env: dict[str, str] | None = None,
    cwd: str | None = None,
) -> PatternResolver[PatternContext]:
    """Build a resolver over the default and glob substitutions.

    Args:
        captures: Strings captured by a glob match, in order
        env: Environment for ${env:...}, defaults to the process environment
        cwd: Directory for ${cwd}, defaults to the process working directory

    Returns:
        PatternResolver bound to a context wrapping ``captures``
    """
    overrides: dict = {}
    if env is not None:
        overrides["env"] = env
    if cwd is not None:
        overrides["cwd"] = cwd
    context = SubstitutionContext[PatternContext](data=tuple(captures), **overrides)
    return PatternResolver(GLOB_SUBSTITUTIONS, context, GLOB_TOKEN_SHAPES)


def glob_resolve(text: str, captures: Iterable[str]) -> str:
    """Resolve ``text`` against ``captures`` in one call."""
    return glob_resolver(captures).resolve(text)
