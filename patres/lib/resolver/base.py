r"""
Rule-driven pattern resolution.

Provides the substitution rule type and the resolver that drives a list of
rules across an input string. Rules are evaluated in list order at each
candidate position and the first match wins, so a rule set built as
``baseline + extensions`` can never have a baseline token shadowed.

The resolver handles:
- Ordered first-match-wins dispatch over regex-keyed rules
- Literal pass-through of text between tokens
- Fail-fast propagation of rule errors
- Token shapes: text that looks like a token but matches no rule is an error

Example:
    resolver = PatternResolver(GLOB_SUBSTITUTIONS, context, GLOB_TOKEN_SHAPES)
    resolver.resolve("out/glob:0.js")
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Iterable, Self
from patres.lib.log import LOG
from patres.config.settings import appsettings
from patres.lib.resolver.errors import (
    PatternResolutionError,
    SubstitutionError,
    UnresolvedPatternError,
)
from patres.models.dataModel import DataT, ParseResult, SubstitutionContext

# resolver(context, *captured_groups) -> replacement
Resolver = Callable[..., str]


@dataclass(frozen=True)
class Substitution:
    """A (match pattern, resolver) pair.

    Attributes:
        name: Label used in logs and error messages
        pattern: Regex matched at a candidate position of the input
        resolver: Called with the active context followed by the match groups
    """

    name: str
    pattern: re.Pattern[str]
    resolver: Resolver = field(compare=False)

    def __post_init__(self: Self) -> None:
        if isinstance(self.pattern, str):
            object.__setattr__(self, "pattern", re.compile(self.pattern))

    def match(self: Self, text: str, pos: int) -> re.Match[str] | None:
        """Match this rule's pattern exactly at ``pos``."""
        return self.pattern.match(text, pos)

    def apply(self: Self, context: SubstitutionContext[Any], match: re.Match[str]) -> str:
        """Compute the replacement for a match of this rule."""
        return self.resolver(context, *match.groups())


def substitution(pattern: str, name: str | None = None) -> Callable[[Resolver], Substitution]:
    """Decorator turning a resolver function into a ``Substitution``.

    Args:
        pattern: Regex for the token shape the function resolves
        name: Rule label, defaults to the function name

    Returns:
        Decorator producing the rule
    """

    def decorator(func: Resolver) -> Substitution:
        return Substitution(name=name or func.__name__, pattern=re.compile(pattern), resolver=func)

    return decorator


class PatternResolver(Generic[DataT]):
    """Resolves every token of a string through an ordered rule list.

    Attributes:
        substitutions: Rules in precedence order
        context: Default context used when ``resolve`` is not given one
        token_shapes: Patterns marking text that must be resolved by some rule
    """

    def __init__(
        self: Self,
        substitutions: Iterable[Substitution],
        context: SubstitutionContext[DataT] | None = None,
        token_shapes: Iterable[str | re.Pattern[str]] = (),
    ) -> None:
        """Initialize resolver with its rule list.

        Raises:
            ValueError: If a rule pattern or token shape can match the empty string
        """
        self.substitutions: tuple[Substitution, ...] = tuple(substitutions)
        self.token_shapes: tuple[re.Pattern[str], ...] = tuple(
            re.compile(shape) if isinstance(shape, str) else shape
            for shape in token_shapes
        )
        self.context: SubstitutionContext[DataT] | None = context

        for rule in self.substitutions:
            if rule.pattern.match("") is not None:
                raise ValueError(f"Substitution '{rule.name}' matches the empty string")
        for shape in self.token_shapes:
            if shape.match("") is not None:
                raise ValueError(f"Token shape {shape.pattern!r} matches the empty string")

        self._scan: tuple[re.Pattern[str], ...] = tuple(
            rule.pattern for rule in self.substitutions
        ) + self.token_shapes

    def extend(
        self: Self,
        *substitutions: Substitution,
        token_shapes: Iterable[str | re.Pattern[str]] = (),
    ) -> "PatternResolver[DataT]":
        """Return a new resolver with rules appended after the current ones."""
        return PatternResolver(
            self.substitutions + substitutions,
            self.context,
            self.token_shapes + tuple(token_shapes),
        )

    def resolve(self: Self, text: str, context: SubstitutionContext[DataT] | None = None) -> str:
        """Replace every token in ``text``.

        Args:
            text: Input string containing tokens
            context: Context for this call, overriding the resolver's default

        Returns:
            The fully resolved string

        Raises:
            ValueError: If no context is available
            PatternResolutionError: For the first token that cannot be resolved
        """
        ctx: SubstitutionContext[DataT] | None = context if context is not None else self.context
        if ctx is None:
            raise ValueError("No substitution context supplied")

        result: list[str] = []
        upcoming: dict[int, int] = {}
        pos: int = 0

        while pos < len(text):
            start: int | None = self._candidate_find(text, pos, upcoming)
            if start is None:
                break
            result.append(text[pos:start])
            replacement, pos = self._token_resolve(text, start, ctx)
            result.append(replacement)

        result.append(text[pos:])
        return "".join(result)

    def parse(self: Self, text: str, context: SubstitutionContext[DataT] | None = None) -> ParseResult:
        """Resolve ``text`` without raising.

        Returns:
            ParseResult with the resolved text or the first error
        """
        try:
            return ParseResult(text=self.resolve(text, context), error=None, success=True)
        except Exception as e:
            LOG(f"Error resolving {text!r}: {e}")
            return ParseResult(text="", error=str(e), success=False)

    def _candidate_find(self: Self, text: str, pos: int, upcoming: dict[int, int]) -> int | None:
        """Return the nearest position at or after ``pos`` where any rule or shape matches.

        ``upcoming`` caches the next match start per pattern, -1 when exhausted.
        """
        nearest: int | None = None
        for i, pattern in enumerate(self._scan):
            start: int | None = upcoming.get(i)
            if start is None or (start != -1 and start < pos):
                found = pattern.search(text, pos)
                start = found.start() if found else -1
                upcoming[i] = start
            if start != -1 and (nearest is None or start < nearest):
                nearest = start
        return nearest

    def _token_resolve(
        self: Self, text: str, start: int, ctx: SubstitutionContext[DataT]
    ) -> tuple[str, int]:
        """Resolve the token at ``start`` with the first matching rule.

        Returns:
            The replacement and the position just past the token
        """
        for rule in self.substitutions:
            match = rule.match(text, start)
            if match is None:
                continue
            if appsettings.detailedOutput:
                LOG(f"{rule.name} matched {match.group(0)!r} at {start}")
            try:
                replacement = rule.apply(ctx, match)
            except PatternResolutionError as e:
                if e.offset is None:
                    e.offset = start
                raise
            if not isinstance(replacement, str):
                raise SubstitutionError(
                    f"Substitution '{rule.name}' returned {type(replacement).__name__}",
                    match.group(0),
                    start,
                )
            return replacement, match.end()

        for shape in self.token_shapes:
            match = shape.match(text, start)
            if match is not None:
                raise UnresolvedPatternError(match.group(0), start)

        # search() and match() disagreed on this position; keep the character literal
        return text[start], start + 1
