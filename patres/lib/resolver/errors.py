"""Resolution errors.

Every failure raised while resolving a template derives from
``PatternResolutionError`` and names the offending token. ``offset`` is the
position of that token in the input and is filled in by the resolver.
"""

from typing import Self


class PatternResolutionError(Exception):
    """Base error for a template that cannot be resolved."""

    def __init__(self: Self, message: str, token: str, offset: int | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.token: str = token
        self.offset: int | None = offset

    def __str__(self: Self) -> str:
        if self.offset is None:
            return f"{self.message}: {self.token!r}"
        return f"{self.message}: {self.token!r} at offset {self.offset}"


class GlobIndexError(PatternResolutionError, IndexError):
    """A ``glob:<i>`` token whose index is unparsable or outside the captures.

    Attributes:
        index: Parsed index, or None if the digits could not be parsed
        length: Number of captures available
    """

    def __init__(
        self: Self,
        token: str,
        index: int | None,
        length: int,
        offset: int | None = None,
    ) -> None:
        super().__init__("Glob index out of range", token, offset)
        self.index: int | None = index
        self.length: int = length

    def __str__(self: Self) -> str:
        return f"{super().__str__()} (index {self.index}, {self.length} captures)"


class UnresolvedPatternError(PatternResolutionError):
    """Token-shaped text that no substitution could resolve."""

    def __init__(self: Self, token: str, offset: int | None = None, message: str = "Unresolved pattern") -> None:
        super().__init__(message, token, offset)


class SubstitutionError(PatternResolutionError):
    """A substitution rule produced something other than a string."""
