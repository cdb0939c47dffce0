"""
Resolver package for patres pattern substitution.

Provides ordered, regex-keyed substitution rules, the resolver that drives
them, and the glob rule set built on the default substitutions.
"""

from .base import PatternResolver, Substitution, substitution
from .capture import glob_capture
from .defaults import DEFAULT_SUBSTITUTIONS, DEFAULT_TOKEN_SHAPES
from .errors import (
    GlobIndexError,
    PatternResolutionError,
    SubstitutionError,
    UnresolvedPatternError,
)
from .glob import GLOB_SUBSTITUTIONS, GLOB_TOKEN_SHAPES, glob_resolve, glob_resolver

__all__ = [
    "PatternResolver",
    "Substitution",
    "substitution",
    "glob_capture",
    "DEFAULT_SUBSTITUTIONS",
    "DEFAULT_TOKEN_SHAPES",
    "GLOB_SUBSTITUTIONS",
    "GLOB_TOKEN_SHAPES",
    "glob_resolve",
    "glob_resolver",
    "GlobIndexError",
    "PatternResolutionError",
    "SubstitutionError",
    "UnresolvedPatternError",
]
