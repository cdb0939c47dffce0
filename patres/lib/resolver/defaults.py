"""
Default substitutions.

The baseline rule set every other rule set is appended to:
- ${env:NAME}: environment variable from the context snapshot
- ${cwd}: working directory recorded in the context
- ${pathSeparator}: the platform path separator
- ${userHome}: the current user's home directory
- $$: a literal dollar sign
"""

import os
from pathlib import Path
from typing import Any, Final
from patres.lib.resolver.base import Substitution, substitution
from patres.lib.resolver.errors import UnresolvedPatternError
from patres.models.dataModel import SubstitutionContext

# Anything in ${...} must be resolved by a rule
DEFAULT_TOKEN_SHAPES: Final[tuple[str, ...]] = (r"\$\{[^}]*\}",)


@substitution(r"\$\$", name="dollar")
def dollar_escape(ctx: SubstitutionContext[Any]) -> str:
    return "$"


@substitution(r"\$\{env:([A-Za-z_][A-Za-z0-9_]*)\}", name="env")
def env_lookup(ctx: SubstitutionContext[Any], name: str) -> str:
    """Look up ``name`` in the context's environment snapshot."""
    if name not in ctx.env:
        raise UnresolvedPatternError(
            f"${{env:{name}}}", message="Environment variable not set"
        )
    return ctx.env[name]


@substitution(r"\$\{cwd\}", name="cwd")
def cwd_lookup(ctx: SubstitutionContext[Any]) -> str:
    return ctx.cwd


@substitution(r"\$\{pathSeparator\}", name="pathSeparator")
def path_separator(ctx: SubstitutionContext[Any]) -> str:
    return os.sep


@substitution(r"\$\{userHome\}", name="userHome")
def user_home(ctx: SubstitutionContext[Any]) -> str:
    return str(Path.home())


DEFAULT_SUBSTITUTIONS: Final[tuple[Substitution, ...]] = (
    dollar_escape,
    env_lookup,
    cwd_lookup,
    path_separator,
    user_home,
)
