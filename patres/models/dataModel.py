"""
dataModel.py

This module defines the data models used throughout patres.
The models leverage Pydantic for validation and type safety.

Features:
- Resolution context carried through every substitution rule
- Parsing results for the non-raising resolver entry point
- Validated CLI requests

Usage:
Import these models to validate and structure data used in the application.
"""

import os
from typing import Generic, TypeVar
from pydantic import BaseModel, ConfigDict, Field

DataT = TypeVar("DataT")

# Ordered strings captured by a glob match, e.g. ("src", "lib")
PatternContext = tuple[str, ...]


class SubstitutionContext(BaseModel, Generic[DataT]):
    """Context handed to every substitution rule during one resolution.

    Attributes:
        data: Domain payload for extension rules (glob captures for glob rules)
        env: Snapshot of environment variables for ``${env:NAME}``
        cwd: Working directory reported by ``${cwd}``
    """

    model_config = ConfigDict(frozen=True)

    data: DataT
    env: dict[str, str] = Field(
        default_factory=lambda: dict(os.environ),
        description="Environment snapshot taken when the context is built.",
    )
    cwd: str = Field(
        default_factory=os.getcwd, description="Working directory for ${cwd}."
    )


class ParseResult(BaseModel):
    """Result of token parsing operation.

    Attributes:
        text: The processed text after substitutions
        error: Optional error message if parsing failed
        success: Whether parsing succeeded
    """

    text: str
    error: str | None
    success: bool


class ResolveRequest(BaseModel):
    """A template and the captures it is resolved against.

    Attributes:
        template: Input string containing tokens
        captures: Ordered glob captures exposed as ``glob:<i>``
    """

    template: str
    captures: PatternContext = Field(
        default=(), description="Ordered glob captures."
    )
