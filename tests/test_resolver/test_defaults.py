"""Tests for the default substitutions."""

import os
from pathlib import Path
import pytest
from patres.lib.resolver import (
    DEFAULT_SUBSTITUTIONS,
    DEFAULT_TOKEN_SHAPES,
    PatternResolver,
    UnresolvedPatternError,
)
from patres.models.dataModel import SubstitutionContext


@pytest.fixture
def resolver():
    context = SubstitutionContext(data=None, env={"HOME_DIR": "/home/me"}, cwd="/repo")
    return PatternResolver(DEFAULT_SUBSTITUTIONS, context, DEFAULT_TOKEN_SHAPES)


def test_env(resolver):
    assert resolver.resolve("${env:HOME_DIR}/bin") == "/home/me/bin"


def test_env_missing(resolver):
    with pytest.raises(UnresolvedPatternError, match="Environment variable not set") as exc_info:
        resolver.resolve("at ${env:NOPE}")
    assert exc_info.value.token == "${env:NOPE}"
    assert exc_info.value.offset == 3


def test_cwd(resolver):
    assert resolver.resolve("${cwd}") == "/repo"


def test_path_separator(resolver):
    assert resolver.resolve("a${pathSeparator}b") == f"a{os.sep}b"


def test_user_home(resolver):
    assert resolver.resolve("${userHome}") == str(Path.home())


def test_dollar_escape(resolver):
    assert resolver.resolve("$${cwd} costs $$5") == "${cwd} costs $5"


def test_lone_dollar_is_literal(resolver):
    assert resolver.resolve("$5 and $HOME") == "$5 and $HOME"


def test_unknown_braced_token(resolver):
    with pytest.raises(UnresolvedPatternError) as exc_info:
        resolver.resolve("${workspaceFolder}")
    assert exc_info.value.token == "${workspaceFolder}"


def test_default_context_snapshot(monkeypatch):
    monkeypatch.setenv("PATRES_TEST_VALUE", "snap")
    context = SubstitutionContext(data=None)
    resolver = PatternResolver(DEFAULT_SUBSTITUTIONS, context, DEFAULT_TOKEN_SHAPES)
    assert resolver.resolve("${env:PATRES_TEST_VALUE}") == "snap"
    assert resolver.resolve("${cwd}") == os.getcwd()
