"""Tests for the rule-driven pattern resolver."""

import pytest
from patres.lib.resolver.base import PatternResolver, Substitution, substitution
from patres.lib.resolver.errors import (
    PatternResolutionError,
    SubstitutionError,
    UnresolvedPatternError,
)
from patres.models.dataModel import ParseResult, SubstitutionContext


@substitution(r"<name>")
def name_rule(ctx):
    return ctx.data["name"]


@substitution(r"<upper:(\w+)>")
def upper_rule(ctx, word):
    return word.upper()


@pytest.fixture
def context():
    return SubstitutionContext(data={"name": "world"}, env={}, cwd="/tmp")


@pytest.fixture
def resolver(context):
    return PatternResolver([name_rule, upper_rule], context, token_shapes=[r"<[^>]*>"])


def test_literal_text_unchanged(resolver):
    assert resolver.resolve("no tokens at all") == "no tokens at all"
    assert resolver.resolve("") == ""


def test_basic_substitution(resolver):
    assert resolver.resolve("Hello <name>!") == "Hello world!"


def test_captured_groups_passed(resolver):
    assert resolver.resolve("<upper:abc>-<name>-<upper:x>") == "ABC-world-X"


def test_first_rule_wins():
    first = Substitution("first", r"<tok>", lambda ctx: "first")
    second = Substitution("second", r"<tok>", lambda ctx: "second")
    ctx = SubstitutionContext(data=None, env={}, cwd="")
    assert PatternResolver([first, second], ctx).resolve("<tok>") == "first"
    assert PatternResolver([second, first], ctx).resolve("<tok>") == "second"


def test_extend_cannot_shadow(resolver):
    shadow = Substitution("shadow", r"<name>", lambda ctx: "shadowed")
    extended = resolver.extend(shadow)
    assert extended.resolve("<name>") == "world"
    assert len(extended.substitutions) == 3
    assert len(resolver.substitutions) == 2


def test_unmatched_token_shape_fails(resolver):
    with pytest.raises(UnresolvedPatternError) as exc_info:
        resolver.resolve("ok <name> then <bogus>")
    assert exc_info.value.token == "<bogus>"
    assert exc_info.value.offset == 15


def test_rule_error_propagates_with_offset(context):
    def boom(ctx):
        raise PatternResolutionError("Broken rule", "<boom>")

    resolver = PatternResolver([Substitution("boom", r"<boom>", boom)], context)
    with pytest.raises(PatternResolutionError) as exc_info:
        resolver.resolve("ab<boom>")
    assert exc_info.value.offset == 2


def test_foreign_exception_propagates(context):
    def boom(ctx):
        raise KeyError("missing")

    resolver = PatternResolver([Substitution("boom", r"<boom>", boom)], context)
    with pytest.raises(KeyError):
        resolver.resolve("<boom>")


def test_first_failure_reported(context):
    calls = []

    def track(ctx, n):
        calls.append(n)
        raise PatternResolutionError("Failed", f"<fail:{n}>")

    resolver = PatternResolver([Substitution("fail", r"<fail:(\d)>", track)], context)
    with pytest.raises(PatternResolutionError) as exc_info:
        resolver.resolve("<fail:1> <fail:2>")
    assert exc_info.value.token == "<fail:1>"
    assert calls == ["1"]


def test_non_string_result(context):
    resolver = PatternResolver([Substitution("num", r"<num>", lambda ctx: 42)], context)
    with pytest.raises(SubstitutionError, match="returned int"):
        resolver.resolve("<num>")


def test_empty_pattern_rejected(context):
    with pytest.raises(ValueError, match="empty string"):
        PatternResolver([Substitution("empty", r"x*", lambda ctx: "")], context)


def test_empty_token_shape_rejected(context):
    with pytest.raises(ValueError, match="empty string"):
        PatternResolver([name_rule], context, token_shapes=[r"<?"])


def test_missing_context():
    with pytest.raises(ValueError, match="No substitution context"):
        PatternResolver([name_rule]).resolve("<name>")


def test_per_call_context(resolver):
    other = SubstitutionContext(data={"name": "there"}, env={}, cwd="")
    assert resolver.resolve("hi <name>", other) == "hi there"
    assert resolver.resolve("hi <name>") == "hi world"


def test_parse_success(resolver):
    result = resolver.parse("Hello <name>")
    assert isinstance(result, ParseResult)
    assert result.success
    assert result.text == "Hello world"
    assert result.error is None


def test_parse_failure(resolver):
    result = resolver.parse("<bogus>")
    assert not result.success
    assert result.text == ""
    assert "<bogus>" in result.error


def test_substitution_compiles_string_pattern():
    rule = Substitution("s", r"a+", lambda ctx: "")
    assert rule.pattern.match("aaa").group(0) == "aaa"
