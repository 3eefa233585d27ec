import math

import pytest

from grid_engine.responsive.breakpoints import (
    BreakpointToken, Direction, ResolvedBreakpoint, Unresolved,
    breakpoint, format_number, parse_token, resolve,
)

BREAKPOINTS = {"small": 480, "medium": 768}


@pytest.mark.parametrize("width", [0, 1, 450, 1023.5])
def test_literal_resolves_to_itself_whatever_the_map(width):
    token = BreakpointToken.literal(width)
    assert resolve(token, {}) == width
    assert resolve(token, BREAKPOINTS) == width
    assert resolve(token, {"other": 10}) == width


def test_named_lookup():
    assert resolve(BreakpointToken.named("small"), BREAKPOINTS) == 480
    assert resolve(BreakpointToken.named("medium"), BREAKPOINTS) == 768


def test_unknown_name_is_unresolved():
    result = resolve(BreakpointToken.named("huge"), BREAKPOINTS)
    assert isinstance(result, Unresolved)
    assert result == Unresolved("huge")
    assert "huge" in str(result)


def test_same_width_under_two_names():
    breakpoints = {"tablet": 768, "medium": 768}
    assert resolve(BreakpointToken.named("tablet"), breakpoints) == 768
    assert resolve(BreakpointToken.named("medium"), breakpoints) == 768


def test_invalid_mapped_width_is_unresolved():
    for width in (-10, float("nan"), float("inf"), "wide"):
        result = resolve(BreakpointToken.named("bad"), {"bad": width})
        assert isinstance(result, Unresolved)
        assert result.name == "bad"


def test_literal_rejects_negative_and_non_finite():
    with pytest.raises(ValueError):
        BreakpointToken.literal(-1)
    with pytest.raises(ValueError):
        BreakpointToken.literal(math.nan)
    with pytest.raises(ValueError):
        BreakpointToken.literal(math.inf)
    with pytest.raises(ValueError):
        ResolvedBreakpoint(Direction.MIN, math.inf)


def test_token_is_immutable_and_hashable():
    token = BreakpointToken.named("small")
    with pytest.raises(AttributeError):
        token.foo = 1
    assert {token: 1}[BreakpointToken.named("small")] == 1
    assert BreakpointToken.literal(450) != BreakpointToken.named("450")


def test_parse_token():
    assert parse_token("small") == BreakpointToken.named("small")
    assert parse_token("450px") == BreakpointToken.literal(450)
    assert parse_token("450") == BreakpointToken.literal(450)
    assert parse_token(768) == BreakpointToken.literal(768)
    token = BreakpointToken.named("x")
    assert parse_token(token) is token


def test_parse_token_keys_in_the_map_are_names():
    breakpoints = {"2xl": 1536, "450": 300}
    assert parse_token("2xl", breakpoints) == BreakpointToken.named("2xl")
    assert parse_token("450", breakpoints) == BreakpointToken.named("450")
    assert resolve(parse_token("2xl", breakpoints), breakpoints) == 1536


def test_parse_token_other_strings_are_names():
    assert parse_token("3xl") == BreakpointToken.named("3xl")
    assert parse_token("40em") == BreakpointToken.named("40em")
    assert parse_token("450px 12px") == BreakpointToken.named("450px 12px")


def test_parse_token_literal_suffix():
    assert parse_token("450px-literal") == BreakpointToken.literal(450)
    assert parse_token("450px-literal", {"small": 450}) == BreakpointToken.literal(450)
    with pytest.raises(ValueError):
        parse_token("wide-literal")


def test_parse_token_rejects_negative_pixels():
    with pytest.raises(ValueError):
        parse_token("-5px")


def test_breakpoint_directions():
    low = breakpoint(BreakpointToken.named("medium"), BREAKPOINTS)
    assert low == ResolvedBreakpoint(Direction.MIN, 768)
    assert low.media_text() == "all and (min-width: 768px)"

    high = breakpoint(BreakpointToken.named("medium"), BREAKPOINTS, Direction.MAX)
    assert high.direction is Direction.MAX
    assert high.media_text() == "all and (max-width: 768px)"

    assert breakpoint(BreakpointToken.named("huge"), BREAKPOINTS) == Unresolved("huge")


def test_format_number():
    assert format_number(25.0) == "25"
    assert format_number(0.6875) == "0.6875"
    assert format_number(100 / 3) == "33.3333333333"
    assert format_number(-0.0) == "0"
