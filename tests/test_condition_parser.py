"""Tests for condition parsing."""

import pytest

from semcheck.versioning import (
    AnyCondition,
    CompatibleCondition,
    CompatibleWithMostRecentCondition,
    CompositeCondition,
    Condition,
    ConditionRange,
    EmptyInputError,
    EmptyTokenListError,
    InvalidTokenAtError,
    InvalidTokenError,
    RangeCondition,
    RangeOperator,
    SimpleCondition,
    UnexpectedError,
    Version,
    build_condition_from_tokens,
    build_range_condition_from_tokens,
    parse_condition,
    tokenize,
)


def v(major, minor=0, patch=0, pre_release=(), metadata=()):
    return Version(major, minor, patch, tuple(pre_release), tuple(metadata))


class TestBasicConditions:
    """Operator-prefixed and bare conditions."""

    def test_any(self):
        assert Condition.parse("*") == AnyCondition()

    def test_simple(self):
        assert Condition.parse("=2.3.4") == SimpleCondition(v(2, 3, 4))
        assert Condition.parse("1.0.0-rc.1") == SimpleCondition(v(1, 0, 0, ["rc", "1"]))

    def test_compatible(self):
        assert Condition.parse("~2.3") == CompatibleCondition(v(2, 3, 0))

    def test_compatible_with_most_recent(self):
        assert Condition.parse("^52.13.194") == CompatibleWithMostRecentCondition(v(52, 13, 194))

    def test_module_function_matches_classmethod(self):
        assert parse_condition("^1.2") == Condition.parse("^1.2")


class TestRangeConditions:
    """Lower bound with optional upper bound."""

    def test_lower_only(self):
        assert Condition.parse(">1.2.3") == RangeCondition(
            ConditionRange(RangeOperator.GREATER, v(1, 2, 3)), None
        )

    def test_lower_with_pre_release(self):
        assert Condition.parse(">=4.15.3-beta.1") == RangeCondition(
            ConditionRange(RangeOperator.GREATER_EQUAL, v(4, 15, 3, ["beta", "1"]))
        )

    @pytest.mark.parametrize("text,lower_op,upper_op", [
        (">1.2.3 <4.15.3", RangeOperator.GREATER, RangeOperator.LESS),
        (">=1.2.3 <4.15.3", RangeOperator.GREATER_EQUAL, RangeOperator.LESS),
        (">=1.2.3 <=4.15.3", RangeOperator.GREATER_EQUAL, RangeOperator.LESS_EQUAL),
        (">1.2.3, <=4.15.3", RangeOperator.GREATER, RangeOperator.LESS_EQUAL),
    ])
    def test_lower_and_upper(self, text, lower_op, upper_op):
        condition = Condition.parse(text)
        assert condition == RangeCondition(
            ConditionRange(lower_op, v(1, 2, 3)),
            ConditionRange(upper_op, v(4, 15, 3)),
        )

    def test_upper_with_pre_release(self):
        condition = Condition.parse(">1.2.3 <4.15.3-beta.1")
        assert condition.upper == ConditionRange(RangeOperator.LESS, v(4, 15, 3, ["beta", "1"]))

    def test_build_range_from_tokens(self):
        condition = build_range_condition_from_tokens(tokenize(">=1 <2"))
        assert condition.lower.operator is RangeOperator.GREATER_EQUAL
        assert condition.upper.operator is RangeOperator.LESS

    def test_build_range_requires_lower_bound_token(self):
        with pytest.raises(UnexpectedError) as exc:
            build_range_condition_from_tokens(tokenize("1 <2"))
        assert str(exc.value) == "Unexpected"

    def test_upper_bound_alone_is_rejected(self):
        """'<2' is not a lower bound, so it fails as a plain version."""
        with pytest.raises(InvalidTokenAtError) as exc:
            Condition.parse("<2")
        assert exc.value.index == 0

    def test_bound_slots_are_enforced(self):
        with pytest.raises(ValueError):
            RangeCondition(ConditionRange(RangeOperator.LESS, v(1)))
        with pytest.raises(ValueError):
            RangeCondition(
                ConditionRange(RangeOperator.GREATER, v(1)),
                ConditionRange(RangeOperator.GREATER_EQUAL, v(2)),
            )


class TestCompositeConditions:
    """Alternatives joined by '||'."""

    def test_range_or_simple(self):
        assert Condition.parse(">=1.2.3 <=4.15.3 || 5") == CompositeCondition([
            RangeCondition(
                ConditionRange(RangeOperator.GREATER_EQUAL, v(1, 2, 3)),
                ConditionRange(RangeOperator.LESS_EQUAL, v(4, 15, 3)),
            ),
            SimpleCondition(v(5)),
        ])

    def test_all_alternatives_kept_in_order(self):
        condition = Condition.parse("1 || 2 || 3 || 4 || ^5")
        assert condition == CompositeCondition([
            SimpleCondition(v(1)),
            SimpleCondition(v(2)),
            SimpleCondition(v(3)),
            SimpleCondition(v(4)),
            CompatibleWithMostRecentCondition(v(5)),
        ])

    def test_two_alternatives_still_composite(self):
        condition = Condition.parse("* || ~1")
        assert isinstance(condition, CompositeCondition)
        assert condition.conditions == (AnyCondition(), CompatibleCondition(v(1)))

    def test_alternatives_are_an_immutable_tuple(self):
        condition = CompositeCondition([SimpleCondition(v(1)), SimpleCondition(v(2))])
        assert isinstance(condition.conditions, tuple)
        assert hash(condition) == hash(Condition.parse("1 || 2"))
        assert len({condition, Condition.parse("1 || 2")}) == 1

    def test_build_from_tokens(self):
        assert build_condition_from_tokens(tokenize("1||2")) == Condition.parse("1 || 2")


class TestConditionErrors:
    """Parse failures."""

    def test_empty_input(self):
        with pytest.raises(EmptyInputError):
            Condition.parse("  ")

    def test_empty_token_list(self):
        with pytest.raises(EmptyTokenListError):
            Condition.parse(" , ")

    @pytest.mark.parametrize("text", ["1 ||", "|| 1", "1 || || 2", ">", "^", "~", ">=<2", ">1 <"])
    def test_empty_sub_sequences(self, text):
        with pytest.raises(EmptyTokenListError):
            Condition.parse(text)

    @pytest.mark.parametrize("text,index", [
        ("* 1.2", 1),
        ("**", 1),
        ("^1..", 2),
        ("~1.0.0.0", 5),
        (">1 <2 <3", 1),
        ("1.2 >3", 3),
        ("2 || 1.x", 2),
    ])
    def test_invalid_token_positions(self, text, index):
        """Indices are relative to the sub-sequence handed to the version builder."""
        with pytest.raises(InvalidTokenAtError) as exc:
            Condition.parse(text)
        assert exc.value.index == index

    def test_lone_pipe(self):
        with pytest.raises(InvalidTokenError) as exc:
            Condition.parse("1 | 2")
        assert exc.value.char == "|"


class TestConditionDisplay:
    """Rendering conditions back to text."""

    @pytest.mark.parametrize("text,expected", [
        ("*", "*"),
        ("=2.3.4", "2.3.4"),
        ("~2.3", "~2.3.0"),
        ("^1", "^1.0.0"),
        (">1.2.3", ">1.2.3"),
        (">=1 <=2.1", ">=1.0.0 <=2.1.0"),
        (">=1.2.3 <=4.15.3 || 5", ">=1.2.3 <=4.15.3 || 5.0.0"),
        ("^1.0.0-rc.1+b5", "^1.0.0-rc.1+b5"),
    ])
    def test_display(self, text, expected):
        assert str(Condition.parse(text)) == expected

    @pytest.mark.parametrize("text", ["*", "~1.2.3", "^0.1.0", ">=1.0.0 <2.0.0", "1.0.0 || >2.0.0"])
    def test_display_parses_back(self, text):
        condition = Condition.parse(text)
        assert Condition.parse(str(condition)) == condition
