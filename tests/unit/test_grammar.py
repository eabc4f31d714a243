"""Tests for rule tag parsing."""

import pytest

from tagcheck.grammar import (
    RuleInvocation,
    RuleSlot,
    format_tag,
    is_skip_tag,
    parse_invocation,
    parse_tag,
)


class TestParseInvocation:
    """Test single rule parsing."""

    def test_bare_name(self):
        invocation = parse_invocation("required")
        assert invocation == RuleInvocation("required", "")

    def test_name_and_param(self):
        invocation = parse_invocation("min=1")
        assert invocation.name == "min"
        assert invocation.param == "1"

    def test_only_first_equals_splits(self):
        invocation = parse_invocation("eq=a=b")
        assert invocation.name == "eq"
        assert invocation.param == "a=b"

    def test_escaped_comma_and_pipe(self):
        invocation = parse_invocation("oneof=a0x2Cb 0x7C")
        assert invocation.param == "a,b |"

    def test_empty_param_after_equals(self):
        invocation = parse_invocation("eq=")
        assert invocation.name == "eq"
        assert invocation.param == ""


class TestParseTag:
    """Test full tag parsing."""

    def test_empty_tag_has_no_slots(self):
        assert parse_tag("") == ()

    def test_slots_in_order(self):
        slots = parse_tag("required,min=1,oneof=1 2")

        assert [slot.primary.name for slot in slots] == ["required", "min", "oneof"]
        assert slots[1].primary.param == "1"
        assert slots[2].primary.param == "1 2"

    def test_or_group(self):
        slots = parse_tag("eq=1|eq=2,required")

        assert len(slots) == 2
        group = slots[0]
        assert [alt.param for alt in group.alternatives] == ["1", "2"]
        assert all(alt.alternative for alt in group.alternatives)
        assert group.primary == RuleInvocation("eq", "1", alternative=True)
        assert slots[1].primary.alternative is False

    def test_omit_marker_slot(self):
        slots = parse_tag("omitempty,required")

        assert slots[0].omit_marker is True
        assert slots[0].alternatives == ()
        assert slots[1] == RuleSlot((RuleInvocation("required"),))

    def test_custom_omit_marker(self):
        slots = parse_tag("optional,required", omit_marker="optional")
        assert slots[0].omit_marker is True

        default_slots = parse_tag("optional,required")
        assert default_slots[0].omit_marker is False
        assert default_slots[0].primary.name == "optional"

    def test_omit_marker_inside_or_group_is_a_rule_name(self):
        slots = parse_tag("omitempty|required")

        assert slots[0].omit_marker is False
        assert [alt.name for alt in slots[0].alternatives] == ["omitempty", "required"]

    def test_empty_rule_name_is_preserved(self):
        slots = parse_tag("required,,min=1")

        assert len(slots) == 3
        assert slots[1].primary.name == ""

    def test_parse_is_memoised(self):
        assert parse_tag("required,max=5") is parse_tag("required,max=5")


class TestSkipTag:

    @pytest.mark.parametrize("tag,expected", [
        ("-", True),
        ("", False),
        ("-,required", False),
        ("required", False),
    ])
    def test_is_skip_tag(self, tag, expected):
        assert is_skip_tag(tag) is expected


class TestFormatTag:
    """Re-serializing parsed tags keeps order and parameters."""

    @pytest.mark.parametrize("tag", [
        "required",
        "omitempty,required,min=1,max=5",
        "eq=1|eq=2,ne=3",
        "oneof='red apple' green",
        "eq=a0x2Cb,ne=x0x7Cy",
    ])
    def test_round_trip(self, tag):
        slots = parse_tag(tag)
        assert format_tag(slots) == tag
        assert parse_tag(format_tag(slots)) == slots

    def test_literal_reserved_characters_are_escaped(self):
        slots = (RuleSlot((RuleInvocation("eq", "a,b|c"),)),)

        text = format_tag(slots)

        assert text == "eq=a0x2Cb0x7Cc"
        assert parse_tag(text)[0].primary.param == "a,b|c"
