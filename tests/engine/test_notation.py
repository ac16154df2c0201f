"""
Arrata - Notation Codec Tests

Tests for stat, obstacle and roll notation parsing and formatting.
"""

import pytest
from arrata.engine.base import Obstacle, Quality, RollSpec, Stat
from arrata.engine.errors import NotationError, ParseErrorKind
from arrata.engine.notation import (
    format_obstacle,
    format_roll,
    format_stat,
    parse_obstacle,
    parse_quality,
    parse_roll,
    parse_stat,
)


class TestParseQuality:
    """Tests for parse_quality()."""

    @pytest.mark.parametrize("code", ["A", "a"])
    def test_adept(self, code):
        assert parse_quality(code) == Quality.ADEPT

    @pytest.mark.parametrize("code", ["S", "s"])
    def test_superb(self, code):
        assert parse_quality(code) == Quality.SUPERB

    @pytest.mark.parametrize("code", ["B", "b", "x", "9", "!", " "])
    def test_everything_else_is_basic(self, code):
        assert parse_quality(code) == Quality.BASIC


class TestParseStat:
    """Tests for parse_stat()."""

    def test_all_notations(self, stat_notations):
        for name, (text, quality, quantity) in stat_notations.items():
            stat = parse_stat(text)
            assert stat.quality == quality, f"Failed for {name}"
            assert stat.quantity == quantity, f"Failed for {name}"

    def test_parsed_stat_has_no_name(self):
        assert parse_stat("S10").name == ""

    def test_parsed_stat_has_zero_checks(self):
        assert parse_stat("S10").checks == 0

    def test_empty_string_defaults(self):
        stat = parse_stat("")
        assert stat.quality == Quality.BASIC
        assert stat.quantity == 1

    def test_plus_sign_accepted(self):
        assert parse_stat("A+3").quantity == 3

    def test_non_ascii_digits_default(self):
        assert parse_stat("A²").quantity == 1

    def test_large_quantity(self):
        assert parse_stat("B120").quantity == 120

    def test_largest_quantity(self):
        assert parse_stat("B18446744073709551615").quantity == 2**64 - 1

    def test_quantity_past_u64_defaults(self):
        assert parse_stat("B18446744073709551616").quantity == 1

    def test_huge_digit_run_defaults(self):
        stat = parse_stat("S" + "9" * 5000)
        assert stat.quality == Quality.SUPERB
        assert stat.quantity == 1

    def test_leading_zeros_accepted(self):
        assert parse_stat("A" + "0" * 5000 + "7").quantity == 7

    def test_malformed_quantity_logged(self, caplog):
        with caplog.at_level("DEBUG", logger="arrata.engine.notation"):
            parse_stat("Bxyz")
        assert "MALFORMED_QUANTITY" in caplog.text


class TestFormatStat:
    """Tests for format_stat()."""

    @pytest.mark.parametrize(
        "quality, quantity, expected",
        [
            (Quality.BASIC, 4, "B4"),
            (Quality.ADEPT, 3, "A3"),
            (Quality.SUPERB, 10, "S10"),
            (Quality.BASIC, 0, "B0"),
        ],
    )
    def test_format(self, quality, quantity, expected):
        assert format_stat(Stat(quality=quality, quantity=quantity)) == expected

    def test_name_and_checks_are_dropped(self):
        stat = Stat(name="Will", quality=Quality.ADEPT, quantity=3, checks=7)
        reparsed = parse_stat(format_stat(stat))
        assert (reparsed.quality, reparsed.quantity) == (Quality.ADEPT, 3)
        assert reparsed.name == ""
        assert reparsed.checks == 0

    @pytest.mark.parametrize(
        "text", ["B4", "a2", "s", "", "Zq", "A-1", "x99", "S0", "?"]
    )
    def test_parse_format_parse_is_stable(self, text):
        parsed = parse_stat(text)
        assert parse_stat(format_stat(parsed)) == parsed


class TestParseObstacle:
    """Tests for parse_obstacle()."""

    @pytest.mark.parametrize(
        "text, expected",
        [("Ob3", 3), ("ob5", 5), ("Ob0", 0), ("Ob12", 12)],
    )
    def test_valid(self, text, expected):
        assert parse_obstacle(text) == Obstacle(expected)

    def test_prefix_is_not_inspected(self):
        assert parse_obstacle("XX4") == Obstacle(4)

    def test_missing_value_defaults_to_one(self):
        assert parse_obstacle("Ob") == Obstacle(1)

    def test_malformed_value_defaults_to_one(self):
        assert parse_obstacle("Obx") == Obstacle(1)

    @pytest.mark.parametrize("text", ["", "O"])
    def test_short_input_is_invalid_format(self, text):
        with pytest.raises(NotationError) as exc_info:
            parse_obstacle(text)
        assert exc_info.value.kind == ParseErrorKind.INVALID_FORMAT
        assert exc_info.value.text == text

    def test_notation_error_is_value_error(self):
        with pytest.raises(ValueError, match="must start with 'Ob'"):
            parse_obstacle("O")

    def test_huge_value_defaults_to_one(self):
        assert parse_obstacle("Ob" + "9" * 5000) == Obstacle(1)

    def test_format(self):
        assert format_obstacle(Obstacle(3)) == "Ob3"


class TestParseRoll:
    """Tests for parse_roll()."""

    def test_plain_stat(self):
        spec = parse_roll("B4")
        assert spec == RollSpec(stat=Stat(quality=Quality.BASIC, quantity=4))

    def test_advantage(self):
        spec = parse_roll("!3B4")
        assert spec.advantage == 3
        assert spec.disadvantage == 0
        assert spec.stat.quantity == 4

    def test_disadvantage(self):
        spec = parse_roll("?2A3")
        assert spec.advantage == 0
        assert spec.disadvantage == 2
        assert spec.stat.quality == Quality.ADEPT

    def test_both(self):
        spec = parse_roll("!1?1S10")
        assert (spec.advantage, spec.disadvantage) == (1, 1)
        assert spec.stat == Stat(quality=Quality.SUPERB, quantity=10)

    def test_disadvantage_before_advantage(self):
        spec = parse_roll("?2!3B4")
        assert (spec.advantage, spec.disadvantage) == (3, 2)

    def test_bare_markers_are_level_one(self):
        spec = parse_roll("!?A2")
        assert (spec.advantage, spec.disadvantage) == (1, 1)

    def test_surrounding_whitespace_ignored(self):
        assert parse_roll("  !2B4\n").advantage == 2

    def test_lenient_stat_part(self):
        spec = parse_roll("!2Bxx")
        assert spec.stat.quantity == 1

    @pytest.mark.parametrize("text", ["", "!", "?3", "!2?"])
    def test_missing_stat_is_invalid_format(self, text):
        with pytest.raises(NotationError) as exc_info:
            parse_roll(text)
        assert exc_info.value.kind == ParseErrorKind.INVALID_FORMAT

    def test_advantage_twice_is_invalid_format(self):
        with pytest.raises(NotationError, match="Advantage given twice"):
            parse_roll("!1?1!2B4")

    @pytest.mark.parametrize("text", ["?1?2B4", "??B4", "!1?1?B4"])
    def test_disadvantage_twice_is_invalid_format(self, text):
        with pytest.raises(NotationError, match="Disadvantage given twice") as exc_info:
            parse_roll(text)
        assert exc_info.value.kind == ParseErrorKind.INVALID_FORMAT

    def test_advantage_after_both_is_invalid_format(self):
        with pytest.raises(NotationError, match="Advantage given twice"):
            parse_roll("?1!2!B4")

    @pytest.mark.parametrize("text", ["!" + "9" * 5000 + "B4", "?18446744073709551616A3"])
    def test_out_of_range_level_is_invalid_format(self, text):
        with pytest.raises(NotationError, match="out of range") as exc_info:
            parse_roll(text)
        assert exc_info.value.kind == ParseErrorKind.INVALID_FORMAT

    def test_largest_level_accepted(self):
        assert parse_roll("!18446744073709551615B4").advantage == 2**64 - 1

    def test_non_ascii_level_digits_not_read_as_level(self):
        spec = parse_roll("!\u0663B4")
        assert spec.advantage == 1
        assert spec.stat.quantity == 1


class TestFormatRoll:
    """Tests for format_roll()."""

    def test_plain(self):
        assert format_roll(RollSpec(stat=Stat(quantity=4))) == "B4"

    def test_both_levels(self):
        spec = RollSpec(
            stat=Stat(quality=Quality.SUPERB, quantity=10),
            advantage=1,
            disadvantage=1,
        )
        assert format_roll(spec) == "!1?1S10"

    def test_reparses(self):
        spec = RollSpec(stat=Stat(quality=Quality.ADEPT, quantity=3), disadvantage=2)
        assert parse_roll(format_roll(spec)) == spec
