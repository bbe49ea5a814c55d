"""
Unit tests for the complexity classifier.

Covers the tier table, the character class detection and the length bounds.
"""
import pytest

from passgen.core.models.complexity import Complexity, ComplexityRule, COMPLEXITY_RULES, rule_for
from passgen.core.models.errors import InvalidLengthError, UndeterminableComplexityError
from passgen.core.services.complexity_classifier import check_length, classify


class TestComplexityTiers:
    """Test the ordered complexity tiers."""

    @pytest.mark.unit
    def test_tiers_are_ordered(self):
        assert Complexity.LOW < Complexity.MEDIUM < Complexity.HIGH < Complexity.ULTRA
        assert Complexity.ULTRA >= Complexity.HIGH
        assert sorted([Complexity.ULTRA, Complexity.LOW, Complexity.HIGH, Complexity.MEDIUM]) == [
            Complexity.LOW, Complexity.MEDIUM, Complexity.HIGH, Complexity.ULTRA
        ]

    @pytest.mark.unit
    def test_rule_table_is_strictest_first(self):
        assert [rule.complexity for rule in COMPLEXITY_RULES] == [
            Complexity.ULTRA, Complexity.HIGH, Complexity.MEDIUM, Complexity.LOW
        ]
        assert rule_for(Complexity.ULTRA).min_length == 17
        assert rule_for(Complexity.HIGH).min_length == 9
        assert rule_for(Complexity.MEDIUM).requires_special is False

    @pytest.mark.unit
    def test_serializes_as_name(self):
        assert Complexity.HIGH.value == "HIGH"
        assert Complexity("MEDIUM") is Complexity.MEDIUM


class TestClassify:
    """Test password classification."""

    @pytest.mark.unit
    @pytest.mark.parametrize("password,expected", [
        ("abc", Complexity.LOW),
        ("abcdefghijklmnopqrstu", Complexity.LOW),
        ("ABC!!!!!!!!", Complexity.LOW),
        ("!@#$%&*()", Complexity.LOW),
        ("aB3456", Complexity.MEDIUM),
        ("aB!defgh", Complexity.MEDIUM),
        ("aBcdefghijklmnopqrstuvwxyz", Complexity.MEDIUM),
        ("aB!defghi", Complexity.HIGH),
        ("aB!defghijklmnop", Complexity.HIGH),
        ("aB!defghijklmnopq", Complexity.ULTRA),
        ("aB!defghijklmnopqrstuvwxyz012345", Complexity.ULTRA),
    ])
    def test_tier_boundaries(self, password, expected, rules):
        assert classify(password, rules) is expected

    @pytest.mark.unit
    def test_digits_and_whitespace_are_not_special(self, rules):
        assert classify("aB 1234567", rules) is Complexity.MEDIUM

    @pytest.mark.unit
    def test_non_ascii_letters_count_as_cases(self, rules):
        assert classify("äÖxyzw", rules) is Complexity.MEDIUM

    @pytest.mark.unit
    def test_non_ascii_symbols_count_as_special(self, rules):
        assert classify("aB€defghi", rules) is Complexity.HIGH

    @pytest.mark.unit
    @pytest.mark.parametrize("password", ["", "ab", "a" * 33])
    def test_length_out_of_bounds(self, password, rules):
        with pytest.raises(InvalidLengthError) as exc_info:
            classify(password, rules)

        assert exc_info.value.length == len(password)
        assert "between 3 and 32" in str(exc_info.value)

    @pytest.mark.unit
    def test_no_matching_rule(self, rules):
        only_ultra = (ComplexityRule(Complexity.ULTRA, 17, True, True),)

        with pytest.raises(UndeterminableComplexityError):
            classify("abcdef", rules, complexity_rules=only_ultra)


class TestCheckLength:
    """Test length bound validation."""

    @pytest.mark.unit
    @pytest.mark.parametrize("length", [3, 16, 32])
    def test_accepts_bounds(self, length, rules):
        check_length(length, rules)

    @pytest.mark.unit
    @pytest.mark.parametrize("length", [-1, 0, 2, 33])
    def test_rejects_out_of_bounds(self, length, rules):
        with pytest.raises(InvalidLengthError):
            check_length(length, rules)
