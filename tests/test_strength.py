"""
Tests for the heuristic strength scorer.
"""

import pytest

from core.strength import StrengthLevel, StyleTag, level_for, score


class TestScore:
    def test_empty_string(self):
        result = score("")
        assert result.score == 5
        assert result.level is StrengthLevel.WEAK
        assert result.style_tag is StyleTag.DANGER

    def test_repeated_lowercase(self):
        # 15 (length 8) + 15 (lowercase), 1 distinct of 8 gets no bonus
        result = score("aaaaaaaa")
        assert result.score == 30
        assert result.level is StrengthLevel.WEAK

    def test_all_classes_low_diversity(self):
        # 25 + 15 + 15 + 15 + 20, 4 distinct of 12 gets no bonus
        result = score("Ab3!Ab3!Ab3!")
        assert result.score == 90
        assert result.level is StrengthLevel.VERY_STRONG
        assert result.style_tag is StyleTag.SUCCESS

    def test_maximum(self):
        result = score("Ab3!Cd4@Ef5#")
        assert result.score == 100
        assert result.level is StrengthLevel.VERY_STRONG

    @pytest.mark.parametrize(
        "password, expected",
        [
            ("abc", 5 + 15 + 10),
            ("abcdefg", 5 + 15 + 10),
            ("abcdefgh", 15 + 15 + 10),
            ("abcdefghijk", 15 + 15 + 10),
            ("abcdefghijkl", 25 + 15 + 10),
        ],
    )
    def test_length_buckets(self, password, expected):
        assert score(password).score == expected

    @pytest.mark.parametrize(
        "password, expected",
        [
            ("aaaa", 5 + 15),
            ("AAAA", 5 + 15),
            ("1111", 5 + 15),
            ("!!!!", 5 + 20),
        ],
    )
    def test_class_presence_not_count(self, password, expected):
        assert score(password).score == expected

    def test_non_ascii_counts_as_symbol(self):
        # é is outside A-Z/a-z/0-9: +20, not +15 for lowercase
        assert score("éééé").score == 5 + 20

    def test_short_strings_get_diversity_bonus(self):
        assert score("a").score == 5 + 15 + 10
        assert score("ab").score == 5 + 15 + 10

    def test_diversity_ratio(self):
        # 7 distinct of 8 clears 70%
        assert score("abcdefga").score == 15 + 15 + 10
        # 4 distinct of 8 does not
        assert score("abcdaaaa").score == 15 + 15

    def test_score_is_pure(self):
        assert score("Tr0ub4dor&3") == score("Tr0ub4dor&3")


class TestLevels:
    @pytest.mark.parametrize(
        "points, level",
        [
            (0, StrengthLevel.WEAK),
            (49, StrengthLevel.WEAK),
            (50, StrengthLevel.MEDIUM),
            (69, StrengthLevel.MEDIUM),
            (70, StrengthLevel.STRONG),
            (84, StrengthLevel.STRONG),
            (85, StrengthLevel.VERY_STRONG),
            (100, StrengthLevel.VERY_STRONG),
        ],
    )
    def test_thresholds(self, points, level):
        assert level_for(points) is level

    def test_one_style_tag_per_level(self):
        samples = ["", "abcdefgh1", "Abcdefgh12", "Ab3!Ab3!Ab3!"]
        results = [score(p) for p in samples]
        assert [r.level for r in results] == [
            StrengthLevel.WEAK,
            StrengthLevel.MEDIUM,
            StrengthLevel.STRONG,
            StrengthLevel.VERY_STRONG,
        ]
        assert len({r.style_tag for r in results}) == 4

    def test_is_strong(self):
        assert score("Abcdefgh12").is_strong
        assert not score("abcdefgh1").is_strong
