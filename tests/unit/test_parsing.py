"""Unit tests for tolerant stat and date parsing."""

from datetime import date, datetime

import pytest

from mlbperf.normalization.parsing import (
    parse_count,
    parse_game_date,
    parse_innings_pitched,
    parse_rate,
    parse_score,
    short_date_label,
)


class TestParseRate:
    def test_leading_dot_average(self):
        assert parse_rate(".287") == pytest.approx(0.287)

    def test_plain_numbers(self):
        assert parse_rate("3.45") == pytest.approx(3.45)
        assert parse_rate(1) == 1.0
        assert parse_rate(0.301) == pytest.approx(0.301)

    def test_placeholders_fall_back_to_zero(self):
        assert parse_rate("-.--") == 0.0
        assert parse_rate("") == 0.0
        assert parse_rate(None) == 0.0
        assert parse_rate("n/a") == 0.0

    def test_strips_decoration(self):
        assert parse_rate(" .312 ") == pytest.approx(0.312)
        assert parse_rate("4.50 ERA") == pytest.approx(4.5)

    @pytest.mark.parametrize("raw", [float("nan"), float("inf"), float("-inf"), "nan", "inf"])
    def test_non_finite_falls_back_to_zero(self, raw):
        assert parse_rate(raw) == 0.0


class TestParseCount:
    def test_values(self):
        assert parse_count("12") == 12
        assert parse_count(7) == 7
        assert parse_count("7.0") == 7
        assert parse_count(None) == 0
        assert parse_count("x") == 0

    @pytest.mark.parametrize("raw", [float("nan"), float("inf"), float("-inf"), "nan", "inf", "-inf"])
    def test_non_finite_falls_back_to_zero(self, raw):
        assert parse_count(raw) == 0


class TestParseInningsPitched:
    @pytest.mark.parametrize("raw,expected", [
        ("7.1", 7 + 1 / 3),
        ("7.2", 7 + 2 / 3),
        ("7.0", 7.0),
        ("9", 9.0),
        (6.1, 6 + 1 / 3),
        ("", 0.0),
        (None, 0.0),
        ("abc", 0.0),
        (float("nan"), 0.0),
        ("inf", 0.0),
    ])
    def test_baseball_notation(self, raw, expected):
        assert parse_innings_pitched(raw) == pytest.approx(expected)


class TestParseScore:
    def test_missing_stays_none(self):
        assert parse_score(None) is None
        assert parse_score("") is None
        assert parse_score("TBD") is None

    def test_values(self):
        assert parse_score("5") == 5
        assert parse_score(0) == 0

    def test_integral_floats_are_scores(self):
        assert parse_score(5.0) == 5
        assert parse_score("3.0") == 3
        assert isinstance(parse_score(5.0), int)

    @pytest.mark.parametrize("raw", [5.5, "2.25", float("nan"), float("inf"), "inf"])
    def test_fractional_or_non_finite_scores_stay_none(self, raw):
        assert parse_score(raw) is None


class TestParseGameDate:
    def test_iso_and_timestamps(self):
        assert parse_game_date("2024-04-12") == date(2024, 4, 12)
        assert parse_game_date("2024-04-12T23:10:00Z") == date(2024, 4, 12)
        assert parse_game_date(datetime(2024, 4, 12, 19, 5)) == date(2024, 4, 12)

    def test_other_formats(self):
        assert parse_game_date("04/12/2024") == date(2024, 4, 12)
        assert parse_game_date("20240412") == date(2024, 4, 12)
        assert parse_game_date("Apr 12, 2024") == date(2024, 4, 12)

    def test_unparseable(self):
        assert parse_game_date("soon") is None
        assert parse_game_date(None) is None

    def test_labels(self):
        assert short_date_label("2024-04-12") == "4/12"
        assert short_date_label("postponed") == "postp"
        assert short_date_label("postponed", fallback_length=3) == "pos"
