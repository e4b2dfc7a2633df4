"""Tests for relative due-date extraction."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from latercap.domain.dates import extract_due_date, next_weekday

# 2025-01-15 is a Wednesday.
WEDNESDAY = date(2025, 1, 15)


class TestRelativePhrases:
    @pytest.mark.parametrize(
        ("text", "offset"),
        [
            ("Buy milk tomorrow", 1),
            ("Finish report today", 0),
            ("Call mom tonight", 0),
            ("Schedule review next week", 7),
            ("Renew passport next month", 30),
            ("TOMORROW: dentist", 1),
        ],
    )
    def test_offsets(self, text: str, offset: int) -> None:
        assert extract_due_date(text, now=WEDNESDAY) == WEDNESDAY + timedelta(days=offset)

    def test_tomorrow_with_real_clock(self) -> None:
        due = extract_due_date("Buy milk tomorrow")
        assert due == date.today() + timedelta(days=1)

    def test_datetime_now_is_truncated(self) -> None:
        now = datetime(2025, 1, 15, 23, 59)
        assert extract_due_date("Pay rent tomorrow", now=now) == date(2025, 1, 16)

    def test_returns_plain_date(self) -> None:
        due = extract_due_date("tomorrow", now=datetime(2025, 1, 15, 8, 0))
        assert type(due) is date


class TestWeekdays:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Submit by Friday", date(2025, 1, 17)),
            ("Gym on monday", date(2025, 1, 20)),
            ("Standup Thursday", date(2025, 1, 16)),
            ("Brunch Sunday", date(2025, 1, 19)),
        ],
    )
    def test_next_occurrence(self, text: str, expected: date) -> None:
        assert extract_due_date(text, now=WEDNESDAY) == expected

    def test_same_weekday_means_next_week(self) -> None:
        assert extract_due_date("Team sync Wednesday", now=WEDNESDAY) == date(2025, 1, 22)

    def test_next_weekday_helper(self) -> None:
        assert next_weekday(WEDNESDAY, 2) == date(2025, 1, 22)
        assert next_weekday(WEDNESDAY, 3) == date(2025, 1, 16)
        assert next_weekday(WEDNESDAY, 1) == date(2025, 1, 21)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("Pay rent by ſunday", date(2025, 1, 19)),
            ("Meet on tueſday", date(2025, 1, 21)),
            ("wedneſday", date(2025, 1, 22)),
            ("Call thurſday", date(2025, 1, 16)),
            ("Party ſaturday", date(2025, 1, 18)),
        ],
    )
    def test_unicode_case_variants(self, text: str, expected: date) -> None:
        # "ſ" (long s) folds to "s" under case-insensitive matching.
        assert extract_due_date(text, now=WEDNESDAY) == expected


class TestPrecedence:
    def test_tomorrow_beats_weekday(self) -> None:
        assert extract_due_date("Tomorrow, not Friday", now=WEDNESDAY) == date(2025, 1, 16)

    def test_today_beats_tomorrow(self) -> None:
        assert extract_due_date("Today or tomorrow", now=WEDNESDAY) == WEDNESDAY

    def test_next_week_beats_weekday(self) -> None:
        assert extract_due_date("Friday or next week", now=WEDNESDAY) == date(2025, 1, 22)


class TestNoDate:
    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "Meeting at 3pm",
            "Buy milk",
            "Todays special",
            "Yesterday was fun",
            "next time maybe",
        ],
    )
    def test_none(self, text: str) -> None:
        assert extract_due_date(text, now=WEDNESDAY) is None
