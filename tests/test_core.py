"""
Tests for run-scoped helpers: finding ids, "Date Found", weekly rotation.

Property 1: ids are contiguous, strictly increasing, zero-padded to 5 digits
Property 2: rotation is a pure function of the date and covers all 4 areas
in any 4 consecutive weeks of a year
"""

from datetime import date, datetime, timedelta, timezone

import pytest
from hypothesis import given, settings, strategies as st

from guest_audit.core.dates import (
    FALLBACK_DATE_FOUND,
    format_date_found,
    resolve_date_found,
    today_in_timezone,
)
from guest_audit.core.identifiers import IdGenerator, format_id
from guest_audit.core.rotation import (
    FEATURE_AREAS,
    FALLBACK_PATH,
    feature_path,
    select_feature_area,
    week_number,
)


# === Identifier Generator ===

class TestIdGenerator:

    def test_default_start(self):
        gen = IdGenerator()
        assert [gen.next_id() for _ in range(3)] == ["00001", "00002", "00003"]

    def test_custom_offset(self):
        gen = IdGenerator(120)
        assert gen.peek == "00120"
        assert gen.next_id() == "00120"
        assert gen.next_id() == "00121"

    def test_no_wrap_after_five_digits(self):
        gen = IdGenerator(99999)
        assert gen.next_id() == "99999"
        assert gen.next_id() == "100000"

    def test_rejects_negative_start(self):
        with pytest.raises(ValueError):
            IdGenerator(-1)

    def test_rejects_non_int_start(self):
        with pytest.raises(TypeError):
            IdGenerator("1")

    @given(
        start=st.integers(min_value=0, max_value=90000),
        count=st.integers(min_value=1, max_value=200),
    )
    @settings(max_examples=50)
    def test_property_contiguous_and_padded(self, start, count):
        gen = IdGenerator(start)
        ids = [gen.next_id() for _ in range(count)]

        assert all(len(i) == 5 and i.isdigit() for i in ids)
        assert [int(i) for i in ids] == list(range(start, start + count))
        assert len(set(ids)) == count

    def test_format_id(self):
        assert format_id(7) == "00007"


# === Date Resolver ===

class TestDateResolver:

    def test_format(self):
        assert format_date_found(date(2026, 3, 9)) == "09-03-2026"

    def test_cairo_is_ahead_of_utc(self):
        # 22:30 UTC 1 января = 00:30 2 января в Каире (UTC+2 зимой)
        now = datetime(2026, 1, 1, 22, 30, tzinfo=timezone.utc)
        assert today_in_timezone("Africa/Cairo", now) == date(2026, 1, 2)
        assert resolve_date_found("Africa/Cairo", now) == "02-01-2026"

    def test_naive_datetime_treated_as_utc(self):
        now = datetime(2026, 6, 15, 12, 0)
        assert resolve_date_found("UTC", now) == "15-06-2026"

    def test_unknown_timezone_falls_back(self):
        assert today_in_timezone("Mars/Olympus_Mons") is None
        assert resolve_date_found("Mars/Olympus_Mons") == FALLBACK_DATE_FOUND
        assert FALLBACK_DATE_FOUND == "01-01-1970"

    def test_fallback_formatting(self):
        assert format_date_found(None) == "01-01-1970"


# === Rotation Selector ===

class TestRotation:

    def test_week_number_boundaries(self):
        assert week_number(date(2026, 1, 1)) == 1
        assert week_number(date(2026, 1, 7)) == 1
        assert week_number(date(2026, 1, 8)) == 2
        assert week_number(date(2026, 12, 31)) == 53

    def test_known_weeks(self):
        # Неделя 1 -> 1 % 4 = 1 -> Hotels
        assert select_feature_area(date(2026, 1, 1)) == "Hotels"
        assert select_feature_area(date(2026, 1, 8)) == "Cruise"
        assert select_feature_area(date(2026, 1, 15)) == "Offers"
        assert select_feature_area(date(2026, 1, 22)) == "Flights"

    def test_paths(self):
        assert feature_path("Flights") == "/flights"
        assert feature_path("Hotels") == "/hotels"
        assert feature_path("Cruise") == "/cruise"
        assert feature_path("Offers") == "/travel-offers"

    def test_unknown_area_falls_back_to_explore(self):
        assert feature_path("Trains") == FALLBACK_PATH == "/explore"

    @given(d=st.dates(min_value=date(2000, 1, 1), max_value=date(2099, 12, 31)))
    def test_property_pure_function_of_date(self, d):
        assert select_feature_area(d) == select_feature_area(date(d.year, d.month, d.day))
        assert select_feature_area(d) in FEATURE_AREAS

    @given(d=st.dates(min_value=date(2000, 1, 1), max_value=date(2099, 12, 10)))
    def test_property_four_weeks_cover_all_areas(self, d):
        weeks = [d + timedelta(days=7 * k) for k in range(4)]
        # Внутри одного года номер недели растёт на 1 каждые 7 дней
        if weeks[-1].year != d.year:
            return
        areas = [select_feature_area(w) for w in weeks]
        assert sorted(areas) == sorted(FEATURE_AREAS)
