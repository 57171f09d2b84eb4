# -*- coding: utf-8 -*-
"""
Tests for the DD/MM/YYYY date mask engine.
"""
from datetime import date

import pytest

from ui.components import DateMaskEngine, MaskState
from ui.components.date_mask import mask_digits, parse_masked


@pytest.fixture
def engine(qapp):
    return DateMaskEngine()


@pytest.fixture
def reported(engine):
    values = []
    engine.value_changed.connect(values.append)
    return values


class TestMaskDigits:

    @pytest.mark.parametrize("raw,masked", [
        ("", ""),
        ("1", "1"),
        ("150", "15/0"),
        ("1501", "15/01"),
        ("15011", "15/01/1"),
        ("15011990", "15/01/1990"),
        ("1501199077", "15/01/1990"),
        ("15/0a1-19", "15/01/19"),
    ])
    def test_mask(self, raw, masked):
        assert mask_digits(raw) == masked

    def test_parse_masked(self):
        assert parse_masked("29/02/2024") == date(2024, 2, 29)
        assert parse_masked("29/02/2023") is None
        assert parse_masked("15/01/19") is None


class TestDateMaskEngine:

    def test_typing_a_full_date(self, engine, reported):
        assert engine.feed("15011990") == "15/01/1990"
        assert engine.state == MaskState.COMPLETE
        assert reported == ["1990-01-15"]

        assert engine.blur() == "15/01/1990"
        assert engine.value == "1990-01-15"

    def test_partial_input_reports_nothing(self, engine, reported):
        assert engine.feed("1501") == "15/01"
        assert engine.state == MaskState.PARTIAL
        assert reported == [None]

    def test_mask_is_rebuilt_after_deletion(self, engine):
        engine.feed("15/01/1990")
        assert engine.feed("15/01/199") == "15/01/199"
        assert engine.feed("15/0/199") == "15/01/99"

    def test_invalid_date_is_cleared_on_blur(self, engine, reported):
        assert engine.feed("15131990") == "15/13/1990"
        assert reported == [None]

        assert engine.blur() == ""
        assert engine.state == MaskState.EMPTY
        assert reported == [None, None]

    def test_incomplete_date_is_cleared_on_blur(self, engine):
        engine.feed("1501")
        assert engine.blur() == ""
        assert engine.value is None

    def test_clamped_to_min_date(self, qapp):
        engine = DateMaskEngine(min_date="2000-01-01", max_date="31/12/2030")
        assert engine.feed("15011990") == "01/01/2000"
        assert engine.value == "2000-01-01"

    def test_clamped_to_max_date(self, qapp):
        engine = DateMaskEngine(max_date=date(2030, 12, 31))
        assert engine.feed("01012031") == "31/12/2030"
        assert engine.blur() == "31/12/2030"
        assert engine.value == "2030-12-31"

    def test_set_value_does_not_report(self, engine, reported):
        assert engine.set_value("1990-01-15") == "15/01/1990"
        assert engine.value == "1990-01-15"
        assert reported == []
        assert engine.set_value(None) == ""
